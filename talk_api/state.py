"""Application state: content loader, session store, and the selection stages."""

import random
from typing import Optional

from talk_engine import PoolAssembler, UniqueSampler

from .config import ServerConfig, get_config
from .services import InMemorySessionStore, JsonContentLoader


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig):
        self.config = config

        # One random source shared by category choice and draws, seeded when configured
        self.rng = random.Random(config.random_seed)

        self.content = JsonContentLoader(
            config.data_dir,
            categories_file=config.categories_file,
            cache=config.content_cache,
        )
        self.session_store = InMemorySessionStore()
        self.assembler = PoolAssembler(self.content, rng=self.rng)
        self.sampler = UniqueSampler(rng=self.rng)

    @property
    def is_loaded(self) -> bool:
        return len(self.content.list_categories()) > 0


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def init_state(config: ServerConfig) -> AppState:
    """Replace the global state (startup with explicit config, tests)."""
    global _state
    _state = AppState(config)
    return _state
