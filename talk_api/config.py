"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from a project-root .env file using python-dotenv.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

# Single .env at the project root
root_env = BASE_DIR / ".env"
if root_env.exists():
    load_dotenv(root_env)


def _bool_env(key: str, default: bool) -> bool:
    v = os.getenv(key)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Content
    data_dir: Path = BASE_DIR / "data"
    categories_file: str = "cat.json"
    content_cache: bool = True

    # Sessions: cookie carrying the session id
    session_cookie: str = "talk_session"

    # Fixed seed makes draws reproducible; None seeds from the OS
    random_seed: Optional[int] = None

    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        data_dir = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
        if not data_dir.is_absolute():
            data_dir = (BASE_DIR / data_dir).resolve()
        seed = os.getenv("RANDOM_SEED", "").strip()
        origins = os.getenv("CORS_ORIGINS", "*")

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            data_dir=data_dir,
            categories_file=os.getenv("CATEGORIES_FILE", "cat.json"),
            content_cache=_bool_env("CONTENT_CACHE", True),
            session_cookie=os.getenv("SESSION_COOKIE", "talk_session"),
            random_seed=int(seed) if seed else None,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.data_dir.exists():
            errors.append(f"Data directory not found: {self.data_dir}")
        elif not (self.data_dir / self.categories_file).exists():
            errors.append(f"Category list not found: {self.data_dir / self.categories_file}")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
