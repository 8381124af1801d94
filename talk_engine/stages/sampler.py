"""
Unique Sampler — "deck of cards" draws over a session's history.

A draw prefers points whose key the session has not seen yet. Once every
point of the pool has been seen, only that pool's keys are dropped from the
history (local reshuffle) and the whole pool becomes eligible again; history
entries from other pools are kept.
"""

import logging
import random
from typing import List, Optional, Sequence

from ..models.point import Point

logger = logging.getLogger(__name__)


def reshuffle(seen: List[str], pool_keys: Sequence[str]) -> int:
    """Remove pool_keys from seen in place. Returns how many entries were dropped."""
    drop = set(pool_keys)
    before = len(seen)
    seen[:] = [key for key in seen if key not in drop]
    return before - len(seen)


class UniqueSampler:
    """Uniform draw without repeats until the pool is exhausted."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(
        self,
        pool: Sequence[Point],
        seen: List[str],
        default_category_id: Optional[int] = None,
    ) -> Point:
        """
        Pick one point from pool and record its key in seen (mutated in place).

        Args:
            pool: Non-empty candidate list.
            seen: The session's ordered history of keys.
            default_category_id: Used for points that carry no category_id.
        """
        if not pool:
            raise ValueError("cannot draw from an empty pool")

        keys = [point.key(default_category_id) for point in pool]
        already_seen = set(seen)
        candidates = [point for point, key in zip(pool, keys) if key not in already_seen]

        if not candidates:
            dropped = reshuffle(seen, keys)
            logger.debug("pool of %d exhausted, reshuffled %d history entries", len(pool), dropped)
            candidates = list(pool)

        chosen = self.rng.choice(candidates)
        seen.append(chosen.key(default_category_id))
        return chosen
