"""
Selection pipeline — query string to chosen point.

    raw query -> parse_query -> intent -> PoolAssembler -> pool -> UniqueSampler -> point

Only the draw runs inside the session history block, so the per-session lock
is held for the read-modify-write of the history and nothing else.
"""

from typing import ContextManager, List

from .models.point import Point
from .stages.intent_parser import parse_query
from .stages.pool_assembler import PoolAssembler
from .stages.sampler import UniqueSampler


def select_point(
    raw_query: str,
    assembler: PoolAssembler,
    sampler: UniqueSampler,
    session_history: ContextManager[List[str]],
) -> Point:
    """
    Run the full pipeline for one request.

    session_history is entered only when a draw is needed (e.g. from
    SessionStore.history(session_id)). Raises SelectionError for every
    domain failure.
    """
    intent = parse_query(raw_query)
    pool = assembler.assemble(intent)
    if pool.exact:
        return pool.points[0]
    with session_history as seen:
        return sampler.draw(pool.points, seen, pool.default_category_id)
