"""
Talk engine — selection core for the conversation starter API.

Thin facade over:
- stages/intent_parser: raw query -> SelectionIntent
- stages/pool_assembler: intent -> ordered candidate pool
- stages/sampler: unique draw against a session's seen history
- stages/topic_kinds: fact/question/debate batches for the CLI
"""

from .content import ContentSource
from .models import (
    Category,
    ErrorKind,
    Point,
    SelectionError,
    SelectionIntent,
    point_key,
)
from .query_builder import build_query, endpoint_url
from .selection import select_point
from .stages import (
    Pool,
    PoolAssembler,
    TopicKind,
    UniqueSampler,
    filter_by_kind,
    generate_topics,
    parse_query,
)

__all__ = [
    "Category",
    "ContentSource",
    "ErrorKind",
    "Point",
    "Pool",
    "PoolAssembler",
    "SelectionError",
    "SelectionIntent",
    "TopicKind",
    "UniqueSampler",
    "build_query",
    "endpoint_url",
    "filter_by_kind",
    "generate_topics",
    "parse_query",
    "point_key",
    "select_point",
]
