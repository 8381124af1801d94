"""Selection stages: parse the query, assemble the pool, draw from it."""

from .intent_parser import parse_query, split_fields, to_int
from .pool_assembler import Pool, PoolAssembler
from .sampler import UniqueSampler, reshuffle
from .topic_kinds import TopicKind, filter_by_kind, generate_topics

__all__ = [
    "Pool",
    "PoolAssembler",
    "TopicKind",
    "UniqueSampler",
    "filter_by_kind",
    "generate_topics",
    "parse_query",
    "reshuffle",
    "split_fields",
    "to_int",
]
