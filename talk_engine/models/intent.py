"""
Selection intents — the closed set of request shapes the query dialect can express.

Every parsed query becomes exactly one of these models (see stages/intent_parser).
"""

from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


class _Intent(BaseModel):
    model_config = ConfigDict(frozen=True)


class RandomAny(_Intent):
    """?talk: one random category, then a unique draw from it."""


class RandomCategory(_Intent):
    category_id: int


class RandomCategories(_Intent):
    category_ids: Tuple[int, ...]


class SpecificPoint(_Intent):
    category_id: int
    point_id: int


class RandomFromPoints(_Intent):
    category_id: int
    point_ids: Tuple[int, ...]


class MultiCategoryWithPoints(_Intent):
    # category id -> explicit point subset (empty = every point), in query order
    category_points: Dict[int, Tuple[int, ...]]


class Search(_Intent):
    keywords: Tuple[str, ...]
    # None searches every category
    category_ids: Optional[Tuple[int, ...]] = None


class Invalid(_Intent):
    """Query shape not recognised."""


SelectionIntent = Union[
    RandomAny,
    RandomCategory,
    RandomCategories,
    SpecificPoint,
    RandomFromPoints,
    MultiCategoryWithPoints,
    Search,
    Invalid,
]
