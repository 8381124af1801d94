"""
Pool Assembler — resolves a SelectionIntent into an ordered candidate pool.

Single-category intents keep the category's stored order; multi-category
intents concatenate categories in the order the caller listed them. Every
pooled point is decorated with its category name and id so the sampler can
key it. Unresolvable categories contribute nothing; when that leaves the pool
empty a SelectionError with the matching ErrorKind is raised.

The public entry point is PoolAssembler.assemble.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..content import ContentSource
from ..models.errors import ErrorKind, SelectionError
from ..models.intent import (
    Invalid,
    MultiCategoryWithPoints,
    RandomAny,
    RandomCategories,
    RandomCategory,
    RandomFromPoints,
    Search,
    SelectionIntent,
    SpecificPoint,
)
from ..models.point import Category, Point

logger = logging.getLogger(__name__)


@dataclass
class Pool:
    """Candidates for one draw."""

    points: List[Point]
    default_category_id: Optional[int] = None
    # exact picks (SpecificPoint) are returned as-is, without a draw
    exact: bool = False


class PoolAssembler:
    """Builds pools from intents using a ContentSource."""

    def __init__(self, content: ContentSource, rng: Optional[random.Random] = None):
        self.content = content
        self.rng = rng or random.Random()
        self._handlers: Dict[type, Callable[..., Pool]] = {
            RandomAny: self._random_any,
            RandomCategory: self._random_category,
            RandomCategories: self._random_categories,
            SpecificPoint: self._specific_point,
            RandomFromPoints: self._random_from_points,
            MultiCategoryWithPoints: self._multi_category_with_points,
            Search: self._search,
            Invalid: self._invalid,
        }

    def assemble(self, intent: SelectionIntent) -> Pool:
        """Resolve intent to a non-empty Pool, or raise SelectionError."""
        handler = self._handlers.get(type(intent), self._invalid)
        return handler(intent)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _decorated(self, category: Category, point_ids: Optional[Iterable[int]] = None) -> List[Point]:
        """Category points in stored order, decorated; filtered to point_ids when given and non-empty."""
        points = self.content.load_points(category)
        wanted = set(point_ids or ())
        return [p.decorate(category) for p in points if not wanted or p.id in wanted]

    def _across(self, selections: Sequence[tuple]) -> List[Point]:
        """Concatenate (category_id, point_ids) selections, skipping unknown categories."""
        pooled: List[Point] = []
        for category_id, point_ids in selections:
            category = self.content.get_category(category_id)
            if category is None:
                logger.debug("skipping unknown category %s", category_id)
                continue
            pooled.extend(self._decorated(category, point_ids))
        return pooled

    def _require_category(self, category_id: int) -> Category:
        category = self.content.get_category(category_id)
        if category is None:
            raise SelectionError(ErrorKind.CATEGORY_NOT_FOUND)
        return category

    # ------------------------------------------------------------------
    # one handler per intent
    # ------------------------------------------------------------------

    def _random_any(self, intent: RandomAny) -> Pool:
        categories = self.content.list_categories()
        if not categories:
            raise SelectionError(ErrorKind.NO_CATEGORIES_FOUND)
        category = self.rng.choice(categories)
        points = self._decorated(category)
        if not points:
            raise SelectionError(ErrorKind.NO_POINTS_FOUND)
        return Pool(points, default_category_id=category.id)

    def _random_category(self, intent: RandomCategory) -> Pool:
        category = self._require_category(intent.category_id)
        points = self._decorated(category)
        if not points:
            raise SelectionError(ErrorKind.NO_POINTS_IN_CATEGORY)
        return Pool(points, default_category_id=category.id)

    def _random_categories(self, intent: RandomCategories) -> Pool:
        points = self._across([(category_id, ()) for category_id in intent.category_ids])
        if not points:
            raise SelectionError(ErrorKind.NO_POINTS_FOUND)
        return Pool(points)

    def _specific_point(self, intent: SpecificPoint) -> Pool:
        category = self._require_category(intent.category_id)
        for point in self.content.load_points(category):
            if point.id == intent.point_id:
                return Pool([point.decorate(category)], default_category_id=category.id, exact=True)
        raise SelectionError(ErrorKind.POINT_NOT_FOUND)

    def _random_from_points(self, intent: RandomFromPoints) -> Pool:
        category = self._require_category(intent.category_id)
        wanted = set(intent.point_ids)
        points = [p.decorate(category) for p in self.content.load_points(category) if p.id in wanted]
        if not points:
            raise SelectionError(ErrorKind.NO_MATCHING_POINTS)
        return Pool(points, default_category_id=category.id)

    def _multi_category_with_points(self, intent: MultiCategoryWithPoints) -> Pool:
        points = self._across(list(intent.category_points.items()))
        if not points:
            raise SelectionError(ErrorKind.NO_POINTS_FOUND)
        return Pool(points)

    def _search(self, intent: Search) -> Pool:
        if intent.category_ids:
            category_ids = list(intent.category_ids)
        else:
            category_ids = [c.id for c in self.content.list_categories()]
        candidates = self._across([(category_id, ()) for category_id in category_ids])
        points = [p for p in candidates if p.matches_any(intent.keywords)]
        if not points:
            raise SelectionError(ErrorKind.NO_MATCHING_POINTS)
        return Pool(points)

    def _invalid(self, intent: SelectionIntent) -> Pool:
        raise SelectionError(ErrorKind.INVALID_REQUEST)
