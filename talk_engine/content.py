"""
Content access abstraction.

Supplies categories and their points to pool assembly. The JSON-file
implementation lives in talk_api.services.content_loader; tests use in-memory
fakes with the same shape.
"""

from typing import List, Optional, Protocol

from .models.point import Category, Point


class ContentSource(Protocol):
    """Protocol for read-only corpus access."""

    def list_categories(self) -> List[Category]:
        """All categories in stored order. Empty list when none are configured."""
        ...

    def get_category(self, category_id: int) -> Optional[Category]:
        """Category with this id, or None."""
        ...

    def load_points(self, category: Category) -> List[Point]:
        """Undecorated points of one category in stored order. Empty when unreadable."""
        ...
