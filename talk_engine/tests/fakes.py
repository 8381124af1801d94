"""In-memory corpus standing in for the JSON content loader."""

from typing import Dict, List, Optional

from talk_engine.models import Category, Point


class FakeContent:
    """ContentSource over plain dicts; category ids without points read as empty."""

    def __init__(self, categories: List[Category], points: Dict[int, List[Point]]):
        self.categories = categories
        self.points = points

    def list_categories(self) -> List[Category]:
        return list(self.categories)

    def get_category(self, category_id: int) -> Optional[Category]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def load_points(self, category: Category) -> List[Point]:
        return list(self.points.get(category.id, []))


def make_point(pid: int, name: str = "", summary: str = "", context: str = "") -> Point:
    return Point.model_validate(
        {"id": pid, "name": name or f"Point {pid}", "the-point": summary, "context": context}
    )
