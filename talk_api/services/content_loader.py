"""
Content Loader

Loads the category list and per-category point files from the data directory.

Expected directory structure:
    data/
    ├── cat.json          [{"id": 1, "name": "Science", "file": "science.json"}, ...]
    ├── science.json      [{"id": 1, "name": "...", "the-point": "...", "context": "..."}, ...]
    └── ...

Usage:
    loader = JsonContentLoader(data_dir)
    for category in loader.list_categories():
        print(category.name, len(loader.load_points(category)))
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from talk_engine.models import Category, Point

logger = logging.getLogger(__name__)


class JsonContentLoader:
    """
    ContentSource backed by JSON files.

    Missing or malformed files read as empty content and are logged; they never
    raise into the request path. With cache=True each file is parsed once until
    reload() is called.
    """

    def __init__(
        self,
        data_dir: Union[Path, str],
        categories_file: str = "cat.json",
        cache: bool = True,
    ):
        self.data_dir = Path(data_dir)
        self.categories_file = categories_file
        self.cache = cache
        self._categories: Optional[List[Category]] = None
        self._points: Dict[str, List[Point]] = {}

    def _read_json(self, path: Path) -> Any:
        """Parsed JSON, or None when the file is missing or unreadable."""
        if not path.exists():
            logger.warning("content file not found: %s", path)
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("failed to read %s: %s", path, e)
            return None

    def _validate_all(self, model, rows: Any, source: Path) -> list:
        if not isinstance(rows, list):
            if rows is not None:
                logger.warning("%s: expected a JSON array, got %s", source, type(rows).__name__)
            return []
        out = []
        for i, row in enumerate(rows):
            try:
                out.append(model.model_validate(row))
            except ValidationError as e:
                logger.warning("%s: skipping entry %d: %s", source, i, e.errors()[0].get("msg"))
        return out

    def list_categories(self) -> List[Category]:
        if self.cache and self._categories is not None:
            return self._categories
        path = self.data_dir / self.categories_file
        categories = self._validate_all(Category, self._read_json(path), path)
        if self.cache:
            self._categories = categories
            logger.info("ContentLoader: loaded %d categories from %s", len(categories), path)
        return categories

    def get_category(self, category_id: int) -> Optional[Category]:
        for category in self.list_categories():
            if category.id == category_id:
                return category
        return None

    def load_points(self, category: Category) -> List[Point]:
        if self.cache and category.file in self._points:
            return self._points[category.file]
        path = self.data_dir / category.file
        points = self._validate_all(Point, self._read_json(path), path)
        if self.cache:
            self._points[category.file] = points
            logger.info("ContentLoader: loaded %d points for %r", len(points), category.name)
        return points

    def count_points(self) -> int:
        return sum(len(self.load_points(c)) for c in self.list_categories())

    def reload(self) -> None:
        """Drop cached content so the next call re-reads disk."""
        self._categories = None
        self._points.clear()
