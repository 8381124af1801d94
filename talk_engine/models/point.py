"""
Point and Category models — typed representation of the content corpus.

Built from content-file dicts via Point.model_validate(d). The summary field is
stored as "the-point" on disk and on the wire; `summary` is the Python name.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """One entry of the category list file."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    file: str


class Point(BaseModel):
    """
    A conversation starter.

    category / category_id are only set once the point has been decorated
    during pool assembly (or when the content file pre-tags them).
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    name: str = ""
    summary: str = Field("", alias="the-point")
    context: str = ""
    category: Optional[str] = None
    category_id: Optional[int] = None

    def decorate(self, category: Category) -> "Point":
        """Copy of this point tagged with the category it was drawn from."""
        return self.model_copy(update={"category": category.name, "category_id": category.id})

    def key(self, default_category_id: Optional[int] = None) -> str:
        category_id = self.category_id if self.category_id is not None else default_category_id
        return point_key(category_id, self.id)

    def matches_any(self, keywords) -> bool:
        """True if any keyword is a substring of name, summary or context (case-insensitive)."""
        fields = (self.name.lower(), self.summary.lower(), self.context.lower())
        for keyword in keywords:
            keyword = keyword.lower()
            if any(keyword in field for field in fields):
                return True
        return False

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation: {id, name, the-point, context, category, category_id}."""
        return self.model_dump(by_alias=True, exclude_none=True)


def point_key(category_id: Optional[int], point_id: int) -> str:
    """Corpus-wide identity of a point: "<categoryId>-<pointId>"."""
    return f"{'' if category_id is None else category_id}-{point_id}"
