"""Typed selection failures. The enum values are the wire messages."""

from enum import Enum


class ErrorKind(str, Enum):
    NO_CATEGORIES_FOUND = "No categories found"
    NO_POINTS_FOUND = "No points found"
    CATEGORY_NOT_FOUND = "Category not found"
    NO_POINTS_IN_CATEGORY = "No points found in category"
    NO_MATCHING_POINTS = "No matching points found"
    POINT_NOT_FOUND = "Point not found"
    INVALID_REQUEST = "Invalid request"


class SelectionError(Exception):
    """Raised by pool assembly when a request resolves to nothing drawable."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def to_payload(self) -> dict:
        return {"error": self.kind.value}
