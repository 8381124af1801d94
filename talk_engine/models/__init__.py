"""Data models for the selection engine."""

from .errors import ErrorKind, SelectionError
from .intent import (
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
from .point import Category, Point, point_key

__all__ = [
    "Category",
    "ErrorKind",
    "Invalid",
    "MultiCategoryWithPoints",
    "Point",
    "RandomAny",
    "RandomCategories",
    "RandomCategory",
    "RandomFromPoints",
    "Search",
    "SelectionError",
    "SelectionIntent",
    "SpecificPoint",
    "point_key",
]
