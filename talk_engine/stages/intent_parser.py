"""
Intent Parser — turns the raw query string into one SelectionIntent.

The dialect uses two delimiter levels so a field can carry a list without being
torn apart by generic key=value decoding:

    &&  separates logical fields          c=3&&p=1&4&7
    &   separates values inside a field   (p -> [1, 4, 7])

A token after a single "&" that itself contains "=" starts a new field, so
"c=1&p=2" still reads as two fields. Keys and values are percent-decoded only
after splitting. Precedence lives entirely in parse_query; it never raises.

The public entry point is parse_query.
"""

import re
from typing import Dict, List, Optional, Tuple
from urllib.parse import unquote_plus

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

FIELD_SEPARATOR = "&&"
VALUE_SEPARATOR = "&"
KEYWORD_SEPARATOR = "|"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_NUMBERED_CATEGORY = re.compile(r"^c(\d+)$")


def to_int(value: Optional[str]) -> int:
    """Leading-integer read: "12abc" -> 12, "abc" -> 0, "" -> 0."""
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0


def split_fields(raw_query: str) -> List[Tuple[str, List[str]]]:
    """
    Split a raw query into ordered (key, values) fields.

    "talk" -> [("talk", [])]; "c=1&2&&p=3" -> [("c", ["1", "2"]), ("p", ["3"])].
    """
    fields: List[Tuple[str, List[str]]] = []
    for chunk in (raw_query or "").split(FIELD_SEPARATOR):
        if not chunk:
            continue
        current: Optional[List[str]] = None
        for token in chunk.split(VALUE_SEPARATOR):
            if current is None or "=" in token:
                key, sep, value = token.partition("=")
                current = [unquote_plus(value)] if sep else []
                fields.append((unquote_plus(key), current))
            else:
                current.append(unquote_plus(token))
    return fields


def _first(values: Optional[List[str]]) -> str:
    return values[0] if values else ""


def _search_category_ids(params: Dict[str, List[str]]) -> Optional[Tuple[int, ...]]:
    """Target categories of a search: c1, c2, ... under mc=yes, else c, else all (None)."""
    if _first(params.get("mc")) == "yes":
        ids = []
        n = 1
        while f"c{n}" in params:
            ids.append(to_int(_first(params[f"c{n}"])))
            n += 1
        return tuple(ids) or None
    if "c" in params:
        return (to_int(_first(params["c"])),)
    return None


def _parse_search(params: Dict[str, List[str]]) -> Search:
    term = VALUE_SEPARATOR.join(params["search"])
    keywords = tuple(k.strip().lower() for k in term.split(KEYWORD_SEPARATOR))
    return Search(keywords=keywords, category_ids=_search_category_ids(params))


def _parse_multi_category(fields: List[Tuple[str, List[str]]]) -> MultiCategoryWithPoints:
    category_points: Dict[int, Tuple[int, ...]] = {}
    for key, values in fields:
        if not _NUMBERED_CATEGORY.match(key) or not VALUE_SEPARATOR.join(values):
            continue
        category_points[to_int(values[0])] = tuple(to_int(v) for v in values[1:])
    return MultiCategoryWithPoints(category_points=category_points)


def _parse_category(params: Dict[str, List[str]]) -> SelectionIntent:
    category_values = params["c"]
    if "p" in params:
        category_id = to_int(_first(category_values))
        point_values = params["p"]
        if len(point_values) > 1:
            return RandomFromPoints(
                category_id=category_id,
                point_ids=tuple(to_int(v) for v in point_values),
            )
        return SpecificPoint(category_id=category_id, point_id=to_int(_first(point_values)))
    if len(category_values) > 1:
        return RandomCategories(category_ids=tuple(to_int(v) for v in category_values))
    return RandomCategory(category_id=to_int(_first(category_values)))


def parse_query(raw_query: Optional[str]) -> SelectionIntent:
    """
    Parse a raw (undecoded) query string. First matching rule wins:

    1. talk                               -> RandomAny
    2. search=kw|kw [&&c=.. | &&mc=yes&&c1=..&&c2=..] -> Search
    3. mc=yes&&c1=id[&p..]&&c2=..         -> MultiCategoryWithPoints
    4. c=id&&p=id / c=id&&p=id&id..       -> SpecificPoint / RandomFromPoints
    5. c=id&id.. / c=id                   -> RandomCategories / RandomCategory
    6. anything else                      -> Invalid
    """
    fields = split_fields(raw_query or "")
    # later duplicates win, like ordinary query decoding
    params: Dict[str, List[str]] = dict(fields)

    if "talk" in params:
        return RandomAny()
    if "search" in params:
        return _parse_search(params)
    if _first(params.get("mc")) == "yes":
        return _parse_multi_category(fields)
    if "c" in params:
        return _parse_category(params)
    return Invalid()
