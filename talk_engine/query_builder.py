"""
Query builder — renders a SelectionIntent back into the query dialect.

Produces the same shapes the web front end's endpoint builder emits, e.g.
"c=2&&p=1&4" or "search=space%7Cocean&&mc=yes&&c1=1&&c2=3".
"""

from typing import List
from urllib.parse import quote

from .models.intent import (
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
from .stages.intent_parser import FIELD_SEPARATOR, KEYWORD_SEPARATOR, VALUE_SEPARATOR


def _values(ids) -> str:
    return VALUE_SEPARATOR.join(str(i) for i in ids)


def _search_fields(intent: Search) -> List[str]:
    fields = ["search=" + quote(KEYWORD_SEPARATOR.join(intent.keywords), safe="")]
    category_ids = intent.category_ids or ()
    if len(category_ids) == 1:
        fields.append(f"c={category_ids[0]}")
    elif category_ids:
        fields.append("mc=yes")
        fields.extend(f"c{n}={cid}" for n, cid in enumerate(category_ids, start=1))
    return fields


def build_query(intent: SelectionIntent) -> str:
    """Query string (without the leading "?") for intent. Raises ValueError for Invalid."""
    if isinstance(intent, RandomAny):
        fields = ["talk"]
    elif isinstance(intent, Search):
        fields = _search_fields(intent)
    elif isinstance(intent, MultiCategoryWithPoints):
        fields = ["mc=yes"]
        for n, (category_id, point_ids) in enumerate(intent.category_points.items(), start=1):
            fields.append(f"c{n}=" + _values((category_id, *point_ids)))
    elif isinstance(intent, SpecificPoint):
        fields = [f"c={intent.category_id}", f"p={intent.point_id}"]
    elif isinstance(intent, RandomFromPoints):
        fields = [f"c={intent.category_id}", "p=" + _values(intent.point_ids)]
    elif isinstance(intent, RandomCategories):
        fields = ["c=" + _values(intent.category_ids)]
    elif isinstance(intent, RandomCategory):
        fields = [f"c={intent.category_id}"]
    elif isinstance(intent, Invalid):
        raise ValueError("Invalid intent has no query form")
    else:
        raise TypeError(f"unknown intent type: {type(intent).__name__}")
    return FIELD_SEPARATOR.join(fields)


def endpoint_url(base_url: str, intent: SelectionIntent) -> str:
    """Full endpoint URL, e.g. http://localhost:8000/api/?c=3."""
    return f"{base_url.rstrip('/')}/api/?{build_query(intent)}"
