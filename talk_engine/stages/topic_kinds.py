"""
Topic kinds — classify points as facts, questions or debates and pick a batch.

Used by the "generate" CLI command. Unlike the query endpoint this is
stateless: it never reads or writes session history.
"""

import random
from enum import Enum
from typing import Iterable, List, Optional

from ..models.point import Point

_DEBATE_NAME_MARKERS = ("debate", "controversy")
_DEBATE_QUESTION_MARKERS = ("should", "better", "would you")


class TopicKind(str, Enum):
    ANY = "any"
    FACT = "fact"
    QUESTION = "question"
    DEBATE = "debate"


def is_question(point: Point) -> bool:
    return "?" in point.summary


def is_debate(point: Point) -> bool:
    name = point.name.lower()
    if any(marker in name for marker in _DEBATE_NAME_MARKERS):
        return True
    summary = point.summary.lower()
    return is_question(point) and any(marker in summary for marker in _DEBATE_QUESTION_MARKERS)


def is_fact(point: Point) -> bool:
    name = point.name.lower()
    return not is_question(point) and not any(marker in name for marker in _DEBATE_NAME_MARKERS)


_PREDICATES = {
    TopicKind.FACT: is_fact,
    TopicKind.QUESTION: is_question,
    TopicKind.DEBATE: is_debate,
}


def filter_by_kind(points: Iterable[Point], kind: TopicKind = TopicKind.ANY) -> List[Point]:
    """Points of the given kind, order preserved. TopicKind.ANY keeps everything."""
    predicate = _PREDICATES.get(TopicKind(kind))
    if predicate is None:
        return list(points)
    return [p for p in points if predicate(p)]


def generate_topics(
    points: Iterable[Point],
    kind: TopicKind = TopicKind.ANY,
    count: int = 3,
    rng: Optional[random.Random] = None,
) -> List[Point]:
    """Up to count distinct points of the given kind, chosen uniformly."""
    rng = rng or random.Random()
    eligible = filter_by_kind(points, kind)
    return rng.sample(eligible, min(max(count, 0), len(eligible)))
