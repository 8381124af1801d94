"""
Selection Pipeline Tests

Query string in, point out, with session history held in a plain list.

Run:
----
    pytest talk_engine/tests/test_selection.py -v
"""

from contextlib import contextmanager

import pytest

from talk_engine import ErrorKind, PoolAssembler, SelectionError, UniqueSampler, select_point


class RecordingHistory:
    """Minimal session history: one list, counts how often it was entered."""

    def __init__(self):
        self.seen = []
        self.entered = 0

    @contextmanager
    def history(self):
        self.entered += 1
        yield self.seen


@pytest.fixture
def pipeline(content, rng):
    return PoolAssembler(content, rng=rng), UniqueSampler(rng)


def test_draws_cover_pool_before_repeating(pipeline):
    assembler, sampler = pipeline
    session = RecordingHistory()
    keys = [
        select_point("mc=yes&&c1=5&&c2=7&2&3", assembler, sampler, session.history()).key()
        for _ in range(5)
    ]
    assert sorted(keys) == ["5-1", "5-2", "5-3", "7-2", "7-3"]
    assert session.entered == 5


def test_history_shared_across_intents(pipeline):
    assembler, sampler = pipeline
    session = RecordingHistory()
    first = select_point("c=5", assembler, sampler, session.history())
    # the same point reached through a multi-category pool counts as seen
    others = {
        select_point("c=5&7", assembler, sampler, session.history()).key()
        for _ in range(6)
    }
    assert first.key() not in others
    assert len(others) == 6


def test_specific_point_does_not_touch_history(pipeline):
    assembler, sampler = pipeline
    session = RecordingHistory()
    point = select_point("c=7&&p=2", assembler, sampler, session.history())
    assert point.key() == "7-2"
    assert session.entered == 0
    assert session.seen == []


def test_errors_raise_before_history(pipeline):
    assembler, sampler = pipeline
    session = RecordingHistory()
    with pytest.raises(SelectionError) as exc_info:
        select_point("nonsense", assembler, sampler, session.history())
    assert exc_info.value.kind == ErrorKind.INVALID_REQUEST
    assert exc_info.value.to_payload() == {"error": "Invalid request"}
    assert session.entered == 0
