"""Shared fixtures for the engine tests."""

import random

import pytest

from talk_engine.models import Category

from fakes import FakeContent, make_point


@pytest.fixture
def content() -> FakeContent:
    categories = [
        Category(id=5, name="Science", file="science.json"),
        Category(id=7, name="History", file="history.json"),
        Category(id=9, name="Empty", file="empty.json"),
    ]
    points = {
        5: [
            make_point(1, "Venus", "A day on Venus is longer than its year.", "Slow rotation."),
            make_point(2, "Ocean", "Should we explore the ocean first?", "Mostly unmapped."),
            make_point(3, "Tardigrades", "They survive in space.", "Cryptobiosis."),
        ],
        7: [
            make_point(1, "Cleopatra", "Closer to the Moon landing than the pyramids.", "Ancient Egypt."),
            make_point(2, "Shortest War", "Under forty minutes.", "Zanzibar, 1896."),
            make_point(3, "Library", "Was it one fire?", "Historians argue."),
            make_point(4, "Trains", "Railways standardised time.", "Time zones."),
        ],
        9: [],
    }
    return FakeContent(categories, points)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
