"""
Pool Assembler Tests

Each intent against a small in-memory corpus: ordering, decoration, subset
filtering, keyword search, and the error kind for every empty outcome.

Run:
----
    pytest talk_engine/tests/test_pool_assembler.py -v
"""

import pytest

from talk_engine.models import (
    Category,
    ErrorKind,
    Invalid,
    MultiCategoryWithPoints,
    RandomAny,
    RandomCategories,
    RandomCategory,
    RandomFromPoints,
    Search,
    SelectionError,
    SpecificPoint,
)
from talk_engine.stages import PoolAssembler

from fakes import FakeContent


def _keys(pool):
    return [p.key() for p in pool.points]


def _error_kind(assembler, intent) -> ErrorKind:
    with pytest.raises(SelectionError) as exc_info:
        assembler.assemble(intent)
    return exc_info.value.kind


@pytest.fixture
def assembler(content, rng):
    return PoolAssembler(content, rng=rng)


class TestSingleCategory:
    def test_stored_order_and_decoration(self, assembler):
        pool = assembler.assemble(RandomCategory(category_id=7))
        assert _keys(pool) == ["7-1", "7-2", "7-3", "7-4"]
        assert all(p.category == "History" and p.category_id == 7 for p in pool.points)
        assert pool.default_category_id == 7
        assert not pool.exact

    def test_unknown_category(self, assembler):
        assert _error_kind(assembler, RandomCategory(category_id=42)) == ErrorKind.CATEGORY_NOT_FOUND

    def test_empty_category(self, assembler):
        assert _error_kind(assembler, RandomCategory(category_id=9)) == ErrorKind.NO_POINTS_IN_CATEGORY


class TestRandomAny:
    def test_pool_is_one_whole_category(self, content, rng):
        content.categories = [c for c in content.categories if c.id != 9]
        pool = PoolAssembler(content, rng=rng).assemble(RandomAny())
        category_ids = {p.category_id for p in pool.points}
        assert len(category_ids) == 1
        (category_id,) = category_ids
        assert len(pool.points) == len(content.points[category_id])

    def test_no_categories(self, rng):
        assembler = PoolAssembler(FakeContent([], {}), rng=rng)
        assert _error_kind(assembler, RandomAny()) == ErrorKind.NO_CATEGORIES_FOUND

    def test_chosen_category_empty(self, rng):
        content = FakeContent([Category(id=1, name="Empty", file="e.json")], {})
        assembler = PoolAssembler(content, rng=rng)
        assert _error_kind(assembler, RandomAny()) == ErrorKind.NO_POINTS_FOUND


class TestMultipleCategories:
    def test_concatenated_in_caller_order(self, assembler):
        pool = assembler.assemble(RandomCategories(category_ids=(7, 5)))
        assert _keys(pool) == ["7-1", "7-2", "7-3", "7-4", "5-1", "5-2", "5-3"]

    def test_unknown_categories_contribute_nothing(self, assembler):
        pool = assembler.assemble(RandomCategories(category_ids=(42, 5)))
        assert _keys(pool) == ["5-1", "5-2", "5-3"]

    def test_all_unknown(self, assembler):
        intent = RandomCategories(category_ids=(42, 43))
        assert _error_kind(assembler, intent) == ErrorKind.NO_POINTS_FOUND

    def test_multi_with_point_subsets(self, assembler):
        pool = assembler.assemble(MultiCategoryWithPoints(category_points={5: (), 7: (2, 3)}))
        assert _keys(pool) == ["5-1", "5-2", "5-3", "7-2", "7-3"]

    def test_multi_subset_matching_nothing(self, assembler):
        intent = MultiCategoryWithPoints(category_points={7: (99,)})
        assert _error_kind(assembler, intent) == ErrorKind.NO_POINTS_FOUND

    def test_multi_empty_map(self, assembler):
        intent = MultiCategoryWithPoints(category_points={})
        assert _error_kind(assembler, intent) == ErrorKind.NO_POINTS_FOUND


class TestPoints:
    def test_specific_point_is_exact(self, assembler):
        pool = assembler.assemble(SpecificPoint(category_id=7, point_id=3))
        assert pool.exact
        assert _keys(pool) == ["7-3"]
        assert pool.points[0].category == "History"

    def test_specific_point_missing(self, assembler):
        intent = SpecificPoint(category_id=7, point_id=99)
        assert _error_kind(assembler, intent) == ErrorKind.POINT_NOT_FOUND

    def test_specific_point_unknown_category(self, assembler):
        intent = SpecificPoint(category_id=42, point_id=1)
        assert _error_kind(assembler, intent) == ErrorKind.CATEGORY_NOT_FOUND

    def test_random_from_points_keeps_stored_order(self, assembler):
        pool = assembler.assemble(RandomFromPoints(category_id=7, point_ids=(4, 1, 99)))
        assert _keys(pool) == ["7-1", "7-4"]

    def test_random_from_points_none_match(self, assembler):
        intent = RandomFromPoints(category_id=7, point_ids=(98, 99))
        assert _error_kind(assembler, intent) == ErrorKind.NO_MATCHING_POINTS

    def test_random_from_points_unknown_category(self, assembler):
        intent = RandomFromPoints(category_id=42, point_ids=(1, 2))
        assert _error_kind(assembler, intent) == ErrorKind.CATEGORY_NOT_FOUND


class TestSearch:
    def test_matches_any_field_case_insensitively(self, assembler, content):
        pool = assembler.assemble(Search(keywords=("ai",)))
        expected = [
            f"{cid}-{p.id}"
            for cid in (5, 7)
            for p in content.points[cid]
            if "ai" in (p.name + " " + p.summary + " " + p.context).lower()
        ]
        assert expected
        assert _keys(pool) == expected

    def test_keywords_are_ored(self, assembler):
        pool = assembler.assemble(Search(keywords=("venus", "zanzibar")))
        assert _keys(pool) == ["5-1", "7-2"]

    def test_restricted_to_categories(self, assembler):
        pool = assembler.assemble(Search(keywords=("fire", "ocean"), category_ids=(7,)))
        assert _keys(pool) == ["7-3"]

    def test_empty_category_list_searches_everything(self, assembler):
        pool = assembler.assemble(Search(keywords=("venus",), category_ids=()))
        assert _keys(pool) == ["5-1"]

    def test_no_match(self, assembler):
        intent = Search(keywords=("zzzznotfound",))
        assert _error_kind(assembler, intent) == ErrorKind.NO_MATCHING_POINTS

    def test_unknown_categories_only(self, assembler):
        intent = Search(keywords=("venus",), category_ids=(42,))
        assert _error_kind(assembler, intent) == ErrorKind.NO_MATCHING_POINTS


def test_invalid(assembler):
    assert _error_kind(assembler, Invalid()) == ErrorKind.INVALID_REQUEST
