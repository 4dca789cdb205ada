"""
tests/common/test_ordering.py

Covers:
  - Total order of Date and Time consistent with the underlying index
  - Equality and hashing (sets, dict keys, sorting)
  - Three-way compare()
  - No cross-type equality or ordering between Date and Time
"""

import itertools

import numpy as np
import pytest

from chrono import Date, Time
from chrono.date import MAX_DAY_INDEX
from chrono.time import SECONDS_PER_DAY


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def dates():
    rng = np.random.default_rng(7)
    index = rng.integers(0, MAX_DAY_INDEX + 1, size=40).tolist() + [0, 0, MAX_DAY_INDEX]
    return [Date.from_index(i) for i in index]


@pytest.fixture
def times():
    rng = np.random.default_rng(11)
    index = rng.integers(0, SECONDS_PER_DAY, size=40).tolist() + [0, 0, SECONDS_PER_DAY - 1]
    return [Time.from_index(i) for i in index]


# ── Helpers ───────────────────────────────────────────────────────────────────

def assert_total_order(values, index_of):
    for a, b in itertools.product(values, repeat=2):
        outcomes = [a < b, a == b, a > b]
        assert outcomes.count(True) == 1
        ia, ib = index_of(a), index_of(b)
        assert outcomes == [ia < ib, ia == ib, ia > ib]
        assert (a <= b) == (ia <= ib)
        assert (a >= b) == (ia >= ib)
        assert (a != b) == (ia != ib)


# ── Ordering ──────────────────────────────────────────────────────────────────

class TestOrdering:

    def test_dates_totally_ordered(self, dates):
        assert_total_order(dates, lambda d: d.day_index)

    def test_times_totally_ordered(self, times):
        assert_total_order(times, lambda t: t.second_index)

    def test_sorting_follows_index(self, dates):
        ordered = sorted(dates)
        assert [d.day_index for d in ordered] == sorted(d.day_index for d in dates)

    def test_calendar_order(self):
        assert Date(2023, 12, 31) < Date(2024, 1, 1) < Date(2024, 2, 29)
        assert Time(0, 0, 1) > Time(0, 0, 0)
        assert max(Time(12, 0, 0), Time(23, 0, 0), Time(1, 0, 0)) == Time(23, 0, 0)


# ── Equality / hashing ────────────────────────────────────────────────────────

class TestEquality:

    def test_equal_values_from_different_constructors(self):
        assert Date(2024, 2, 29) == Date.from_index(738_944) == Date.parse("20240229")
        assert Time(1, 1, 1) == Time.from_index(3661) == Time.parse("010101")

    def test_equal_values_hash_equal(self):
        assert hash(Date(2024, 2, 29)) == hash(Date.parse("20240229"))
        assert hash(Time(1, 1, 1)) == hash(Time.from_index(3661 + SECONDS_PER_DAY))

    def test_hash_is_not_degenerate(self):
        hashes = {hash(Date.from_index(i)) for i in range(0, MAX_DAY_INDEX, 997)}
        assert len(hashes) == len(range(0, MAX_DAY_INDEX, 997))

    def test_usable_in_sets_and_dicts(self, dates):
        assert len(set(dates)) == len({d.day_index for d in dates})
        lookup = {Date(2024, 2, 29): "leap"}
        assert lookup[Date.parse("20240229")] == "leap"

    def test_not_equal_to_other_types(self):
        assert Date.from_index(5) != Time.from_index(5)
        assert Date.from_index(5) != 5
        assert Time.from_index(5) != "00:00:05"

    def test_cross_type_ordering_raises(self):
        with pytest.raises(TypeError):
            Date.from_index(5) < Time.from_index(5)
        with pytest.raises(TypeError):
            Time.from_index(5) >= 5


# ── compare() ─────────────────────────────────────────────────────────────────

class TestCompare:

    def test_three_way(self):
        a, b = Date(2024, 1, 1), Date(2024, 1, 2)
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(Date(2024, 1, 1)) == 0

    def test_none_sorts_first(self):
        assert Time.MIN.compare(None) == 1

    def test_other_type_raises(self):
        with pytest.raises(TypeError):
            Time.MIN.compare(Date.MIN)

    def test_matches_operators(self, times):
        for a, b in itertools.product(times[:10], repeat=2):
            assert a.compare(b) == (a > b) - (a < b)
