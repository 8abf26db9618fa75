"""Tests for the extended counting sort."""

from __future__ import annotations

import array

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linsort import CapacityError, ElementTypeError, ExtendedCountingSort, Tagged, extended_counting_sort
from linsort._counting import _cumulative_sum, _maximum, _minimum
from linsort._properties import is_stable, outside_unchanged
from linsort._strategies import sort_requests, tagged_requests


def _sort(xs, left, right, **kw):
    ExtendedCountingSort(**kw).sort(xs, left, right)
    return xs


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_basic_with_duplicates(self):
        assert _sort([5, 3, 5, 1, 4], 0, 4) == [1, 3, 4, 5, 5]

    def test_all_equal(self):
        assert _sort([7, 7, 7], 0, 2) == [7, 7, 7]

    def test_negative_values(self):
        assert _sort([-3, -1, -2], 0, 2) == [-3, -2, -1]

    def test_mixed_signs(self):
        assert _sort([3, -7, 0, 12, -7, 1], 0, 5) == [-7, -7, 0, 1, 3, 12]

    def test_two_element_range(self):
        assert _sort([9, 2, 7], 0, 1) == [2, 9, 7]
        assert _sort([9, 2, 7], 1, 2) == [9, 2, 7]
        assert _sort([1, 9, 2], 1, 2) == [1, 2, 9]

    def test_sub_range_leaves_rest_alone(self):
        assert _sort([9, 8, 7, 6, 5], 1, 3) == [9, 6, 7, 8, 5]

    def test_already_sorted(self):
        assert _sort([1, 2, 3, 4], 0, 3) == [1, 2, 3, 4]

    def test_reverse_sorted(self):
        assert _sort([4, 3, 2, 1], 0, 3) == [1, 2, 3, 4]

    def test_large_offset_small_span(self):
        base = 10**12
        assert _sort([base + 2, base, base + 1], 0, 2) == [base, base + 1, base + 2]

    def test_returns_none(self):
        assert ExtendedCountingSort().sort([2, 1], 0, 1) is None

    def test_stability_with_tags(self):
        xs = [Tagged(5, "a"), Tagged(3, "b"), Tagged(5, "c"), Tagged(1, "x"), Tagged(4, "y")]
        _sort(xs, 0, 4)
        assert xs == [1, 3, 4, 5, 5]
        assert [t.tag for t in xs] == ["x", "b", "y", "a", "c"]

    def test_places_original_objects(self):
        xs = [Tagged(2, "p"), Tagged(1, "q")]
        first, second = xs
        _sort(xs, 0, 1)
        assert xs[0] is second
        assert xs[1] is first


# ---------------------------------------------------------------------------
# No-op cases
# ---------------------------------------------------------------------------

class TestNoOp:
    def test_left_greater_than_right(self):
        assert _sort([9, 2, 7], 2, 1) == [9, 2, 7]

    def test_left_equals_right(self):
        assert _sort([9, 2, 7], 1, 1) == [9, 2, 7]

    def test_negative_left(self):
        assert _sort([9, 2, 7], -1, 2) == [9, 2, 7]

    def test_negative_right(self):
        assert _sort([9, 2, 7], -3, -1) == [9, 2, 7]

    def test_right_past_end(self):
        assert _sort([9, 2, 7], 0, 3) == [9, 2, 7]

    def test_single_element(self):
        assert _sort([4], 0, 0) == [4]

    def test_empty(self):
        assert _sort([], 0, 1) == []

    def test_none(self):
        ExtendedCountingSort().sort(None, 0, 1)

    def test_invalid_range_skips_element_checks(self):
        xs = [None, "a", 1.5]
        _sort(xs, 2, 0)
        assert xs == [None, "a", 1.5]


# ---------------------------------------------------------------------------
# Explicit errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_none_element_in_range(self):
        xs = [3, None, 1]
        with pytest.raises(ElementTypeError, match="index 1"):
            _sort(xs, 0, 2)
        assert xs == [3, None, 1]

    def test_float_element(self):
        with pytest.raises(TypeError):
            _sort([3, 1.5, 1], 0, 2)

    def test_non_integer_outside_range_is_ignored(self):
        assert _sort(["x", 3, 1, None], 1, 2) == ["x", 1, 3, None]

    def test_bools_are_integers(self):
        assert _sort([True, False, True], 0, 2) == [False, True, True]

    def test_capacity_error_before_mutation(self):
        xs = [0, 10**9, 5]
        with pytest.raises(CapacityError) as exc_info:
            _sort(xs, 0, 2, max_span=1000)
        assert exc_info.value.span == 10**9 + 1
        assert exc_info.value.max_span == 1000
        assert xs == [0, 10**9, 5]

    def test_capacity_exactly_at_limit(self):
        assert _sort([9, 0], 0, 1, max_span=10) == [0, 9]

    def test_capacity_error_is_value_error(self):
        with pytest.raises(ValueError):
            _sort([0, 100], 0, 1, max_span=10)

    def test_global_limit_applies(self):
        from linsort import set_max_span
        set_max_span(4)
        with pytest.raises(CapacityError):
            _sort([0, 4], 0, 1)
        assert _sort([0, 3], 0, 1) == [0, 3]

    def test_rejects_non_positive_max_span(self):
        with pytest.raises(ValueError, match="positive"):
            ExtendedCountingSort(max_span=0)


# ---------------------------------------------------------------------------
# Other sequence types
# ---------------------------------------------------------------------------

class TestSequenceTypes:
    def test_array_array(self):
        xs = array.array("q", [5, -3, 5, 1])
        _sort(xs, 0, 3)
        assert list(xs) == [-3, 1, 5, 5]

    def test_numpy_int8_no_overflow(self):
        np = pytest.importorskip("numpy")
        xs = np.array([100, -100, 0, 127, -128], dtype=np.int8)
        _sort(xs, 0, 4)
        assert xs.tolist() == [-128, -100, 0, 100, 127]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_minimum_and_maximum_respect_bounds(self):
        xs = [-50, 3, 8, 1, 99]
        assert _minimum(xs, 1, 3) == 1
        assert _maximum(xs, 1, 3) == 8

    def test_cumulative_sum(self):
        counter = [1, 0, 2, 1]
        _cumulative_sum(counter)
        assert counter == [1, 1, 3, 4]


class TestConvenienceFunction:
    def test_defaults_to_whole_sequence(self):
        xs = [3, 1, 2]
        extended_counting_sort(xs)
        assert xs == [1, 2, 3]

    def test_explicit_range(self):
        xs = [3, 1, 2, 0]
        extended_counting_sort(xs, 1, 2)
        assert xs == [3, 1, 2, 0]

    def test_none_is_noop(self):
        extended_counting_sort(None)

    def test_max_span_passthrough(self):
        with pytest.raises(CapacityError):
            extended_counting_sort([0, 50], max_span=10)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

class TestProperties:
    @given(sort_requests())
    def test_matches_sorted_slice(self, req):
        xs, left, right = req
        after = _sort(list(xs), left, right)
        assert after[left:right + 1] == sorted(xs[left:right + 1])
        assert outside_unchanged(xs, after, left, right)

    @given(tagged_requests())
    def test_stable(self, req):
        xs, left, right = req
        after = _sort(list(xs), left, right)
        assert is_stable(xs, after, left, right)

    @given(sort_requests())
    def test_idempotent(self, req):
        xs, left, right = req
        once = _sort(list(xs), left, right)
        twice = _sort(list(once), left, right)
        assert once == twice

    @given(st.lists(st.integers(), max_size=5), st.integers(-3, 8), st.integers(-3, 8))
    def test_invalid_ranges_untouched(self, xs, left, right):
        before = list(xs)
        if 0 <= left < right <= len(xs) - 1:
            return
        _sort(xs, left, right)
        assert xs == before
