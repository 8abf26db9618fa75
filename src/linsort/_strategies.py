"""Hypothesis strategies producing ``(sequence, left, right)`` sort requests."""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from linsort._properties import Tagged

SortRequest = tuple[list[Any], int, int]


@st.composite
def _with_valid_range(draw: st.DrawFn, values: st.SearchStrategy[list[Any]]) -> SortRequest:
    xs = draw(values)
    left = draw(st.integers(min_value=0, max_value=len(xs) - 2))
    right = draw(st.integers(min_value=left + 1, max_value=len(xs) - 1))
    return xs, left, right


def sort_requests(
    *,
    max_list_size: int = 20,
    min_value: int = -1000,
    max_value: int = 1000,
) -> st.SearchStrategy[SortRequest]:
    values = st.lists(
        st.integers(min_value=min_value, max_value=max_value),
        min_size=2,
        max_size=max(2, max_list_size),
    )
    return _with_valid_range(values)


def tagged_requests(*, max_list_size: int = 20, distinct_values: int = 4) -> st.SearchStrategy[SortRequest]:
    """Requests over few distinct values, each element tagged with its input position."""
    values = st.lists(
        st.integers(min_value=-distinct_values // 2, max_value=distinct_values // 2),
        min_size=2,
        max_size=max(2, max_list_size),
    ).map(lambda xs: [Tagged(x, i) for i, x in enumerate(xs)])
    return _with_valid_range(values)


@st.composite
def _out_of_bounds(draw: st.DrawFn, max_list_size: int) -> SortRequest:
    xs = draw(st.lists(st.integers(min_value=-50, max_value=50), max_size=max_list_size))
    n = len(xs)
    left, right = draw(
        st.one_of(
            # degenerate or reversed
            st.integers(min_value=-2, max_value=n + 2).flatmap(
                lambda r: st.tuples(st.integers(min_value=r, max_value=r + 3), st.just(r))
            ),
            st.tuples(st.integers(min_value=-5, max_value=-1), st.integers(min_value=0, max_value=n + 2)),
            st.tuples(st.integers(min_value=0, max_value=n), st.integers(min_value=n, max_value=n + 5)),
        )
    )
    return xs, left, right


def invalid_requests(*, max_list_size: int = 20) -> st.SearchStrategy[SortRequest]:
    """Requests every sorter must treat as a no-op."""
    return _out_of_bounds(max_list_size)
