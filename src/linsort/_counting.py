"""Extended counting sort over a closed range of a mutable integer sequence.

The histogram is sized to the value span of the range (``maximum - minimum + 1``)
rather than to the largest value, so negative numbers and large offsets cost
nothing extra as long as the values sit close together.

- complexity: O(n + k), k being the value span
- in-place: no (histogram plus a snapshot of the range)
- stable: yes
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from numbers import Integral
from typing import Any

from linsort._config import max_span as _configured_max_span
from linsort._errors import CapacityError, ElementTypeError
from linsort._range import full_range, valid_range


def _check_elements(sequence: Sequence[Any], left: int, right: int) -> None:
    for i in range(left, right + 1):
        if not isinstance(sequence[i], Integral):
            raise ElementTypeError(i, sequence[i])


def _minimum(sequence: Sequence[int], left: int, right: int) -> int:
    minimum = sequence[right]
    for i in range(right, left - 1, -1):
        if sequence[i] < minimum:
            minimum = sequence[i]
    return minimum


def _maximum(sequence: Sequence[int], left: int, right: int) -> int:
    maximum = sequence[left]
    for i in range(left, right + 1):
        if sequence[i] > maximum:
            maximum = sequence[i]
    return maximum


def _cumulative_sum(counter: list[int]) -> None:
    # counter[i] becomes the number of elements <= minimum + i
    for i in range(1, len(counter)):
        counter[i] += counter[i - 1]


class ExtendedCountingSort:
    """Stable counting sort with a histogram compressed to the range's value span.

    Only integers are accepted. Calls with an absent or too-short sequence, or
    with indexes that do not describe a range of at least two positions inside
    the sequence, return without touching anything.

    Args:
        max_span: Largest histogram this instance will allocate. ``None`` uses
                  the process-wide limit (``LINSORT_MAX_SPAN`` or
                  :func:`linsort.set_max_span`).
    """

    name = "extended-counting"

    def __init__(self, *, max_span: int | None = None) -> None:
        if max_span is not None and max_span <= 0:
            raise ValueError(f"max_span must be positive, got {max_span}")
        self.max_span = max_span

    def __repr__(self) -> str:
        return f"ExtendedCountingSort(max_span={self.max_span!r})"

    def sort(self, sequence: MutableSequence[int] | None, left: int, right: int) -> None:
        if sequence is None or not valid_range(sequence, left, right):
            return
        _check_elements(sequence, left, right)

        # Plain ints so fixed-width element types cannot overflow the offsets.
        minimum = int(_minimum(sequence, left, right))
        maximum = int(_maximum(sequence, left, right))
        span = maximum - minimum + 1
        limit = self.max_span if self.max_span is not None else _configured_max_span()
        if span > limit:
            raise CapacityError(span, limit)

        counter = [0] * span
        for i in range(left, right + 1):
            counter[int(sequence[i]) - minimum] += 1
        _cumulative_sum(counter)

        snapshot = [sequence[i] for i in range(left, right + 1)]
        # Walking backwards keeps equal values in input order.
        for i in range(right, left - 1, -1):
            value = snapshot[i - left]
            offset = int(value) - minimum
            counter[offset] -= 1
            sequence[left + counter[offset]] = value


def extended_counting_sort(
    sequence: MutableSequence[int] | None,
    left: int = 0,
    right: int | None = None,
    *,
    max_span: int | None = None,
) -> None:
    """Sort ``sequence[left..right]`` (inclusive) in place; ``right`` defaults to the last index."""
    if right is None:
        right = full_range(sequence)[1]
    ExtendedCountingSort(max_span=max_span).sort(sequence, left, right)
