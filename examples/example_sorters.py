# example_sorters.py
# Extra sorters for `linsort check --import example_sorters <name>`.
from __future__ import annotations

from collections.abc import MutableSequence

from linsort import register_sorter
from linsort._range import valid_range


class ForwardCountingSort:
    """Counting sort that scatters front to back: sorted, but not stable."""

    name = "forward-counting"

    def sort(self, sequence: MutableSequence[int] | None, left: int, right: int) -> None:
        if sequence is None or not valid_range(sequence, left, right):
            return
        minimum = min(sequence[left:right + 1])
        counter = [0] * (max(sequence[left:right + 1]) - minimum + 1)
        for i in range(left, right + 1):
            counter[sequence[i] - minimum] += 1
        for i in range(1, len(counter)):
            counter[i] += counter[i - 1]
        snapshot = list(sequence[left:right + 1])
        for value in snapshot:
            counter[value - minimum] -= 1
            sequence[left + counter[value - minimum]] = value


class SkipLastSort:
    """Forgets the right endpoint is inclusive."""

    name = "skip-last"

    def sort(self, sequence: MutableSequence[int] | None, left: int, right: int) -> None:
        if sequence is None or not valid_range(sequence, left, right):
            return
        sequence[left:right] = sorted(sequence[left:right])


register_sorter(ForwardCountingSort.name, ForwardCountingSort())
register_sorter(SkipLastSort.name, SkipLastSort())
