from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from linsort._properties import first_violation
from linsort._range import valid_range
from linsort._sorter import Sorter
from linsort._util import _qualified_name


class CheckedSorter:
    """Wraps a sorter and asserts the range-sort postconditions after every call."""

    def __init__(self, inner: Sorter) -> None:
        self.inner = inner
        self.name = getattr(inner, "name", _qualified_name(inner))

    def __repr__(self) -> str:
        return f"checked({self.inner!r})"

    def sort(self, sequence: MutableSequence[Any] | None, left: int, right: int) -> None:
        before = None if sequence is None else list(sequence)
        self.inner.sort(sequence, left, right)
        if sequence is None or before is None:
            return

        after = list(sequence)
        if not valid_range(before, left, right):
            if after != before:
                raise AssertionError(f"Postcondition failed for {self.name}: sequence changed on an invalid range")
            return

        broken = first_violation(before, after, left, right)
        if broken is not None:
            raise AssertionError(f"Postcondition failed for {self.name}: {broken}")


def checked(sorter: Sorter) -> CheckedSorter:
    return CheckedSorter(sorter)
