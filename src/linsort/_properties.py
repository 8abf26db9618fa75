"""Predicates over the before/after state of a range sort.

All of them take plain sequences so they can be used from tests, from the
``checked`` wrapper and from the property engine alike. Stability cannot be
seen on bare integers, so elements are tagged with :class:`Tagged`, an ``int``
subclass that still satisfies the integer-only restriction of the sorters.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any


class Tagged(int):
    """An integer carrying a tie-breaking tag; compares and hashes as its value."""

    tag: Any

    def __new__(cls, value: int, tag: Any) -> Tagged:
        obj = super().__new__(cls, value)
        obj.tag = tag
        return obj

    def __getnewargs__(self) -> tuple[int, Any]:
        return (int(self), self.tag)

    def __repr__(self) -> str:
        return f"Tagged({int(self)}, {self.tag!r})"


def first_unsorted_index(xs: Sequence[Any]) -> int | None:
    """First ``i`` with ``xs[i] > xs[i + 1]``, or ``None``."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_sorted(xs: Sequence[Any]) -> bool:
    return first_unsorted_index(xs) is None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    if len(a) != len(b):
        return False
    return Counter(int(x) for x in a) == Counter(int(x) for x in b)


def outside_unchanged(before: Sequence[Any], after: Sequence[Any], left: int, right: int) -> bool:
    if len(before) != len(after):
        return False
    for i in range(len(before)):
        if left <= i <= right:
            continue
        # A tagged element must be the very same object, not an equal-valued stand-in.
        same = before[i] is after[i] if isinstance(before[i], Tagged) else before[i] == after[i]
        if not same:
            return False
    return True


def _ties(xs: Sequence[Any]) -> dict[int, list[Any]]:
    groups: dict[int, list[Any]] = {}
    for x in xs:
        groups.setdefault(int(x), []).append(x.tag if isinstance(x, Tagged) else None)
    return groups


def is_stable(before: Sequence[Any], after: Sequence[Any], left: int, right: int) -> bool:
    """Equal values inside ``[left, right]`` keep their input order.

    Only tagged elements can reveal an unstable sort; bare integers always pass.
    """
    return _ties(before[left:right + 1]) == _ties(after[left:right + 1])


def first_violation(before: Sequence[Any], after: Sequence[Any], left: int, right: int) -> str | None:
    """Name of the first property the sort broke, or ``None`` if all hold."""
    segment = after[left:right + 1]
    if not is_sorted(segment):
        return f"sorted (out of order at index {left + (first_unsorted_index(segment) or 0)})"
    if not is_permutation(before[left:right + 1], segment):
        return "preserves multiset"
    if not outside_unchanged(before, after, left, right):
        return "outside range untouched"
    if not is_stable(before, after, left, right):
        return "stable"
    return None
