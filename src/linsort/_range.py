from __future__ import annotations

from collections.abc import Sized


def valid_range(sequence: Sized | None, left: int, right: int) -> bool:
    """Whether ``[left, right]`` names at least two positions inside ``sequence``.

    A ``False`` result means the sort request is a no-op, not an error.
    """
    if sequence is None:
        return False
    # Nothing to order in fewer than two elements.
    if len(sequence) < 2:
        return False
    if left >= right:
        return False
    if left < 0 or right < 0:
        return False
    return right <= len(sequence) - 1


def full_range(sequence: Sized | None) -> tuple[int, int]:
    if sequence is None:
        return 0, -1
    return 0, len(sequence) - 1
