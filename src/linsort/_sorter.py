"""The range-sort capability and the registry of named implementations."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Protocol, runtime_checkable

from linsort._counting import ExtendedCountingSort
from linsort._errors import UnknownSorterError
from linsort._range import valid_range


@runtime_checkable
class Sorter(Protocol):
    """Anything that sorts ``sequence[left..right]`` (inclusive) in place."""

    def sort(self, sequence: MutableSequence[Any] | None, left: int, right: int) -> None:
        ...


class ReferenceSort:
    """Obviously-correct range sort built on :func:`sorted`.

    Same no-op rules as the other sorters; used as the oracle by ``linsort check``.
    """

    name = "reference"

    def sort(self, sequence: MutableSequence[Any] | None, left: int, right: int) -> None:
        if sequence is None or not valid_range(sequence, left, right):
            return
        ordered = sorted(sequence[i] for i in range(left, right + 1))
        for i, value in enumerate(ordered, start=left):
            sequence[i] = value


_SORTERS: dict[str, Sorter] = {}


def register_sorter(name: str, sorter: Sorter) -> None:
    if not isinstance(sorter, Sorter):
        raise TypeError(f"{sorter!r} has no sort(sequence, left, right) method")
    _SORTERS[name] = sorter


def get_sorter(name: str) -> Sorter:
    try:
        return _SORTERS[name]
    except KeyError:
        raise UnknownSorterError(name, available_sorters()) from None


def available_sorters() -> list[str]:
    return sorted(_SORTERS)


register_sorter(ExtendedCountingSort.name, ExtendedCountingSort())
register_sorter(ReferenceSort.name, ReferenceSort())
