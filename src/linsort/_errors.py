from __future__ import annotations


class LinsortError(Exception):
    """Base class for errors raised by linsort."""


class ElementTypeError(LinsortError, TypeError):
    def __init__(self, index: int, value: object) -> None:
        self.index = index
        self.value = value
        super().__init__(f"element at index {index} is not an integer: {value!r}")


class CapacityError(LinsortError, ValueError):
    """The value span of a range needs more counters than allowed."""

    def __init__(self, span: int, max_span: int) -> None:
        self.span = span
        self.max_span = max_span
        super().__init__(
            f"value span {span} exceeds the maximum histogram size {max_span}; "
            "raise it with LINSORT_MAX_SPAN or set_max_span()"
        )


class UnknownSorterError(LinsortError, KeyError):
    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown sorter {self.name!r} (available: {', '.join(self.available) or 'none'})"
