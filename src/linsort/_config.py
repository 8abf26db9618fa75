from __future__ import annotations

import os

DEFAULT_MAX_SPAN = 1 << 26
MAX_SPAN_ENV = "LINSORT_MAX_SPAN"

_MAX_SPAN: int | None = None


def _parse_span(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_SPAN_ENV} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{MAX_SPAN_ENV} must be positive, got {value}")
    return value


def max_span() -> int:
    global _MAX_SPAN
    if _MAX_SPAN is not None:
        return _MAX_SPAN
    raw = os.environ.get(MAX_SPAN_ENV, "")
    _MAX_SPAN = _parse_span(raw) if raw != "" else DEFAULT_MAX_SPAN
    return _MAX_SPAN


def set_max_span(value: int | None) -> None:
    """Override the histogram limit; ``None`` re-reads the environment on next use."""
    global _MAX_SPAN
    if value is not None and value <= 0:
        raise ValueError(f"max span must be positive, got {value}")
    _MAX_SPAN = value
