from __future__ import annotations

import os
import sys

_COLOR: bool | None = None

# SGR codes by role; statuses reuse the same table.
_PALETTE: dict[str, tuple[int, ...]] = {
    "ok": (32,),
    "bad": (31,),
    "muted": (2,),
    "strong": (1,),
    "pass": (32,),
    "fail": (31, 1),
    "error": (31,),
}


def supports_color() -> bool:
    """Colors only on an interactive stdout, and never with ``NO_COLOR`` or ``TERM=dumb``."""
    global _COLOR
    if _COLOR is None:
        env_off = os.environ.get("NO_COLOR", "") != "" or os.environ.get("TERM", "") == "dumb"
        isatty = getattr(sys.stdout, "isatty", None)
        _COLOR = not env_off and isatty is not None and bool(isatty())
    return _COLOR


def force_color(enabled: bool | None) -> None:
    global _COLOR
    _COLOR = enabled


def paint(text: str, role: str) -> str:
    codes = _PALETTE.get(role, ())
    if not codes or not supports_color():
        return text
    return f"\033[{';'.join(map(str, codes))}m{text}\033[0m"


def status_label(status: str) -> str:
    return paint(status.upper(), status)
