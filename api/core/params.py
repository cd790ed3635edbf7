"""
Query-string parsing that never fails.

Numeric query parameters are never a client error here: missing, blank or
unparsable values become a defined default, and those defaults carry meaning
downstream (partner 0 means "all partners", coordinate 0 means "no geo
ranking").
"""

from __future__ import annotations

import math


def parse_int(raw: str | None, default: int = 0) -> int:
    value = (raw or "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def parse_float(raw: str | None, default: float = 0.0) -> float:
    value = (raw or "").strip()
    if not value:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    # nan/inf parse fine but are not coordinates.
    if not math.isfinite(parsed):
        return default
    return parsed
