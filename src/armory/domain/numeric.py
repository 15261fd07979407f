"""Numeric coercion helpers shared by the simulator and comparator."""
from __future__ import annotations

import math
import re

_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def to_number(value: object) -> float:
    """Coerce a catalog value to a float, or NaN when it is not numeric.

    Booleans count as 1/0; strings must be plain decimal literals.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL_RE.match(text):
            return float(text)
    return math.nan


def round_half_up(value: float) -> int | float:
    """Round finite values to the nearest int with halves rounding up.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)
