"""Ammo value parsing."""
from __future__ import annotations

import math

from armory.domain.numeric import to_number

UNLIMITED_AMMO = "inf"


def parse_ammo_value(raw: object) -> float:
    """Parse a catalog ammo value into a magazine size.

    ``"inf"`` is unlimited and parses to ``math.inf``. Composite pools such
    as ``"30+1"`` are summed, with a blank part counting as zero. Anything
    else goes through plain numeric coercion, so malformed input yields NaN
    instead of raising.
    """
    if raw == UNLIMITED_AMMO:
        return math.inf
    if isinstance(raw, str) and "+" in raw:
        return sum(_part_value(part) for part in raw.split("+"))
    return to_number(raw)


def is_unlimited(ammo: float) -> bool:
    return ammo == math.inf


def _part_value(part: str) -> float:
    if not part.strip():
        return 0.0
    return to_number(part)
