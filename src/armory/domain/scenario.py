"""Simulation scenario parameters."""
from __future__ import annotations

import math
from dataclasses import dataclass

from armory.core.types import ZONES, Zone

DEFAULT_DURATION = 10.0
DEFAULT_ZONE: Zone = "none"
DEFAULT_PELLET_HIT_PCT = 100.0


@dataclass(frozen=True, slots=True)
class Scenario:
    """Caller-supplied conditions for one DPS computation.

    ``duration`` is the simulated window in seconds, ``zone`` the body zone
    every hit lands on and ``pellet_hit_pct`` the percentage of pellets
    assumed to connect for multi-projectile weapons.
    """

    duration: float = DEFAULT_DURATION
    zone: Zone = DEFAULT_ZONE
    pellet_hit_pct: float = DEFAULT_PELLET_HIT_PCT

    @classmethod
    def from_inputs(
        cls,
        duration: object = None,
        zone: object = None,
        pellet_hit_pct: object = None,
    ) -> "Scenario":
        """Build a scenario from loosely typed form input.

        A blank, unparsable or zero duration falls back to the default
        window; an unparsable pellet percentage falls back to 100; an
        unknown zone falls back to ``"none"``.
        """
        parsed_duration = _parse_float(duration)
        if parsed_duration is None or parsed_duration == 0:
            parsed_duration = DEFAULT_DURATION
        parsed_pct = _parse_float(pellet_hit_pct)
        if parsed_pct is None:
            parsed_pct = DEFAULT_PELLET_HIT_PCT
        return cls(
            duration=parsed_duration,
            zone=normalize_zone(zone),
            pellet_hit_pct=parsed_pct,
        )


def normalize_zone(value: object) -> Zone:
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in ZONES:
            return candidate  # type: ignore[return-value]
    return DEFAULT_ZONE


def _parse_float(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number
