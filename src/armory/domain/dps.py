"""Sustained DPS simulation over discrete fire and reload cycles.

The simulated window starts with a full magazine. The first round of every
burst leaves at t=0 of that burst and the rest follow at the weapon's fire
rate, so emptying a magazine of ``n`` rounds takes ``(n - 1) / rps`` seconds.
After the magazine empties the weapon reloads, either for a flat
``reload_speed_empty`` or, for per-bullet reloaders, for
``ammo * reload_speed_empty``. Unlimited-ammo weapons never reload.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from armory.domain.ammo import is_unlimited, parse_ammo_value
from armory.domain.defs import WeaponDef
from armory.domain.numeric import round_half_up
from armory.domain.scenario import Scenario

# Absorbs float error from accumulated cycle times before flooring round counts.
_FLOOR_EPSILON = 1e-9

_ZONE_MULTIPLIER_FIELDS = {
    "head": "head_multiplier",
    "torso": "torso_multiplier",
    "limb": "limb_multiplier",
}


@dataclass(frozen=True, slots=True)
class CycleBreakdown:
    damage_per_hit: float
    rounds_per_second: float
    magazine: float
    reload_time: float
    cycle_time: float
    full_cycles: float
    leftover_time: float
    leftover_rounds: float
    total_rounds: float
    raw_dps: float

    @property
    def dps(self) -> int | float:
        return round_half_up(self.raw_dps)


def zone_multiplier(weapon: WeaponDef, zone: str) -> float:
    field = _ZONE_MULTIPLIER_FIELDS.get(zone)
    if field is None:
        return 1.0
    value = getattr(weapon, field)
    return 1.0 if value is None else value


def pellet_multiplier(weapon: WeaponDef, pellet_hit_pct: float) -> float:
    if not weapon.pellet_count:
        return 1.0
    return weapon.pellet_count * pellet_hit_pct / 100


def damage_per_hit(weapon: WeaponDef, scenario: Scenario) -> float:
    return (
        weapon.damage_max
        * zone_multiplier(weapon, scenario.zone)
        * pellet_multiplier(weapon, scenario.pellet_hit_pct)
    )


def simulate_cycles(weapon: WeaponDef, scenario: Scenario) -> CycleBreakdown:
    """Simulate ``scenario.duration`` seconds of sustained fire."""
    duration = scenario.duration
    damage = damage_per_hit(weapon, scenario)
    ammo = parse_ammo_value(weapon.ammo)
    rps = weapon.firerate / 60 if 0 < weapon.firerate < math.inf else math.nan
    if not 0 < duration < math.inf:
        return _degenerate(damage, rps, ammo, math.nan, math.nan, math.nan)

    if is_unlimited(ammo):
        rounds = 1 + duration * rps
        return CycleBreakdown(
            damage_per_hit=damage,
            rounds_per_second=rps,
            magazine=ammo,
            reload_time=0.0,
            cycle_time=math.inf,
            full_cycles=0,
            leftover_time=duration,
            leftover_rounds=rounds,
            total_rounds=rounds,
            raw_dps=rounds * damage / duration,
        )

    reload_time = ammo * weapon.reload_speed_empty if weapon.reload_per_bullet else weapon.reload_speed_empty
    cycle_time = (ammo - 1) / rps + reload_time
    if math.isnan(cycle_time):
        return _degenerate(damage, rps, ammo, reload_time, cycle_time, math.nan)
    if cycle_time <= 0:
        # A one-round magazine with no reload never stops firing.
        return _degenerate(damage, rps, ammo, reload_time, cycle_time, math.inf)

    full_cycles = _floor(duration / cycle_time)
    leftover_time = duration - full_cycles * cycle_time
    leftover_rounds = min(ammo, 1 + _floor(leftover_time * rps))
    total_rounds = full_cycles * ammo + leftover_rounds
    return CycleBreakdown(
        damage_per_hit=damage,
        rounds_per_second=rps,
        magazine=ammo,
        reload_time=reload_time,
        cycle_time=cycle_time,
        full_cycles=full_cycles,
        leftover_time=leftover_time,
        leftover_rounds=leftover_rounds,
        total_rounds=total_rounds,
        raw_dps=total_rounds * damage / duration,
    )


def compute_dps(weapon: WeaponDef | None, scenario: Scenario | None = None) -> int | float | None:
    """Return the rounded sustained DPS for ``weapon``.

    Returns None for a missing weapon. Bad data never raises: it comes back
    as NaN (or infinity for a zero-length cycle), which compares as
    incomparable.
    """
    if weapon is None:
        return None
    return simulate_cycles(weapon, scenario or Scenario()).dps


def _floor(value: float) -> int:
    return math.floor(value + _FLOOR_EPSILON)


def _degenerate(
    damage: float,
    rps: float,
    ammo: float,
    reload_time: float,
    cycle_time: float,
    raw_dps: float,
) -> CycleBreakdown:
    return CycleBreakdown(
        damage_per_hit=damage,
        rounds_per_second=rps,
        magazine=ammo,
        reload_time=reload_time,
        cycle_time=cycle_time,
        full_cycles=math.nan,
        leftover_time=math.nan,
        leftover_rounds=math.nan,
        total_rounds=raw_dps,
        raw_dps=raw_dps,
    )
