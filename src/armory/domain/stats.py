"""The fixed table of comparable and rankable weapon stats."""
from __future__ import annotations

from dataclasses import dataclass

from armory.domain.ammo import parse_ammo_value
from armory.domain.numeric import to_number

DPS_STAT_KEY = "dps"
AMMO_STAT_KEY = "ammo"


@dataclass(frozen=True, slots=True)
class StatDef:
    key: str
    label: str
    higher_is_better: bool = False
    computed: bool = False

    def to_number(self, value: object) -> float:
        """Coerce a value of this stat for comparison and sorting."""
        if self.key == AMMO_STAT_KEY:
            return parse_ammo_value(value)
        return to_number(value)


STATS: tuple[StatDef, ...] = (
    StatDef(DPS_STAT_KEY, "DPS", higher_is_better=True, computed=True),
    StatDef("damage_max", "Damage (max)", higher_is_better=True),
    StatDef("damage_min", "Damage (min)", higher_is_better=True),
    StatDef("firerate", "Fire rate (RPM)", higher_is_better=True),
    StatDef("damage_falloff_start", "Falloff start", higher_is_better=True),
    StatDef("max_bullet_range", "Max range", higher_is_better=True),
    StatDef("hip_fire_accuracy", "Hip accuracy", higher_is_better=True),
    StatDef("ads_accuracy", "ADS accuracy", higher_is_better=True),
    StatDef("vertical_recoil", "Vertical recoil"),
    StatDef("horizontal_recoil", "Horizontal recoil"),
    StatDef("head_multiplier", "Head multiplier", higher_is_better=True),
    StatDef("torso_multiplier", "Torso multiplier", higher_is_better=True),
    StatDef("limb_multiplier", "Limb multiplier", higher_is_better=True),
    StatDef("reload_speed_partial", "Reload (partial)"),
    StatDef("reload_speed_empty", "Reload (empty)"),
    StatDef("equip_speed", "Equip speed"),
    StatDef("aim_speed", "Aim speed"),
    StatDef("weight", "Weight"),
    StatDef(AMMO_STAT_KEY, "Ammo", higher_is_better=True),
    StatDef("pellet_count", "Pellet count", higher_is_better=True),
    StatDef("reload_per_bullet", "Reload per bullet"),
    StatDef("game_pass", "Game Pass"),
)

_STATS_BY_KEY = {stat.key: stat for stat in STATS}


def get_stat(key: str) -> StatDef:
    """Return a stat definition by key, raising KeyError when unknown."""
    try:
        return _STATS_BY_KEY[key]
    except KeyError as exc:
        raise KeyError(key) from exc


def stat_keys() -> list[str]:
    return [stat.key for stat in STATS]
