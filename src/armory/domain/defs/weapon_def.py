"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass, fields

from armory.core.types import StatValue


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Immutable weapon record keyed by its unique name.

    ``ammo`` keeps the raw catalog value: an int magazine size, a composite
    ``"a+b"`` string or the ``"inf"`` sentinel. Optional attributes are
    ``None`` when the catalog omits them.
    """

    name: str
    damage_max: float
    damage_min: float
    firerate: float
    ammo: int | str
    reload_speed_empty: float
    reload_speed_partial: float
    reload_per_bullet: bool = False
    pellet_count: int | None = None
    head_multiplier: float | None = None
    torso_multiplier: float | None = None
    limb_multiplier: float | None = None
    damage_falloff_start: StatValue | None = None
    max_bullet_range: StatValue | None = None
    hip_fire_accuracy: StatValue | None = None
    ads_accuracy: StatValue | None = None
    vertical_recoil: StatValue | None = None
    horizontal_recoil: StatValue | None = None
    equip_speed: StatValue | None = None
    aim_speed: StatValue | None = None
    weight: StatValue | None = None
    game_pass: StatValue | None = None

    def attribute(self, key: str) -> StatValue | None:
        """Return a raw attribute by key, or None when absent or unknown."""
        if key not in WEAPON_ATTRIBUTE_KEYS:
            return None
        return getattr(self, key)


WEAPON_ATTRIBUTE_KEYS: frozenset[str] = frozenset(
    field.name for field in fields(WeaponDef) if field.name != "name"
)
