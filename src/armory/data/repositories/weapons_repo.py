"""Weapons repository."""
from __future__ import annotations

import logging
import math
from typing import Dict

from armory.data.errors import DataValidationError
from armory.data.repositories.base import RepositoryBase
from armory.domain.ammo import parse_ammo_value
from armory.domain.defs import WeaponDef

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {
    "damage_max",
    "damage_min",
    "firerate",
    "ammo",
    "reload_speed_empty",
    "reload_speed_partial",
    "reload_per_bullet",
}
_MULTIPLIER_FIELDS = ("head_multiplier", "torso_multiplier", "limb_multiplier")
_PASSTHROUGH_FIELDS = (
    "damage_falloff_start",
    "max_bullet_range",
    "hip_fire_accuracy",
    "ads_accuracy",
    "vertical_recoil",
    "horizontal_recoil",
    "equip_speed",
    "aim_speed",
    "weight",
    "game_pass",
)
_OPTIONAL_FIELDS = {"pellet_count", *_MULTIPLIER_FIELDS, *_PASSTHROUGH_FIELDS}


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon definitions keyed by weapon name."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for name, payload in raw.items():
            if not isinstance(name, str) or not name.strip():
                raise DataValidationError("Weapon names must be non-empty strings.")
            context = f"weapon '{name}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, _REQUIRED_FIELDS, context, optional_fields=_OPTIONAL_FIELDS)

            damage_max = self._require_positive(data["damage_max"], f"{context} damage_max")
            damage_min = self._require_positive(data["damage_min"], f"{context} damage_min")
            firerate = self._require_positive(data["firerate"], f"{context} firerate")
            reload_empty = self._require_non_negative(
                data["reload_speed_empty"], f"{context} reload_speed_empty"
            )
            reload_partial = self._require_non_negative(
                data["reload_speed_partial"], f"{context} reload_speed_partial"
            )
            reload_per_bullet = data["reload_per_bullet"]
            if not isinstance(reload_per_bullet, bool):
                raise DataValidationError(f"{context} reload_per_bullet must be a boolean.")

            multipliers = {
                key: self._require_positive(data[key], f"{context} {key}")
                for key in _MULTIPLIER_FIELDS
                if key in data
            }
            passthrough = {
                key: self._require_passthrough(data[key], f"{context} {key}")
                for key in _PASSTHROUGH_FIELDS
                if key in data
            }

            weapons[name] = WeaponDef(
                name=name,
                damage_max=damage_max,
                damage_min=damage_min,
                firerate=firerate,
                ammo=self._parse_ammo(data["ammo"], context),
                reload_speed_empty=reload_empty,
                reload_speed_partial=reload_partial,
                reload_per_bullet=reload_per_bullet,
                pellet_count=self._parse_pellet_count(data.get("pellet_count"), context),
                **multipliers,
                **passthrough,
            )
        return weapons

    @staticmethod
    def _parse_ammo(value: object, context: str) -> int | str:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise DataValidationError(f"{context} ammo must be an integer or a string.")
        if isinstance(value, int):
            if value < 1:
                raise DataValidationError(f"{context} ammo must be at least 1.")
            return value
        if math.isnan(parse_ammo_value(value)):
            # Malformed ammo is kept; it compares and simulates as NaN.
            logger.warning("%s has unparsable ammo value %r", context, value)
        return value

    @staticmethod
    def _parse_pellet_count(value: object, context: str) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise DataValidationError(f"{context} pellet_count must be an integer >= 1.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        if not math.isfinite(value):
            raise DataValidationError(f"{context} must be finite.")
        return value

    @classmethod
    def _require_positive(cls, value: object, context: str) -> float:
        number = cls._require_number(value, context)
        if number <= 0:
            raise DataValidationError(f"{context} must be positive.")
        return number

    @classmethod
    def _require_non_negative(cls, value: object, context: str) -> float:
        number = cls._require_number(value, context)
        if number < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return number

    @staticmethod
    def _require_passthrough(value: object, context: str) -> int | float | str | bool:
        if not isinstance(value, (int, float, str, bool)):
            raise DataValidationError(f"{context} must be a number, string or boolean.")
        return value
