"""Domain definition exports."""

from .category_def import CategoryDef
from .weapon_def import WEAPON_ATTRIBUTE_KEYS, WeaponDef

__all__ = [
    "CategoryDef",
    "WEAPON_ATTRIBUTE_KEYS",
    "WeaponDef",
]
