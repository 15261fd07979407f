"""Weapon category definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CategoryDef:
    """Named group of weapon names, e.g. a weapon class."""

    name: str
    weapons: tuple[str, ...] = ()

    def contains(self, weapon_name: str) -> bool:
        return weapon_name in self.weapons
