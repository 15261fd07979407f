"""Read-only access to the weapon catalog and its categories."""
from __future__ import annotations

import logging

from armory.data.repositories import CategoriesRepository, WeaponsRepository
from armory.domain.categories import category_of
from armory.domain.defs import CategoryDef, WeaponDef
from armory.domain.dps import CycleBreakdown, compute_dps, simulate_cycles
from armory.domain.scenario import Scenario

logger = logging.getLogger(__name__)


class CatalogService:
    """Looks up weapons and categories and runs the DPS simulation by name."""

    def __init__(self, *, weapons_repo: WeaponsRepository, categories_repo: CategoriesRepository) -> None:
        self._weapons_repo = weapons_repo
        self._categories_repo = categories_repo

    def weapon_names(self) -> list[str]:
        return self._weapons_repo.ids()

    def weapons_by_name(self) -> dict[str, WeaponDef]:
        return {weapon.name: weapon for weapon in self._weapons_repo.all()}

    def categories(self) -> list[CategoryDef]:
        return self._categories_repo.all()

    def category_names(self) -> list[str]:
        return [category.name for category in self._categories_repo.all()]

    def get_weapon(self, name: str) -> WeaponDef | None:
        return self._weapons_repo.find(name)

    def category_of(self, name: str) -> str:
        return category_of(name, self._categories_repo.all())

    def compute_dps(self, name: str, scenario: Scenario | None = None) -> int | float | None:
        """Return the simulated DPS for ``name``, or None for an unknown weapon."""
        weapon = self.get_weapon(name)
        if weapon is None:
            logger.debug("DPS requested for unknown weapon %r", name)
        return compute_dps(weapon, scenario)

    def breakdown(self, name: str, scenario: Scenario | None = None) -> CycleBreakdown | None:
        weapon = self.get_weapon(name)
        if weapon is None:
            return None
        return simulate_cycles(weapon, scenario or Scenario())
