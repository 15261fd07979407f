"""Weapon categories repository."""
from __future__ import annotations

import logging
from typing import Dict

from armory.data.errors import DataReferenceError, DataValidationError
from armory.data.repositories.base import RepositoryBase
from armory.data.repositories.weapons_repo import WeaponsRepository
from armory.domain.defs import CategoryDef

logger = logging.getLogger(__name__)


class CategoriesRepository(RepositoryBase[CategoryDef]):
    """Loads category membership lists, keeping the file's category order."""

    def __init__(self, base_path=None, *, weapons_repo: WeaponsRepository) -> None:
        super().__init__("categories.json", base_path)
        self._weapons_repo = weapons_repo

    def all(self) -> list[CategoryDef]:
        """Return all categories in file order, which is the lookup order."""
        return list(self._ensure_loaded().values())

    def _build(self, raw: dict[str, object]) -> Dict[str, CategoryDef]:
        known_weapons = set(self._weapons_repo.ids())
        owners: dict[str, str] = {}
        categories: Dict[str, CategoryDef] = {}
        for name, payload in raw.items():
            if not isinstance(name, str) or not name.strip():
                raise DataValidationError("Category names must be non-empty strings.")
            context = f"category '{name}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"weapons"}, context)
            members = self._require_list(data["weapons"], f"{context} weapons")
            weapons: list[str] = []
            for index, member in enumerate(members):
                weapon_name = self._require_str(member, f"{context} weapons[{index}]")
                if weapon_name not in known_weapons:
                    raise DataReferenceError(f"{context} references unknown weapon '{weapon_name}'.")
                if weapon_name in weapons:
                    raise DataValidationError(f"{context} lists '{weapon_name}' more than once.")
                if weapon_name in owners:
                    logger.warning(
                        "Weapon '%s' is listed by '%s' and '%s'; '%s' wins lookups",
                        weapon_name,
                        owners[weapon_name],
                        name,
                        owners[weapon_name],
                    )
                else:
                    owners[weapon_name] = name
                weapons.append(weapon_name)
            categories[name] = CategoryDef(name=name, weapons=tuple(weapons))
        return categories
