"""Category membership lookup."""
from __future__ import annotations

from typing import Iterable

from armory.domain.defs import CategoryDef

UNKNOWN_CATEGORY = "Unknown"


def category_of(weapon_name: str, categories: Iterable[CategoryDef]) -> str:
    """Return the first category listing ``weapon_name``, in the given order."""
    for category in categories:
        if category.contains(weapon_name):
            return category.name
    return UNKNOWN_CATEGORY
