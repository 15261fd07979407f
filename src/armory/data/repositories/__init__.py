"""Repository exports."""

from .weapons_repo import WeaponsRepository
from .categories_repo import CategoriesRepository

__all__ = [
    "CategoriesRepository",
    "WeaponsRepository",
]
