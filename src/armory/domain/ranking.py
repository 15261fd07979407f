"""Search and ranking of weapons by a single stat."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from armory.core.types import StatValue
from armory.domain.defs import CategoryDef, WeaponDef
from armory.domain.dps import compute_dps
from armory.domain.scenario import Scenario
from armory.domain.stats import DPS_STAT_KEY, StatDef, get_stat

ALL_CATEGORIES = "all"


@dataclass(frozen=True, slots=True)
class RankEntry:
    name: str
    value: StatValue
    placement: int


def candidate_names(
    weapons: Mapping[str, WeaponDef],
    categories: Iterable[CategoryDef],
    query: str = "",
    category_filter: str | None = None,
) -> list[str]:
    """Return weapon names matching ``query`` within ``category_filter``.

    With no filter (or ``"all"``) the whole catalog is searched in name
    order; otherwise the category's own member order is kept. An unknown
    category matches nothing.
    """
    if category_filter is None or category_filter == ALL_CATEGORIES:
        pool: Iterable[str] = sorted(weapons)
    else:
        pool = next(
            (category.weapons for category in categories if category.name == category_filter),
            (),
        )
    needle = (query or "").lower()
    return [name for name in pool if needle in name.lower()]


def stat_value(
    weapons: Mapping[str, WeaponDef],
    name: str,
    stat: StatDef,
    scenario: Scenario,
) -> StatValue | None:
    """Return the value ranked for ``name``, or None to exclude it."""
    weapon = weapons.get(name)
    if stat.key == DPS_STAT_KEY:
        return compute_dps(weapon, scenario)
    if weapon is None:
        return None
    return weapon.attribute(stat.key)


def rank(
    weapons: Mapping[str, WeaponDef],
    categories: Iterable[CategoryDef],
    query: str = "",
    stat_key: str = DPS_STAT_KEY,
    scenario: Scenario | None = None,
    category_filter: str | None = None,
    descending: bool = True,
) -> list[RankEntry]:
    """Rank the matching weapons by one stat.

    Values are ordered descending when ``descending`` agrees with the
    stat's ``higher_is_better`` flag and ascending otherwise, so the best
    weapon leads a descending list. Ties keep candidate order and
    incomparable values go last. Raises KeyError for an unknown stat key.
    """
    stat = get_stat(stat_key)
    scenario = scenario or Scenario()
    valued: list[tuple[str, StatValue]] = []
    for name in candidate_names(weapons, categories, query, category_filter):
        value = stat_value(weapons, name, stat, scenario)
        if value is not None:
            valued.append((name, value))

    sign = -1.0 if descending == stat.higher_is_better else 1.0

    def sort_key(item: tuple[str, StatValue]) -> tuple[bool, float]:
        number = stat.to_number(item[1])
        if math.isnan(number):
            return True, 0.0
        return False, sign * number

    ordered = sorted(valued, key=sort_key)
    return [
        RankEntry(name=name, value=value, placement=index)
        for index, (name, value) in enumerate(ordered, start=1)
    ]
