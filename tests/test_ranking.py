from __future__ import annotations

import pytest

from armory.domain.defs import CategoryDef, WeaponDef
from armory.domain.ranking import candidate_names, rank
from armory.domain.scenario import Scenario


def _weapon(name: str, **overrides) -> WeaponDef:
    fields = {
        "name": name,
        "damage_max": 20,
        "damage_min": 10,
        "firerate": 600,
        "ammo": 30,
        "reload_speed_empty": 2,
        "reload_speed_partial": 1.5,
    }
    fields.update(overrides)
    return WeaponDef(**fields)


def _catalog() -> dict[str, WeaponDef]:
    weapons = [
        _weapon("Alpha", damage_max=30, weight=3),
        _weapon("Bravo", damage_max=20, weight=2),
        _weapon("Charlie", damage_max=40),
        _weapon("Delta Pistol", damage_max=25, weight=1),
    ]
    return {weapon.name: weapon for weapon in weapons}


def _categories() -> list[CategoryDef]:
    return [
        CategoryDef("Rifles", ("Charlie", "Alpha", "Bravo", "Ghost")),
        CategoryDef("Pistols", ("Delta Pistol",)),
    ]


def _names(entries) -> list[str]:
    return [entry.name for entry in entries]


def test_rank_descending_puts_highest_first_for_higher_is_better() -> None:
    entries = rank(_catalog(), _categories(), stat_key="damage_max", descending=True)
    assert _names(entries) == ["Charlie", "Alpha", "Delta Pistol", "Bravo"]
    assert [entry.value for entry in entries] == [40, 30, 25, 20]


def test_rank_ascending_for_higher_is_better() -> None:
    entries = rank(_catalog(), _categories(), stat_key="damage_max", descending=False)
    assert _names(entries) == ["Bravo", "Delta Pistol", "Alpha", "Charlie"]


def test_rank_descending_puts_lowest_first_for_lower_is_better() -> None:
    entries = rank(_catalog(), _categories(), stat_key="weight", descending=True)
    assert _names(entries) == ["Delta Pistol", "Bravo", "Alpha"]


def test_rank_excludes_weapons_missing_the_attribute() -> None:
    entries = rank(_catalog(), _categories(), stat_key="weight")
    assert "Charlie" not in _names(entries)


def test_rank_query_is_case_insensitive_substring() -> None:
    entries = rank(_catalog(), _categories(), query="ALP", stat_key="damage_max")
    assert _names(entries) == ["Alpha"]
    assert _names(rank(_catalog(), _categories(), query="pistol")) == ["Delta Pistol"]


def test_rank_category_filter_restricts_and_skips_unknown_members() -> None:
    entries = rank(_catalog(), _categories(), stat_key="damage_max", category_filter="Rifles")
    assert _names(entries) == ["Charlie", "Alpha", "Bravo"]


def test_rank_unknown_category_is_empty() -> None:
    assert rank(_catalog(), _categories(), category_filter="Launchers") == []


def test_candidate_names_keeps_category_order_and_sorts_catalog() -> None:
    assert candidate_names(_catalog(), _categories(), "", "Rifles") == ["Charlie", "Alpha", "Bravo", "Ghost"]
    assert candidate_names(_catalog(), _categories(), "", "all") == [
        "Alpha",
        "Bravo",
        "Charlie",
        "Delta Pistol",
    ]


def test_rank_by_dps_uses_the_scenario() -> None:
    entries = rank(_catalog(), _categories(), stat_key="dps", scenario=Scenario(duration=10))
    assert _names(entries) == ["Charlie", "Alpha", "Delta Pistol", "Bravo"]
    assert entries[-1].value == 126


def test_rank_by_ammo_parses_unlimited_and_composite() -> None:
    catalog = {
        "Belt": _weapon("Belt", ammo="inf"),
        "Dual": _weapon("Dual", ammo="30+1"),
        "Mag": _weapon("Mag", ammo=30),
        "Broken": _weapon("Broken", ammo="???"),
    }
    entries = rank(catalog, [], stat_key="ammo", descending=True)
    assert _names(entries) == ["Belt", "Dual", "Mag", "Broken"]
    entries = rank(catalog, [], stat_key="ammo", descending=False)
    assert _names(entries) == ["Mag", "Dual", "Belt", "Broken"]


def test_rank_ties_keep_name_order() -> None:
    catalog = {name: _weapon(name) for name in ("Zulu", "Echo", "Mike")}
    entries = rank(catalog, [], stat_key="damage_max")
    assert _names(entries) == ["Echo", "Mike", "Zulu"]


def test_rank_is_idempotent_with_contiguous_placements() -> None:
    first = rank(_catalog(), _categories(), stat_key="dps", scenario=Scenario(zone="head"))
    second = rank(_catalog(), _categories(), stat_key="dps", scenario=Scenario(zone="head"))
    assert first == second
    assert [entry.placement for entry in first] == list(range(1, len(first) + 1))


def test_rank_unknown_stat_raises_key_error() -> None:
    with pytest.raises(KeyError):
        rank(_catalog(), _categories(), stat_key="luck")
