import math

from armory.data.repositories import CategoriesRepository, WeaponsRepository
from armory.domain.categories import category_of
from armory.domain.dps import compute_dps
from armory.domain.scenario import Scenario

_weapons_repo = WeaponsRepository()
_categories_repo = CategoriesRepository(weapons_repo=_weapons_repo)


def test_every_weapon_belongs_to_exactly_one_category() -> None:
    categories = _categories_repo.all()
    for weapon in _weapons_repo.all():
        owners = [category.name for category in categories if category.contains(weapon.name)]
        assert len(owners) == 1, f"{weapon.name} owned by {owners}"
        assert category_of(weapon.name, categories) == owners[0]


def test_every_weapon_has_a_finite_integer_dps() -> None:
    for zone in ("none", "head", "torso", "limb"):
        scenario = Scenario(zone=zone)
        for weapon in _weapons_repo.all():
            value = compute_dps(weapon, scenario)
            assert isinstance(value, int), f"{weapon.name} {zone}: {value}"
            assert value > 0


def test_shipped_ammo_values_all_parse() -> None:
    from armory.domain.ammo import parse_ammo_value

    for weapon in _weapons_repo.all():
        assert not math.isnan(parse_ammo_value(weapon.ammo)), weapon.name
