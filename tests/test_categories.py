from armory.domain.categories import UNKNOWN_CATEGORY, category_of
from armory.domain.defs import CategoryDef


def test_category_of_returns_owning_category() -> None:
    categories = [CategoryDef("Rifles", ("AK-47",)), CategoryDef("Pistols", ("Glock 17",))]
    assert category_of("Glock 17", categories) == "Pistols"


def test_category_of_first_match_wins() -> None:
    categories = [CategoryDef("First", ("Dual",)), CategoryDef("Second", ("Dual",))]
    assert category_of("Dual", categories) == "First"
    assert category_of("Dual", list(reversed(categories))) == "Second"


def test_category_of_unknown_weapon() -> None:
    assert category_of("Nothing", [CategoryDef("Rifles", ("AK-47",))]) == UNKNOWN_CATEGORY
    assert category_of("Nothing", []) == "Unknown"
