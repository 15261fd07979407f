import math

import pytest

from armory.domain.ammo import parse_ammo_value
from armory.domain.comparison import Comparison, classify, classify_pair


def test_equal_values_are_same() -> None:
    assert classify(5, 5, True) is Comparison.SAME
    assert classify(5, 5, False) is Comparison.SAME


def test_unlimited_ammo_on_both_sides_is_same() -> None:
    assert classify(parse_ammo_value("inf"), parse_ammo_value("inf"), True) is Comparison.SAME


def test_nan_is_incomparable() -> None:
    assert classify(math.nan, 3, True) is Comparison.INCOMPARABLE
    assert classify(3, math.nan, False) is Comparison.INCOMPARABLE
    assert classify(math.nan, math.nan, True) is Comparison.INCOMPARABLE


def test_direction_follows_higher_is_better() -> None:
    assert classify(10, 5, True) is Comparison.BETTER
    assert classify(10, 5, False) is Comparison.WORSE
    assert classify(5, 10, False) is Comparison.BETTER


def test_composite_ammo_compares_by_sum() -> None:
    left, right = classify_pair(parse_ammo_value("30+1"), parse_ammo_value("30"), True)
    assert left is Comparison.BETTER
    assert right is Comparison.WORSE


@pytest.mark.parametrize(("a", "b"), [(1, 2), (2.5, -1), (0, 100), (math.inf, 30)])
def test_pairs_are_never_both_better(a: float, b: float) -> None:
    for higher in (True, False):
        left, right = classify_pair(a, b, higher)
        assert {left, right} == {Comparison.BETTER, Comparison.WORSE}


def test_raw_non_numeric_values_are_incomparable() -> None:
    assert classify("abc", 5, True) is Comparison.INCOMPARABLE
    assert classify(None, 5, False) is Comparison.INCOMPARABLE
    assert classify("abc", "abc", True) is Comparison.INCOMPARABLE
    assert classify("12", 5, True) is Comparison.BETTER


def test_raw_ammo_strings_use_ammo_coercion() -> None:
    assert classify("inf", 30, True, coerce=parse_ammo_value) is Comparison.BETTER
    assert classify("inf", "inf", True, coerce=parse_ammo_value) is Comparison.SAME
    left, right = classify_pair("30+1", "30", True, coerce=parse_ammo_value)
    assert left is Comparison.BETTER
    assert right is Comparison.WORSE
