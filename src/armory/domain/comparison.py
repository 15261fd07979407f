"""Directional better/worse classification of stat values."""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable

from armory.domain.numeric import to_number

Coercion = Callable[[object], float]


class Comparison(Enum):
    """Outcome of comparing one side's value against the other's."""

    SAME = "same"
    BETTER = "better"
    WORSE = "worse"
    INCOMPARABLE = "incomparable"


def classify(
    left: object,
    right: object,
    higher_is_better: bool,
    coerce: Coercion = to_number,
) -> Comparison:
    """Classify ``left`` relative to ``right``.

    Both values go through ``coerce`` first; pass ``parse_ammo_value`` for
    ammo so ``"inf"`` and ``"a+b"`` compare by magazine size. Equal values,
    including two unlimited-ammo infinities, are SAME; a value that does not
    coerce to a number is INCOMPARABLE. Call again with the sides swapped
    for the other column.
    """
    left_number = coerce(left)
    right_number = coerce(right)
    if left_number == right_number:
        return Comparison.SAME
    if math.isnan(left_number) or math.isnan(right_number):
        return Comparison.INCOMPARABLE
    preferred = left_number > right_number if higher_is_better else left_number < right_number
    return Comparison.BETTER if preferred else Comparison.WORSE


def classify_pair(
    left: object,
    right: object,
    higher_is_better: bool,
    coerce: Coercion = to_number,
) -> tuple[Comparison, Comparison]:
    """Return the (left, right) classifications for a side-by-side row."""
    return (
        classify(left, right, higher_is_better, coerce),
        classify(right, left, higher_is_better, coerce),
    )
