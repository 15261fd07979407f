"""Side-by-side weapon comparison."""
from __future__ import annotations

from dataclasses import dataclass

from armory.core.types import StatValue
from armory.domain.comparison import Comparison, classify_pair
from armory.domain.scenario import Scenario
from armory.domain.stats import STATS, StatDef
from armory.services.catalog_service import CatalogService

MISSING_VALUE = "—"


@dataclass(frozen=True, slots=True)
class StatComparisonRow:
    key: str
    label: str
    left_value: StatValue | None
    right_value: StatValue | None
    left_result: Comparison
    right_result: Comparison

    @property
    def left_display(self) -> str:
        return format_stat_value(self.left_value)

    @property
    def right_display(self) -> str:
        return format_stat_value(self.right_value)


@dataclass(frozen=True, slots=True)
class ComparisonView:
    left_name: str
    right_name: str
    left_category: str
    right_category: str
    rows: tuple[StatComparisonRow, ...]


class ComparisonService:
    """Builds comparison views for two weapons under one scenario."""

    def __init__(self, *, catalog_service: CatalogService) -> None:
        self._catalog = catalog_service

    def compare(self, left_name: str, right_name: str, scenario: Scenario | None = None) -> ComparisonView:
        scenario = scenario or Scenario()
        rows = tuple(self._build_row(stat, left_name, right_name, scenario) for stat in STATS)
        return ComparisonView(
            left_name=left_name,
            right_name=right_name,
            left_category=self._catalog.category_of(left_name),
            right_category=self._catalog.category_of(right_name),
            rows=rows,
        )

    def _build_row(self, stat: StatDef, left_name: str, right_name: str, scenario: Scenario) -> StatComparisonRow:
        left_value = self._value_for(stat, left_name, scenario)
        right_value = self._value_for(stat, right_name, scenario)
        left_result, right_result = classify_pair(
            left_value,
            right_value,
            stat.higher_is_better,
            stat.to_number,
        )
        return StatComparisonRow(
            key=stat.key,
            label=stat.label,
            left_value=left_value,
            right_value=right_value,
            left_result=left_result,
            right_result=right_result,
        )

    def _value_for(self, stat: StatDef, name: str, scenario: Scenario) -> StatValue | None:
        if stat.computed:
            return self._catalog.compute_dps(name, scenario)
        weapon = self._catalog.get_weapon(name)
        if weapon is None:
            return None
        return weapon.attribute(stat.key)


def format_stat_value(value: StatValue | None) -> str:
    if value is None:
        return MISSING_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
