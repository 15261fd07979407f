"""Tests for CLI rendering utilities."""
from armory.domain.comparison import Comparison
from armory.domain.defs import WeaponDef
from armory.domain.dps import simulate_cycles
from armory.domain.ranking import RankEntry
from armory.domain.scenario import Scenario
from armory.presentation.cli.render import (
    format_breakdown_lines,
    format_comparison_lines,
    format_marked,
    format_ranking_lines,
)
from armory.services.comparison_service import ComparisonView, StatComparisonRow, format_stat_value


def test_format_stat_value_handles_missing_bools_and_whole_floats() -> None:
    assert format_stat_value(None) == "—"
    assert format_stat_value(True) == "true"
    assert format_stat_value(3.0) == "3"
    assert format_stat_value(2.5) == "2.5"
    assert format_stat_value("30+1") == "30+1"


def test_format_marked_prefixes_result() -> None:
    assert format_marked("10", Comparison.BETTER) == "+10"
    assert format_marked("10", Comparison.WORSE) == "-10"
    assert format_marked("10", Comparison.SAME) == "=10"
    assert format_marked("—", Comparison.INCOMPARABLE) == " —"


def test_format_comparison_lines_aligns_columns() -> None:
    view = ComparisonView(
        left_name="AK-47",
        right_name="M4A1",
        left_category="Assault Rifles",
        right_category="Assault Rifles",
        rows=(
            StatComparisonRow("dps", "DPS", 150, 140, Comparison.BETTER, Comparison.WORSE),
        ),
    )
    lines = format_comparison_lines(view)
    assert len(lines) == 3
    assert lines[1].startswith("Assault Rifles")
    assert "Class" in lines[1]
    assert lines[2].startswith("+150")
    assert lines[2].endswith("-140")
    assert lines[1].index("Class") == lines[2].index("DPS")


def test_format_ranking_lines() -> None:
    lines = format_ranking_lines([RankEntry("AK-47", 150, 1), RankEntry("UZI", 99, 2)])
    assert lines[0].startswith("#1")
    assert lines[0].endswith("150")
    assert "UZI" in lines[1]
    assert format_ranking_lines([]) == ["No weapons match."]


def test_format_breakdown_lines_ends_with_dps() -> None:
    weapon = WeaponDef(
        name="Rifle",
        damage_max=20,
        damage_min=10,
        firerate=600,
        ammo=30,
        reload_speed_empty=2,
        reload_speed_partial=1,
    )
    lines = format_breakdown_lines(simulate_cycles(weapon, Scenario()))
    assert lines[-1] == "DPS: 126"
    assert "Total rounds: 63" in lines
