"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from armory.domain.comparison import Comparison
from armory.domain.dps import CycleBreakdown
from armory.domain.ranking import RankEntry
from armory.services.comparison_service import ComparisonView, format_stat_value

_MARKERS = {
    Comparison.BETTER: "+",
    Comparison.WORSE: "-",
    Comparison.SAME: "=",
    Comparison.INCOMPARABLE: " ",
}


def debug_enabled() -> bool:
    """Return True only when ARMORY_DEBUG is explicitly set to '1'."""
    return os.getenv("ARMORY_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_marked(value: str, result: Comparison) -> str:
    return f"{_MARKERS[result]}{value}"


def format_comparison_lines(view: ComparisonView) -> list[str]:
    """
    Lay out a comparison as three aligned columns.

    Each value is prefixed with '+' when it is the better side, '-' when
    worse, '=' when equal and a blank when the values cannot be compared.
    """
    left_cells = [view.left_category] + [
        format_marked(row.left_display, row.left_result) for row in view.rows
    ]
    labels = ["Class"] + [row.label for row in view.rows]
    right_cells = [view.right_category] + [
        format_marked(row.right_display, row.right_result) for row in view.rows
    ]
    left_width = max(len(view.left_name), *(len(cell) for cell in left_cells))
    label_width = max(len(label) for label in labels)

    lines = [f"{view.left_name:<{left_width}}  {'':<{label_width}}  {view.right_name}"]
    for left, label, right in zip(left_cells, labels, right_cells):
        lines.append(f"{left:<{left_width}}  {label:<{label_width}}  {right}")
    return lines


def format_ranking_lines(entries: Sequence[RankEntry]) -> list[str]:
    if not entries:
        return ["No weapons match."]
    name_width = max(len(entry.name) for entry in entries)
    return [
        f"#{entry.placement:<4}{entry.name:<{name_width}}  {format_stat_value(entry.value)}"
        for entry in entries
    ]


def format_breakdown_lines(breakdown: CycleBreakdown) -> list[str]:
    return [
        f"Damage per hit: {breakdown.damage_per_hit:g}",
        f"Rounds per second: {breakdown.rounds_per_second:g}",
        f"Magazine: {breakdown.magazine:g}",
        f"Reload time: {breakdown.reload_time:g}s",
        f"Cycle time: {breakdown.cycle_time:g}s",
        f"Full cycles: {breakdown.full_cycles:g}",
        f"Leftover rounds: {breakdown.leftover_rounds:g}",
        f"Total rounds: {breakdown.total_rounds:g}",
        f"DPS: {format_stat_value(breakdown.dps)}",
    ]


def render_comparison(view: ComparisonView) -> None:
    render_heading("Compare")
    for line in format_comparison_lines(view):
        print(line)


def render_ranking(entries: Sequence[RankEntry]) -> None:
    render_heading("Results")
    for line in format_ranking_lines(entries):
        print(line)
