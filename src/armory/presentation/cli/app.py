"""Console-driven UI loops for the armory."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from armory.core.types import ZONES
from armory.data.errors import DataError
from armory.data.repositories import CategoriesRepository, WeaponsRepository
from armory.domain.ranking import ALL_CATEGORIES
from armory.domain.scenario import Scenario
from armory.domain.stats import STATS, get_stat
from armory.presentation.cli import render
from armory.presentation.cli.config import load_config, save_config, scenario_from_config
from armory.services import CatalogService, ComparisonService, RankingService

MenuAction = Callable[["CliSession"], bool]


class CliSession:
    """Services and user settings shared by the menu loops."""

    def __init__(
        self,
        *,
        catalog_service: CatalogService,
        config: Dict[str, object],
        config_path: Path | None = None,
    ) -> None:
        self.catalog = catalog_service
        self.comparison = ComparisonService(catalog_service=catalog_service)
        self.ranking = RankingService(catalog_service=catalog_service)
        self.config = config
        self.config_path = config_path

    @property
    def scenario(self) -> Scenario:
        return scenario_from_config(self.config)


def main() -> None:
    """Start the interactive CLI session."""
    try:
        session = _build_session()
    except DataError as exc:
        print(f"Unable to load weapon data: {exc}")
        raise SystemExit(1) from exc
    print("=== Armory ===")
    print(f"{len(session.catalog.weapon_names())} weapons loaded.")
    running = True
    while running:
        options = _main_menu_options()
        render.render_menu("Main Menu", [label for label, _ in options])
        index = _prompt_index(len(options))
        _, action = options[index]
        running = action(session)
    print("Goodbye!")


def _build_session(base_path: Path | str | None = None, config_path: Path | None = None) -> CliSession:
    """Construct the session with concrete repositories, loading data eagerly."""
    weapons_repo = WeaponsRepository(base_path)
    categories_repo = CategoriesRepository(base_path, weapons_repo=weapons_repo)
    catalog = CatalogService(weapons_repo=weapons_repo, categories_repo=categories_repo)
    catalog.weapon_names()
    catalog.category_names()
    return CliSession(catalog_service=catalog, config=load_config(config_path), config_path=config_path)


def _main_menu_options() -> List[Tuple[str, MenuAction]]:
    return [
        ("Compare Weapons", _compare_flow),
        ("Search & Rank", _search_flow),
        ("Weapon Details", _details_flow),
        ("Scenario Settings", _scenario_flow),
        ("Quit", _quit),
    ]


def _quit(session: CliSession) -> bool:
    return False


def _compare_flow(session: CliSession) -> bool:
    left = _prompt_weapon(session, "Left weapon: ")
    right = _prompt_weapon(session, "Right weapon: ")
    view = session.comparison.compare(left, right, session.scenario)
    render.render_comparison(view)
    return True


def _search_flow(session: CliSession) -> bool:
    query = input("Search (blank for all): ").strip()

    category_options = [ALL_CATEGORIES] + session.catalog.category_names()
    render.render_menu("Class", ["All Classes"] + category_options[1:])
    category_filter = category_options[_prompt_index(len(category_options))]

    stat_key = _prompt_stat(str(session.config.get("sort_stat")))

    current_order = str(session.config.get("sort_order"))
    order = input(f"Order asc/desc (blank for {current_order}): ").strip().lower()
    if order not in ("asc", "desc"):
        order = current_order

    session.config["sort_stat"] = stat_key
    session.config["sort_order"] = order
    entries = session.ranking.rank(
        query=query,
        stat_key=stat_key,
        scenario=session.scenario,
        category_filter=category_filter,
        descending=order == "desc",
    )
    render.render_ranking(entries)
    return True


def _details_flow(session: CliSession) -> bool:
    name = _prompt_weapon(session, "Weapon: ")
    scenario = session.scenario
    breakdown = session.catalog.breakdown(name, scenario)
    render.render_heading(f"{name} ({session.catalog.category_of(name)})")
    print(f"Scenario: {scenario.duration:g}s, zone {scenario.zone}, pellets hit {scenario.pellet_hit_pct:g}%")
    if breakdown is None:
        print("No data.")
        return True
    lines = render.format_breakdown_lines(breakdown)
    if not render.debug_enabled():
        lines = lines[-1:]
    render.render_bullet_lines(lines)
    return True


def _scenario_flow(session: CliSession) -> bool:
    scenario = session.scenario
    render.render_heading("Scenario Settings")
    duration = input(f"Duration in seconds (blank for {scenario.duration:g}): ").strip()
    zone = input(f"Target zone {'/'.join(ZONES)} (blank for {scenario.zone}): ").strip()
    pellets = input(f"Pellet hit % (blank for {scenario.pellet_hit_pct:g}): ").strip()
    if duration:
        session.config["duration"] = duration
    if zone:
        session.config["zone"] = zone
    if pellets:
        session.config["pellet_hit_pct"] = pellets
    save_config(session.config, session.config_path)
    session.config = load_config(session.config_path)
    updated = session.scenario
    print(f"Scenario set to {updated.duration:g}s, zone {updated.zone}, pellets hit {updated.pellet_hit_pct:g}%.")
    return True


def _prompt_weapon(session: CliSession, prompt: str) -> str:
    names = session.catalog.weapon_names()
    while True:
        raw = input(prompt).strip()
        if not raw:
            print("Please enter a weapon name.")
            continue
        match = _match_weapon(names, raw)
        if match is not None:
            return match
        suggestions = [name for name in names if raw.lower() in name.lower()]
        if suggestions:
            print("Did you mean:")
            render.render_bullet_lines(suggestions[:10])
        else:
            print(f"No weapon named '{raw}'.")


def _prompt_stat(current_stat: str) -> str:
    render.render_menu("Sort by", [stat.label for stat in STATS])
    while True:
        raw = input(f"Select a stat (blank for {get_stat(current_stat).label}): ").strip()
        if not raw:
            return current_stat
        index = _parse_index(raw, len(STATS), default=None)
        if index is not None:
            return STATS[index].key
        print(f"Please enter a value between 1 and {len(STATS)}.")


def _match_weapon(names: Sequence[str], raw: str) -> str | None:
    lowered = raw.lower()
    for name in names:
        if name.lower() == lowered:
            return name
    matches = [name for name in names if lowered in name.lower()]
    if len(matches) == 1:
        return matches[0]
    return None


def _prompt_index(option_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        index = _parse_index(raw, option_count, default=None)
        if index is not None:
            return index
        print(f"Please enter a value between 1 and {option_count}.")


def _parse_index(raw: str, option_count: int, *, default: int | None) -> int | None:
    try:
        index = int(raw) - 1
    except ValueError:
        return default
    if 0 <= index < option_count:
        return index
    return default
