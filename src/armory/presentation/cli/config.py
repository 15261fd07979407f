"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from armory.domain.scenario import DEFAULT_DURATION, DEFAULT_PELLET_HIT_PCT, Scenario
from armory.domain.stats import DPS_STAT_KEY, stat_keys

logger = logging.getLogger(__name__)

_DEFAULT_SORT_ORDER = "desc"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Armory"
        return Path.home() / "Armory"
    return Path.home() / ".config" / "armory"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, object]:
    return {
        "duration": DEFAULT_DURATION,
        "zone": "none",
        "pellet_hit_pct": DEFAULT_PELLET_HIT_PCT,
        "sort_stat": DPS_STAT_KEY,
        "sort_order": _DEFAULT_SORT_ORDER,
    }


def normalize_config(raw: object) -> Dict[str, object]:
    """Coerce arbitrary JSON into a complete, valid config mapping."""
    if not isinstance(raw, dict):
        return default_config()
    scenario = Scenario.from_inputs(raw.get("duration"), raw.get("zone"), raw.get("pellet_hit_pct"))
    sort_stat = raw.get("sort_stat")
    if sort_stat not in stat_keys():
        sort_stat = DPS_STAT_KEY
    sort_order = raw.get("sort_order")
    if sort_order not in ("asc", "desc"):
        sort_order = _DEFAULT_SORT_ORDER
    return {
        "duration": scenario.duration,
        "zone": scenario.zone,
        "pellet_hit_pct": scenario.pellet_hit_pct,
        "sort_stat": sort_stat,
        "sort_order": sort_order,
    }


def scenario_from_config(config: Dict[str, object]) -> Scenario:
    return Scenario.from_inputs(config.get("duration"), config.get("zone"), config.get("pellet_hit_pct"))


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    return normalize_config(raw)


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = normalize_config(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
