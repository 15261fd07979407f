"""Search and ranking over the catalog."""
from __future__ import annotations

import logging

from armory.domain.ranking import RankEntry, rank
from armory.domain.scenario import Scenario
from armory.domain.stats import DPS_STAT_KEY, get_stat
from armory.services.catalog_service import CatalogService
from armory.services.errors import UnknownStatError

logger = logging.getLogger(__name__)


class RankingService:
    """Filters the catalog by name and category and ranks it by one stat."""

    def __init__(self, *, catalog_service: CatalogService) -> None:
        self._catalog = catalog_service

    def rank(
        self,
        *,
        query: str = "",
        stat_key: str = DPS_STAT_KEY,
        scenario: Scenario | None = None,
        category_filter: str | None = None,
        descending: bool = True,
    ) -> list[RankEntry]:
        try:
            get_stat(stat_key)
        except KeyError as exc:
            raise UnknownStatError(stat_key) from exc
        entries = rank(
            self._catalog.weapons_by_name(),
            self._catalog.categories(),
            query=query,
            stat_key=stat_key,
            scenario=scenario,
            category_filter=category_filter,
            descending=descending,
        )
        logger.debug(
            "Ranked %d weapons by %s (query=%r, category=%r, descending=%s)",
            len(entries),
            stat_key,
            query,
            category_filter,
            descending,
        )
        return entries
