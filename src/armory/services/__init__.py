"""Service layer exports."""

from .errors import UnknownStatError
from .catalog_service import CatalogService
from .comparison_service import ComparisonService, ComparisonView, StatComparisonRow
from .ranking_service import RankingService

__all__ = [
    "UnknownStatError",
    "CatalogService",
    "ComparisonService",
    "ComparisonView",
    "StatComparisonRow",
    "RankingService",
]
