def test_import_armory_package() -> None:
    import importlib

    module = importlib.import_module("armory")
    assert module is not None


def test_import_services_no_side_effects() -> None:
    from armory.services import CatalogService, ComparisonService, RankingService

    assert CatalogService and ComparisonService and RankingService
