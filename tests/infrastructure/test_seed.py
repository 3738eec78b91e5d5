"""Tests for the demo catalogue loader."""

from inventory_manager.infrastructure.persistence.seed import DEMO_PRODUCTS, seed_catalog
from tests.fakes import FakeProductRepository


class TestSeedCatalog:

    def test_seeds_every_demo_product(self):
        repo = FakeProductRepository()

        added = seed_catalog(repo)

        assert added == len(DEMO_PRODUCTS) == 14
        assert len(repo.list_all()) == 14

    def test_second_run_adds_nothing(self):
        repo = FakeProductRepository()
        seed_catalog(repo)

        assert seed_catalog(repo) == 0
        assert len(repo.list_all()) == 14

    def test_demo_skus_are_valid_and_unique(self):
        skus = [sku for *_, sku in DEMO_PRODUCTS]
        assert len(set(skus)) == len(skus)
        assert all(5 <= len(sku) <= 20 for sku in skus)
