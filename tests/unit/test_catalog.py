"""
DataVault Pro - Catalog Tests

Tests for listing search, publishing and view/sale counters.
"""

import pytest

from datavault.core.exceptions import DatasetNotFoundError
from datavault.models.enums import DatasetCategory, SortOrder, StorageStatus
from datavault.services.catalog import SEED_DATASETS, DatasetCatalog
from tests.conftest import SELLER


class TestCatalogSeed:
    """Test the built-in listings."""

    def test_seeded_catalog(self):
        catalog = DatasetCatalog()

        assert len(catalog) == len(SEED_DATASETS)
        assert all(d.verified for d in catalog.all())

    def test_empty_catalog(self):
        assert len(DatasetCatalog(seed=False)) == 0

    def test_get_unknown_dataset_raises(self, catalog):
        with pytest.raises(DatasetNotFoundError) as exc_info:
            catalog.get("404")
        assert exc_info.value.details["dataset_id"] == "404"


class TestCatalogSearch:
    """Test search, filter and sort."""

    def test_default_sort_is_most_recent_first(self, catalog):
        assert [d.id for d in catalog.search()] == ["2", "1", "3"]

    def test_query_matches_title_and_description_case_insensitively(self, catalog):
        assert [d.id for d in catalog.search(query="alpha")] == ["1"]
        assert [d.id for d in catalog.search(query="THIRD")] == ["3"]
        assert catalog.search(query="nothing like this") == []

    def test_category_filter(self, catalog):
        results = catalog.search(category=DatasetCategory.FINANCE)
        assert {d.id for d in results} == {"2", "3"}

        assert len(catalog.search(category="all")) == 3

    @pytest.mark.parametrize("sort,expected", [
        (SortOrder.POPULAR, ["1", "2", "3"]),
        (SortOrder.PRICE_LOW, ["3", "1", "2"]),
        (SortOrder.PRICE_HIGH, ["2", "1", "3"]),
    ])
    def test_sort_orders(self, catalog, sort, expected):
        assert [d.id for d in catalog.search(sort=sort)] == expected


class TestCatalogUpdates:
    """Test publishing and counters."""

    def test_publish_assigns_next_id(self, catalog, sample_metadata):
        dataset = catalog.publish(sample_metadata, "bafybeinew", SELLER)

        assert dataset.id == "4"
        assert dataset.title == sample_metadata.title
        assert dataset.status == StorageStatus.PENDING
        assert dataset.verified is False
        assert catalog.get("4") == dataset

    def test_publish_verified(self, catalog, sample_metadata):
        dataset = catalog.publish(sample_metadata, "bafybeinew", SELLER, status=StorageStatus.VERIFIED)
        assert dataset.verified is True

    def test_datasets_for_seller_ignores_case(self, catalog):
        assert [d.id for d in catalog.datasets_for_seller(SELLER.upper())] == ["2", "1"]
        assert catalog.datasets_for_seller(None) == []

    def test_record_view_and_sale(self, catalog):
        catalog.record_view("1")
        updated = catalog.record_sale("1")

        assert updated.views == 101
        assert updated.sales == 5
        assert [e.kind for e in catalog.events] == ["view", "sale"]

    def test_record_on_unknown_dataset_raises(self, catalog):
        with pytest.raises(DatasetNotFoundError):
            catalog.record_view("404")
        assert catalog.events == []
