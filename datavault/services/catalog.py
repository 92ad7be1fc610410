"""
Marketplace Catalog

In-memory dataset listings: search, filter, sort, publish uploaded datasets
and record views and sales.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Union

from ..core.exceptions import DatasetNotFoundError
from ..models.enums import DatasetCategory, SortOrder, StorageStatus
from ..models.schemas import Dataset, DatasetMetadata

logger = logging.getLogger(__name__)


SEED_DATASETS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "cid": "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi",
        "title": "Customer Analytics Dataset 2024",
        "description": "Comprehensive customer behavior data with purchase patterns, demographics, and engagement metrics",
        "detailed_description": (
            "This comprehensive dataset contains detailed customer behavior analytics collected over 12 months. "
            "It includes purchase patterns, demographic information, engagement metrics, and customer journey data."
        ),
        "sample_data": (
            '{\n  "customer_id": "C12345",\n  "age": 34,\n  "location": "New York",\n'
            '  "total_purchases": 23,\n  "avg_order_value": 156.78,\n  "engagement_score": 8.5\n}'
        ),
        "category": "analytics",
        "price": 2.5,
        "views": 234,
        "sales": 12,
        "seller": "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb",
        "age_days": 5,
        "file_size": 45600000,
    },
    {
        "id": "2",
        "cid": "bafybeihkoviema7g3gxyt6la7vd5ho32ictqbilu3wnlo3rs7ewhnp7lly",
        "title": "ML Training Dataset - Image Classification",
        "description": "10,000 labeled images for computer vision training with diverse categories and high-quality annotations",
        "detailed_description": (
            "A high-quality image classification dataset containing 10,000 professionally labeled images "
            "across 50 categories, each 1024x1024 pixels with detailed annotations and metadata."
        ),
        "sample_data": (
            '{\n  "image_id": "IMG_001",\n  "category": "wildlife",\n  "subcategory": "birds",\n'
            '  "labels": ["eagle", "flying", "outdoor"],\n  "resolution": "1024x1024",\n  "format": "PNG"\n}'
        ),
        "category": "machine-learning",
        "price": 5.0,
        "views": 567,
        "sales": 28,
        "seller": "0x8ba1f109551bD432803012645Ac136ddd64DBA72",
        "age_days": 12,
        "file_size": 234000000,
    },
    {
        "id": "3",
        "cid": "bafybeibhwfzx6oo5rymsxmkdxpmkujcejbxvn2ykwencbxa3g7wcstss52",
        "title": "Financial Market Data Q1 2024",
        "description": "Stock market data with technical indicators, volume analysis, and historical price movements",
        "category": "finance",
        "price": 3.75,
        "views": 189,
        "sales": 8,
        "seller": "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
        "age_days": 8,
        "file_size": 12300000,
    },
    {
        "id": "4",
        "cid": "bafybeif2ewg3nqa7dmbqkqkdqkqkqkqkqkqkqkqkqkqkqkqkqkqkqkqkq",
        "title": "Healthcare Research Dataset - Patient Outcomes",
        "description": "Anonymized patient outcome data for medical research with treatment efficacy metrics",
        "category": "healthcare",
        "price": 8.0,
        "views": 423,
        "sales": 15,
        "seller": "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
        "age_days": 20,
        "file_size": 89000000,
    },
    {
        "id": "5",
        "cid": "bafybeigvgzoolc3drupxhlevdp2ugqcrbcsqfmcek2zxiw5wctk3xjpjrm",
        "title": "E-commerce Product Catalog 2024",
        "description": "Complete product catalog with descriptions, pricing, and sales performance data",
        "category": "analytics",
        "price": 1.5,
        "views": 156,
        "sales": 6,
        "seller": "0x1aE0EA34a72D944a8C7603FfB3eC30a6669E454C",
        "age_days": 3,
        "file_size": 23400000,
    },
    {
        "id": "6",
        "cid": "bafybeihdwdcefgh4dfdiu3uhjixvsqwejqhvqiemr542796fsz6f5paaaq",
        "title": "Climate Data - Global Temperature Records",
        "description": "Historical climate data with temperature, precipitation, and atmospheric measurements",
        "category": "research",
        "price": 4.25,
        "views": 312,
        "sales": 11,
        "seller": "0x0F4ee9631f4be0a63756515141281A3E2B293Bbe",
        "age_days": 15,
        "file_size": 67800000,
    },
]


@dataclass(frozen=True)
class CatalogEvent:
    """A view or sale recorded against a listing."""
    dataset_id: str
    kind: str
    timestamp: datetime


def _seed(now: datetime) -> List[Dataset]:
    datasets = []
    for entry in SEED_DATASETS:
        data = dict(entry)
        age_days = data.pop("age_days")
        datasets.append(Dataset(
            uploaded_at=now - timedelta(days=age_days),
            verified=True,
            status=StorageStatus.VERIFIED,
            **data,
        ))
    return datasets


class DatasetCatalog:
    """Marketplace listings for the lifetime of the application."""

    def __init__(self, datasets: Optional[List[Dataset]] = None, seed: bool = True):
        """
        Initialize the catalog.

        Args:
            datasets: Initial listings (overrides the seed data)
            seed: Load the built-in listings when ``datasets`` is not given
        """
        if datasets is None:
            datasets = _seed(datetime.now()) if seed else []
        self._datasets: Dict[str, Dataset] = {dataset.id: dataset for dataset in datasets}
        self.events: List[CatalogEvent] = []

    def __len__(self) -> int:
        return len(self._datasets)

    def all(self) -> List[Dataset]:
        return list(self._datasets.values())

    def get(self, dataset_id: str) -> Dataset:
        dataset = self._datasets.get(dataset_id)
        if dataset is None:
            raise DatasetNotFoundError(f"Dataset not found: {dataset_id}", dataset_id=dataset_id)
        return dataset

    def search(
        self,
        query: str = "",
        category: Union[DatasetCategory, str] = "all",
        sort: SortOrder = SortOrder.RECENT,
    ) -> List[Dataset]:
        """
        Filter and order listings.

        Args:
            query: Case-insensitive text matched against title or description
            category: A category, or "all"
            sort: Listing order

        Returns:
            Matching datasets in the requested order
        """
        needle = query.strip().lower()
        category_value = category.value if isinstance(category, DatasetCategory) else category

        results = [
            dataset for dataset in self._datasets.values()
            if (not needle or needle in dataset.title.lower() or needle in dataset.description.lower())
            and (category_value == "all" or dataset.category.value == category_value)
        ]

        if sort == SortOrder.RECENT:
            results.sort(key=lambda d: d.uploaded_at, reverse=True)
        elif sort == SortOrder.POPULAR:
            results.sort(key=lambda d: d.views, reverse=True)
        elif sort == SortOrder.PRICE_LOW:
            results.sort(key=lambda d: d.price)
        elif sort == SortOrder.PRICE_HIGH:
            results.sort(key=lambda d: d.price, reverse=True)
        return results

    def publish(
        self,
        metadata: DatasetMetadata,
        cid: str,
        seller: str,
        status: StorageStatus = StorageStatus.PENDING,
    ) -> Dataset:
        """List an uploaded dataset."""
        numeric_ids = [int(key) for key in self._datasets if key.isdigit()]
        dataset_id = str(max(numeric_ids, default=0) + 1)
        dataset = Dataset(
            id=dataset_id,
            cid=cid,
            title=metadata.title,
            description=metadata.description,
            detailed_description=metadata.description,
            category=metadata.category,
            price=metadata.price,
            seller=seller,
            uploaded_at=metadata.uploaded_at,
            file_size=metadata.file_size,
            verified=status == StorageStatus.VERIFIED,
            status=status,
        )
        self._datasets[dataset_id] = dataset
        logger.info(f"Published dataset {dataset_id} ({cid}) for {seller}")
        return dataset

    def datasets_for_seller(self, seller: Optional[str]) -> List[Dataset]:
        """Listings owned by ``seller`` (addresses compare case-insensitively)."""
        if not seller:
            return []
        owner = seller.lower()
        return sorted(
            (d for d in self._datasets.values() if d.seller.lower() == owner),
            key=lambda d: d.uploaded_at,
            reverse=True,
        )

    def _bump(self, dataset_id: str, kind: str, field: str) -> Dataset:
        dataset = self.get(dataset_id)
        updated = dataset.model_copy(update={field: getattr(dataset, field) + 1})
        self._datasets[dataset_id] = updated
        self.events.append(CatalogEvent(dataset_id=dataset_id, kind=kind, timestamp=datetime.now()))
        return updated

    def record_view(self, dataset_id: str) -> Dataset:
        return self._bump(dataset_id, "view", "views")

    def record_sale(self, dataset_id: str) -> Dataset:
        return self._bump(dataset_id, "sale", "sales")
