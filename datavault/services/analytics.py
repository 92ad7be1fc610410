"""
Seller Analytics

Aggregates listing counters and recorded catalog events into the figures
shown on the analytics page.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from ..models.enums import TimeRange, TransferStatus
from ..models.schemas import AnalyticsSummary, DailyMetric, Dataset, PaymentTransfer, TopDataset
from .catalog import CatalogEvent

TOP_DATASETS_LIMIT = 5


def summarize(
    datasets: List[Dataset],
    events: Optional[List[CatalogEvent]] = None,
    time_range: TimeRange = TimeRange.LAST_7_DAYS,
    now: Optional[datetime] = None,
) -> AnalyticsSummary:
    """
    Build the analytics summary for a seller's datasets.

    Args:
        datasets: The seller's listings
        events: Catalog events; only those of the given datasets are counted
        time_range: Window of the daily series
        now: Reference time (defaults to now)

    Returns:
        Totals, ratios, top datasets and a daily series covering ``time_range``
    """
    now = now or datetime.now()
    total_views = sum(d.views for d in datasets)
    total_sales = sum(d.sales for d in datasets)
    total_revenue = round(sum(d.revenue for d in datasets), 2)

    conversion_rate = (total_sales / total_views * 100) if total_views else 0.0
    avg_order_value = (total_revenue / total_sales) if total_sales else 0.0

    top = sorted(datasets, key=lambda d: (d.revenue, d.views), reverse=True)[:TOP_DATASETS_LIMIT]
    top_datasets = [
        TopDataset(id=d.id, title=d.title, views=d.views, sales=d.sales, revenue=d.revenue)
        for d in top
    ]

    return AnalyticsSummary(
        total_views=total_views,
        total_sales=total_sales,
        total_revenue=total_revenue,
        conversion_rate=conversion_rate,
        avg_order_value=avg_order_value,
        daily=daily_series(datasets, events or [], time_range, now),
        top_datasets=top_datasets,
    )


def daily_series(
    datasets: List[Dataset],
    events: List[CatalogEvent],
    time_range: TimeRange,
    now: datetime,
) -> List[DailyMetric]:
    """One metric per day, oldest first, ending today."""
    ids = {d.id for d in datasets}
    today = now.date()
    days = [today - timedelta(days=offset) for offset in range(time_range.days - 1, -1, -1)]
    buckets: Dict[str, DailyMetric] = {
        day.isoformat(): DailyMetric(date=day.isoformat()) for day in days
    }

    for event in events:
        if event.dataset_id not in ids:
            continue
        bucket = buckets.get(event.timestamp.date().isoformat())
        if bucket is None:
            continue
        if event.kind == "view":
            bucket.views += 1
        elif event.kind == "sale":
            bucket.sales += 1

    return list(buckets.values())


def committed_total(transfers: List[PaymentTransfer]) -> float:
    """Amount paid or still streaming: active and completed transfers, cancelled ones excluded."""
    return round(sum(t.amount for t in transfers if t.status != TransferStatus.CANCELLED), 2)
