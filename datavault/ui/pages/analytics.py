"""
Analytics Page

Views, sales and revenue of the connected seller's datasets.
"""

import pandas as pd
import streamlit as st

from datavault.core.context import AppContext
from datavault.models.enums import TimeRange
from datavault.services.analytics import summarize
from datavault.services.formatting import format_amount
from datavault.ui.components.common.status_display import StatusDisplay


class AnalyticsPage:
    """Seller analytics page component."""

    RANGE_LABELS = {
        TimeRange.LAST_7_DAYS.value: "Last 7 days",
        TimeRange.LAST_30_DAYS.value: "Last 30 days",
        TimeRange.LAST_90_DAYS.value: "Last 90 days",
    }

    def __init__(self, context: AppContext):
        self.context = context

    def render(self) -> None:
        """Render the complete analytics page."""
        st.header("📈 Analytics")

        wallet = self.context.wallet
        if not wallet.is_connected:
            StatusDisplay.show_info("Connect your wallet to view analytics.")
            return

        time_range = st.selectbox(
            "Time range",
            list(self.RANGE_LABELS),
            key="analytics_range",
            format_func=lambda r: self.RANGE_LABELS[r],
        )

        catalog = self.context.catalog
        summary = summarize(
            catalog.datasets_for_seller(wallet.address),
            events=catalog.events,
            time_range=TimeRange(time_range),
        )
        figures = summary.to_display_dict()
        currency = self.context.settings.payment.currency

        col1, col2, col3 = st.columns(3)
        col1.metric("Total views", figures["total_views"])
        col2.metric("Total sales", figures["total_sales"])
        col3.metric("Revenue", format_amount(figures["total_revenue"], currency))
        col4, col5 = st.columns(2)
        col4.metric("Conversion rate", f"{figures['conversion_rate']:.2f}%")
        col5.metric("Avg. order value", format_amount(figures["avg_order_value"], currency))

        series = pd.DataFrame([metric.model_dump() for metric in summary.daily]).set_index("date")
        st.subheader("Activity")
        st.line_chart(series)

        st.subheader("Top datasets")
        if summary.top_datasets:
            st.dataframe(
                pd.DataFrame([row.model_dump() for row in summary.top_datasets]),
                hide_index=True,
                use_container_width=True,
            )
        else:
            StatusDisplay.show_info("No datasets yet.")
