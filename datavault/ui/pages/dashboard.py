"""
Dashboard Page

Seller view of the connected wallet's datasets with views, sales and revenue.
"""

import pandas as pd
import streamlit as st

from datavault.core.constants import CATEGORY_LABELS, STATUS_ICONS
from datavault.core.context import AppContext
from datavault.services.formatting import format_amount, format_date
from datavault.ui.components.common.status_display import StatusDisplay


class DashboardPage:
    """Seller dashboard page component."""

    def __init__(self, context: AppContext):
        self.context = context

    def render(self) -> None:
        """Render the complete dashboard page."""
        st.header("📊 Seller Dashboard")

        wallet = self.context.wallet
        if not wallet.is_connected:
            StatusDisplay.show_info("Connect your wallet to view your datasets.")
            return

        datasets = self.context.catalog.datasets_for_seller(wallet.address)
        currency = self.context.settings.payment.currency

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Datasets", len(datasets))
        col2.metric("Total views", sum(d.views for d in datasets))
        col3.metric("Total sales", sum(d.sales for d in datasets))
        col4.metric("Revenue", format_amount(sum(d.revenue for d in datasets), currency))

        if not datasets:
            StatusDisplay.show_info("You have not uploaded any datasets yet.")
            return

        table = pd.DataFrame([
            {
                "Status": f"{STATUS_ICONS.get(d.status.value, '')} {d.status.value}",
                "Title": d.title,
                "Category": CATEGORY_LABELS.get(d.category.value, d.category.value),
                "Price": d.price,
                "Views": d.views,
                "Sales": d.sales,
                "Revenue": d.revenue,
                "Uploaded": format_date(d.uploaded_at),
                "CID": d.cid,
            }
            for d in datasets
        ])
        st.dataframe(table, hide_index=True, use_container_width=True)
