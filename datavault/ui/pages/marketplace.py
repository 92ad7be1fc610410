"""
Marketplace Page

Dataset listing with search, category filter and sort, plus the dataset
detail view and purchase flow.
"""

from typing import List

import streamlit as st

from datavault.core.constants import CATEGORY_LABELS, SORT_LABELS
from datavault.core.context import AppContext
from datavault.core.exceptions import DataVaultException, DatasetNotFoundError
from datavault.models.enums import DatasetCategory, SortOrder
from datavault.models.schemas import Dataset
from datavault.services.formatting import format_address, format_amount, format_date, format_file_size
from datavault.ui.components.common.status_display import StatusDisplay
from datavault.ui.core.session_state import SessionStateManager, run_async


class MarketplacePage:
    """Marketplace listing and dataset detail page component."""

    def __init__(self, context: AppContext):
        """
        Initialize the marketplace page.

        Args:
            context: Application context with the catalog and payment session
        """
        self.context = context

    def render_filters(self) -> List[Dataset]:
        """Render search, category and sort controls and return the matching datasets."""
        col1, col2, col3 = st.columns([3, 1, 1])
        with col1:
            query = st.text_input("🔍 Search datasets", key="search_query")
        with col2:
            categories = ["all"] + [c.value for c in DatasetCategory]
            category = st.selectbox(
                "Category",
                categories,
                key="category_filter",
                format_func=lambda c: "All Categories" if c == "all" else CATEGORY_LABELS.get(c, c),
            )
        with col3:
            sort = st.selectbox(
                "Sort by",
                [s.value for s in SortOrder],
                key="sort_order",
                format_func=lambda s: SORT_LABELS.get(s, s),
            )
        return self.context.catalog.search(query=query, category=category, sort=SortOrder(sort))

    def render_card(self, dataset: Dataset) -> None:
        currency = self.context.settings.payment.currency
        with st.container(border=True):
            badge = "✅ Verified" if dataset.verified else "⏳ Pending"
            st.caption(f"{CATEGORY_LABELS.get(dataset.category.value, dataset.category.value)} · {badge}")
            st.markdown(f"**{dataset.title}**")
            st.write(dataset.description)
            st.caption(f"👁️ {dataset.views} views · 📈 {dataset.sales} sales · {format_file_size(dataset.file_size)}")
            st.markdown(f"**{format_amount(dataset.price, currency)}**")
            if st.button("View details", key=f"view_{dataset.id}"):
                self.context.catalog.record_view(dataset.id)
                SessionStateManager.select_dataset(dataset.id)
                st.rerun()

    def render_listing(self) -> None:
        datasets = self.render_filters()
        st.caption(f"{len(datasets)} dataset(s) found")
        if not datasets:
            StatusDisplay.show_info("No datasets match your search.")
            return

        per_row = self.context.settings.ui.listings_per_row
        for start in range(0, len(datasets), per_row):
            columns = st.columns(per_row)
            for column, dataset in zip(columns, datasets[start:start + per_row]):
                with column:
                    self.render_card(dataset)

    def purchase(self, dataset: Dataset) -> None:
        """Pay the seller for ``dataset`` and record the sale."""
        payments = self.context.payments
        with st.spinner("Processing payment..."):
            try:
                transfer_id = run_async(payments.create_payment(dataset.id, dataset.seller, dataset.price))
            except DataVaultException as e:
                StatusDisplay.show_exception("Purchase failed", e)
                return
        self.context.catalog.record_sale(dataset.id)
        SessionStateManager.set("last_payment_id", transfer_id)
        StatusDisplay.show_success(f"Purchase successful! Payment {transfer_id} is streaming to the seller.")

    def render_detail(self, dataset_id: str) -> None:
        if st.button("← Back to Marketplace"):
            SessionStateManager.select_dataset(None)
            st.rerun()

        try:
            dataset = self.context.catalog.get(dataset_id)
        except DatasetNotFoundError:
            StatusDisplay.show_error("Dataset not found. The dataset you're looking for doesn't exist.")
            return

        currency = self.context.settings.payment.currency
        main, side = st.columns([2, 1])
        with main:
            st.caption(CATEGORY_LABELS.get(dataset.category.value, dataset.category.value))
            st.header(dataset.title)
            st.write(dataset.description)
            overview, sample, details = st.tabs(["Overview", "Sample Data", "Technical Details"])
            with overview:
                st.write(dataset.detailed_description or dataset.description)
            with sample:
                if dataset.sample_data:
                    st.code(dataset.sample_data, language="json")
                else:
                    st.info("No sample available for this dataset.")
            with details:
                st.write(f"**Content identifier:** `{dataset.cid}`")
                st.write(f"**File size:** {format_file_size(dataset.file_size)}")
                st.write(f"**Uploaded:** {format_date(dataset.uploaded_at)}")
                st.write(f"**Storage status:** {dataset.status.value}")

        with side:
            with st.container(border=True):
                st.metric("Price", format_amount(dataset.price, currency))
                st.write(f"**Seller:** {format_address(dataset.seller)}")
                st.write(f"👁️ {dataset.views} views · 📈 {dataset.sales} sales")
                connected = self.context.wallet.is_connected
                if not connected:
                    StatusDisplay.show_warning("Connect your wallet to purchase datasets.")
                if st.button(
                    "⚡ Purchase",
                    type="primary",
                    disabled=not connected or self.context.payments.is_processing,
                ):
                    self.purchase(dataset)

    def render(self) -> None:
        """Render the complete marketplace page."""
        dataset_id = SessionStateManager.get_selected_dataset_id()
        if dataset_id:
            self.render_detail(dataset_id)
            return

        st.header("🛒 Dataset Marketplace")
        self.render_listing()
