"""
Payments Page

Payment history of the connected wallet and its active payment streams.
"""

from typing import List

import pandas as pd
import streamlit as st

from datavault.core.constants import STATUS_ICONS
from datavault.core.context import AppContext
from datavault.core.exceptions import DataVaultException, DatasetNotFoundError
from datavault.models.schemas import PaymentTransfer
from datavault.services.analytics import committed_total
from datavault.services.formatting import format_address, format_amount, format_date
from datavault.ui.components.common.status_display import StatusDisplay
from datavault.ui.core.session_state import run_async


class PaymentsPage:
    """Payment history page component."""

    def __init__(self, context: AppContext):
        self.context = context

    def dataset_title(self, dataset_id: str) -> str:
        try:
            return self.context.catalog.get(dataset_id).title
        except DatasetNotFoundError:
            return f"Dataset {dataset_id}"

    def render_history(self, history: List[PaymentTransfer]) -> None:
        if not history:
            StatusDisplay.show_info("No payments yet.")
            return
        currency = self.context.settings.payment.currency
        table = pd.DataFrame([
            {
                "Status": f"{STATUS_ICONS.get(t.status.value, '')} {t.status.value}",
                "Dataset": self.dataset_title(t.dataset_id),
                "Amount": format_amount(t.amount, currency),
                "Seller": format_address(t.seller),
                "Started": format_date(t.start_time, with_time=True),
                "Ended": format_date(t.end_time, with_time=True),
                "Transfer": t.id,
            }
            for t in history
        ])
        st.dataframe(table, hide_index=True, use_container_width=True)

    def render_streams(self, streams: List[PaymentTransfer]) -> None:
        if not streams:
            StatusDisplay.show_info("No active payment streams.")
            return
        currency = self.context.settings.payment.currency
        payments = self.context.payments
        for stream in streams:
            with st.container(border=True):
                col1, col2 = st.columns([4, 1])
                with col1:
                    st.markdown(f"⚡ **{self.dataset_title(stream.dataset_id)}**")
                    st.caption(
                        f"{format_amount(stream.amount, currency)} to {format_address(stream.seller)} "
                        f"since {format_date(stream.start_time, with_time=True)}"
                    )
                with col2:
                    if st.button("Cancel", key=f"cancel_{stream.id}", disabled=payments.is_processing):
                        try:
                            run_async(payments.cancel_payment(stream.id))
                            st.rerun()
                        except DataVaultException as e:
                            StatusDisplay.show_exception("Cancellation failed", e)

    def render(self) -> None:
        """Render the complete payments page."""
        st.header("💳 Payments")

        if not self.context.wallet.is_connected:
            StatusDisplay.show_info("Connect your wallet to view payment history.")
            return

        payments = self.context.payments
        try:
            history = run_async(payments.get_payment_history())
        except DataVaultException as e:
            StatusDisplay.show_exception("Could not load payment history", e)
            history = []
        streams = run_async(payments.get_active_streams())

        currency = self.context.settings.payment.currency
        total_committed = committed_total(history)
        col1, col2, col3 = st.columns(3)
        col1.metric("Total committed", format_amount(total_committed, currency))
        col2.metric("Payments", len(history))
        col3.metric("Active streams", len(streams))

        history_tab, streams_tab = st.tabs(["History", "Active Streams"])
        with history_tab:
            self.render_history(history)
        with streams_tab:
            self.render_streams(streams)
