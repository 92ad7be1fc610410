"""
Verification Page

Looks up the storage network status of a content identifier.
"""

import streamlit as st

from datavault.core.constants import STATUS_ICONS
from datavault.core.context import AppContext
from datavault.core.exceptions import DataVaultException
from datavault.models.schemas import FileStatus
from datavault.services.formatting import format_date, format_file_size
from datavault.ui.components.common.status_display import StatusDisplay
from datavault.ui.core.session_state import SessionStateManager, run_async


class VerificationPage:
    """Content identifier lookup page component."""

    def __init__(self, context: AppContext):
        self.context = context

    def verify(self, cid: str) -> None:
        if not cid.strip():
            StatusDisplay.show_error("CID required: please enter a CID to verify")
            return
        with st.spinner("Checking storage status..."):
            try:
                result = run_async(self.context.uploads.get_file_status(cid.strip()))
            except DataVaultException as e:
                SessionStateManager.set("verification_result", None)
                StatusDisplay.show_exception("Verification failed", e)
                return
        SessionStateManager.set("verification_result", result)

    def render_result(self, result: FileStatus) -> None:
        with st.container(border=True):
            st.subheader(f"{STATUS_ICONS.get(result.status.value, '')} {result.status.value.capitalize()}")
            st.write(f"**CID:** `{result.cid}`")
            st.write(f"**Proof of possession:** {'reported' if result.proof_of_possession else 'not reported'}")
            st.write(f"**Size:** {format_file_size(result.size)}")
            st.write(f"**Stored:** {format_date(result.stored_at, with_time=True)}")
            st.write(f"**Last checked:** {format_date(result.last_checked, with_time=True)}")

    def render(self) -> None:
        """Render the complete verification page."""
        st.header("🛡️ Storage Verification")

        if not self.context.uploads.is_initialized:
            StatusDisplay.show_info("Connect your wallet to query the storage network.")
            return

        cid = st.text_input("Content identifier (CID)", value=SessionStateManager.get("last_upload_cid") or "")
        if st.button("🔍 Verify", type="primary"):
            self.verify(cid)

        result = SessionStateManager.get("verification_result")
        if result is not None:
            self.render_result(result)
