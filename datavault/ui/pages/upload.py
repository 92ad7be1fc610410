"""
Upload Page

Dataset upload form: metadata, file, and hand-off to the storage network.
"""

from typing import Any, Optional

import streamlit as st
from pydantic import ValidationError as PydanticValidationError

from datavault.core.constants import CATEGORY_LABELS
from datavault.core.context import AppContext
from datavault.core.exceptions import DataVaultException, format_validation_error
from datavault.models.enums import DatasetCategory
from datavault.models.schemas import DatasetMetadata
from datavault.ui.components.common.status_display import StatusDisplay
from datavault.ui.core.session_state import SessionStateManager, run_async


class UploadPage:
    """Dataset upload page component."""

    def __init__(self, context: AppContext):
        """
        Initialize the upload page.

        Args:
            context: Application context with the upload session
        """
        self.context = context

    def build_metadata(self, uploaded_file: Any, title: str, description: str,
                       category: str, price: float) -> Optional[DatasetMetadata]:
        """Validate form input into metadata, reporting problems to the user."""
        if uploaded_file is None:
            StatusDisplay.show_error("Missing information: please select a file")
            return None
        try:
            return DatasetMetadata(
                title=title.strip(),
                description=description.strip(),
                category=DatasetCategory(category),
                price=price,
                file_name=uploaded_file.name,
                file_size=uploaded_file.size,
            )
        except PydanticValidationError as e:
            StatusDisplay.show_error(f"Missing information: {format_validation_error(e.errors())}")
            return None

    def process_upload(self, uploaded_file: Any, metadata: DatasetMetadata) -> None:
        uploads = self.context.uploads
        progress = st.progress(10, text="Uploading to the storage network...")
        try:
            cid = run_async(uploads.upload_file(uploaded_file.getvalue(), metadata))
        except DataVaultException as e:
            progress.empty()
            StatusDisplay.show_exception("Upload failed", e)
            return

        progress.progress(100, text="Upload complete")
        dataset = self.context.catalog.publish(metadata, cid, seller=self.context.wallet.address)
        SessionStateManager.set("last_upload_cid", cid)
        StatusDisplay.show_success(f"Upload successful! Dataset #{dataset.id} stored with CID: {cid}")

    def render(self) -> None:
        """Render the complete upload page."""
        st.header("📤 Upload Dataset")

        if not self.context.wallet.is_connected:
            StatusDisplay.show_info("Connect your wallet to upload datasets.")
            return

        max_mb = self.context.settings.ui.max_file_size_mb
        with st.form("upload_form"):
            uploaded_file = st.file_uploader(f"Dataset file (max {max_mb} MB)")
            title = st.text_input("Title")
            description = st.text_area("Description")
            category = st.selectbox(
                "Category",
                [c.value for c in DatasetCategory],
                format_func=lambda c: CATEGORY_LABELS.get(c, c),
            )
            price = st.number_input(
                f"Price ({self.context.settings.payment.currency})", min_value=0.0, step=0.25, format="%.2f"
            )
            submitted = st.form_submit_button(
                "🚀 Upload dataset", type="primary", disabled=self.context.uploads.is_uploading
            )

        if submitted:
            metadata = self.build_metadata(uploaded_file, title, description, category, price)
            if metadata is not None:
                self.process_upload(uploaded_file, metadata)

        last_cid = SessionStateManager.get("last_upload_cid")
        if last_cid:
            st.caption(f"Last upload: `{last_cid}`")
