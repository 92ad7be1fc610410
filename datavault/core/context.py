"""
DataVault Pro - Application Context

Builds the signing agent, the collaborator clients and the session managers
once per application run and hands them to the UI by reference.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.enums import ClientBackend
from ..services.catalog import DatasetCatalog
from ..services.clients import (
    HttpPaymentClient,
    HttpStorageClient,
    InMemoryPaymentClient,
    InMemoryStorageClient,
    LocalSigningAgent,
    PaymentClient,
    SigningAgent,
    StorageClient,
)
from ..services.payment_manager import PaymentSessionManager
from ..services.session_manager import WalletSessionManager
from ..services.upload_manager import UploadSessionManager
from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything the pages need, constructed once at application start."""

    settings: Settings
    wallet: WalletSessionManager
    uploads: UploadSessionManager
    payments: PaymentSessionManager
    catalog: DatasetCatalog

    @classmethod
    def create(
        cls,
        app_settings: Optional[Settings] = None,
        agent: Optional[SigningAgent] = None,
        storage: Optional[StorageClient] = None,
        payments: Optional[PaymentClient] = None,
        catalog: Optional[DatasetCatalog] = None,
    ) -> "AppContext":
        """
        Build the context from settings. Explicit collaborators win over settings.
        """
        app_settings = app_settings or default_settings

        if agent is None and app_settings.wallet.enabled:
            agent = LocalSigningAgent(accounts=app_settings.wallet.accounts)
        if storage is None:
            storage = build_storage_client(app_settings)
        if payments is None:
            payments = build_payment_client(app_settings)

        wallet = WalletSessionManager(agent)
        context = cls(
            settings=app_settings,
            wallet=wallet,
            uploads=UploadSessionManager(
                wallet, storage, max_upload_size_bytes=app_settings.storage.max_upload_size_bytes
            ),
            payments=PaymentSessionManager(wallet, payments),
            catalog=catalog if catalog is not None else DatasetCatalog(),
        )
        logger.info(
            f"Application context created (agent={'yes' if agent else 'no'}, "
            f"storage={app_settings.storage.backend.value}, payment={app_settings.payment.backend.value})"
        )
        return context

    def close(self) -> None:
        self.wallet.close()


def build_storage_client(app_settings: Settings) -> StorageClient:
    if app_settings.storage.backend == ClientBackend.HTTP:
        return HttpStorageClient(app_settings.storage.gateway_url, timeout=app_settings.storage.timeout)
    return InMemoryStorageClient()


def build_payment_client(app_settings: Settings) -> PaymentClient:
    if app_settings.payment.backend == ClientBackend.HTTP:
        return HttpPaymentClient(app_settings.payment.gateway_url, timeout=app_settings.payment.timeout)
    return InMemoryPaymentClient()
