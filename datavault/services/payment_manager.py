"""
Payment Session Manager

Creates and cancels payment transfers for the connected wallet and exposes
its payment history and active streams.
"""

import logging
import math
from typing import List, Optional

from ..core.constants import CANCEL_FAILED_MESSAGE, PAYMENT_FAILED_MESSAGE
from ..core.exceptions import (
    BusyError,
    DataVaultException,
    NotConnectedError,
    PaymentError,
    ValidationError,
)
from ..models.enums import TransferStatus
from ..models.schemas import PaymentStatus, PaymentTransfer
from .clients.payment_client import PaymentClient
from .session_manager import WalletSessionManager

logger = logging.getLogger(__name__)


class PaymentSessionManager:
    """
    Payment lifecycle for the connected wallet.

    ``create_payment`` and ``cancel_payment`` share the ``is_processing``
    flag and are single-flight: a call made while the other is in flight is
    rejected with ``BusyError``. Queries never touch the flag.
    """

    def __init__(self, session: WalletSessionManager, payments: PaymentClient):
        """
        Initialize the payment session.

        Args:
            session: Wallet session paying for datasets
            payments: Payment network client
        """
        self.session = session
        self.payments = payments
        self.is_processing = False
        self.error: Optional[str] = None

    def _begin(self, operation: str) -> None:
        if self.is_processing:
            raise BusyError("A payment operation is already in progress", operation=operation)
        self.is_processing = True
        self.error = None

    async def create_payment(self, dataset_id: str, seller: str, amount: float) -> str:
        """
        Start paying ``seller`` for ``dataset_id``.

        Args:
            dataset_id: Purchased dataset
            seller: Recipient identity
            amount: Amount to transfer (must be finite and positive)

        Returns:
            Transfer identifier

        Raises:
            NotConnectedError: If no wallet is connected
            BusyError: If another payment operation is in flight
            ValidationError: If the seller is blank or the amount is not a positive number
            PaymentError: If the payment network fails
        """
        buyer = self.session.require_connected(NotConnectedError)
        if not seller or not seller.strip():
            raise ValidationError("Seller address is required", field="seller", value=seller)
        if not math.isfinite(amount) or amount <= 0:
            raise ValidationError("Payment amount must be a positive number", field="amount", value=amount)

        self._begin("create_payment")
        logger.info(f"Creating payment for dataset {dataset_id}: {amount} to {seller}")
        try:
            transfer = await self.payments.create_transfer(dataset_id, seller, buyer, amount)
            logger.info(f"Payment created: {transfer.id}")
            return transfer.id
        except DataVaultException as e:
            logger.error(f"Payment creation failed: {e.message}")
            self.error = e.message or PAYMENT_FAILED_MESSAGE
            raise
        except Exception as e:
            logger.error(f"Payment creation failed: {e}")
            self.error = str(e) or PAYMENT_FAILED_MESSAGE
            raise PaymentError(self.error, cause=e) from e
        finally:
            self.is_processing = False

    async def get_payment_status(self, transfer_id: str) -> PaymentStatus:
        """
        Current status of a transfer. Does not require a connected wallet.

        Raises:
            TransferNotFoundError: If the transfer is unknown
            PaymentError: If the payment network fails
        """
        logger.info(f"Checking payment status: {transfer_id}")
        try:
            transfer = await self.payments.get_transfer(transfer_id)
        except DataVaultException:
            raise
        except Exception as e:
            logger.error(f"Status check failed for {transfer_id}: {e}")
            raise PaymentError(str(e), cause=e) from e
        return PaymentStatus.from_transfer(transfer)

    async def cancel_payment(self, transfer_id: str) -> None:
        """
        Cancel an active transfer.

        Raises:
            NotConnectedError: If no wallet is connected
            BusyError: If another payment operation is in flight
            InvalidTransitionError: If the transfer is no longer active
            PaymentError: If the payment network fails
        """
        self.session.require_connected(NotConnectedError)

        self._begin("cancel_payment")
        logger.info(f"Cancelling payment: {transfer_id}")
        try:
            await self.payments.cancel_transfer(transfer_id)
            logger.info(f"Payment cancelled: {transfer_id}")
        except DataVaultException as e:
            logger.error(f"Payment cancellation failed: {e.message}")
            self.error = e.message or CANCEL_FAILED_MESSAGE
            raise
        except Exception as e:
            logger.error(f"Payment cancellation failed: {e}")
            self.error = str(e) or CANCEL_FAILED_MESSAGE
            raise PaymentError(self.error, cause=e) from e
        finally:
            self.is_processing = False

    async def get_active_streams(self) -> List[PaymentTransfer]:
        """Active transfers paid by the connected wallet; empty when disconnected."""
        if not self.session.is_connected:
            return []

        buyer = self.session.address
        logger.info(f"Fetching active payment streams for {buyer}")
        try:
            transfers = await self.payments.list_transfers(buyer, status=TransferStatus.ACTIVE)
        except Exception as e:
            logger.error(f"Failed to fetch streams: {e}")
            return []
        return [transfer for transfer in transfers if transfer.is_active]

    async def get_payment_history(self) -> List[PaymentTransfer]:
        """
        Every transfer paid by the connected wallet, newest first.

        Raises:
            PaymentError: If the payment network fails
        """
        if not self.session.is_connected:
            return []

        try:
            transfers = await self.payments.list_transfers(self.session.address)
        except DataVaultException:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch payment history: {e}")
            raise PaymentError(str(e), cause=e) from e
        return sorted(transfers, key=lambda t: t.start_time, reverse=True)
