"""
Payment Network Client

Creates, queries, cancels and lists payment transfers between a buyer and a
dataset seller.
"""

import asyncio
import logging
import secrets
import string
from typing import Any, Dict, List, Optional, Protocol

import httpx

from ...core.constants import TRANSFER_ID_LENGTH, TRANSFER_ID_PREFIX
from ...core.exceptions import InvalidTransitionError, PaymentError, TransferNotFoundError
from ...models.enums import TransferStatus
from ...models.schemas import PaymentTransfer

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


class PaymentClient(Protocol):
    """Shape of a payment network client."""

    async def create_transfer(self, dataset_id: str, seller: str, buyer: str, amount: float) -> PaymentTransfer:
        ...

    async def get_transfer(self, transfer_id: str) -> PaymentTransfer:
        ...

    async def cancel_transfer(self, transfer_id: str) -> PaymentTransfer:
        ...

    async def list_transfers(self, buyer: str, status: Optional[TransferStatus] = None) -> List[PaymentTransfer]:
        ...


def new_transfer_id() -> str:
    """Opaque transfer identifier such as ``pay_k3j9x0a1b2c3d``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(TRANSFER_ID_LENGTH))
    return f"{TRANSFER_ID_PREFIX}{suffix}"


class InMemoryPaymentClient:
    """Payment ledger held in process memory for the application's lifetime."""

    def __init__(self):
        self.transfers: Dict[str, PaymentTransfer] = {}
        self.fail_next: Optional[str] = None

    def _raise_if_failing(self) -> None:
        if self.fail_next is not None:
            reason, self.fail_next = self.fail_next, None
            raise PaymentError(reason)

    def _lookup(self, transfer_id: str) -> PaymentTransfer:
        transfer = self.transfers.get(transfer_id)
        if transfer is None:
            raise TransferNotFoundError(f"Transfer not found: {transfer_id}", transfer_id=transfer_id)
        return transfer

    async def create_transfer(self, dataset_id: str, seller: str, buyer: str, amount: float) -> PaymentTransfer:
        await asyncio.sleep(0)
        self._raise_if_failing()

        transfer_id = new_transfer_id()
        while transfer_id in self.transfers:
            transfer_id = new_transfer_id()

        transfer = PaymentTransfer(
            id=transfer_id,
            dataset_id=dataset_id,
            seller=seller,
            buyer=buyer,
            amount=amount,
        )
        self.transfers[transfer_id] = transfer
        return transfer

    async def get_transfer(self, transfer_id: str) -> PaymentTransfer:
        await asyncio.sleep(0)
        return self._lookup(transfer_id)

    async def cancel_transfer(self, transfer_id: str) -> PaymentTransfer:
        await asyncio.sleep(0)
        self._raise_if_failing()
        cancelled = self._lookup(transfer_id).cancel()
        self.transfers[transfer_id] = cancelled
        return cancelled

    async def list_transfers(self, buyer: str, status: Optional[TransferStatus] = None) -> List[PaymentTransfer]:
        await asyncio.sleep(0)
        self._raise_if_failing()
        return [
            transfer for transfer in self.transfers.values()
            if transfer.buyer == buyer and (status is None or transfer.status == status)
        ]

    def settle(self, transfer_id: str) -> PaymentTransfer:
        """Complete an active transfer (the network's settlement event)."""
        completed = self._lookup(transfer_id).complete()
        self.transfers[transfer_id] = completed
        logger.info(f"Transfer {transfer_id} settled")
        return completed


class HttpPaymentClient:
    """Payment network reached through an HTTP gateway."""

    def __init__(self, base_url: str, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            base_url: Gateway base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    async def _request(self, method: str, path: str, transfer_id: Optional[str] = None, **kwargs) -> Any:
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
                if response.status_code == 404 and transfer_id:
                    raise TransferNotFoundError(f"Transfer not found: {transfer_id}", transfer_id=transfer_id)
                if response.status_code == 409 and transfer_id:
                    body = response.json()
                    raise InvalidTransitionError(
                        body.get("message", f"Transfer {transfer_id} can no longer change state"),
                        transfer_id=transfer_id,
                        current_status=body.get("status", "unknown"),
                        requested_status=TransferStatus.CANCELLED.value,
                    )
                response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Payment gateway error: {e.response.status_code} - {e.response.text}")
            raise PaymentError(f"Payment request failed: {e.response.status_code}", cause=e)
        except httpx.RequestError as e:
            logger.error(f"Payment gateway connection error: {e}")
            raise PaymentError(f"Failed to reach payment gateway: {e}", cause=e)
        except ValueError as e:
            logger.error(f"Unexpected payment gateway response: {e}")
            raise PaymentError(f"Invalid payment gateway response: {e}", cause=e)

    @staticmethod
    def _parse(body: Dict[str, Any]) -> PaymentTransfer:
        try:
            return PaymentTransfer.model_validate(body)
        except ValueError as e:
            raise PaymentError(f"Invalid transfer record from payment gateway: {e}", cause=e)

    async def create_transfer(self, dataset_id: str, seller: str, buyer: str, amount: float) -> PaymentTransfer:
        body = await self._request(
            "POST",
            "/transfers",
            json={"dataset_id": dataset_id, "seller": seller, "buyer": buyer, "amount": amount},
        )
        return self._parse(body)

    async def get_transfer(self, transfer_id: str) -> PaymentTransfer:
        body = await self._request("GET", f"/transfers/{transfer_id}", transfer_id=transfer_id)
        return self._parse(body)

    async def cancel_transfer(self, transfer_id: str) -> PaymentTransfer:
        body = await self._request("POST", f"/transfers/{transfer_id}/cancel", transfer_id=transfer_id)
        return self._parse(body)

    async def list_transfers(self, buyer: str, status: Optional[TransferStatus] = None) -> List[PaymentTransfer]:
        params = {"buyer": buyer}
        if status is not None:
            params["status"] = status.value
        body = await self._request("GET", "/transfers", params=params)
        if not isinstance(body, list):
            raise PaymentError("Invalid payment gateway response: expected a list of transfers")
        return [self._parse(item) for item in body]
