"""
Storage Network Client

Stores a payload with its metadata and returns a content identifier, and
reports the network-side status of a content identifier.
"""

import asyncio
import base64
import hashlib
import logging
from datetime import datetime
from typing import Any, Dict, Optional, Protocol

import httpx

from ...core.constants import CID_DIGEST_LENGTH, CID_PREFIX
from ...core.exceptions import ContentNotFoundError, StorageError
from ...models.enums import StorageStatus
from ...models.schemas import DatasetMetadata, FileStatus

logger = logging.getLogger(__name__)


class StorageClient(Protocol):
    """Shape of a storage network client."""

    async def store(self, payload: bytes, metadata: DatasetMetadata) -> str:
        ...

    async def get_status(self, cid: str) -> FileStatus:
        ...


def compute_cid(payload: bytes, tag: str = "") -> str:
    """Content identifier for a payload: prefix plus base32 SHA-256 of tag|payload."""
    digest = hashlib.sha256(tag.encode("utf-8") + b"|" + bytes(payload)).digest()
    encoded = base64.b32encode(digest).decode("ascii").lower().rstrip("=")
    return f"{CID_PREFIX}{encoded[:CID_DIGEST_LENGTH]}"


class InMemoryStorageClient:
    """Storage network held in process memory for the application's lifetime."""

    def __init__(self, verify_on_store: bool = True):
        """
        Args:
            verify_on_store: Report stored content as verified immediately
        """
        self.store_data: Dict[str, bytes] = {}
        self.records: Dict[str, FileStatus] = {}
        self.verify_on_store = verify_on_store
        self.fail_next: Optional[str] = None

    async def store(self, payload: bytes, metadata: DatasetMetadata) -> str:
        await asyncio.sleep(0)
        if self.fail_next is not None:
            reason, self.fail_next = self.fail_next, None
            raise StorageError(reason)

        cid = compute_cid(payload, tag=metadata.file_name)
        self.store_data[cid] = bytes(payload)
        status = StorageStatus.VERIFIED if self.verify_on_store else StorageStatus.PENDING
        self.records[cid] = FileStatus(
            cid=cid,
            status=status,
            proof_of_possession=self.verify_on_store,
            size=len(payload),
            stored_at=datetime.now(),
        )
        logger.debug(f"Stored {len(payload)} bytes as {cid}")
        return cid

    async def get_status(self, cid: str) -> FileStatus:
        await asyncio.sleep(0)
        record = self.records.get(cid)
        if record is None:
            raise ContentNotFoundError(f"Content not found: {cid}", cid=cid)
        return record.model_copy(update={"last_checked": datetime.now()})

    def mark(self, cid: str, status: StorageStatus, proof_of_possession: bool = False) -> None:
        """Set the status the network reports for a stored cid."""
        record = self.records.get(cid)
        if record is None:
            raise ContentNotFoundError(f"Content not found: {cid}", cid=cid)
        self.records[cid] = record.model_copy(
            update={"status": status, "proof_of_possession": proof_of_possession}
        )


class HttpStorageClient:
    """Storage network reached through an HTTP gateway."""

    def __init__(self, base_url: str, timeout: float = 60.0, transport: Optional[httpx.AsyncBaseTransport] = None):
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

    async def store(self, payload: bytes, metadata: DatasetMetadata) -> str:
        files = {"file": (metadata.file_name, payload, "application/octet-stream")}
        data = {"metadata": metadata.model_dump_json()}
        try:
            async with self._client() as client:
                response = await client.post("/uploads", files=files, data=data)
                response.raise_for_status()
            result = response.json()
            return str(result["cid"])
        except httpx.HTTPStatusError as e:
            logger.error(f"Storage gateway error: {e.response.status_code} - {e.response.text}")
            raise StorageError(f"Storage upload failed: {e.response.status_code}", cause=e)
        except httpx.RequestError as e:
            logger.error(f"Storage gateway connection error: {e}")
            raise StorageError(f"Failed to reach storage gateway: {e}", cause=e)
        except (KeyError, ValueError) as e:
            logger.error(f"Unexpected storage gateway response: {e}")
            raise StorageError(f"Invalid storage gateway response: {e}", cause=e)

    async def get_status(self, cid: str) -> FileStatus:
        try:
            async with self._client() as client:
                response = await client.get(f"/uploads/{cid}")
                if response.status_code == 404:
                    raise ContentNotFoundError(f"Content not found: {cid}", cid=cid)
                response.raise_for_status()
            body: Dict[str, Any] = response.json()
            return FileStatus(
                cid=body.get("cid", cid),
                status=StorageStatus(body["status"]),
                proof_of_possession=bool(body.get("proof_of_possession", False)),
                size=int(body.get("size", 0)),
                stored_at=body.get("stored_at"),
            )
        except httpx.HTTPStatusError as e:
            logger.error(f"Storage gateway error: {e.response.status_code} - {e.response.text}")
            raise StorageError(f"Storage status check failed: {e.response.status_code}", cause=e)
        except httpx.RequestError as e:
            logger.error(f"Storage gateway connection error: {e}")
            raise StorageError(f"Failed to reach storage gateway: {e}", cause=e)
        except (KeyError, ValueError) as e:
            logger.error(f"Unexpected storage gateway response: {e}")
            raise StorageError(f"Invalid storage gateway response: {e}", cause=e)
