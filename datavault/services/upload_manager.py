"""
Upload Session Manager

Hands a dataset payload and its metadata to the storage network and tracks
the single in-flight upload.
"""

import logging
from typing import Optional

from ..core.config import settings
from ..core.constants import NOT_INITIALIZED_MESSAGE, UPLOAD_FAILED_MESSAGE
from ..core.exceptions import (
    BusyError,
    DataVaultException,
    FileTooLargeError,
    NotInitializedError,
    StorageError,
)
from ..models.schemas import DatasetMetadata, FileStatus, UploadTask
from .clients.storage_client import StorageClient
from .session_manager import WalletSessionManager

logger = logging.getLogger(__name__)


class UploadSessionManager:
    """
    Upload lifecycle for the connected wallet.

    At most one upload runs at a time; a second call while one is in flight
    is rejected with ``BusyError``. ``is_uploading`` is always cleared when
    the call settles.
    """

    def __init__(
        self,
        session: WalletSessionManager,
        storage: StorageClient,
        max_upload_size_bytes: Optional[int] = None,
    ):
        """
        Initialize the upload session.

        Args:
            session: Wallet session the uploads belong to
            storage: Storage network client
            max_upload_size_bytes: Size limit (defaults to settings)
        """
        self.session = session
        self.storage = storage
        self.max_upload_size_bytes = max_upload_size_bytes or settings.storage.max_upload_size_bytes
        self.is_uploading = False
        self.error: Optional[str] = None
        self.last_task: Optional[UploadTask] = None

    @property
    def is_initialized(self) -> bool:
        """Ready to upload once a wallet is connected."""
        return self.session.is_connected

    async def upload_file(self, payload: bytes, metadata: DatasetMetadata) -> str:
        """
        Upload a payload to the storage network.

        Args:
            payload: File content
            metadata: Descriptive metadata stored with the payload

        Returns:
            Content identifier of the stored payload

        Raises:
            NotInitializedError: If no wallet is connected
            BusyError: If another upload is in flight
            FileTooLargeError: If the payload exceeds the size limit
            StorageError: If the storage network fails
        """
        if not self.is_initialized:
            raise NotInitializedError(NOT_INITIALIZED_MESSAGE)
        if self.is_uploading:
            raise BusyError("An upload is already in progress", operation="upload_file")
        if len(payload) > self.max_upload_size_bytes:
            raise FileTooLargeError(
                f"File {metadata.file_name} exceeds the upload size limit",
                file_size=len(payload),
                max_size=self.max_upload_size_bytes,
            )

        self.is_uploading = True
        self.error = None
        task = UploadTask(metadata=metadata)
        self.last_task = task
        logger.info(f"Uploading {metadata.file_name} ({len(payload)} bytes) for {self.session.address}")

        try:
            cid = await self.storage.store(payload, metadata)
            self.last_task = task.succeed(cid)
            logger.info(f"Uploaded {metadata.file_name} as {cid}")
            return cid
        except DataVaultException as e:
            logger.error(f"Upload failed: {e.message}")
            self.error = e.message or UPLOAD_FAILED_MESSAGE
            self.last_task = task.fail(self.error)
            raise
        except Exception as e:
            logger.error(f"Upload failed: {e}")
            self.error = str(e) or UPLOAD_FAILED_MESSAGE
            self.last_task = task.fail(self.error)
            raise StorageError(self.error, cause=e) from e
        finally:
            self.is_uploading = False

    async def get_file_status(self, cid: str) -> FileStatus:
        """
        Storage network status of a content identifier.

        Raises:
            NotInitializedError: If no wallet is connected
            StorageError: If the storage network fails
        """
        if not self.is_initialized:
            raise NotInitializedError(NOT_INITIALIZED_MESSAGE)

        logger.info(f"Checking status for {cid}")
        try:
            return await self.storage.get_status(cid)
        except DataVaultException:
            raise
        except Exception as e:
            logger.error(f"Status check failed for {cid}: {e}")
            raise StorageError(str(e), cause=e) from e
