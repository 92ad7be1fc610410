"""
DataVault Pro - Custom Exceptions

This module defines all custom exceptions used throughout the application
with proper error codes, messages, and context information.
"""

from typing import Any


class DataVaultException(Exception):
    """Base exception class for DataVault Pro."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code}')"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for UI notifications and logs."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


# ============================================================================
# Configuration and Validation Exceptions
# ============================================================================

class ConfigurationError(DataVaultException):
    """Raised when there's a configuration error."""
    pass


class ValidationError(DataVaultException):
    """Raised when user-supplied data fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        details = kwargs.pop('details', {})
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = str(value)
        super().__init__(message, details=details, **kwargs)


# ============================================================================
# Wallet Session Exceptions
# ============================================================================

class SessionError(DataVaultException):
    """Base exception for wallet session errors."""
    pass


class AgentUnavailableError(SessionError):
    """Raised when no signing agent (browser wallet) is present."""
    pass


class SigningAgentError(SessionError):
    """Raised when the signing agent rejects or fails an authorization request."""
    pass


class NotConnectedError(SessionError):
    """Raised when an operation needs a connected wallet session."""
    pass


class NotInitializedError(SessionError):
    """Raised when the storage session is used before a wallet is connected."""
    pass


class BusyError(DataVaultException):
    """Raised when an operation is already in flight on the same manager."""

    def __init__(self, message: str, operation: str, **kwargs):
        self.operation = operation
        details = kwargs.pop('details', {})
        details['operation'] = operation
        super().__init__(message, details=details, **kwargs)


# ============================================================================
# Storage Exceptions
# ============================================================================

class StorageError(DataVaultException):
    """Base exception for storage network failures."""
    pass


class FileTooLargeError(StorageError):
    """Raised when a payload exceeds the upload size limit."""

    def __init__(self, message: str, file_size: int, max_size: int, **kwargs):
        self.file_size = file_size
        self.max_size = max_size
        details = kwargs.pop('details', {})
        details.update({
            'file_size': file_size,
            'max_size': max_size,
            'size_mb': file_size / (1024 * 1024),
            'max_mb': max_size / (1024 * 1024),
        })
        super().__init__(message, details=details, **kwargs)


class ContentNotFoundError(StorageError):
    """Raised when the storage network does not know a content identifier."""

    def __init__(self, message: str, cid: str, **kwargs):
        self.cid = cid
        details = kwargs.pop('details', {})
        details['cid'] = cid
        super().__init__(message, details=details, **kwargs)


# ============================================================================
# Payment Exceptions
# ============================================================================

class PaymentError(DataVaultException):
    """Base exception for payment network failures."""
    pass


class TransferNotFoundError(PaymentError):
    """Raised when a transfer identifier is unknown to the payment network."""

    def __init__(self, message: str, transfer_id: str, **kwargs):
        self.transfer_id = transfer_id
        details = kwargs.pop('details', {})
        details['transfer_id'] = transfer_id
        super().__init__(message, details=details, **kwargs)


class InvalidTransitionError(PaymentError):
    """Raised when a transfer is moved out of a terminal state."""

    def __init__(
        self,
        message: str,
        transfer_id: str,
        current_status: str,
        requested_status: str,
        **kwargs
    ):
        self.transfer_id = transfer_id
        self.current_status = current_status
        self.requested_status = requested_status
        details = kwargs.pop('details', {})
        details.update({
            'transfer_id': transfer_id,
            'current_status': current_status,
            'requested_status': requested_status,
        })
        super().__init__(message, details=details, **kwargs)


# ============================================================================
# Marketplace Exceptions
# ============================================================================

class DatasetNotFoundError(DataVaultException):
    """Raised when a dataset listing does not exist."""

    def __init__(self, message: str, dataset_id: str, **kwargs):
        self.dataset_id = dataset_id
        details = kwargs.pop('details', {})
        details['dataset_id'] = dataset_id
        super().__init__(message, details=details, **kwargs)


# ============================================================================
# Exception Utilities
# ============================================================================

def format_validation_error(errors: list[dict[str, Any]]) -> str:
    """Format Pydantic validation errors into a readable string."""
    error_messages = []
    for error in errors:
        field = " -> ".join(str(loc) for loc in error.get("loc", []))
        message = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {message}" if field else message)
    return "; ".join(error_messages)


# Exception hierarchy for easy catching
SESSION_EXCEPTIONS = (
    SessionError,
    AgentUnavailableError,
    SigningAgentError,
    NotConnectedError,
    NotInitializedError,
)

STORAGE_EXCEPTIONS = (
    StorageError,
    FileTooLargeError,
    ContentNotFoundError,
)

PAYMENT_EXCEPTIONS = (
    PaymentError,
    TransferNotFoundError,
    InvalidTransitionError,
)
