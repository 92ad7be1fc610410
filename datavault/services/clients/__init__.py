"""
External Collaborator Clients

Signing agent, storage network and payment network clients.
"""

from .payment_client import HttpPaymentClient, InMemoryPaymentClient, PaymentClient, new_transfer_id
from .signing_agent import LocalSigningAgent, SigningAgent
from .storage_client import HttpStorageClient, InMemoryStorageClient, StorageClient, compute_cid

__all__ = [
    "HttpPaymentClient",
    "HttpStorageClient",
    "InMemoryPaymentClient",
    "InMemoryStorageClient",
    "LocalSigningAgent",
    "PaymentClient",
    "SigningAgent",
    "StorageClient",
    "compute_cid",
    "new_transfer_id",
]
