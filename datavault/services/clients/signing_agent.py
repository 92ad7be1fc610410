"""
Signing Agent

The external wallet that authorizes accounts. Only its consumed surface is
modelled here: list authorized accounts, request authorization, and notify
on account changes.
"""

import asyncio
import logging
from typing import Callable, List, Optional, Protocol

from ...core.exceptions import SigningAgentError

logger = logging.getLogger(__name__)

AccountsListener = Callable[[List[str]], None]
Unsubscribe = Callable[[], None]


class SigningAgent(Protocol):
    """Shape of a signing agent as consumed by the wallet session."""

    async def get_accounts(self) -> List[str]:
        """Accounts already authorized, without prompting the user."""
        ...

    async def request_accounts(self) -> List[str]:
        """Prompt the user to authorize accounts."""
        ...

    def on_accounts_changed(self, listener: AccountsListener) -> Unsubscribe:
        """Subscribe to account changes. Returns a callable that unsubscribes."""
        ...


class LocalSigningAgent:
    """
    In-process signing agent.

    Holds the accounts the user would approve, grants them on request and
    broadcasts account changes to subscribers.
    """

    def __init__(self, accounts: Optional[List[str]] = None, authorized: bool = False):
        """
        Initialize the agent.

        Args:
            accounts: Accounts the user approves when prompted
            authorized: Whether the accounts are already authorized
        """
        self._available = list(accounts or [])
        self._authorized: List[str] = list(self._available) if authorized else []
        self._listeners: List[AccountsListener] = []
        self._reject_reason: Optional[str] = None

    async def get_accounts(self) -> List[str]:
        await asyncio.sleep(0)
        return list(self._authorized)

    async def request_accounts(self) -> List[str]:
        await asyncio.sleep(0)
        if self._reject_reason is not None:
            reason, self._reject_reason = self._reject_reason, None
            raise SigningAgentError(reason)
        self._authorized = list(self._available)
        return list(self._authorized)

    def on_accounts_changed(self, listener: AccountsListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reject_next_request(self, reason: str = "User rejected the request.") -> None:
        """Make the next authorization prompt fail."""
        self._reject_reason = reason

    def set_accounts(self, accounts: List[str]) -> None:
        """Switch or revoke authorized accounts and notify subscribers."""
        self._available = list(accounts)
        self._authorized = list(accounts)
        logger.info(f"Signing agent accounts changed: {len(accounts)} authorized")
        for listener in list(self._listeners):
            listener(list(accounts))

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
