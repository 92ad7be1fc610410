"""
Wallet Session Manager

Owns the connection to the external signing agent: the connected identity
address, the in-progress flag of an authorization request and the last
user-visible error.
"""

import logging
from typing import List, Optional, Type

from ..core.constants import AGENT_UNAVAILABLE_MESSAGE, CONNECT_FAILED_MESSAGE, NOT_CONNECTED_MESSAGE
from ..core.exceptions import AgentUnavailableError, DataVaultException, SessionError, SigningAgentError
from ..models.schemas import WalletSession
from .clients.signing_agent import SigningAgent, Unsubscribe

logger = logging.getLogger(__name__)


class WalletSessionManager:
    """
    Wallet session for the lifetime of the application.

    ``is_connected`` is derived from ``address`` so the two can never
    disagree. The accounts-changed subscription is the only mutation that is
    not triggered by a caller.
    """

    def __init__(self, agent: Optional[SigningAgent] = None):
        """
        Initialize the wallet session.

        Args:
            agent: Signing agent, or None when no wallet is present
        """
        self.agent = agent
        self.address: Optional[str] = None
        self.is_connecting = False
        self.error: Optional[str] = None
        self._unsubscribe: Optional[Unsubscribe] = None

        if agent is not None:
            self._unsubscribe = agent.on_accounts_changed(self._handle_accounts_changed)

    @property
    def is_connected(self) -> bool:
        return self.address is not None

    @property
    def has_agent(self) -> bool:
        return self.agent is not None

    def snapshot(self) -> WalletSession:
        """Immutable view of the session for the UI."""
        return WalletSession(address=self.address, is_connecting=self.is_connecting, error=self.error)

    def _handle_accounts_changed(self, accounts: List[str]) -> None:
        previous = self.address
        self.address = accounts[0] if accounts else None
        if previous != self.address:
            logger.info(f"Wallet account changed: {previous} -> {self.address}")

    async def restore(self) -> None:
        """Pick up an already-authorized account without prompting the user."""
        if self.agent is None:
            return
        try:
            accounts = await self.agent.get_accounts()
        except Exception as e:
            logger.error(f"Failed to check wallet connection: {e}")
            return
        if accounts:
            self.address = accounts[0]
            logger.info(f"Restored wallet session for {self.address}")

    async def connect(self) -> None:
        """
        Request authorization from the signing agent.

        Raises:
            AgentUnavailableError: If no signing agent is present
            SigningAgentError: If the agent rejects or fails the request
        """
        if self.agent is None:
            self.error = AGENT_UNAVAILABLE_MESSAGE
            logger.warning("Connect attempted without a signing agent")
            raise AgentUnavailableError(AGENT_UNAVAILABLE_MESSAGE)

        self.is_connecting = True
        self.error = None
        try:
            accounts = await self.agent.request_accounts()
            if accounts:
                self.address = accounts[0]
                logger.info(f"Wallet connected: {self.address}")
            else:
                logger.warning("Signing agent authorized no accounts")
        except DataVaultException as e:
            logger.error(f"Failed to connect wallet: {e.message}")
            self.error = e.message or CONNECT_FAILED_MESSAGE
            raise
        except Exception as e:
            logger.error(f"Failed to connect wallet: {e}")
            self.error = str(e) or CONNECT_FAILED_MESSAGE
            raise SigningAgentError(self.error, cause=e) from e
        finally:
            self.is_connecting = False

    def disconnect(self) -> None:
        """Forget the connected identity. Always succeeds."""
        if self.address:
            logger.info(f"Wallet disconnected: {self.address}")
        self.address = None
        self.error = None

    def require_connected(self, error_cls: Type[SessionError], message: str = NOT_CONNECTED_MESSAGE) -> str:
        """
        Return the connected address or raise ``error_cls``.

        Args:
            error_cls: Exception raised when disconnected
            message: Exception message
        """
        if self.address is None:
            raise error_cls(message)
        return self.address

    def close(self) -> None:
        """Drop the accounts-changed subscription."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
