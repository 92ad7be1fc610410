"""
DataVault Pro - Wallet Session Tests

Tests for connecting, disconnecting and reacting to account changes.
"""

import pytest

from datavault.core.constants import AGENT_UNAVAILABLE_MESSAGE
from datavault.core.exceptions import AgentUnavailableError, NotConnectedError, SigningAgentError
from datavault.services.clients import LocalSigningAgent
from datavault.services.session_manager import WalletSessionManager
from tests.conftest import BUYER, OTHER_ACCOUNT


class FailingAgent(LocalSigningAgent):
    """Agent whose authorization prompt raises a non-application error."""

    async def request_accounts(self):
        raise RuntimeError("wallet locked")


class ObservingAgent(LocalSigningAgent):
    """Agent that records the session's in-progress flag while it prompts."""

    def __init__(self, accounts):
        super().__init__(accounts=accounts)
        self.wallet = None
        self.flags = []

    async def request_accounts(self):
        self.flags.append(self.wallet.is_connecting)
        return await super().request_accounts()


class TestConnect:
    """Test wallet connection."""

    @pytest.mark.asyncio
    async def test_connect_sets_first_authorized_account(self):
        agent = LocalSigningAgent(accounts=[BUYER, OTHER_ACCOUNT])
        wallet = WalletSessionManager(agent)

        await wallet.connect()

        assert wallet.address == BUYER
        assert wallet.is_connected is True
        assert wallet.is_connecting is False
        assert wallet.error is None

    @pytest.mark.asyncio
    async def test_connecting_flag_is_set_only_while_request_is_pending(self):
        agent = ObservingAgent(accounts=[BUYER])
        wallet = WalletSessionManager(agent)
        agent.wallet = wallet

        assert wallet.is_connecting is False
        await wallet.connect()

        assert agent.flags == [True]
        assert wallet.is_connecting is False
        assert wallet.snapshot().is_connecting is False

    @pytest.mark.asyncio
    async def test_connect_without_agent_raises_and_sets_error(self):
        wallet = WalletSessionManager(agent=None)

        with pytest.raises(AgentUnavailableError):
            await wallet.connect()

        assert wallet.error == AGENT_UNAVAILABLE_MESSAGE
        assert wallet.address is None
        assert wallet.is_connected is False
        assert wallet.is_connecting is False

    @pytest.mark.asyncio
    async def test_rejected_request_records_error(self, agent, wallet):
        agent.reject_next_request("User rejected the request.")

        with pytest.raises(SigningAgentError):
            await wallet.connect()

        assert wallet.error == "User rejected the request."
        assert wallet.is_connected is False
        assert wallet.is_connecting is False

    @pytest.mark.asyncio
    async def test_unexpected_agent_failure_is_wrapped(self):
        wallet = WalletSessionManager(FailingAgent(accounts=[BUYER]))

        with pytest.raises(SigningAgentError) as exc_info:
            await wallet.connect()

        assert exc_info.value.message == "wallet locked"
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert wallet.error == "wallet locked"
        assert wallet.is_connecting is False

    @pytest.mark.asyncio
    async def test_connect_clears_previous_error(self, agent, wallet):
        agent.reject_next_request()
        with pytest.raises(SigningAgentError):
            await wallet.connect()

        await wallet.connect()

        assert wallet.error is None
        assert wallet.address == BUYER

    @pytest.mark.asyncio
    async def test_agent_with_no_accounts_leaves_session_disconnected(self):
        wallet = WalletSessionManager(LocalSigningAgent(accounts=[]))

        await wallet.connect()

        assert wallet.is_connected is False


class TestDisconnect:
    """Test wallet disconnection."""

    @pytest.mark.asyncio
    async def test_disconnect_clears_address_and_error(self, wallet):
        await wallet.connect()
        wallet.error = "stale"

        wallet.disconnect()

        assert wallet.address is None
        assert wallet.error is None
        assert wallet.is_connected is False

    def test_disconnect_when_not_connected_succeeds(self, wallet):
        wallet.disconnect()
        assert wallet.is_connected is False

    @pytest.mark.asyncio
    async def test_connection_flag_tracks_address_over_any_sequence(self, wallet):
        for step in ["connect", "disconnect", "disconnect", "connect", "connect", "disconnect", "connect"]:
            if step == "connect":
                await wallet.connect()
            else:
                wallet.disconnect()
            assert wallet.is_connected == (wallet.address is not None)
            assert wallet.snapshot().is_connected == (wallet.snapshot().address is not None)


class TestAccountsChanged:
    """Test the accounts-changed subscription."""

    @pytest.mark.asyncio
    async def test_zero_accounts_disconnects_without_explicit_call(self, agent, wallet):
        await wallet.connect()
        assert wallet.is_connected

        agent.set_accounts([])

        assert wallet.address is None
        assert wallet.is_connected is False

    @pytest.mark.asyncio
    async def test_account_switch_updates_address(self, agent, wallet):
        await wallet.connect()

        agent.set_accounts([OTHER_ACCOUNT])

        assert wallet.address == OTHER_ACCOUNT

    def test_close_unsubscribes(self, agent):
        wallet = WalletSessionManager(agent)
        assert agent.listener_count == 1

        wallet.close()
        agent.set_accounts([OTHER_ACCOUNT])

        assert agent.listener_count == 0
        assert wallet.address is None


class TestRestoreAndHelpers:
    """Test silent restore and helper methods."""

    @pytest.mark.asyncio
    async def test_restore_picks_up_authorized_account(self):
        wallet = WalletSessionManager(LocalSigningAgent(accounts=[BUYER], authorized=True))

        await wallet.restore()

        assert wallet.address == BUYER

    @pytest.mark.asyncio
    async def test_restore_does_not_prompt(self, wallet):
        await wallet.restore()
        assert wallet.is_connected is False

    @pytest.mark.asyncio
    async def test_restore_without_agent_is_noop(self):
        wallet = WalletSessionManager(agent=None)
        await wallet.restore()
        assert wallet.is_connected is False

    @pytest.mark.asyncio
    async def test_require_connected(self, wallet):
        with pytest.raises(NotConnectedError):
            wallet.require_connected(NotConnectedError)

        await wallet.connect()
        assert wallet.require_connected(NotConnectedError) == BUYER

    def test_snapshot_reflects_state(self, wallet):
        wallet.error = "boom"
        snapshot = wallet.snapshot()

        assert snapshot.address is None
        assert snapshot.error == "boom"
        assert snapshot.is_connected is False
