import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import AccountId, Client, PrivateKey

from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from hedera_agent_toolkit.shared.errors import (
    InsufficientContextError,
    NetworkError,
    UnresolvableAccountError,
)
from hedera_agent_toolkit.shared.utils.account_resolver import AccountResolver

OPERATOR_ID = "0.0.2002"
OPERATOR_KEY = PrivateKey.generate_ed25519()
EVM_ADDRESS = "0x" + "ab" * 20


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string(OPERATOR_ID)
    client.operator_private_key = OPERATOR_KEY
    return client


@pytest.fixture
def bare_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = None
    client.operator_private_key = None
    return client


def test_address_forms():
    assert AccountResolver.is_hedera_address("0.0.1234")
    assert not AccountResolver.is_hedera_address(EVM_ADDRESS)
    assert AccountResolver.is_evm_address(EVM_ADDRESS)
    assert AccountResolver.is_evm_address("ab" * 20)
    assert not AccountResolver.is_evm_address("0x1234")
    assert not AccountResolver.is_evm_address(None)


def test_explicit_account_wins(mock_client):
    context = Context(account_id="0.0.1001")
    assert AccountResolver.resolve_account("0.0.5", context, mock_client) == "0.0.5"


def test_context_account_before_operator(mock_client):
    context = Context(account_id="0.0.1001")
    assert AccountResolver.resolve_account(None, context, mock_client) == "0.0.1001"


def test_operator_is_last_fallback(mock_client):
    assert AccountResolver.resolve_account(None, Context(), mock_client) == OPERATOR_ID


def test_unresolvable_default_account(bare_client):
    with pytest.raises(UnresolvableAccountError):
        AccountResolver.resolve_account(None, Context(), bare_client)


@pytest.mark.asyncio
async def test_native_id_is_mapped_to_evm_address():
    mirrornode = AsyncMock()
    mirrornode.get_account.return_value = {"evm_address": EVM_ADDRESS}

    result = await AccountResolver.get_hedera_evm_address("0.0.1234", mirrornode)

    assert result == EVM_ADDRESS
    mirrornode.get_account.assert_called_once_with("0.0.1234")


@pytest.mark.asyncio
async def test_evm_address_is_returned_unchanged():
    mirrornode = AsyncMock()

    result = await AccountResolver.get_hedera_evm_address(EVM_ADDRESS, mirrornode)

    assert result == EVM_ADDRESS
    mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_evm_address_is_mapped_to_account_id():
    mirrornode = AsyncMock()
    mirrornode.get_account.return_value = {"account_id": "0.0.777"}

    assert (
        await AccountResolver.get_hedera_account_id(EVM_ADDRESS, mirrornode)
        == "0.0.777"
    )


@pytest.mark.asyncio
async def test_missing_evm_address_raises():
    mirrornode = AsyncMock()
    mirrornode.get_account.return_value = {"evm_address": None}

    with pytest.raises(UnresolvableAccountError, match="No EVM address"):
        await AccountResolver.get_hedera_evm_address("0.0.1234", mirrornode)


@pytest.mark.asyncio
async def test_default_public_key_falls_back_to_operator(mock_client):
    mirrornode = AsyncMock()
    mirrornode.get_account.return_value = {"account_public_key": None}

    key = await AccountResolver.get_default_public_key(
        Context(), mock_client, mirrornode
    )

    mirrornode.get_account.assert_called_once_with(OPERATOR_ID)
    assert key.to_string_der() == OPERATOR_KEY.public_key().to_string_der()


@pytest.mark.asyncio
async def test_default_public_key_unavailable(bare_client):
    with pytest.raises(InsufficientContextError):
        await AccountResolver.get_default_public_key(Context(), bare_client, None)


def test_default_account_description():
    assert (
        AccountResolver.get_default_account_description(
            Context(mode=AgentMode.RETURN_BYTES, account_id="0.0.42")
        )
        == "user account (0.0.42)"
    )
    assert AccountResolver.get_default_account_description(Context()) == (
        "operator account"
    )


@pytest.mark.asyncio
async def test_default_public_key_survives_mirror_node_outage(mock_client):
    mirrornode = AsyncMock()
    mirrornode.get_account.side_effect = NetworkError("HTTP 503")

    key = await AccountResolver.get_default_public_key(
        Context(), mock_client, mirrornode
    )

    assert key.to_string_der() == OPERATOR_KEY.public_key().to_string_der()


@pytest.mark.asyncio
async def test_default_public_key_lookup_bugs_propagate(mock_client):
    mirrornode = AsyncMock()
    mirrornode.get_account.side_effect = KeyError("account_public_key")

    with pytest.raises(KeyError):
        await AccountResolver.get_default_public_key(Context(), mock_client, mirrornode)
