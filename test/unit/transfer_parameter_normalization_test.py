import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import AccountId, Client, Network, PrivateKey

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import InvalidAmountError, InvalidParametersError
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.parameter_schemas import (
    AirdropFungibleTokenParameters,
    CreateAccountParameters,
    DeleteAccountParameters,
    TransferHbarParameters,
    UpdateAccountParameters,
)

TEST_OPERATOR_ID = "0.0.1001"
TEST_PRIVATE_KEY = PrivateKey.generate_ed25519()


@pytest.fixture
def mock_context():
    return Context(account_id=TEST_OPERATOR_ID)


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string(TEST_OPERATOR_ID)
    client.operator_private_key = TEST_PRIVATE_KEY
    client.network = Network(network="testnet")
    return client


@pytest.fixture
def mock_mirrornode():
    service = AsyncMock()
    service.get_account = AsyncMock(return_value={})
    return service


def _as_tuples(entries):
    return [(str(entry.account_id), entry.amount) for entry in entries]


def test_transfer_hbar_is_balanced(mock_context, mock_client):
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "0.0.2001", "amount": 1.5},
            {"account_id": "0.0.2002", "amount": "0.00000001"},
        ],
        transaction_memo="rent",
    )

    result = HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert _as_tuples(result.hbar_transfers) == [
        ("0.0.2001", 150_000_000),
        ("0.0.2002", 1),
        (TEST_OPERATOR_ID, -150_000_001),
    ]
    assert sum(entry.amount for entry in result.hbar_transfers) == 0
    assert result.transaction_memo == "rent"


def test_transfer_hbar_uses_explicit_source(mock_context, mock_client):
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2001", "amount": 1}],
        source_account_id="0.0.3003",
    )

    result = HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert _as_tuples(result.hbar_transfers)[-1] == ("0.0.3003", -100_000_000)


@pytest.mark.parametrize("amount", [0, -1, "0.000000001"])
def test_transfer_hbar_rejects_zero_and_negative(mock_context, mock_client, amount):
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2001", "amount": amount}]
    )

    with pytest.raises(InvalidAmountError, match="Invalid transfer amount"):
        HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )


def test_transfer_hbar_requires_a_recipient(mock_context, mock_client):
    with pytest.raises(InvalidParametersError, match="transfers"):
        HederaParameterNormaliser.normalise_transfer_hbar(
            {"transfers": []}, mock_context, mock_client
        )


def test_transfer_hbar_accepts_evm_recipient(mock_context, mock_client):
    evm_address = "0x" + "12" * 20
    params = TransferHbarParameters(
        transfers=[{"account_id": evm_address, "amount": 1}]
    )

    result = HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert result.hbar_transfers[0].account_id.evm_address is not None


def test_builder_produces_transfer_transaction(mock_context, mock_client):
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2001", "amount": 2}],
        transaction_memo="memo",
    )
    normalised = HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    tx = HederaBuilder.transfer_hbar(normalised)

    assert type(tx).__name__ == "TransferTransaction"
    assert tx.memo == "memo"


@pytest.mark.asyncio
async def test_airdrop_allows_zero_amounts(mock_context, mock_client, mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {"decimals": "2"}
    params = AirdropFungibleTokenParameters(
        token_id="0.0.5005",
        recipients=[
            {"account_id": "0.0.2001", "amount": 1.25},
            {"account_id": "0.0.2002", "amount": 0},
        ],
    )

    result = await HederaParameterNormaliser.normalise_airdrop_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert str(result.token_id) == "0.0.5005"
    assert _as_tuples(result.token_transfers) == [
        ("0.0.2001", 125),
        ("0.0.2002", 0),
        (TEST_OPERATOR_ID, -125),
    ]
    mock_mirrornode.get_token_info.assert_called_once_with("0.0.5005")


@pytest.mark.asyncio
async def test_airdrop_rejects_negative_amounts(
    mock_context, mock_client, mock_mirrornode
):
    mock_mirrornode.get_token_info.return_value = {"decimals": "0"}
    params = AirdropFungibleTokenParameters(
        token_id="0.0.5005",
        recipients=[{"account_id": "0.0.2001", "amount": -3}],
    )

    with pytest.raises(InvalidAmountError, match="Invalid recipient amount: -3"):
        await HederaParameterNormaliser.normalise_airdrop_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_create_account_defaults(mock_context, mock_client, mock_mirrornode):
    params = CreateAccountParameters(initial_balance=1, account_memo="x" * 150)

    result = await HederaParameterNormaliser.normalise_create_account(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert result.initial_balance.to_tinybars() == 100_000_000
    assert result.memo == "x" * 100
    assert result.max_automatic_token_associations == -1
    assert (
        result.key.to_string_der() == TEST_PRIVATE_KEY.public_key().to_string_der()
    )


@pytest.mark.asyncio
async def test_create_account_with_explicit_key(
    mock_context, mock_client, mock_mirrornode
):
    public_key = PrivateKey.generate_ed25519().public_key().to_string_der()
    params = CreateAccountParameters(public_key=public_key)

    result = await HederaParameterNormaliser.normalise_create_account(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert result.key.to_string_der() == public_key
    mock_mirrornode.get_account.assert_not_called()


def test_update_account_sets_only_given_fields(mock_context, mock_client):
    params = UpdateAccountParameters(account_memo="new memo")

    result = HederaParameterNormaliser.normalise_update_account(
        params, mock_context, mock_client
    )

    account_params = result.account_params
    assert str(account_params.account_id) == TEST_OPERATOR_ID
    assert account_params.account_memo == "new memo"
    assert account_params.staked_account_id is None


def test_delete_account_defaults_transfer_account(mock_context, mock_client):
    params = DeleteAccountParameters(account_id="0.0.4444")

    result = HederaParameterNormaliser.normalise_delete_account(
        params, mock_context, mock_client
    )

    assert str(result.account_id) == "0.0.4444"
    assert str(result.transfer_account_id) == TEST_OPERATOR_ID


def test_delete_account_requires_native_id(mock_context, mock_client):
    params = DeleteAccountParameters(account_id="0x" + "ab" * 20)

    with pytest.raises(InvalidParametersError, match="Hedera address"):
        HederaParameterNormaliser.normalise_delete_account(
            params, mock_context, mock_client
        )
