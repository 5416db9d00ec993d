import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import (
    Client,
    PrivateKey,
    Network,
    AccountId,
    SupplyType,
    TokenType,
)
from hiero_sdk_python.tokens.token_create_transaction import TokenParams

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import (
    InvalidAmountError,
    InvalidParametersError,
    NetworkError,
    UnresolvableAccountError,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.parameter_schemas.token_schema import (
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
)

# Test constants
TEST_OPERATOR_ID = "0.0.1001"
TEST_PRIVATE_KEY = PrivateKey.generate_ed25519()
TEST_PUBLIC_KEY = TEST_PRIVATE_KEY.public_key()
TEST_MIRROR_KEY_STR = PrivateKey.generate_ed25519().public_key().to_string_der()


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
    # Default behavior: return empty account info (no key found)
    service.get_account = AsyncMock(return_value={})
    return service


@pytest.mark.asyncio
async def test_normalise_create_fungible_token_defaults(
    mock_context, mock_client, mock_mirrornode
):
    """Should default to an infinite supply with the context account as treasury."""
    params = CreateFungibleTokenParameters(
        token_name="Test Token",
        token_symbol="TEST",
        decimals=2,
        initial_supply=100,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert isinstance(result, CreateFungibleTokenParametersNormalised)
    assert isinstance(result.token_params, TokenParams)

    tp = result.token_params
    assert tp.token_name == "Test Token"
    assert tp.token_symbol == "TEST"
    assert tp.decimals == 2
    assert tp.initial_supply == 10000
    assert tp.token_type == TokenType.FUNGIBLE_COMMON
    assert str(tp.treasury_account_id) == TEST_OPERATOR_ID
    assert str(tp.auto_renew_account_id) == TEST_OPERATOR_ID
    assert tp.supply_type == SupplyType.INFINITE
    assert tp.max_supply == 0

    # No supply key unless asked for
    assert result.keys is None


@pytest.mark.asyncio
async def test_normalise_finite_supply_scales_by_decimals(
    mock_context, mock_client, mock_mirrornode
):
    """Should scale both supplies by decimals for a finite token."""
    params = CreateFungibleTokenParameters(
        token_name="Finite Token",
        token_symbol="FIN",
        decimals=3,
        initial_supply=0,
        supply_type="finite",
        max_supply=500,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    tp = result.token_params
    assert tp.supply_type == SupplyType.FINITE
    assert tp.max_supply == 500000
    assert tp.initial_supply == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("max_supply", [None, 0])
async def test_finite_supply_without_max_is_rejected(
    mock_context, mock_client, mock_mirrornode, max_supply
):
    """A finite token must name a positive max supply; it is never defaulted."""
    params = CreateFungibleTokenParameters(
        token_name="Explicit Finite",
        token_symbol="EXP",
        supply_type="finite",
        initial_supply=0,
        max_supply=max_supply,
    )

    with pytest.raises(
        InvalidParametersError,
        match="Must include a positive max supply for finite supply type",
    ):
        await HederaParameterNormaliser.normalise_create_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_validates_initial_vs_max_supply(
    mock_context, mock_client, mock_mirrornode
):
    """Should raise if initial_supply > max_supply."""
    params = CreateFungibleTokenParameters(
        token_name="Invalid Token",
        token_symbol="INV",
        decimals=0,
        initial_supply=200,
        supply_type="finite",
        max_supply=100,
    )

    with pytest.raises(ValueError, match=r"Initial supply \(200\) cannot exceed max supply \(100\)"):
        await HederaParameterNormaliser.normalise_create_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_negative_initial_supply_is_rejected(
    mock_context, mock_client, mock_mirrornode
):
    params = CreateFungibleTokenParameters(
        token_name="Negative", token_symbol="NEG", initial_supply=-1
    )

    with pytest.raises(InvalidAmountError):
        await HederaParameterNormaliser.normalise_create_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_resolves_supply_key_from_mirrornode(
    mock_context, mock_client, mock_mirrornode
):
    """Should fetch the default account's key from mirror node if is_supply_key is True."""
    mock_mirrornode.get_account.return_value = {
        "account_public_key": TEST_MIRROR_KEY_STR
    }

    params = CreateFungibleTokenParameters(
        token_name="Key Token",
        token_symbol="KEY",
        is_supply_key=True,
        treasury_account_id=TEST_OPERATOR_ID,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    mock_mirrornode.get_account.assert_called_once_with(TEST_OPERATOR_ID)
    assert result.keys is not None
    assert result.keys.supply_key.to_string_der() == TEST_MIRROR_KEY_STR


@pytest.mark.asyncio
async def test_falls_back_to_operator_key_if_mirror_fails(
    mock_context, mock_client, mock_mirrornode
):
    """Should fall back to client operator key if mirror node lookup fails."""
    mock_mirrornode.get_account.side_effect = NetworkError("Mirror node offline")

    params = CreateFungibleTokenParameters(
        token_name="Fallback Token",
        token_symbol="FB",
        is_supply_key=True,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    mock_mirrornode.get_account.assert_called()
    assert result.keys is not None
    assert result.keys.supply_key.to_string_der() == TEST_PUBLIC_KEY.to_string_der()


@pytest.mark.asyncio
async def test_context_public_key_takes_precedence(mock_client, mock_mirrornode):
    context = Context(account_id=TEST_OPERATOR_ID, account_public_key=TEST_MIRROR_KEY_STR)
    params = CreateFungibleTokenParameters(
        token_name="Ctx Token", token_symbol="CTX", is_supply_key=True
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, context, mock_client, mock_mirrornode
    )

    mock_mirrornode.get_account.assert_not_called()
    assert result.keys.supply_key.to_string_der() == TEST_MIRROR_KEY_STR


@pytest.mark.asyncio
async def test_empty_name_and_symbol_are_kept(
    mock_context, mock_client, mock_mirrornode
):
    params = CreateFungibleTokenParameters(token_name="", token_symbol="")

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert result.token_params.token_name == ""
    assert result.token_params.token_symbol == ""


@pytest.mark.asyncio
async def test_missing_treasury_is_rejected(mock_mirrornode):
    client = MagicMock(spec=Client)
    client.operator_account_id = None
    client.operator_private_key = None

    params = CreateFungibleTokenParameters(token_name="Orphan", token_symbol="ORP")

    with pytest.raises(UnresolvableAccountError, match="Must include treasury account ID"):
        await HederaParameterNormaliser.normalise_create_fungible_token_params(
            params, Context(), client, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_non_fungible_token_defaults(mock_context, mock_client, mock_mirrornode):
    """NFT collections are finite, start empty and always carry a supply key."""
    params = CreateNonFungibleTokenParameters(token_name="Art", token_symbol="ART")

    result = (
        await HederaParameterNormaliser.normalise_create_non_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )
    )

    tp = result.token_params
    assert tp.token_type == TokenType.NON_FUNGIBLE_UNIQUE
    assert tp.supply_type == SupplyType.FINITE
    assert tp.max_supply == 100
    assert tp.decimals == 0
    assert tp.initial_supply == 0
    assert str(tp.treasury_account_id) == TEST_OPERATOR_ID
    assert result.keys.supply_key.to_string_der() == TEST_PUBLIC_KEY.to_string_der()
