import pytest
from unittest.mock import AsyncMock

from hiero_sdk_python import TokenId

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import InvalidAmountError, InvalidParametersError
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.parameter_schemas import (
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
)


@pytest.fixture
def mock_context():
    """Provide a mock Context."""
    return Context(account_id="0.0.1001")


@pytest.fixture
def mock_mirrornode():
    """Provide a mock Mirror Node service."""
    return AsyncMock()


@pytest.mark.asyncio
async def test_normalise_mint_token_calculates_base_units(
    mock_context, mock_mirrornode
):
    """Should correctly convert amount to base units using decimals from mirror node."""
    mock_mirrornode.get_token_info.return_value = {"decimals": "3"}

    # Amount: 10.5, Decimals: 3 -> 10500
    params = MintFungibleTokenParameters(token_id="0.0.5678", amount=10.5)

    result = await HederaParameterNormaliser.normalise_mint_fungible_token_params(
        params, mock_context, mock_mirrornode
    )

    assert isinstance(result, MintFungibleTokenParametersNormalised)
    assert isinstance(result.token_id, TokenId)
    assert str(result.token_id) == "0.0.5678"
    assert result.amount == 10500

    mock_mirrornode.get_token_info.assert_called_once_with("0.0.5678")


@pytest.mark.asyncio
async def test_normalise_mint_token_zero_decimals(mock_context, mock_mirrornode):
    """Should handle tokens with 0 decimals correctly."""
    mock_mirrornode.get_token_info.return_value = {"decimals": "0"}

    params = MintFungibleTokenParameters(token_id="0.0.1234", amount=500.0)

    result = await HederaParameterNormaliser.normalise_mint_fungible_token_params(
        params, mock_context, mock_mirrornode
    )

    assert result.amount == 500


@pytest.mark.asyncio
async def test_missing_decimals_are_treated_as_zero(mock_context, mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {}

    params = MintFungibleTokenParameters(token_id="0.0.1234", amount=7)

    result = await HederaParameterNormaliser.normalise_mint_fungible_token_params(
        params, mock_context, mock_mirrornode
    )

    assert result.amount == 7


@pytest.mark.asyncio
async def test_negative_mint_amount_is_rejected(mock_context, mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {"decimals": "2"}

    params = MintFungibleTokenParameters(token_id="0.0.1234", amount=-1)

    with pytest.raises(InvalidAmountError):
        await HederaParameterNormaliser.normalise_mint_fungible_token_params(
            params, mock_context, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_mirror_node_failure_propagates(mock_context, mock_mirrornode):
    mock_mirrornode.get_token_info.side_effect = Exception("Mirror node offline")

    params = MintFungibleTokenParameters(token_id="0.0.1234", amount=1)

    with pytest.raises(Exception, match="Mirror node offline"):
        await HederaParameterNormaliser.normalise_mint_fungible_token_params(
            params, mock_context, mock_mirrornode
        )


def test_normalise_mint_nft_encodes_uris(mock_context):
    params = MintNonFungibleTokenParameters(
        token_id="0.0.4321", uris=["ipfs://one", "ipfs://two"]
    )

    result = HederaParameterNormaliser.normalise_mint_non_fungible_token_params(
        params, mock_context
    )

    assert str(result.token_id) == "0.0.4321"
    assert result.metadata == [b"ipfs://one", b"ipfs://two"]


def test_mint_nft_requires_at_least_one_uri(mock_context):
    with pytest.raises(InvalidParametersError, match="uris"):
        HederaParameterNormaliser.normalise_mint_non_fungible_token_params(
            {"token_id": "0.0.4321", "uris": []}, mock_context
        )
