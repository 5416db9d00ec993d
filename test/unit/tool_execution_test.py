import json

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

from hiero_sdk_python import (
    AccountId,
    Client,
    Network,
    PrivateKey,
    ResponseCode,
    TokenId,
    TransactionId,
)

from hedera_agent_toolkit.plugins.core_account_plugin import TransferHbarTool
from hedera_agent_toolkit.plugins.core_evm_plugin import CreateERC20Tool
from hedera_agent_toolkit.plugins.core_token_plugin import (
    CreateFungibleTokenTool,
    MintFungibleTokenTool,
)
from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from hedera_agent_toolkit.shared.models import (
    ExecutedTransactionToolResponse,
    ReturnBytesToolResponse,
)
from hedera_agent_toolkit.shared.parameter_schemas import (
    CreateERC20Parameters,
    CreateFungibleTokenParameters,
    MintFungibleTokenParameters,
    TransferHbarParameters,
)
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)

TEST_OPERATOR_ID = "0.0.1001"
TX_ID = "0.0.1001@1755169980.651721264"


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string(TEST_OPERATOR_ID)
    client.operator_private_key = PrivateKey.generate_ed25519()
    client.network = Network(network="testnet")
    return client


@pytest.fixture
def mock_mirrornode():
    service = AsyncMock()
    service.get_account = AsyncMock(return_value={})
    return service


def receipt(**overrides):
    fields = dict(
        status=ResponseCode.SUCCESS,
        transaction_id=TransactionId.from_string(TX_ID),
        account_id=None,
        token_id=None,
        topic_id=None,
        contract_id=None,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.mark.asyncio
async def test_invalid_amount_becomes_error_response(mock_client):
    context = Context(account_id=TEST_OPERATOR_ID)
    tool = TransferHbarTool(context)
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2001", "amount": 0}]
    )

    result = await tool.execute(mock_client, context, params)

    assert result.error == "Failed to transfer HBAR: Invalid transfer amount: 0"
    assert result.human_message == result.error


@pytest.mark.asyncio
async def test_return_bytes_mode_never_submits(mock_client):
    context = Context(mode=AgentMode.RETURN_BYTES, account_id=TEST_OPERATOR_ID)
    tool = TransferHbarTool(context)
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2001", "amount": 1}]
    )

    with patch(
        "hiero_sdk_python.TransferTransaction.execute"
    ) as execute:
        result = await tool.execute(mock_client, context, params)

    execute.assert_not_called()
    assert isinstance(result, ReturnBytesToolResponse)
    assert result.error is None
    assert len(result.bytes_data) > 0

    parsed = transaction_tool_output_parser(result.to_json())
    assert parsed["raw"]["bytes"] == result.bytes_data.hex()


@pytest.mark.asyncio
async def test_return_bytes_mode_without_account_fails(mock_client):
    context = Context(mode=AgentMode.RETURN_BYTES)
    tool = TransferHbarTool(context)
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2001", "amount": 1}],
        source_account_id=TEST_OPERATOR_ID,
    )

    result = await tool.execute(mock_client, context, params)

    assert "Context account ID is required for return bytes mode" in result.error


@pytest.mark.asyncio
async def test_create_fungible_token_reports_token_id(mock_client, mock_mirrornode):
    context = Context(account_id=TEST_OPERATOR_ID, mirrornode_service=mock_mirrornode)
    tool = CreateFungibleTokenTool(context)
    params = CreateFungibleTokenParameters(token_name="Gold", token_symbol="GLD")

    with patch(
        "hiero_sdk_python.TokenCreateTransaction.execute",
        return_value=receipt(token_id=TokenId.from_string("0.0.5005")),
    ):
        result = await tool.execute(mock_client, context, params)

    assert isinstance(result, ExecutedTransactionToolResponse)
    assert "0.0.5005" in result.human_message
    assert result.raw.status == "SUCCESS"

    parsed = tool.output_parser(result.to_json())
    assert parsed["raw"]["tokenId"] == "0.0.5005"


@pytest.mark.asyncio
async def test_mirror_node_failure_becomes_error_response(mock_client, mock_mirrornode):
    mock_mirrornode.get_token_info.side_effect = Exception("Mirror node offline")
    context = Context(account_id=TEST_OPERATOR_ID, mirrornode_service=mock_mirrornode)
    tool = MintFungibleTokenTool(context)
    params = MintFungibleTokenParameters(token_id="0.0.5005", amount=1)

    result = await tool.execute(mock_client, context, params)

    assert result.error is not None
    assert "Mirror node offline" in result.error


@pytest.mark.asyncio
async def test_create_erc20_reports_deployed_address(mock_client):
    context = Context(account_id=TEST_OPERATOR_ID)
    tool = CreateERC20Tool(context)
    params = CreateERC20Parameters(token_name="Test", token_symbol="TST")
    address = "0x" + "12" * 20

    with patch(
        "hiero_sdk_python.ContractExecuteTransaction.execute",
        return_value=receipt(),
    ), patch(
        "hedera_agent_toolkit.plugins.core_evm_plugin.create_erc20.get_deployed_token_address",
        new_callable=AsyncMock,
        return_value=address,
    ) as lookup:
        result = await tool.execute(mock_client, context, params)

    lookup.assert_awaited_once_with(mock_client, result.raw.transaction_id)
    assert result.human_message == f"ERC20 token created successfully at address {address}"

    parsed = json.loads(result.to_json())
    assert parsed["extra"] == {"erc20Address": address}
    assert tool.output_parser(result.to_json())["raw"]["erc20Address"] == address


@pytest.mark.asyncio
async def test_create_erc20_unsupported_network(mock_client):
    mock_client.network = Network(network="mainnet")
    context = Context(account_id=TEST_OPERATOR_ID)
    tool = CreateERC20Tool(context)

    result = await tool.execute(
        mock_client, context, CreateERC20Parameters(token_name="T", token_symbol="T")
    )

    assert "not supported for ERC20 factory" in result.error
