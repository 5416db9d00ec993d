import asyncio
import json

import pytest
from hiero_sdk_python import PrivateKey

from hedera_agent_toolkit import HederaAgentAPI, ToolDiscovery
from hedera_agent_toolkit.plugins import (
    core_account_plugin_tool_names,
    core_queries_plugin_tool_names,
)
from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from test.utils.setup import get_operator_client_for_tests, has_operator_credentials

pytestmark = pytest.mark.skipif(
    not has_operator_credentials(),
    reason="ACCOUNT_ID and PRIVATE_KEY are required for testnet runs",
)

CREATE_ACCOUNT_TOOL = core_account_plugin_tool_names["CREATE_ACCOUNT_TOOL"]
TRANSFER_HBAR_TOOL = core_account_plugin_tool_names["TRANSFER_HBAR_TOOL"]
GET_HBAR_BALANCE_QUERY_TOOL = core_queries_plugin_tool_names[
    "GET_HBAR_BALANCE_QUERY_TOOL"
]

# mirror node lags consensus by a few seconds
MIRROR_NODE_WAIT_SECONDS = 5


@pytest.fixture
def operator_client():
    client = get_operator_client_for_tests()
    yield client
    client.close()


@pytest.fixture
def api(operator_client):
    context = Context(
        mode=AgentMode.AUTONOMOUS,
        account_id=str(operator_client.operator_account_id),
    )
    tools = ToolDiscovery().get_all_tools(
        context, [CREATE_ACCOUNT_TOOL, TRANSFER_HBAR_TOOL, GET_HBAR_BALANCE_QUERY_TOOL]
    )
    return HederaAgentAPI(operator_client, context, tools)


@pytest.mark.asyncio
async def test_operator_balance_query(api, operator_client):
    result = json.loads(await api.run(GET_HBAR_BALANCE_QUERY_TOOL, {}))

    assert "error" not in result
    assert result["raw"]["accountId"] == str(operator_client.operator_account_id)
    assert result["raw"]["tinybarBalance"] > 0


@pytest.mark.asyncio
async def test_create_account_and_transfer(api):
    key = PrivateKey.generate_ed25519().public_key()
    created = json.loads(
        await api.run(
            CREATE_ACCOUNT_TOOL,
            {"public_key": key.to_string_der(), "initial_balance": 0},
        )
    )
    assert created["raw"]["status"] == "SUCCESS"
    account_id = created["raw"]["accountId"]

    transferred = json.loads(
        await api.run(
            TRANSFER_HBAR_TOOL,
            {
                "transfers": [{"account_id": account_id, "amount": 0.5}],
                "transaction_memo": "integration transfer",
            },
        )
    )
    assert transferred["raw"]["status"] == "SUCCESS"

    await asyncio.sleep(MIRROR_NODE_WAIT_SECONDS)
    balance = json.loads(
        await api.run(GET_HBAR_BALANCE_QUERY_TOOL, {"account_id": account_id})
    )
    assert balance["raw"]["tinybarBalance"] == 50_000_000
