import json

import pytest
from unittest.mock import MagicMock, patch

from hiero_sdk_python import Client

from hedera_agent_toolkit import HederaAgentAPI, Plugin, ToolDiscovery
from hedera_agent_toolkit.plugins import (
    core_account_plugin_tool_names,
    core_queries_plugin,
    core_queries_plugin_tool_names,
)
from hedera_agent_toolkit.shared.configuration import Configuration, Context
from hedera_agent_toolkit.shared.errors import InvalidParametersError
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import AccountQueryParameters
from hedera_agent_toolkit.shared.tool import Tool

TRANSFER_HBAR_TOOL = core_account_plugin_tool_names["TRANSFER_HBAR_TOOL"]
GET_HBAR_BALANCE_QUERY_TOOL = core_queries_plugin_tool_names[
    "GET_HBAR_BALANCE_QUERY_TOOL"
]


class EchoTool(Tool):
    def __init__(self, context: Context):
        self.method = "echo_tool"
        self.name = "Echo"
        self.description = "Echoes the account id"
        self.parameters = AccountQueryParameters

    async def execute(self, client, context, params):
        return ToolResponse(
            human_message=f"echo {params.account_id}",
            extra={"accountId": params.account_id},
        )


echo_plugin = Plugin(name="echo-plugin", tools=lambda context: [EchoTool(context)])


def test_default_plugins_expose_every_core_tool():
    tools = ToolDiscovery().get_all_tools(Context())
    methods = [tool.method for tool in tools]

    assert len(methods) == len(set(methods)) == 22
    assert TRANSFER_HBAR_TOOL in methods
    assert GET_HBAR_BALANCE_QUERY_TOOL in methods


def test_tool_filter_keeps_plugin_order():
    tools = ToolDiscovery().get_all_tools(
        Context(), [GET_HBAR_BALANCE_QUERY_TOOL, TRANSFER_HBAR_TOOL]
    )
    assert [tool.method for tool in tools] == [
        TRANSFER_HBAR_TOOL,
        GET_HBAR_BALANCE_QUERY_TOOL,
    ]


def test_unknown_tool_is_rejected():
    with pytest.raises(InvalidParametersError, match="Unknown tools: nope_tool"):
        ToolDiscovery().get_all_tools(Context(), ["nope_tool"])


def test_duplicate_methods_are_rejected():
    discovery = ToolDiscovery([echo_plugin, echo_plugin])
    with pytest.raises(InvalidParametersError, match="more than one plugin"):
        discovery.get_all_tools(Context())


def test_create_from_configuration():
    configuration = Configuration(plugins=[core_queries_plugin, echo_plugin])
    tools = ToolDiscovery.create_from_configuration(configuration)
    assert tools[-1].method == "echo_tool"
    assert len(tools) == 7


def test_tool_descriptions_follow_context():
    context = Context(account_id="0.0.4242")
    (tool,) = ToolDiscovery().get_all_tools(context, [TRANSFER_HBAR_TOOL])
    assert "0.0.4242" in tool.description


@pytest.mark.asyncio
async def test_api_runs_tool_by_method():
    api = HederaAgentAPI(MagicMock(spec=Client), Context(), [EchoTool(Context())])

    result = json.loads(await api.run("echo_tool", {"account_id": "0.0.7"}))

    assert result == {"humanMessage": "echo 0.0.7", "raw": {"accountId": "0.0.7"}}


@pytest.mark.asyncio
async def test_api_rejects_unknown_method():
    api = HederaAgentAPI(MagicMock(spec=Client), Context(), [EchoTool(Context())])

    with pytest.raises(InvalidParametersError, match="Invalid method missing"):
        await api.run("missing", {})


@pytest.mark.asyncio
async def test_api_returns_error_payload_for_bad_params():
    api = HederaAgentAPI(MagicMock(spec=Client), Context(), [EchoTool(Context())])

    result = json.loads(await api.run("echo_tool", {}))

    assert result["error"].startswith('Invalid parameters: Field "account_id"')
    assert result["humanMessage"] == result["error"]
    assert "raw" not in result


@pytest.mark.asyncio
async def test_api_bad_params_never_reach_the_network():
    transfer_tool = ToolDiscovery().get_all_tools(Context(), [TRANSFER_HBAR_TOOL])
    client = MagicMock(spec=Client)
    api = HederaAgentAPI(client, Context(), transfer_tool)

    with patch("hiero_sdk_python.TransferTransaction.execute") as execute:
        result = json.loads(await api.run(TRANSFER_HBAR_TOOL, {}))

    execute.assert_not_called()
    assert 'Field "transfers"' in result["error"]
