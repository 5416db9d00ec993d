import asyncio
import json
import os
from pprint import pprint

from dotenv import load_dotenv
from hiero_sdk_python import Network, AccountId, PrivateKey, Client

from hedera_agent_toolkit import HederaAgentAPI, ToolDiscovery
from hedera_agent_toolkit.plugins import (
    core_account_plugin,
    core_account_plugin_tool_names,
    core_consensus_plugin,
    core_consensus_plugin_tool_names,
    core_queries_plugin,
    core_queries_plugin_tool_names,
    core_token_plugin,
    core_token_plugin_tool_names,
)
from hedera_agent_toolkit.shared.configuration import AgentMode, Context, Configuration

load_dotenv(".env")

TRANSFER_HBAR_TOOL = core_account_plugin_tool_names["TRANSFER_HBAR_TOOL"]
CREATE_ACCOUNT_TOOL = core_account_plugin_tool_names["CREATE_ACCOUNT_TOOL"]
CREATE_FUNGIBLE_TOKEN_TOOL = core_token_plugin_tool_names["CREATE_FUNGIBLE_TOKEN_TOOL"]
CREATE_TOPIC_TOOL = core_consensus_plugin_tool_names["CREATE_TOPIC_TOOL"]
SUBMIT_TOPIC_MESSAGE_TOOL = core_consensus_plugin_tool_names[
    "SUBMIT_TOPIC_MESSAGE_TOOL"
]
GET_HBAR_BALANCE_QUERY_TOOL = core_queries_plugin_tool_names[
    "GET_HBAR_BALANCE_QUERY_TOOL"
]
GET_TOPIC_MESSAGES_QUERY_TOOL = core_queries_plugin_tool_names[
    "GET_TOPIC_MESSAGES_QUERY_TOOL"
]


async def bootstrap():
    # Hedera Client setup (testnet unless HEDERA_NETWORK says otherwise)
    operator_id: AccountId = AccountId.from_string(os.getenv("ACCOUNT_ID"))
    operator_key: PrivateKey = PrivateKey.from_string(os.getenv("PRIVATE_KEY"))

    client: Client = Client(Network(network=os.getenv("HEDERA_NETWORK", "testnet")))
    client.set_operator(operator_id, operator_key)

    mode = AgentMode(os.getenv("AGENT_MODE", AgentMode.AUTONOMOUS.value))

    configuration: Configuration = Configuration(
        tools=[
            TRANSFER_HBAR_TOOL,
            CREATE_ACCOUNT_TOOL,
            CREATE_FUNGIBLE_TOKEN_TOOL,
            CREATE_TOPIC_TOOL,
            SUBMIT_TOPIC_MESSAGE_TOOL,
            GET_HBAR_BALANCE_QUERY_TOOL,
            GET_TOPIC_MESSAGES_QUERY_TOOL,
        ],
        plugins=[
            core_account_plugin,
            core_token_plugin,
            core_consensus_plugin,
            core_queries_plugin,
        ],
        context=Context(mode=mode, account_id=str(operator_id)),
    )

    tools = ToolDiscovery.create_from_configuration(configuration)
    api = HederaAgentAPI(client, configuration.context, tools)

    print("Hedera toolkit CLI. Type '<tool method> <json params>' or 'exit' to quit")
    print("Available tools:")
    for tool in tools:
        print(f"- {tool.method}: {tool.name}")
    print("")

    # CLI loop
    while True:
        user_input = input("You: ").strip()
        if not user_input or user_input.lower() in ["exit", "quit"]:
            print("Goodbye!")
            break

        method, _, raw_params = user_input.partition(" ")
        try:
            params = json.loads(raw_params) if raw_params else {}
            output = await api.run(method, params)

            parsed = api.get_tool(method).output_parser(output)
            print("\n= Direct tool response =\n", parsed["humanMessage"])
            print("\n= Full tool response =")
            pprint(parsed)

        except Exception as e:
            print("Error:", e)

    client.close()


if __name__ == "__main__":
    asyncio.run(bootstrap())
