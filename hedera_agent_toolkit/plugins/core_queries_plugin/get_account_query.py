"""Account details query tool backed by the mirror node."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.types import AccountResponse
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import AccountQueryParameters
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def get_account_query_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will return the account information for a given Hedera account.

Parameters:
- account_id (str, required): The account ID to query
{usage_instructions}
"""


def post_process(account: AccountResponse) -> str:
    return f"""Details for {account["account_id"]}
Balance: {account["balance"].get("balance", 0)}
Public Key: {account["account_public_key"]},
EVM address: {account["evm_address"]},
"""


async def get_account_query(
    client: Client,
    context: Context,
    params: AccountQueryParameters,
) -> ToolResponse:
    try:
        parsed_params = HederaParameterNormaliser.normalise_get_account_query(params)

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )
        account: AccountResponse = await mirrornode_service.get_account(
            parsed_params.account_id
        )

        return ToolResponse(
            human_message=post_process(account),
            extra={"accountId": parsed_params.account_id, "account": account},
        )

    except Exception as e:
        message = f"Failed to get account query: {str(e)}"
        print("[get_account_query_tool]", message)
        return ToolResponse(human_message=message, error=message)


GET_ACCOUNT_QUERY_TOOL: str = "get_account_query_tool"


class GetAccountQueryTool(Tool):
    def __init__(self, context: Context):
        self.method: str = GET_ACCOUNT_QUERY_TOOL
        self.name: str = "Get Account Query"
        self.description: str = get_account_query_prompt(context)
        self.parameters: type[AccountQueryParameters] = AccountQueryParameters
        self.output_parser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: AccountQueryParameters
    ) -> ToolResponse:
        return await get_account_query(client, context, params)
