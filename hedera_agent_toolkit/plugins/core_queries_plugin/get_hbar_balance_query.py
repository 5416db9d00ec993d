"""Utilities for querying HBAR balances via the toolkit.

This module exposes:
- get_hbar_balance_query_prompt: Generate a prompt/description for the HBAR balance tool.
- get_hbar_balance_query: Fetch the balance from the mirror node.
- GetHbarBalanceQueryTool: Tool wrapper exposing the query to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.decimals_utils import (
    HBAR_DECIMALS,
    to_display_unit,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
)
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def get_hbar_balance_query_prompt(context: Context) -> str:
    """Generate a human-readable description of the HBAR balance query tool.

    Args:
        context: Runtime context that shapes the default account wording.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    account_desc: str = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will return the HBAR balance for a given Hedera account.

Parameters:
- {account_desc}
{usage_instructions}
"""


def post_process(hbar_balance: str, account_id: str) -> str:
    return f"Account {account_id} has a balance of {hbar_balance} HBAR"


async def get_hbar_balance_query(
    client: Client,
    context: Context,
    params: AccountBalanceQueryParameters,
) -> ToolResponse:
    """Return the HBAR balance of the given account, or of the default account.

    Args:
        client: Hedera client; only used to resolve the network and defaults.
        context: Runtime context providing the default account.
        params: Optional account id.

    Returns:
        A ToolResponse with the balance in HBAR and tinybars, or the failure message.
    """
    try:
        normalised_params: AccountBalanceQueryParametersNormalised = (
            HederaParameterNormaliser.normalise_get_hbar_balance(
                params, context, client
            )
        )

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )
        tinybars: int = await mirrornode_service.get_account_hbar_balance(
            normalised_params.account_id
        )
        hbar_balance = format(to_display_unit(tinybars, HBAR_DECIMALS), "f")

        return ToolResponse(
            human_message=post_process(hbar_balance, normalised_params.account_id),
            extra={
                "accountId": normalised_params.account_id,
                "hbarBalance": hbar_balance,
                "tinybarBalance": tinybars,
            },
        )

    except Exception as e:
        message = f"Failed to get HBAR balance: {str(e)}"
        print("[get_hbar_balance_query_tool]", message)
        return ToolResponse(human_message=message, error=message)


GET_HBAR_BALANCE_QUERY_TOOL: str = "get_hbar_balance_query_tool"


class GetHbarBalanceQueryTool(Tool):
    """Tool wrapper that exposes the HBAR balance query to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = GET_HBAR_BALANCE_QUERY_TOOL
        self.name: str = "Get HBAR Balance"
        self.description: str = get_hbar_balance_query_prompt(context)
        self.parameters: type[AccountBalanceQueryParameters] = (
            AccountBalanceQueryParameters
        )
        self.output_parser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: AccountBalanceQueryParameters
    ) -> ToolResponse:
        return await get_hbar_balance_query(client, context, params)
