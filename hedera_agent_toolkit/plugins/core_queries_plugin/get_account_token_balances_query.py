"""Token balances query tool: every token an account holds, or a single one."""

from __future__ import annotations

from typing import List

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.decimals_utils import to_display_unit
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.types import TokenBalance
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    AccountTokenBalancesQueryParameters,
)
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def get_account_token_balances_query_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    account_desc: str = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will return the token balances for a given Hedera account.

Parameters:
- {account_desc}
- token_id (str, optional): Only return the balance of this token
{usage_instructions}
"""


def post_process(tokens: List[TokenBalance], account_id: str) -> str:
    if not tokens:
        return f"No token balances found for account {account_id}"

    lines = [f"Details for {account_id}", "--- Token Balances ---"]
    for token in tokens:
        decimals = int(token.get("decimals") or 0)
        balance = format(to_display_unit(token.get("balance", 0), decimals), "f")
        lines.append(f"  Token: {token.get('token_id')}, Balance: {balance}")
    return "\n".join(lines)


async def get_account_token_balances_query(
    client: Client,
    context: Context,
    params: AccountTokenBalancesQueryParameters,
) -> ToolResponse:
    try:
        normalised_params = (
            HederaParameterNormaliser.normalise_account_token_balances_params(
                params, context, client
            )
        )

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )
        token_balances = await mirrornode_service.get_account_token_balances(
            normalised_params.account_id, normalised_params.token_id
        )

        return ToolResponse(
            human_message=post_process(
                token_balances["tokens"], normalised_params.account_id
            ),
            extra={
                "accountId": normalised_params.account_id,
                "tokenBalances": token_balances,
            },
        )

    except Exception as e:
        message = f"Failed to get account token balances: {str(e)}"
        print("[get_account_token_balances_query_tool]", message)
        return ToolResponse(human_message=message, error=message)


GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL: str = "get_account_token_balances_query_tool"


class GetAccountTokenBalancesQueryTool(Tool):
    def __init__(self, context: Context):
        self.method: str = GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL
        self.name: str = "Get Account Token Balances"
        self.description: str = get_account_token_balances_query_prompt(context)
        self.parameters: type[AccountTokenBalancesQueryParameters] = (
            AccountTokenBalancesQueryParameters
        )
        self.output_parser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: AccountTokenBalancesQueryParameters,
    ) -> ToolResponse:
        return await get_account_token_balances_query(client, context, params)
