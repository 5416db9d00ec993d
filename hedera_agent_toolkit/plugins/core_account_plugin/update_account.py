"""Account update tool: memo, staking and automatic association settings."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import UpdateAccountParameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def update_account_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    account_desc: str = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will update an existing Hedera account. Only provided fields will be updated.

Parameters:
- {account_desc}
- max_automatic_token_associations (int, optional): -1 means unlimited
- staked_account_id (str, optional): Account to stake to
- account_memo (str, optional): New memo for the account
- decline_staking_reward (bool, optional): Whether to decline staking rewards
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"Account successfully updated. Transaction ID: {response.transaction_id}"


async def update_account(
    client: Client,
    context: Context,
    params: UpdateAccountParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_update_account(
            params, context, client
        )
        tx = HederaBuilder.update_account(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to update account: {str(e)}"
        print("[update_account_tool]", message)
        return ToolResponse(human_message=message, error=message)


UPDATE_ACCOUNT_TOOL: str = "update_account_tool"


class UpdateAccountTool(Tool):
    def __init__(self, context: Context):
        self.method: str = UPDATE_ACCOUNT_TOOL
        self.name: str = "Update Account"
        self.description: str = update_account_prompt(context)
        self.parameters: type[UpdateAccountParameters] = UpdateAccountParameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: UpdateAccountParameters
    ) -> ToolResponse:
        return await update_account(client, context, params)
