"""Account deletion tool.

This module exposes:
- delete_account_prompt: Generate a prompt/description for the delete account tool.
- delete_account: Execute an account deletion transaction.
- DeleteAccountTool: Tool wrapper exposing the delete account operation to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import DeleteAccountParameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def delete_account_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    transfer_account_desc: str = PromptGenerator.get_account_parameter_description(
        "transfer_account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will delete an existing Hedera account. The remaining balance of the account will be transferred to the transfer account.

Parameters:
- account_id (str, required): The account ID to delete
- {transfer_account_desc}
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"Account successfully deleted. Transaction ID: {response.transaction_id}"


async def delete_account(
    client: Client,
    context: Context,
    params: DeleteAccountParameters,
) -> ToolResponse:
    """Delete ``params.account_id`` and sweep its balance to the transfer account.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        normalised_params = HederaParameterNormaliser.normalise_delete_account(
            params, context, client
        )
        tx = HederaBuilder.delete_account(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to delete account: {str(e)}"
        print("[delete_account_tool]", message)
        return ToolResponse(human_message=message, error=message)


DELETE_ACCOUNT_TOOL: str = "delete_account_tool"


class DeleteAccountTool(Tool):
    """Tool wrapper that exposes account deletion to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = DELETE_ACCOUNT_TOOL
        self.name: str = "Delete Account"
        self.description: str = delete_account_prompt(context)
        self.parameters: type[DeleteAccountParameters] = DeleteAccountParameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: DeleteAccountParameters
    ) -> ToolResponse:
        return await delete_account(client, context, params)
