"""Utilities for building and executing HBAR transfers via the toolkit.

This module exposes:
- transfer_hbar_prompt: Generate a prompt/description for the transfer HBAR tool.
- transfer_hbar: Execute an HBAR transfer transaction.
- TransferHbarTool: Tool wrapper exposing the HBAR transfer operation to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    TransferHbarParameters,
    TransferHbarParametersNormalised,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def transfer_hbar_prompt(context: Context) -> str:
    """Generate a human-readable description of the transfer HBAR tool.

    Args:
        context: Runtime context that shapes the default account wording.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    source_account_desc: str = PromptGenerator.get_account_parameter_description(
        "source_account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will transfer HBAR to one or more accounts.

Parameters:
- transfers (list of objects, required): Each object has account_id (str, Hedera account ID or EVM address) and amount (number, HBAR in display units, must be positive)
- {source_account_desc}
- transaction_memo (str, optional): Memo to include with the transaction
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"HBAR successfully transferred.\nTransaction ID: {response.transaction_id}"


async def transfer_hbar(
    client: Client,
    context: Context,
    params: TransferHbarParameters,
) -> ToolResponse:
    """Transfer HBAR from the source account to every recipient in one transaction.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Recipients with display-unit amounts and an optional source account.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        normalised_params: TransferHbarParametersNormalised = (
            HederaParameterNormaliser.normalise_transfer_hbar(params, context, client)
        )

        tx = HederaBuilder.transfer_hbar(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to transfer HBAR: {str(e)}"
        print("[transfer_hbar_tool]", message)
        return ToolResponse(
            human_message=message,
            error=message,
        )


TRANSFER_HBAR_TOOL: str = "transfer_hbar_tool"


class TransferHbarTool(Tool):
    """Tool wrapper that exposes HBAR transfers to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = TRANSFER_HBAR_TOOL
        self.name: str = "Transfer HBAR"
        self.description: str = transfer_hbar_prompt(context)
        self.parameters: type[TransferHbarParameters] = TransferHbarParameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: TransferHbarParameters
    ) -> ToolResponse:
        return await transfer_hbar(client, context, params)
