"""Utilities for transferring ERC20 tokens via the toolkit.

This module exposes:
- transfer_erc20_prompt: Generate a prompt/description for the transfer ERC20 tool.
- transfer_erc20: Execute a ``transfer(to, amount)`` contract call.
- TransferERC20Tool: Tool wrapper exposing the operation to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.constants.contracts import (
    ERC20_TRANSFER_FUNCTION_ABI,
    ERC20_TRANSFER_FUNCTION_NAME,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    ContractExecuteTransactionParametersNormalised,
    TransferERC20Parameters,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def transfer_erc20_prompt(context: Context) -> str:
    """Generate a human-readable description of the transfer ERC20 tool.

    Args:
        context: Runtime context that shapes the default account wording.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    recipient_desc: str = PromptGenerator.get_any_address_parameter_description(
        "recipient_address", context, is_required=True
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will transfer a given amount of an existing ERC20 token on Hedera.

Parameters:
- contract_id (str, required): The id of the ERC20 contract. This can be the EVM address or the Hedera id
- {recipient_desc}
- amount (int, required): The amount to be transferred, in the token's base units
{usage_instructions}

Example: "Transfer 1 ERC20 token 0.0.6473135 to 0xd94dc7f82f103757f715514e4a37186be6e4580b" means transferring the amount of 1 of the ERC20 token with contract id 0.0.6473135 to the 0xd94dc7f82f103757f715514e4a37186be6e4580b EVM address.
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"ERC20 token transferred successfully.\nTransaction ID: {response.transaction_id}"


async def transfer_erc20(
    client: Client,
    context: Context,
    params: TransferERC20Parameters,
) -> ToolResponse:
    """Transfer ERC20 tokens; Hedera ids are mapped to EVM addresses first.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Contract, recipient and base-unit amount.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params: ContractExecuteTransactionParametersNormalised = (
            await HederaParameterNormaliser.normalise_transfer_erc20_params(
                params,
                ERC20_TRANSFER_FUNCTION_ABI,
                ERC20_TRANSFER_FUNCTION_NAME,
                context,
                mirrornode_service,
            )
        )

        tx = HederaBuilder.execute_transaction(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to transfer ERC20: {str(e)}"
        print("[transfer_erc20_tool]", message)
        return ToolResponse(human_message=message, error=message)


TRANSFER_ERC20_TOOL: str = "transfer_erc20_tool"


class TransferERC20Tool(Tool):
    """Tool wrapper that exposes ERC20 transfers to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = TRANSFER_ERC20_TOOL
        self.name: str = "Transfer ERC20"
        self.description: str = transfer_erc20_prompt(context)
        self.parameters: type[TransferERC20Parameters] = TransferERC20Parameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: TransferERC20Parameters
    ) -> ToolResponse:
        return await transfer_erc20(client, context, params)
