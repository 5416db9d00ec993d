"""ERC721 ``transferFrom`` tool."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.constants.contracts import (
    ERC721_TRANSFER_FUNCTION_ABI,
    ERC721_TRANSFER_FUNCTION_NAME,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import TransferERC721Parameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def transfer_erc721_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    from_desc: str = PromptGenerator.get_any_address_parameter_description(
        "from_address", context, is_required=True
    )
    to_desc: str = PromptGenerator.get_any_address_parameter_description(
        "to_address", context, is_required=True
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will transfer an existing ERC721 token on Hedera.

Parameters:
- contract_id (str, required): The id of the ERC721 contract
- {from_desc}
- {to_desc}
- token_id (int, required): The ID of the token to transfer
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"ERC721 token transferred successfully.\nTransaction ID: {response.transaction_id}"


async def transfer_erc721(
    client: Client,
    context: Context,
    params: TransferERC721Parameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params = (
            await HederaParameterNormaliser.normalise_transfer_erc721_params(
                params,
                ERC721_TRANSFER_FUNCTION_ABI,
                ERC721_TRANSFER_FUNCTION_NAME,
                context,
                mirrornode_service,
            )
        )

        tx = HederaBuilder.execute_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to transfer ERC721: {str(e)}"
        print("[transfer_erc721_tool]", message)
        return ToolResponse(human_message=message, error=message)


TRANSFER_ERC721_TOOL: str = "transfer_erc721_tool"


class TransferERC721Tool(Tool):
    def __init__(self, context: Context):
        self.method: str = TRANSFER_ERC721_TOOL
        self.name: str = "Transfer ERC721"
        self.description: str = transfer_erc721_prompt(context)
        self.parameters: type[TransferERC721Parameters] = TransferERC721Parameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: TransferERC721Parameters
    ) -> ToolResponse:
        return await transfer_erc721(client, context, params)
