"""ERC721 ``safeMint`` tool."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.constants.contracts import (
    ERC721_MINT_FUNCTION_ABI,
    ERC721_MINT_FUNCTION_NAME,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import MintERC721Parameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def mint_erc721_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    to_desc: str = PromptGenerator.get_any_address_parameter_description(
        "to_address", context, is_required=True
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will mint a new ERC721 token on Hedera.

Parameters:
- contract_id (str, required): The id of the ERC721 contract
- {to_desc}
{usage_instructions}

Example: "Mint ERC721 token 0.0.6486793 to 0xd94dc7f82f103757f715514e4a37186be6e4580b" means minting the ERC721 token with contract id 0.0.6486793 to the 0xd94dc7f82f103757f715514e4a37186be6e4580b EVM address.
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"ERC721 token minted successfully.\nTransaction ID: {response.transaction_id}"


async def mint_erc721(
    client: Client,
    context: Context,
    params: MintERC721Parameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params = await HederaParameterNormaliser.normalise_mint_erc721_params(
            params,
            ERC721_MINT_FUNCTION_ABI,
            ERC721_MINT_FUNCTION_NAME,
            context,
            mirrornode_service,
        )

        tx = HederaBuilder.execute_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to mint ERC721: {str(e)}"
        print("[mint_erc721_tool]", message)
        return ToolResponse(human_message=message, error=message)


MINT_ERC721_TOOL: str = "mint_erc721_tool"


class MintERC721Tool(Tool):
    def __init__(self, context: Context):
        self.method: str = MINT_ERC721_TOOL
        self.name: str = "Mint ERC721"
        self.description: str = mint_erc721_prompt(context)
        self.parameters: type[MintERC721Parameters] = MintERC721Parameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: MintERC721Parameters
    ) -> ToolResponse:
        return await mint_erc721(client, context, params)
