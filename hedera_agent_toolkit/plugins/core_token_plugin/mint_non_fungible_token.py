"""NFT minting tool: one serial per metadata URI."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    MintNonFungibleTokenParameters,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def mint_non_fungible_token_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will mint NFTs with their unique metadata for the class of NFTs (non-fungible tokens) defined by the tokenId on Hedera.

Parameters:
- token_id (str, required): The id of the NFT class
- uris (list of str, required): Between 1 and 10 URIs hosting the NFT metadata
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"NFTs successfully minted.\nTransaction ID: {response.transaction_id}"


async def mint_non_fungible_token(
    client: Client,
    context: Context,
    params: MintNonFungibleTokenParameters,
) -> ToolResponse:
    try:
        normalised_params = (
            HederaParameterNormaliser.normalise_mint_non_fungible_token_params(
                params, context
            )
        )
        tx = HederaBuilder.mint_non_fungible_token(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to mint non-fungible token: {str(e)}"
        print("[mint_non_fungible_token_tool]", message)
        return ToolResponse(human_message=message, error=message)


MINT_NON_FUNGIBLE_TOKEN_TOOL: str = "mint_non_fungible_token_tool"


class MintNonFungibleTokenTool(Tool):
    def __init__(self, context: Context):
        self.method: str = MINT_NON_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Mint Non-Fungible Token"
        self.description: str = mint_non_fungible_token_prompt(context)
        self.parameters: type[MintNonFungibleTokenParameters] = (
            MintNonFungibleTokenParameters
        )
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: MintNonFungibleTokenParameters
    ) -> ToolResponse:
        return await mint_non_fungible_token(client, context, params)
