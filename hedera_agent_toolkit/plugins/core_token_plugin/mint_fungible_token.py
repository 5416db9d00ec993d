"""Utilities for building and executing fungible token minting operations via the toolkit.

This module exposes:
- mint_fungible_token_prompt: Generate a prompt/description for the mint fungible token tool.
- mint_fungible_token: Execute a token minting transaction.
- MintFungibleTokenTool: Tool wrapper exposing the token minting operation to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.models import (
    RawTransactionResponse,
    ToolResponse,
)
from hedera_agent_toolkit.shared.parameter_schemas import (
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import (
    handle_transaction,
)
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def mint_fungible_token_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will mint a given amount (supply) of an existing fungible token on Hedera.

Parameters:
- token_id (str, required): The id of the token
- amount (number, required): The amount to be minted, in display units
{usage_instructions}

Example: "Mint 1 of 0.0.6458037" means minting the amount of 1 of the token with id 0.0.6458037.
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"Tokens successfully minted.\nTransaction ID: {response.transaction_id}"


async def mint_fungible_token(
    client: Client,
    context: Context,
    params: MintFungibleTokenParameters,
) -> ToolResponse:
    """Mint additional supply; the amount is scaled by the token's decimals.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Token id and display-unit amount.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params: MintFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_mint_fungible_token_params(
                params, context, mirrornode_service
            )
        )

        tx = HederaBuilder.mint_fungible_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to mint fungible token: {str(e)}"
        print("[mint_fungible_token_tool]", message)
        return ToolResponse(
            human_message=message,
            error=message,
        )


MINT_FUNGIBLE_TOKEN_TOOL: str = "mint_fungible_token_tool"


class MintFungibleTokenTool(Tool):
    """Tool wrapper that exposes fungible token minting to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = MINT_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Mint Fungible Token"
        self.description: str = mint_fungible_token_prompt(context)
        self.parameters: type[MintFungibleTokenParameters] = (
            MintFungibleTokenParameters
        )
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: MintFungibleTokenParameters
    ) -> ToolResponse:
        return await mint_fungible_token(client, context, params)
