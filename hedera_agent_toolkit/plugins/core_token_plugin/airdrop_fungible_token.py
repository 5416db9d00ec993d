"""Utilities for airdropping fungible tokens via the toolkit.

This module exposes:
- airdrop_fungible_token_prompt: Generate a prompt/description for the airdrop tool.
- airdrop_fungible_token: Execute a token airdrop transaction.
- AirdropFungibleTokenTool: Tool wrapper exposing the airdrop operation to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def airdrop_fungible_token_prompt(context: Context) -> str:
    """Generate a human-readable description of the airdrop fungible token tool.

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

This tool will airdrop a fungible token on Hedera. Recipients that are not yet associated with the token receive a pending airdrop they can claim.

Parameters:
- token_id (str, required): The id of the token
- {source_account_desc}
- recipients (list of objects, required): Each object has account_id (str) and amount (number, in display units)
- transaction_memo (str, optional): Memo to include with the transaction
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"Token successfully airdropped.\nTransaction ID: {response.transaction_id}"


async def airdrop_fungible_token(
    client: Client,
    context: Context,
    params: AirdropFungibleTokenParameters,
) -> ToolResponse:
    """Airdrop a fungible token to every recipient in a single transaction.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Token id, recipients and an optional source account.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params: AirdropFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_airdrop_fungible_token_params(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.airdrop_fungible_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to airdrop fungible token: {str(e)}"
        print("[airdrop_fungible_token_tool]", message)
        return ToolResponse(
            human_message=message,
            error=message,
        )


AIRDROP_FUNGIBLE_TOKEN_TOOL: str = "airdrop_fungible_token_tool"


class AirdropFungibleTokenTool(Tool):
    """Tool wrapper that exposes fungible token airdrops to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = AIRDROP_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Airdrop Fungible Token"
        self.description: str = airdrop_fungible_token_prompt(context)
        self.parameters: type[AirdropFungibleTokenParameters] = (
            AirdropFungibleTokenParameters
        )
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: AirdropFungibleTokenParameters
    ) -> ToolResponse:
        return await airdrop_fungible_token(client, context, params)
