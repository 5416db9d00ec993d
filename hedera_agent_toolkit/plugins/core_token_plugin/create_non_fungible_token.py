"""NFT collection creation tool.

This module exposes:
- create_non_fungible_token_prompt: Generate a prompt/description for the tool.
- create_non_fungible_token: Execute an NFT collection creation transaction.
- CreateNonFungibleTokenTool: Tool wrapper exposing the operation to the runtime.
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
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def create_non_fungible_token_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    treasury_account_desc: str = PromptGenerator.get_account_parameter_description(
        "treasury_account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool creates a non-fungible token (NFT) collection on Hedera. The collection always has a finite supply and a supply key, so NFTs can be minted into it.

Parameters:
- token_name (str, required): The name of the collection
- token_symbol (str, required): The symbol of the collection
- max_supply (int, optional): The maximum number of NFTs. Defaults to 100
- {treasury_account_desc}
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    token_id_str = str(response.token_id) if response.token_id else "unknown"
    return f"""Token created successfully.
Transaction ID: {response.transaction_id}
Token ID: {token_id_str}"""


async def create_non_fungible_token(
    client: Client,
    context: Context,
    params: CreateNonFungibleTokenParameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params: CreateNonFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_non_fungible_token_params(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.create_non_fungible_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create non-fungible token: {str(e)}"
        print("[create_non_fungible_token_tool]", message)
        return ToolResponse(human_message=message, error=message)


CREATE_NON_FUNGIBLE_TOKEN_TOOL: str = "create_non_fungible_token_tool"


class CreateNonFungibleTokenTool(Tool):
    def __init__(self, context: Context):
        self.method: str = CREATE_NON_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Create Non-Fungible Token"
        self.description: str = create_non_fungible_token_prompt(context)
        self.parameters: type[CreateNonFungibleTokenParameters] = (
            CreateNonFungibleTokenParameters
        )
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: CreateNonFungibleTokenParameters,
    ) -> ToolResponse:
        return await create_non_fungible_token(client, context, params)
