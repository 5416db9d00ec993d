"""Create a fungible token (HTS) with supply, decimals and treasury defaults resolved from context."""

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
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
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


def create_fungible_token_prompt(context: Context) -> str:
    """Generate a human-readable description of the create fungible token tool.

    Args:
        context: Runtime context that shapes the default account wording.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    treasury_account_desc: str = PromptGenerator.get_account_parameter_description(
        "treasury_account_id", context
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool creates a fungible token on Hedera.
*NOTE*: if token_name or token_symbol are not specified, do not call this tool and ask user for specific token name and symbol!

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- initial_supply (number, optional): The initial supply of the token in display units, defaults to 0
- supply_type (str, optional): "finite" or "infinite". Defaults to "infinite"
- max_supply (number, optional): The maximum supply in display units. Required when supply_type is "finite"
- decimals (int, optional): The number of decimals the token supports. Defaults to 0
- {treasury_account_desc}
- is_supply_key (bool, optional): Set to true if the user wants the default account's key as supply key
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a fungible token creation result.

    Args:
        response: Receipt fields of the executed transaction.

    Returns:
        A concise message with the token ID and transaction ID.
    """
    token_id_str = str(response.token_id) if response.token_id else "unknown"
    return f"""Token created successfully.
Transaction ID: {response.transaction_id}
Token ID: {token_id_str}"""


async def create_fungible_token(
    client: Client,
    context: Context,
    params: CreateFungibleTokenParameters,
) -> ToolResponse:
    """Execute a fungible token creation using normalised parameters and a built transaction.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: User-supplied parameters describing the token to create.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        # Normalise parameters
        normalised_params: CreateFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_fungible_token_params(
                params, context, client, mirrornode_service
            )
        )

        # Build transaction
        tx = HederaBuilder.create_fungible_token(normalised_params)

        # Execute or return bytes, then post-process the result
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create fungible token: {str(e)}"
        print("[create_fungible_token_tool]", message)
        return ToolResponse(
            human_message=message,
            error=message,
        )


CREATE_FUNGIBLE_TOKEN_TOOL: str = "create_fungible_token_tool"


class CreateFungibleTokenTool(Tool):
    """Tool wrapper that exposes the fungible token creation capability to the agent runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata and parameter schema.

        Args:
            context: Runtime context used to tailor the tool description.
        """
        self.method: str = CREATE_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Create Fungible Token"
        self.description: str = create_fungible_token_prompt(context)
        self.parameters: type[CreateFungibleTokenParameters] = (
            CreateFungibleTokenParameters
        )
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateFungibleTokenParameters
    ) -> ToolResponse:
        return await create_fungible_token(client, context, params)
