"""ERC721 deployment through the factory contract."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.plugins.core_evm_plugin.utils import get_deployed_token_address
from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from hedera_agent_toolkit.shared.constants.contracts import (
    DEPLOY_TOKEN_FUNCTION_NAME,
    ERC721_FACTORY_ABI,
    get_erc721_factory_address,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import (
    ExecutedTransactionToolResponse,
    ToolResponse,
)
from hedera_agent_toolkit.shared.parameter_schemas import CreateERC721Parameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def create_erc721_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool creates an ERC721 token on Hedera by calling the BaseERC721Factory contract.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- base_uri (str, optional): The base URI for token metadata. Defaults to an empty string
{usage_instructions}
"""


async def create_erc721(
    client: Client,
    context: Context,
    params: CreateERC721Parameters,
) -> ToolResponse:
    try:
        factory_contract_id = get_erc721_factory_address(
            ledger_id_from_network(client.network)
        )

        normalised_params = HederaParameterNormaliser.normalise_create_erc721_params(
            params,
            factory_contract_id,
            ERC721_FACTORY_ABI,
            DEPLOY_TOKEN_FUNCTION_NAME,
        )

        tx = HederaBuilder.execute_transaction(normalised_params)
        result = await handle_transaction(tx, client, context)

        if context.mode == AgentMode.AUTONOMOUS and isinstance(
            result, ExecutedTransactionToolResponse
        ):
            erc721_address = await get_deployed_token_address(
                client, result.raw.transaction_id
            )
            result.extra = {"erc721Address": erc721_address}
            result.human_message = (
                f"ERC721 token created successfully at address {erc721_address}"
            )

        return result

    except Exception as e:
        message: str = f"Failed to create ERC721 token: {str(e)}"
        print("[create_erc721_tool]", message)
        return ToolResponse(human_message=message, error=message)


CREATE_ERC721_TOOL: str = "create_erc721_tool"


class CreateERC721Tool(Tool):
    def __init__(self, context: Context):
        self.method: str = CREATE_ERC721_TOOL
        self.name: str = "Create ERC721 Token"
        self.description: str = create_erc721_prompt(context)
        self.parameters: type[CreateERC721Parameters] = CreateERC721Parameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateERC721Parameters
    ) -> ToolResponse:
        return await create_erc721(client, context, params)
