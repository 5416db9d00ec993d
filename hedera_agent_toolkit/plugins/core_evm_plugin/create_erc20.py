"""Utilities for deploying ERC20 tokens through the factory contract.

This module exposes:
- create_erc20_prompt: Generate a prompt/description for the create ERC20 tool.
- create_erc20: Call the factory and, in autonomous mode, report the new token address.
- CreateERC20Tool: Tool wrapper exposing the operation to the runtime.
"""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.plugins.core_evm_plugin.utils import get_deployed_token_address
from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from hedera_agent_toolkit.shared.constants.contracts import (
    DEPLOY_TOKEN_FUNCTION_NAME,
    ERC20_FACTORY_ABI,
    get_erc20_factory_address,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import (
    ExecutedTransactionToolResponse,
    ToolResponse,
)
from hedera_agent_toolkit.shared.parameter_schemas import CreateERC20Parameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def create_erc20_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool creates an ERC20 token on Hedera by calling the BaseERC20Factory contract.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- decimals (int, optional): The number of decimals the token supports. Defaults to 18
- initial_supply (int, optional): The initial supply of the token. Defaults to 0
{usage_instructions}
"""


async def create_erc20(
    client: Client,
    context: Context,
    params: CreateERC20Parameters,
) -> ToolResponse:
    """Deploy an ERC20 token through the network's factory contract.

    In autonomous mode the transaction record is queried for the address the
    factory returned, and it is reported in ``extra["erc20Address"]``.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        factory_contract_id = get_erc20_factory_address(
            ledger_id_from_network(client.network)
        )

        normalised_params = HederaParameterNormaliser.normalise_create_erc20_params(
            params,
            factory_contract_id,
            ERC20_FACTORY_ABI,
            DEPLOY_TOKEN_FUNCTION_NAME,
        )

        tx = HederaBuilder.execute_transaction(normalised_params)
        result = await handle_transaction(tx, client, context)

        if context.mode == AgentMode.AUTONOMOUS and isinstance(
            result, ExecutedTransactionToolResponse
        ):
            erc20_address = await get_deployed_token_address(
                client, result.raw.transaction_id
            )
            result.extra = {"erc20Address": erc20_address}
            result.human_message = (
                f"ERC20 token created successfully at address {erc20_address}"
            )

        return result

    except Exception as e:
        message: str = f"Failed to create ERC20 token: {str(e)}"
        print("[create_erc20_tool]", message)
        return ToolResponse(human_message=message, error=message)


CREATE_ERC20_TOOL: str = "create_erc20_tool"


class CreateERC20Tool(Tool):
    """Tool wrapper that exposes ERC20 deployment to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = CREATE_ERC20_TOOL
        self.name: str = "Create ERC20 Token"
        self.description: str = create_erc20_prompt(context)
        self.parameters: type[CreateERC20Parameters] = CreateERC20Parameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateERC20Parameters
    ) -> ToolResponse:
        return await create_erc20(client, context, params)
