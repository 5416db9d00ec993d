"""Utilities for building and executing account creation operations via the toolkit.

This module exposes:
- create_account_prompt: Generate a prompt/description for the create account tool.
- create_account: Execute an account creation transaction.
- CreateAccountTool: Tool wrapper exposing the create account operation to the runtime.
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
    CreateAccountParameters,
    CreateAccountParametersNormalised,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def create_account_prompt(context: Context) -> str:
    """Generate a human-readable description of the create account tool.

    Args:
        context: Runtime context that shapes the default account wording.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will create a new Hedera account with a passed public key. If not passed, the tool will use the public key of the default account.

Parameters:
- public_key (str, optional): Public key to use for the account. If not provided, the tool will use the default account's public key.
- account_memo (str, optional): Optional memo for the account (at most 100 characters)
- initial_balance (number, optional, default 0): Initial HBAR to fund the account
- max_automatic_token_associations (int, optional, default -1): -1 means unlimited
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    account_id_str = str(response.account_id) if response.account_id else "unknown"
    return f"""Account created successfully.
Transaction ID: {response.transaction_id}
New Account ID: {account_id_str}"""


async def create_account(
    client: Client,
    context: Context,
    params: CreateAccountParameters,
) -> ToolResponse:
    """Create an account, keyed by the given public key or the default account key.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: User-supplied account creation parameters.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params: CreateAccountParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_account(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.create_account(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create account: {str(e)}"
        print("[create_account_tool]", message)
        return ToolResponse(
            human_message=message,
            error=message,
        )


CREATE_ACCOUNT_TOOL: str = "create_account_tool"


class CreateAccountTool(Tool):
    """Tool wrapper that exposes account creation to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = CREATE_ACCOUNT_TOOL
        self.name: str = "Create Account"
        self.description: str = create_account_prompt(context)
        self.parameters: type[CreateAccountParameters] = CreateAccountParameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateAccountParameters
    ) -> ToolResponse:
        return await create_account(client, context, params)
