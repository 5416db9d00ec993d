"""Utilities for creating Hedera Consensus Service topics via the toolkit.

This module exposes:
- create_topic_prompt: Generate a prompt/description for the create topic tool.
- create_topic: Execute a topic creation transaction.
- CreateTopicTool: Tool wrapper exposing the create topic operation to the runtime.
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
    CreateTopicParameters,
    CreateTopicParametersNormalised,
)
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def create_topic_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will create a new topic on the Hedera network. The default account's key becomes the topic admin key.

Parameters:
- is_submit_key (bool, optional): Whether to restrict message submission with the default account's key. Defaults to false
- topic_memo (str, optional): A memo for the topic
- transaction_memo (str, optional): A memo for the transaction
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    topic_id_str = str(response.topic_id) if response.topic_id else "unknown"
    return f"""Topic created successfully.
Transaction ID: {response.transaction_id}
Topic ID: {topic_id_str}"""


async def create_topic(
    client: Client,
    context: Context,
    params: CreateTopicParameters,
) -> ToolResponse:
    """Create a topic administered by the default account.

    Args:
        client: Hedera client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Topic options.

    Returns:
        A ToolResponse wrapping the strategy result, or the failure message.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        normalised_params: CreateTopicParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_topic_params(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.create_topic(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create topic: {str(e)}"
        print("[create_topic_tool]", message)
        return ToolResponse(human_message=message, error=message)


CREATE_TOPIC_TOOL: str = "create_topic_tool"


class CreateTopicTool(Tool):
    """Tool wrapper that exposes topic creation to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = CREATE_TOPIC_TOOL
        self.name: str = "Create Topic"
        self.description: str = create_topic_prompt(context)
        self.parameters: type[CreateTopicParameters] = CreateTopicParameters
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateTopicParameters
    ) -> ToolResponse:
        return await create_topic(client, context, params)
