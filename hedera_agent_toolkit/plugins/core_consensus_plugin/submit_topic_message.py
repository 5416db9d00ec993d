"""Topic message submission tool."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import RawTransactionResponse, ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import SubmitTopicMessageParameters
from hedera_agent_toolkit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def submit_topic_message_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will submit a message to a topic on the Hedera network.

Parameters:
- topic_id (str, required): The ID of the topic to submit the message to
- message (str, required): The message to submit to the topic
- transaction_memo (str, optional): A memo for the transaction
{usage_instructions}
"""


def post_process(response: RawTransactionResponse) -> str:
    return f"Message submitted successfully with transaction id {response.transaction_id}"


async def submit_topic_message(
    client: Client,
    context: Context,
    params: SubmitTopicMessageParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_submit_topic_message(
            params
        )
        tx = HederaBuilder.submit_topic_message(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to submit message to topic: {str(e)}"
        print("[submit_topic_message_tool]", message)
        return ToolResponse(human_message=message, error=message)


SUBMIT_TOPIC_MESSAGE_TOOL: str = "submit_topic_message_tool"


class SubmitTopicMessageTool(Tool):
    def __init__(self, context: Context):
        self.method: str = SUBMIT_TOPIC_MESSAGE_TOOL
        self.name: str = "Submit Topic Message"
        self.description: str = submit_topic_message_prompt(context)
        self.parameters: type[SubmitTopicMessageParameters] = (
            SubmitTopicMessageParameters
        )
        self.output_parser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: SubmitTopicMessageParameters
    ) -> ToolResponse:
        return await submit_topic_message(client, context, params)
