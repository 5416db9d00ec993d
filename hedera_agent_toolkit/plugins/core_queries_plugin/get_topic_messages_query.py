"""Utilities for reading Hedera Consensus Service topic messages via the toolkit.

This module exposes:
- get_topic_messages_query_prompt: Generate a prompt/description for the topic messages tool.
- get_topic_messages_query: Fetch and decode messages from the mirror node.
- GetTopicMessagesQueryTool: Tool wrapper exposing the query to the runtime.
"""

from __future__ import annotations

import base64
import binascii
from typing import List

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.types import (
    TopicMessage,
    TopicMessagesQueryParams,
)
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import TopicMessagesQueryParameters
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def get_topic_messages_query_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will return the messages for a given Hedera topic, newest first.

Parameters:
- topic_id (str, required): The topic ID to query
- start_time (str, optional): ISO 8601 timestamp; only messages at or after this time are returned
- end_time (str, optional): ISO 8601 timestamp; only messages at or before this time are returned
- limit (int, optional): The maximum number of messages to return. Defaults to 100
{usage_instructions}
"""


def decode_message(message: str) -> str:
    """Decode a base64 mirror node message; undecodable payloads are returned as is."""
    try:
        return base64.b64decode(message, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return message


def post_process(messages: List[TopicMessage], topic_id: str) -> str:
    if not messages:
        return f"No messages found for topic {topic_id}."

    lines = [f"Messages for topic {topic_id}:"]
    for message in messages:
        lines.append(
            f"{message.get('consensus_timestamp')} "
            f"(#{message.get('sequence_number')}): {message.get('message')}"
        )
    return "\n".join(lines)


async def get_topic_messages_query(
    client: Client,
    context: Context,
    params: TopicMessagesQueryParameters,
) -> ToolResponse:
    """Fetch topic messages within an optional time window.

    Args:
        client: Hedera client; only used to resolve the network.
        context: Runtime context.
        params: Topic id, optional ISO 8601 bounds and a limit.

    Returns:
        A ToolResponse with the decoded messages, or the failure message.
    """
    try:
        normalised_params = HederaParameterNormaliser.normalise_get_topic_messages(
            params
        )

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )
        response = await mirrornode_service.get_topic_messages(
            TopicMessagesQueryParams(
                topic_id=normalised_params.topic_id,
                lower_timestamp=normalised_params.lower_timestamp,
                upper_timestamp=normalised_params.upper_timestamp,
                limit=normalised_params.limit,
            )
        )

        messages: List[TopicMessage] = [
            {**message, "message": decode_message(message.get("message", ""))}
            for message in response["messages"]
        ]

        return ToolResponse(
            human_message=post_process(messages, normalised_params.topic_id),
            extra={"topicId": normalised_params.topic_id, "messages": messages},
        )

    except Exception as e:
        message = f"Failed to get topic messages: {str(e)}"
        print("[get_topic_messages_query_tool]", message)
        return ToolResponse(human_message=message, error=message)


GET_TOPIC_MESSAGES_QUERY_TOOL: str = "get_topic_messages_query_tool"


class GetTopicMessagesQueryTool(Tool):
    """Tool wrapper that exposes the topic messages query to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = GET_TOPIC_MESSAGES_QUERY_TOOL
        self.name: str = "Get Topic Messages"
        self.description: str = get_topic_messages_query_prompt(context)
        self.parameters: type[TopicMessagesQueryParameters] = (
            TopicMessagesQueryParameters
        )
        self.output_parser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: TopicMessagesQueryParameters
    ) -> ToolResponse:
        return await get_topic_messages_query(client, context, params)
