from hedera_agent_toolkit.shared.plugin import Plugin
from .create_topic import CreateTopicTool, CREATE_TOPIC_TOOL
from .submit_topic_message import SubmitTopicMessageTool, SUBMIT_TOPIC_MESSAGE_TOOL

core_consensus_plugin = Plugin(
    name="core-consensus-plugin",
    version="1.0.0",
    description="A plugin for the Hedera Consensus Service",
    tools=lambda context: [
        CreateTopicTool(context),
        SubmitTopicMessageTool(context),
    ],
)

core_consensus_plugin_tool_names = {
    "CREATE_TOPIC_TOOL": CREATE_TOPIC_TOOL,
    "SUBMIT_TOPIC_MESSAGE_TOOL": SUBMIT_TOPIC_MESSAGE_TOOL,
}

__all__ = [
    "core_consensus_plugin",
    "core_consensus_plugin_tool_names",
    "CreateTopicTool",
    "SubmitTopicMessageTool",
]
