from hedera_agent_toolkit.shared.api import HederaAgentAPI
from hedera_agent_toolkit.shared.configuration import AgentMode, Configuration, Context
from hedera_agent_toolkit.shared.plugin import Plugin
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.tool_discovery import ToolDiscovery

__version__ = "0.1.0"

__all__ = [
    "AgentMode",
    "Configuration",
    "Context",
    "HederaAgentAPI",
    "Plugin",
    "Tool",
    "ToolDiscovery",
]
