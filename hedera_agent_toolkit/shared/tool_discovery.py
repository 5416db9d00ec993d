from __future__ import annotations

import logging
from typing import List, Optional

from hedera_agent_toolkit.shared.configuration import Configuration, Context
from hedera_agent_toolkit.shared.errors import InvalidParametersError
from hedera_agent_toolkit.shared.plugin import Plugin
from hedera_agent_toolkit.shared.tool import Tool

logger = logging.getLogger(__name__)


def default_plugins() -> List[Plugin]:
    from hedera_agent_toolkit.plugins import (
        core_account_plugin,
        core_consensus_plugin,
        core_evm_plugin,
        core_queries_plugin,
        core_token_plugin,
    )

    return [
        core_account_plugin,
        core_token_plugin,
        core_consensus_plugin,
        core_evm_plugin,
        core_queries_plugin,
    ]


class ToolDiscovery:
    """Collects the tools exposed by a set of plugins."""

    def __init__(self, plugins: Optional[List[Plugin]] = None):
        self.plugins: List[Plugin] = plugins if plugins else default_plugins()

    def get_all_tools(
        self, context: Context, tool_methods: Optional[List[str]] = None
    ) -> List[Tool]:
        """Instantiate plugin tools for ``context``.

        Args:
            context: Runtime context passed to each plugin's tool factory.
            tool_methods: When non-empty, only tools with these methods are kept.

        Returns:
            The tools in plugin order.

        Raises:
            InvalidParametersError: If two plugins expose the same method, or a
                requested method is not provided by any plugin.
        """
        tools: List[Tool] = []
        seen: set = set()

        for plugin in self.plugins:
            for tool in plugin.tools(context):
                if tool.method in seen:
                    raise InvalidParametersError(
                        f"Tool {tool.method} is provided by more than one plugin"
                    )
                seen.add(tool.method)
                if tool_methods and tool.method not in tool_methods:
                    continue
                tools.append(tool)

        if tool_methods:
            missing = [method for method in tool_methods if method not in seen]
            if missing:
                raise InvalidParametersError(f"Unknown tools: {', '.join(missing)}")

        logger.debug(
            "Discovered %d tools from %d plugins", len(tools), len(self.plugins)
        )
        return tools

    @staticmethod
    def create_from_configuration(configuration: Configuration) -> List[Tool]:
        discovery = ToolDiscovery(configuration.plugins)
        return discovery.get_all_tools(configuration.context, configuration.tools)
