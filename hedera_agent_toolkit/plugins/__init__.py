__all__ = [
    "core_account_plugin",
    "core_account_plugin_tool_names",
    "core_token_plugin",
    "core_token_plugin_tool_names",
    "core_consensus_plugin",
    "core_consensus_plugin_tool_names",
    "core_evm_plugin",
    "core_evm_plugin_tool_names",
    "core_queries_plugin",
    "core_queries_plugin_tool_names",
]

from hedera_agent_toolkit.plugins.core_account_plugin import (
    core_account_plugin,
    core_account_plugin_tool_names,
)

from hedera_agent_toolkit.plugins.core_consensus_plugin import (
    core_consensus_plugin,
    core_consensus_plugin_tool_names,
)

from hedera_agent_toolkit.plugins.core_evm_plugin import (
    core_evm_plugin,
    core_evm_plugin_tool_names,
)

from hedera_agent_toolkit.plugins.core_queries_plugin import (
    core_queries_plugin,
    core_queries_plugin_tool_names,
)

from hedera_agent_toolkit.plugins.core_token_plugin import (
    core_token_plugin,
    core_token_plugin_tool_names,
)
