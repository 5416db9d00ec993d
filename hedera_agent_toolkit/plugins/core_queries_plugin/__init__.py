from hedera_agent_toolkit.shared.plugin import Plugin
from .get_account_query import GetAccountQueryTool, GET_ACCOUNT_QUERY_TOOL
from .get_account_token_balances_query import (
    GetAccountTokenBalancesQueryTool,
    GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
)
from .get_hbar_balance_query import GetHbarBalanceQueryTool, GET_HBAR_BALANCE_QUERY_TOOL
from .get_token_info_query import GetTokenInfoQueryTool, GET_TOKEN_INFO_QUERY_TOOL
from .get_topic_messages_query import (
    GetTopicMessagesQueryTool,
    GET_TOPIC_MESSAGES_QUERY_TOOL,
)
from .get_transaction_details_query import (
    GetTransactionDetailsQueryTool,
    GET_TRANSACTION_DETAILS_QUERY_TOOL,
)

core_queries_plugin = Plugin(
    name="core-queries-plugin",
    version="1.0.0",
    description="A plugin for mirror node queries",
    tools=lambda context: [
        GetAccountQueryTool(context),
        GetHbarBalanceQueryTool(context),
        GetAccountTokenBalancesQueryTool(context),
        GetTokenInfoQueryTool(context),
        GetTopicMessagesQueryTool(context),
        GetTransactionDetailsQueryTool(context),
    ],
)

core_queries_plugin_tool_names = {
    "GET_ACCOUNT_QUERY_TOOL": GET_ACCOUNT_QUERY_TOOL,
    "GET_HBAR_BALANCE_QUERY_TOOL": GET_HBAR_BALANCE_QUERY_TOOL,
    "GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL": GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
    "GET_TOKEN_INFO_QUERY_TOOL": GET_TOKEN_INFO_QUERY_TOOL,
    "GET_TOPIC_MESSAGES_QUERY_TOOL": GET_TOPIC_MESSAGES_QUERY_TOOL,
    "GET_TRANSACTION_DETAILS_QUERY_TOOL": GET_TRANSACTION_DETAILS_QUERY_TOOL,
}

__all__ = [
    "core_queries_plugin",
    "core_queries_plugin_tool_names",
    "GetAccountQueryTool",
    "GetAccountTokenBalancesQueryTool",
    "GetHbarBalanceQueryTool",
    "GetTokenInfoQueryTool",
    "GetTopicMessagesQueryTool",
    "GetTransactionDetailsQueryTool",
]
