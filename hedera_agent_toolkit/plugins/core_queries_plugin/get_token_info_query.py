"""Utilities for querying Hedera token information via the toolkit.

This module exposes:
- get_token_info_query_prompt: Generate a prompt/description for the get token info query tool.
- get_token_info_query: Execute a token info query.
- GetTokenInfoQueryTool: Tool wrapper exposing the token info query operation to the runtime.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import InvalidAmountError
from hedera_agent_toolkit.shared.hedera_utils.decimals_utils import to_display_unit
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.types import TokenInfo
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import GetTokenInfoParameters
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator


def get_token_info_query_prompt(context: Context) -> str:
    """Generate a human-readable description of the get token info query tool.

    Args:
        context: Runtime context used for the context snippet.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will return the information for a given Hedera token. Make sure to return token symbol.

Parameters:
- token_id (str, required): The token ID to query for.
{usage_instructions}
"""


def format_supply(supply: Optional[str], decimals_str: Optional[str]) -> str:
    """Format a base-unit supply in display units with thousands separators.

    Args:
        supply: The raw supply string from the mirror node.
        decimals_str: The string representation of the token decimals.

    Returns:
        A formatted string representing the human-readable supply.
    """
    if not supply:
        return "N/A"

    if not decimals_str:
        return "the token has no supplied decimals"

    try:
        display = to_display_unit(int(supply), int(decimals_str))
    except (ValueError, InvalidAmountError):
        return supply

    formatted = f"{display:,f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted


def format_key(key: Optional[Dict[str, Any]]) -> str:
    if not key:
        return "Not Set"
    if key.get("_type"):
        return str(key.get("key", "Present"))
    return "Present"


def post_process(token_info: TokenInfo) -> str:
    """Produce a human-readable summary for a token info query result.

    Args:
        token_info: The token info returned by the mirror node.

    Returns:
        A formatted markdown message describing the token details.
    """
    token_id = token_info.get("token_id", "N/A")
    name = token_info.get("name", "N/A")
    symbol = token_info.get("symbol", "N/A")
    token_type = token_info.get("type", "N/A")

    decimals_str = str(token_info.get("decimals", "0"))
    max_supply = format_supply(token_info.get("max_supply"), decimals_str)
    total_supply = format_supply(token_info.get("total_supply"), decimals_str)

    supply_type = (
        "Infinite" if token_info.get("supply_type", "") == "INFINITE" else "Finite"
    )
    freeze_status = "Frozen" if token_info.get("freeze_default") else "Active"
    deleted_status = "Deleted" if token_info.get("deleted") else "Active"
    treasury = token_info.get("treasury_account_id", "N/A")

    keys = "\n".join(
        f"- {label}: {format_key(token_info.get(field))}"
        for label, field in (
            ("Admin Key", "admin_key"),
            ("Supply Key", "supply_key"),
            ("Wipe Key", "wipe_key"),
            ("KYC Key", "kyc_key"),
            ("Freeze Key", "freeze_key"),
            ("Fee Schedule Key", "fee_schedule_key"),
            ("Pause Key", "pause_key"),
            ("Metadata Key", "metadata_key"),
        )
    )

    memo_section = ""
    if token_info.get("memo"):
        memo_section = f"\n**Memo**: {token_info.get('memo')}"

    return f"""Here are the details for token **{token_id}**:

- **Token Name**: {name}
- **Token Symbol**: {symbol}
- **Token Type**: {token_type}
- **Decimals**: {decimals_str}
- **Max Supply**: {max_supply}
- **Current Supply**: {total_supply}
- **Supply Type**: {supply_type}
- **Treasury Account ID**: {treasury}
- **Status (Deleted/Active)**: {deleted_status}
- **Status (Frozen/Active)**: {freeze_status}

**Keys**:
{keys}
{memo_section}
"""


async def get_token_info_query(
    client: Client,
    context: Context,
    params: GetTokenInfoParameters,
) -> ToolResponse:
    try:
        parsed_params = HederaParameterNormaliser.normalise_get_token_info(params)

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )

        token_info: TokenInfo = await mirrornode_service.get_token_info(
            parsed_params.token_id
        )
        if not token_info.get("token_id"):
            token_info["token_id"] = parsed_params.token_id

        return ToolResponse(
            human_message=post_process(token_info),
            extra={"tokenInfo": token_info, "tokenId": parsed_params.token_id},
        )

    except Exception as e:
        message = f"Failed to get token info: {str(e)}"
        print("[get_token_info_query_tool]", message)
        return ToolResponse(
            human_message=message,
            error=message,
        )


GET_TOKEN_INFO_QUERY_TOOL: str = "get_token_info_query_tool"


class GetTokenInfoQueryTool(Tool):
    """Tool wrapper that exposes the token info query capability to the agent runtime."""

    def __init__(self, context: Context):
        self.method: str = GET_TOKEN_INFO_QUERY_TOOL
        self.name: str = "Get Token Info"
        self.description: str = get_token_info_query_prompt(context)
        self.parameters: type[GetTokenInfoParameters] = GetTokenInfoParameters
        self.output_parser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: GetTokenInfoParameters
    ) -> ToolResponse:
        return await get_token_info_query(client, context, params)
