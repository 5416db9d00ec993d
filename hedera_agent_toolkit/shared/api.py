from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import InvalidParametersError
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.tool import Tool

logger = logging.getLogger(__name__)


class HederaAgentAPI:
    """Framework-neutral entry point: run a tool by method name.

    Agent adapters call ``run`` with the method chosen by the model and the raw
    arguments it produced; the result is always a JSON string.
    """

    def __init__(
        self,
        client: Client,
        context: Optional[Context] = None,
        tools: Optional[List[Tool]] = None,
    ):
        self.client = client
        self.context = context or Context()
        self.tools: Dict[str, Tool] = {tool.method: tool for tool in tools or []}

    def get_tool(self, method: str) -> Tool:
        tool = self.tools.get(method)
        if tool is None:
            raise InvalidParametersError(f"Invalid method {method}")
        return tool

    async def run(self, method: str, params: Any) -> str:
        """Validate ``params`` against the tool schema and execute the tool.

        Params that do not match the schema come back as an error payload, like
        any other tool failure.

        Raises:
            InvalidParametersError: If ``method`` is unknown.
        """
        tool = self.get_tool(method)
        try:
            parsed_params = HederaParameterNormaliser.parse_params_with_schema(
                params or {}, tool.parameters
            )
        except InvalidParametersError as e:
            message: str = str(e)
            logger.warning("Rejected params for %s: %s", method, message)
            return ToolResponse(human_message=message, error=message).to_json()
        logger.debug("Running %s", method)
        result: ToolResponse = await tool.execute(
            self.client, self.context, parsed_params
        )
        return result.to_json()
