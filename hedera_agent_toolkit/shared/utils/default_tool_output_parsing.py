"""Parsers turning a serialised ``ToolResponse`` back into a dictionary.

``HederaAgentAPI.run`` returns JSON strings; agent adapters use these parsers to
recover ``{"raw": ..., "humanMessage": ...}`` for display or chaining.
"""

import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _load(raw_output: str) -> Any:
    try:
        return json.loads(raw_output)
    except (TypeError, ValueError):
        logger.debug("Tool output is not JSON: %r", raw_output)
        return None


def transaction_tool_output_parser(raw_output: str) -> Dict[str, Any]:
    """Parse the output of a transaction tool (either strategy)."""
    parsed = _load(raw_output)
    if not isinstance(parsed, dict):
        return {"raw": {"error": raw_output}, "humanMessage": raw_output}

    if parsed.get("error"):
        return {
            "raw": {"error": parsed["error"]},
            "humanMessage": parsed.get("humanMessage", parsed["error"]),
        }

    # return-bytes mode carries the frozen transaction instead of receipt fields
    if "bytes" in parsed:
        return {
            "raw": {"bytes": parsed["bytes"]},
            "humanMessage": parsed.get("humanMessage", ""),
        }

    raw = dict(parsed.get("raw") or {})
    if parsed.get("extra"):
        raw.update(parsed["extra"])
    return {"raw": raw, "humanMessage": parsed.get("humanMessage", "")}


def untyped_query_output_parser(raw_output: str) -> Dict[str, Any]:
    """Parse the output of a query tool."""
    parsed = _load(raw_output)
    if not isinstance(parsed, dict):
        return {"raw": {"error": raw_output}, "humanMessage": raw_output}

    if parsed.get("error"):
        return {
            "raw": {"error": parsed["error"]},
            "humanMessage": parsed.get("humanMessage", parsed["error"]),
        }

    return {
        "raw": parsed.get("raw") or {},
        "humanMessage": parsed.get("humanMessage", ""),
    }
