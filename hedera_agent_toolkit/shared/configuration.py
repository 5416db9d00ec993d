from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AgentMode(str, Enum):
    """How built transactions leave the toolkit."""

    AUTONOMOUS = "autonomous"
    RETURN_BYTES = "returnBytes"


class Context(BaseModel):
    """Per-session settings passed explicitly to every tool call.

    Attributes:
        mode: ``AUTONOMOUS`` signs and submits with the client operator,
            ``RETURN_BYTES`` freezes the transaction and hands back unsigned bytes.
        account_id: Account the agent acts for. Used as the default account for
            parameters and to generate transaction ids in return-bytes mode.
        account_public_key: Optional public key of ``account_id``.
        mirrornode_service: Optional mirror node service overriding the default
            HTTP implementation (mostly useful in tests).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    mode: AgentMode = AgentMode.AUTONOMOUS
    account_id: Optional[str] = None
    account_public_key: Optional[str] = None
    mirrornode_service: Optional[Any] = None


class Configuration(BaseModel):
    """Toolkit configuration.

    ``tools`` lists tool methods to expose; when empty every tool of the selected
    plugins is exposed. ``plugins`` defaults to all core plugins.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tools: Optional[List[str]] = None
    plugins: Optional[List[Any]] = None
    context: Context = Field(default_factory=Context)
