from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from hedera_agent_toolkit.shared.configuration import Context

if TYPE_CHECKING:
    from hedera_agent_toolkit.shared.tool import Tool


@dataclass(frozen=True)
class Plugin:
    """A named group of tools, instantiated per context."""

    name: str
    tools: Callable[[Context], List["Tool"]]
    version: Optional[str] = None
    description: Optional[str] = None
