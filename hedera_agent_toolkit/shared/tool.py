from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Type

from hiero_sdk_python import Client
from pydantic import BaseModel

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.models import ToolResponse


class Tool(ABC):
    """A single operation exposed to an agent runtime.

    Subclasses set the metadata attributes in ``__init__`` and implement
    ``execute``, which must never raise: failures come back as a
    ``ToolResponse`` with ``error`` set.
    """

    method: str
    name: str
    description: str
    parameters: Type[BaseModel]
    output_parser: Callable[[str], Dict[str, Any]]

    @abstractmethod
    async def execute(
        self, client: Client, context: Context, params: Any
    ) -> ToolResponse: ...
