from .configuration import AgentMode, Configuration, Context
from .errors import (
    HederaAgentToolkitError,
    InsufficientContextError,
    InvalidAmountError,
    InvalidParametersError,
    MissingAccountContextError,
    NetworkError,
    UnresolvableAccountError,
)
from .models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ReturnBytesToolResponse,
    ToolResponse,
)

__all__ = [
    "AgentMode",
    "Configuration",
    "Context",
    "HederaAgentToolkitError",
    "InsufficientContextError",
    "InvalidAmountError",
    "InvalidParametersError",
    "MissingAccountContextError",
    "NetworkError",
    "UnresolvableAccountError",
    "ExecutedTransactionToolResponse",
    "RawTransactionResponse",
    "ReturnBytesToolResponse",
    "ToolResponse",
]
