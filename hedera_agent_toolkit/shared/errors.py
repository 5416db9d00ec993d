"""Exception hierarchy used across the toolkit.

Internal layers (resolver, normaliser, strategies, mirror node client) raise these;
only the tool ``execute`` boundary catches them and converts them into a
human-readable ``ToolResponse``.

Validation and context errors also subclass ``ValueError`` so callers that only
know about the builtin type keep working.
"""


class HederaAgentToolkitError(Exception):
    """Base exception for all toolkit errors."""


class InvalidParametersError(HederaAgentToolkitError, ValueError):
    """Malformed, missing or out-of-range tool input."""


class InvalidAmountError(InvalidParametersError):
    """An amount is negative, non-finite, not numeric or rounds to nothing."""


class InsufficientContextError(HederaAgentToolkitError, ValueError):
    """A required default could not be derived from the context or client."""


class UnresolvableAccountError(InsufficientContextError):
    """No account id was supplied and none could be resolved as a default."""


class MissingAccountContextError(InsufficientContextError):
    """Return-bytes mode needs ``context.account_id`` to stamp the transaction id."""


class NetworkError(HederaAgentToolkitError):
    """Submission or query failure reported by the network or the mirror node."""
