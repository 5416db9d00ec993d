from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from hedera_agent_toolkit.shared.errors import InvalidAmountError

HBAR_DECIMALS: int = 8

Amount = Union[int, float, str, Decimal]


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Invalid amount: {amount}")
    try:
        # str() keeps floats at their shortest repr instead of the binary expansion
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError) as e:
        raise InvalidAmountError(f"Invalid amount: {amount}") from e
    if not value.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {amount}")
    return value


def _scale(value: Decimal, exponent: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 1)
        return value.scaleb(exponent)


def to_base_unit(amount: Amount, decimals: int) -> int:
    """Convert a display amount to integer base units.

    Digits below the smallest unit are truncated.

    Args:
        amount: Human readable amount, e.g. ``1.5``.
        decimals: Number of decimals of the token.

    Returns:
        int: The amount in base units, e.g. ``150`` for 2 decimals.

    Raises:
        InvalidAmountError: If the amount is negative, non-finite or not numeric,
            or if decimals is negative.
    """
    if decimals < 0:
        raise InvalidAmountError(f"Decimals must be non-negative, got {decimals}")
    value = _to_decimal(amount)
    if value < 0:
        raise InvalidAmountError(f"Amount must be non-negative: {amount}")
    return int(_scale(value, decimals).to_integral_value(rounding=ROUND_DOWN))


def to_display_unit(base_amount: Union[int, str, Decimal], decimals: int) -> Decimal:
    """Convert integer base units back to an exact display amount.

    Format the result with ``format(value, "f")`` to avoid scientific notation.
    """
    if decimals < 0:
        raise InvalidAmountError(f"Decimals must be non-negative, got {decimals}")
    return _scale(_to_decimal(base_amount), -decimals)


def to_tinybars(amount: Amount) -> int:
    """Convert an HBAR amount to tinybars."""
    return to_base_unit(amount, HBAR_DECIMALS)
