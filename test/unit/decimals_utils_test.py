from decimal import Decimal

import pytest

from hedera_agent_toolkit.shared.errors import InvalidAmountError
from hedera_agent_toolkit.shared.hedera_utils.decimals_utils import (
    to_base_unit,
    to_display_unit,
    to_tinybars,
)


@pytest.mark.parametrize(
    "amount, decimals, expected",
    [
        (1.5, 2, 150),
        ("2.25", 2, 225),
        (10, 0, 10),
        (0, 6, 0),
        # digits below the smallest unit are truncated
        (1.239, 2, 123),
        (0.1, 18, 100_000_000_000_000_000),
    ],
)
def test_to_base_unit(amount, decimals, expected):
    assert to_base_unit(amount, decimals) == expected


def test_to_base_unit_keeps_float_precision():
    # 0.3 must not become 0.29999999999999998889...
    assert to_base_unit(0.3, 8) == 30_000_000


def test_to_tinybars():
    assert to_tinybars(1) == 100_000_000
    assert to_tinybars("0.00000001") == 1
    assert to_tinybars("0.000000001") == 0


@pytest.mark.parametrize("amount", [-1, "-0.5", "abc", float("nan"), float("inf"), True])
def test_to_base_unit_rejects_invalid_amounts(amount):
    with pytest.raises(InvalidAmountError):
        to_base_unit(amount, 2)


def test_negative_decimals_are_rejected():
    with pytest.raises(InvalidAmountError):
        to_base_unit(1, -1)
    with pytest.raises(InvalidAmountError):
        to_display_unit(1, -1)


def test_to_display_unit_is_exact():
    assert to_display_unit(150, 2) == Decimal("1.5")
    assert format(to_display_unit(1, 8), "f") == "0.00000001"
    assert to_display_unit("123456789012345678901234567890", 18) == Decimal(
        "123456789012.345678901234567890"
    )


@pytest.mark.parametrize("decimals", range(19))
def test_display_amount_round_trips(decimals):
    amount = Decimal("123456789.123456789012345678").quantize(
        Decimal(1).scaleb(-decimals)
    )

    assert to_display_unit(to_base_unit(amount, decimals), decimals) == amount
