import logging
from decimal import Decimal

import pytest

from cashbox.domain.monetary.denominations import (
    FIFTY_DINARS,
    FIVE_DINARS,
    FIVE_PIASTERS,
    ONE_DINAR,
    ONE_PIASTER,
    TEN_DINARS,
    TEN_PIASTERS,
    TWENTY_DINARS,
    TWENTY_FIVE_PIASTERS,
    ZERO,
)
from cashbox.domain.monetary.errors import InsufficientChangeError
from cashbox.domain.monetary.money_amount import MoneyAmount

# Constants
ONE_HUNDRED_FIFTY = FIFTY_DINARS.times(2).plus(FIVE_DINARS.times(5)).plus(TWENTY_DINARS).plus(ONE_DINAR.times(5))
SEVENTY_THREE = FIFTY_DINARS.plus(TWENTY_DINARS).plus(ONE_DINAR.times(3))


def test_minus():
    with pytest.raises(InsufficientChangeError):
        ZERO.minus(ONE_DINAR)
    assert ZERO.minus(ZERO) == ZERO
    assert ONE_PIASTER.minus(ONE_PIASTER) == ZERO
    assert FIVE_DINARS.plus(ONE_DINAR).minus(FIVE_DINARS) == ONE_DINAR
    with pytest.raises(InsufficientChangeError):
        TEN_DINARS.minus(ONE_DINAR)
    assert ONE_DINAR.times(10).minus(FIVE_DINARS) == FIVE_DINARS


def test_minus_takes_largest_denominations_first():
    assert ONE_HUNDRED_FIFTY.amount() == Decimal("150.00")

    seventy_seven = ONE_HUNDRED_FIFTY.minus(SEVENTY_THREE)

    assert seventy_seven.amount() == Decimal("77.00")
    assert seventy_seven == TEN_DINARS.times(7).plus(ONE_DINAR.times(7))
    assert dict(seventy_seven.denominations) == {
        Decimal("1.00"): 2,
        Decimal("5.00"): 5,
        Decimal("20.00"): 0,
        Decimal("50.00"): 1,
    }


def test_minus_same_denomination():
    result = TEN_DINARS.times(5).minus(TEN_DINARS)

    assert result.amount() == Decimal("40.00")
    assert dict(result.denominations) == {Decimal("10.00"): 4}


def test_minus_pays_with_several_denominations():
    # Holding 1 x 5.00 and 8 x 1.00, a 10.00 deduction is paid as 5.00 + 5 x 1.00
    result = FIVE_DINARS.plus(ONE_DINAR.times(8)).minus(TEN_DINARS)

    assert result == ONE_DINAR.times(3)
    assert dict(result.denominations) == {Decimal("1.00"): 3, Decimal("5.00"): 0}


@pytest.mark.parametrize(
    "held, deducted",
    [
        # Smaller coins paid for a breakdown made of other coins
        (FIVE_DINARS.plus(TEN_PIASTERS.times(2)).plus(FIVE_PIASTERS).plus(ONE_PIASTER), FIVE_PIASTERS.times(5).plus(ONE_PIASTER)),
        (FIVE_DINARS.plus(FIVE_PIASTERS.times(5)).plus(ONE_PIASTER), TEN_PIASTERS.times(2).plus(FIVE_PIASTERS).plus(ONE_PIASTER)),
    ],
)
def test_minus_ignores_breakdown_of_deducted_amount(held, deducted):
    assert held.minus(deducted) == FIVE_DINARS


def test_minus_to_zero():
    assert TWENTY_FIVE_PIASTERS.minus(TEN_PIASTERS.plus(TEN_PIASTERS).plus(FIVE_PIASTERS)) == ZERO
    assert TEN_PIASTERS.plus(TEN_PIASTERS).plus(FIVE_PIASTERS).minus(TWENTY_FIVE_PIASTERS) == ZERO


def test_minus_keeps_denominations_of_self():
    held = FIFTY_DINARS + TEN_DINARS * 2 + ONE_DINAR * 4 + FIVE_PIASTERS
    result = held.minus(TEN_DINARS + ONE_DINAR)

    assert list(result.denominations.keys()) == list(held.denominations.keys())
    assert result.amount() == held.amount() - Decimal("11.00")


@pytest.mark.parametrize(
    "held, deducted",
    [
        (ONE_PIASTER.times(500), ONE_DINAR.times(3)),
        (FIFTY_DINARS.plus(TWENTY_DINARS.times(2)).plus(ONE_DINAR.times(9)), TEN_DINARS.times(7).plus(ONE_PIASTER.times(300))),
        (TWENTY_FIVE_PIASTERS.times(8).plus(FIVE_PIASTERS.times(3)), ONE_DINAR.plus(FIVE_PIASTERS.times(2))),
        (ZERO.plus(ONE_DINAR), ONE_DINAR),
    ],
)
def test_minus_result_value(held, deducted):
    assert held.minus(deducted).amount() == held.amount() - deducted.amount()


def test_minus_does_not_substitute():
    # Greedy takes the 0.25 coin first, then 0.05 is left and no 0.10 coin fits
    held = TWENTY_FIVE_PIASTERS.plus(TEN_PIASTERS.times(3))

    with pytest.raises(InsufficientChangeError):
        held.minus(TEN_PIASTERS.times(3))


def test_minus_more_than_held():
    with pytest.raises(InsufficientChangeError) as exc_info:
        FIVE_DINARS.plus(ONE_DINAR).minus(TEN_DINARS)

    assert exc_info.value.requested == Decimal("10.00")
    assert exc_info.value.available == Decimal("6.00")
    assert isinstance(exc_info.value, ValueError)


def test_minus_logs_rejection(caplog):
    with caplog.at_level(logging.DEBUG, logger="cashbox.domain.monetary.money_amount"):
        with pytest.raises(InsufficientChangeError):
            ZERO.minus(ONE_DINAR)

    assert "Rejected `minus` of 1.00 from 0.00" in caplog.text


def test_minus_rejects_other_types():
    with pytest.raises(TypeError):
        ONE_DINAR.minus(1)


def test_from_mapping_with_non_standard_denominations():
    held = MoneyAmount.from_mapping({"0.03": 4, "0.07": 1})

    assert held.minus(MoneyAmount("0.13", 1)) == MoneyAmount("0.06", 1)


def test_minus_at_maximum_total():
    held = MoneyAmount("0.01", 99_999_999_999_999_999)

    assert held.minus(held).is_zero()
    assert held.minus(ONE_DINAR).amount() == Decimal("999999999999998.99")
    with pytest.raises(InsufficientChangeError):
        ONE_PIASTER.minus(held)


def test_minus_with_finest_denomination():
    held = MoneyAmount("0.000000000000000001", 10**18)

    assert held.minus(ONE_DINAR).is_zero()
