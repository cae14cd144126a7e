import pytest

from hardclaw.amount import (
    MAX_SUPPLY,
    ONE_HCLAW,
    U128_MAX,
    AmountOverflowError,
    HclawAmount,
    InvalidAmountFormatError,
    TooManyDecimalsError,
)


def test_from_hclaw():
    amount = HclawAmount.from_hclaw(100)
    assert amount.whole_hclaw() == 100
    assert amount.raw == 100 * ONE_HCLAW


def test_from_decimal_str():
    amount = HclawAmount.from_decimal_str("1.5")
    assert amount.raw == ONE_HCLAW + ONE_HCLAW // 2

    amount = HclawAmount.from_decimal_str("0.001")
    assert amount.raw == ONE_HCLAW // 1000


def test_to_decimal_string():
    assert HclawAmount.from_hclaw(100).to_decimal_string() == "100.0"
    assert HclawAmount.from_raw(ONE_HCLAW + ONE_HCLAW // 2).to_decimal_string() == "1.5"


def test_percentage():
    amount = HclawAmount.from_hclaw(100)
    assert amount.percentage(95).whole_hclaw() == 95
    assert amount.percentage(4).whole_hclaw() == 4
    assert amount.percentage(1).whole_hclaw() == 1


def test_arithmetic():
    a = HclawAmount.from_hclaw(100)
    b = HclawAmount.from_hclaw(50)
    assert (a + b).whole_hclaw() == 150
    assert (a - b).whole_hclaw() == 50
    assert (a * 2).whole_hclaw() == 200
    assert (a // 2).whole_hclaw() == 50


def test_checked_arithmetic():
    a = HclawAmount.from_hclaw(100)
    b = HclawAmount.from_hclaw(200)
    assert a.checked_sub(b) is None
    assert a.checked_add(b) == HclawAmount.from_hclaw(300)


def test_checked_div_by_zero_is_none():
    assert HclawAmount.from_hclaw(1).checked_div(0) is None


def test_floordiv_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        HclawAmount.from_hclaw(1) // 0


def test_sub_underflow_raises():
    with pytest.raises(AmountOverflowError):
        HclawAmount.from_hclaw(1) - HclawAmount.from_hclaw(2)


def test_add_overflow_raises():
    with pytest.raises(AmountOverflowError):
        HclawAmount.from_raw(U128_MAX) + HclawAmount.from_raw(1)


def test_checked_mul_overflow_is_none():
    assert HclawAmount.from_raw(U128_MAX).checked_mul(2) is None


def test_saturating_add_caps_at_max_supply():
    big = HclawAmount.from_raw(MAX_SUPPLY)
    assert big.saturating_add(HclawAmount.from_hclaw(5)).raw == MAX_SUPPLY


def test_saturating_sub_floors_at_zero():
    result = HclawAmount.from_hclaw(1).saturating_sub(HclawAmount.from_hclaw(5))
    assert result.is_zero()
    assert result == HclawAmount.ZERO


@pytest.mark.parametrize("text", ["1.2.3", "abc", "", "-1", "1.x", " 1"])
def test_invalid_format(text):
    with pytest.raises(InvalidAmountFormatError):
        HclawAmount.from_decimal_str(text)


def test_too_many_decimals():
    with pytest.raises(TooManyDecimalsError):
        HclawAmount.from_decimal_str("0." + "1" * 19)


def test_decimal_overflow():
    with pytest.raises(AmountOverflowError):
        HclawAmount.from_decimal_str(str(U128_MAX))


@pytest.mark.parametrize("text", ["0.0", "1.5", "0.001", "123.000000000000000001"])
def test_decimal_round_trip(text):
    assert HclawAmount.from_decimal_str(text).to_decimal_string() == text


def test_display_and_repr():
    amount = HclawAmount.from_decimal_str("1.5")
    assert str(amount) == "1.5 HCLAW"
    assert repr(amount) == "HclawAmount(1.5)"


def test_ordering():
    assert HclawAmount.from_raw(1) < HclawAmount.from_hclaw(1)
    assert max(HclawAmount.from_hclaw(3), HclawAmount.from_hclaw(7)).whole_hclaw() == 7


def test_out_of_range_raw_rejected():
    with pytest.raises(ValueError):
        HclawAmount.from_raw(-1)