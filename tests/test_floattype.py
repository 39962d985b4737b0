import math
from fractions import Fraction

import pytest

from xbig.floattype import Accuracy, BigFloat, RoundingMode


def test_from_int_round_trip_and_precision():
    assert BigFloat.from_int(7).to_int() == 7
    assert BigFloat.from_int(7).prec == 64
    big = 1 << 100
    value = BigFloat.from_int(big)
    assert value.prec == 101
    assert value.to_int() == big


def test_from_float_round_trip():
    value = BigFloat.from_float(0.1)
    assert value.prec == 53
    assert value.to_float() == 0.1
    assert value.acc is Accuracy.EXACT


def test_from_float_rejects_nan():
    with pytest.raises(ValueError):
        BigFloat.from_float(math.nan)


def test_negative_zero_is_kept():
    value = BigFloat.from_float(-0.0)
    assert math.copysign(1.0, value.to_float()) == -1.0
    assert value.cmp(0) == 0


def test_from_fraction_matches_float_rounding():
    third = Fraction(1, 3)
    assert BigFloat.from_fraction(third, 53).to_float() == 1 / 3


def test_rounding_accuracy_is_consistent():
    third = Fraction(1, 3)
    value = BigFloat.from_fraction(third, 10)
    got = value.to_fraction()
    assert value.acc is not Accuracy.EXACT
    if value.acc is Accuracy.BELOW:
        assert got < third
    else:
        assert got > third


def test_parse_round_trips():
    assert BigFloat.parse("1.5").to_fraction() == Fraction(3, 2)
    assert BigFloat.parse("1e3").to_int() == 1000
    assert BigFloat.parse("0x1.8p1").to_fraction() == Fraction(3)
    assert BigFloat.parse("-Inf").to_float() == -math.inf


@pytest.mark.parametrize("text", ["", "abc", "1.2.3", "0x", "1e", "0b102"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        BigFloat.parse(text)


def test_repr_parses_back():
    value = BigFloat.from_float(-0.375)
    text = repr(value).split("'")[1]
    assert BigFloat.parse(text).cmp(value) == 0


def test_add_sub_are_inverse_for_exact_values():
    a = BigFloat.from_float(1.25)
    b = BigFloat.from_float(3.5)
    assert a.add(b).sub(b).cmp(a) == 0
    assert (a + b).to_float() == 1.25 + 3.5


def test_exact_cancellation_sign_depends_on_mode():
    one = BigFloat.from_int(1)
    assert one.sub(one).neg is False
    assert one.with_mode(RoundingMode.TO_NEGATIVE_INF).sub(one).neg is True


def test_directed_rounding_brackets_value():
    three = BigFloat.from_int(3)
    down = three.with_mode(RoundingMode.TO_ZERO).with_prec(1)
    up = three.with_mode(RoundingMode.AWAY_FROM_ZERO).with_prec(1)
    assert down.cmp(three) == -1
    assert up.cmp(three) == 1
    assert down.acc is Accuracy.BELOW
    assert up.acc is Accuracy.ABOVE


def test_with_prec_zero_gives_zero():
    value = BigFloat.from_int(-5).with_prec(0)
    assert value.is_int()
    assert value.cmp(0) == 0


def test_sqrt_matches_math():
    assert BigFloat.from_int(2, 53).sqrt().to_float() == math.sqrt(2)
    assert BigFloat.from_int(49).sqrt().to_int() == 7


def test_sqrt_negative_raises():
    with pytest.raises(ValueError):
        BigFloat.from_int(-4).sqrt()


def test_division_special_cases():
    one = BigFloat.from_int(1)
    zero = BigFloat.from_int(0)
    assert one.quo(zero).to_float() == math.inf
    with pytest.raises(ValueError):
        zero.quo(zero)
    with pytest.raises(ValueError):
        BigFloat.inf(False).sub(BigFloat.inf(False))
    with pytest.raises(ValueError):
        BigFloat.inf(True).mul(zero)


def test_quo_then_mul_recovers_dividend():
    a = BigFloat.from_int(10)
    b = BigFloat.from_int(4)
    assert a.quo(b).mul(b).cmp(a) == 0


def test_ldexp_and_to_int():
    assert BigFloat.from_int(5).ldexp(3).to_int() == 5 << 3
    assert BigFloat.from_float(-2.5).to_int() == int(-2.5)
    assert not BigFloat.from_float(2.5).is_int()


def test_conversions_of_infinity():
    inf = BigFloat.inf(False)
    with pytest.raises(OverflowError):
        inf.to_int()
    with pytest.raises(OverflowError):
        inf.to_fraction()
    assert inf.cmp(BigFloat.from_int(1 << 200)) == 1


def test_to_float_overflow_gives_infinity():
    assert BigFloat.from_int(1 << 2000).to_float() == math.inf
    assert BigFloat.from_int(-(1 << 2000)).to_float() == -math.inf


def test_abs_and_neg():
    value = BigFloat.from_float(-1.5)
    assert value.abs().to_float() == 1.5
    assert value.neg().to_float() == 1.5