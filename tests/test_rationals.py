import math
from fractions import Fraction

import pytest

from xbig.floattype import BigFloat
from xbig.integers import exp_int
from xbig.rationals import (
    abs_rat,
    add_rat,
    cmp_rat,
    fma_rat,
    inv_rat,
    mul_rat,
    neg_rat,
    new_rat,
    new_rat_frac,
    quo_rat,
    sub_rat,
)


def test_complex_expression():
    q = quo_rat(mul_rat(-3, math.pi), exp_int(2, 128))
    assert q == Fraction(-2652839157010665, 2**176)


def test_complex_strings():
    assert mul_rat("5.7", exp_int("2", "123")) == Fraction(57 * 2**122, 5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3", Fraction(3)),
        ("-3/4", Fraction(-3, 4)),
        ("0x10/0b11", Fraction(16, 3)),
        ("010/3", Fraction(8, 3)),
        ("010", Fraction(10)),
        ("1.5", Fraction(3, 2)),
        ("1.5e2", Fraction(150)),
        ("-2.5e-1", Fraction(-1, 4)),
        ("0x1.8p1", Fraction(3)),
        ("0b101", Fraction(5)),
        ("1p-2", Fraction(1, 4)),
        ("0.125", Fraction(1, 8)),
    ],
)
def test_parse_strings(text, expected):
    assert new_rat(text) == expected


@pytest.mark.parametrize(
    "text", ["", "abc", "1/0", "1/-2", "1/+2", "Inf", "1/", "/2", " 1", "1.2.3", "1/2.5"]
)
def test_invalid_strings(text):
    with pytest.raises(ValueError):
        new_rat(text)


def test_float_is_exact():
    assert new_rat(0.1) == Fraction(3602879701896397, 36028797018963968)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_float_rejected(value):
    with pytest.raises(ValueError):
        new_rat(value)


def test_bigfloat_conversion():
    assert new_rat(BigFloat.parse("0.375")) == Fraction(3, 8)
    with pytest.raises(ValueError):
        new_rat(BigFloat.inf(True))


@pytest.mark.parametrize("value", [True, [1], None])
def test_unsupported_types(value):
    with pytest.raises(TypeError):
        new_rat(value)


def test_new_rat_frac():
    assert new_rat_frac(6, 4) == Fraction(3, 2)
    assert new_rat_frac("1/2", 0.25) == 2
    assert new_rat_frac(BigFloat.from_int(3), Fraction(1, 3)) == 9
    with pytest.raises(ZeroDivisionError):
        new_rat_frac(1, 0)


def test_basic_arithmetic():
    assert add_rat("1/3", "1/6") == Fraction(1, 2)
    assert sub_rat(1, "1/4") == Fraction(3, 4)
    assert mul_rat(Fraction(2, 3), 0.5) == Fraction(1, 3)
    assert quo_rat(1, 3) == Fraction(1, 3)
    with pytest.raises(ZeroDivisionError):
        quo_rat(1, 0)


def test_abs_neg_inv():
    assert abs_rat("-5/2") == Fraction(5, 2)
    assert neg_rat("5/2") == Fraction(-5, 2)
    assert inv_rat("-2/7") == Fraction(-7, 2)
    with pytest.raises(ZeroDivisionError):
        inv_rat(0)


def test_cmp():
    assert cmp_rat("1/3", 0.5) == -1
    assert cmp_rat("0.5", Fraction(1, 2)) == 0
    assert cmp_rat(2, "3/2") == 1


def test_fma():
    assert fma_rat("1/2", 4, 1) == 3
    assert fma_rat(0.1, 10, -1) == Fraction(1, 18014398509481984)