import math
from fractions import Fraction

import pytest

from xbig.constants import e, phi, pi

PI_DIGITS = "3.141592653589793238462643383279502884197169399375105820974944592307816406286"
E_DIGITS = "2.71828182845904523536028747135266249775724709369995"
PHI_DIGITS = "1.61803398874989484820458683436563811772030917980576"


def test_constants_match_float():
    assert e(64).to_float() == math.e
    assert pi(64).to_float() == math.pi
    assert phi(64).to_float() == 1.618033988749895


@pytest.mark.parametrize("func", [e, pi, phi])
def test_requested_precision(func):
    assert func(64).prec == 64
    assert func(150).prec == 150


def test_pi_high_precision():
    value = pi(200).to_fraction()
    assert abs(value - Fraction(PI_DIGITS)) < Fraction(1, 2**190)


def test_e_high_precision():
    value = e(150).to_fraction()
    assert abs(value - Fraction(E_DIGITS)) < Fraction(1, 2**145)


def test_phi_high_precision():
    value = phi(150).to_fraction()
    assert abs(value - Fraction(PHI_DIGITS)) < Fraction(1, 2**145)


def test_pi_one_bit():
    assert pi(1) == 4


@pytest.mark.parametrize("prec", [0, -1, 2**32 - 1, 2**32])
def test_pi_invalid_precision(prec):
    with pytest.raises(ValueError):
        pi(prec)


def test_phi_negative_precision():
    with pytest.raises(ValueError):
        phi(-1)