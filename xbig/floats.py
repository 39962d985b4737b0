"""Arbitrary-precision binary floating-point arithmetic on mixed inputs.

Every function accepts ints, floats, fractions, numeric strings and BigFloat
values, leaves its inputs unchanged and returns a new BigFloat. Ints take a
precision of at least 64 bits, floats 53 bits, fractions enough bits for their
numerator and denominator, and strings 64 bits.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Union

import mpmath

from .floattype import BigFloat, RoundingMode, _Form
from .rationals import fma_rat

FloatLike = Union[BigFloat, int, float, Fraction, str]

_GUARD_BITS = 64
_NEAREST = RoundingMode.TO_NEAREST_EVEN


def _operand(x: FloatLike) -> BigFloat:
    if isinstance(x, BigFloat):
        return x
    if isinstance(x, bool):
        raise TypeError("bool is not accepted as a number")
    if isinstance(x, int):
        return BigFloat.from_int(x)
    if isinstance(x, float):
        return BigFloat.from_float(x)
    if isinstance(x, Fraction):
        return BigFloat.from_fraction(x)
    if isinstance(x, str):
        return BigFloat.parse(x)
    raise TypeError(f"unsupported number: {type(x).__name__}")


def new_float(x: FloatLike) -> BigFloat:
    """Convert ``x`` to a BigFloat rounding to nearest even."""
    if isinstance(x, BigFloat):
        return x.with_mode(_NEAREST)
    return _operand(x)


def add_float(x: FloatLike, y: FloatLike) -> BigFloat:
    return new_float(x).add(_operand(y))


def sub_float(x: FloatLike, y: FloatLike) -> BigFloat:
    return new_float(x).sub(_operand(y))


def mul_float(x: FloatLike, y: FloatLike) -> BigFloat:
    return new_float(x).mul(_operand(y))


def quo_float(x: FloatLike, y: FloatLike) -> BigFloat:
    return new_float(x).quo(_operand(y))


def abs_float(x: FloatLike) -> BigFloat:
    return new_float(x).abs()


def neg_float(x: FloatLike) -> BigFloat:
    return new_float(x).neg()


def cmp_float(x: FloatLike, y: FloatLike) -> int:
    """Return -1, 0 or 1 as ``x`` is less than, equal to or greater than ``y``."""
    return _operand(x).cmp(_operand(y))


def sqrt_float(x: FloatLike) -> BigFloat:
    return new_float(x).sqrt()


def set_mode_float(x: FloatLike, mode: RoundingMode) -> BigFloat:
    return new_float(x).with_mode(mode)


def set_prec_float(x: FloatLike, prec: int) -> BigFloat:
    return new_float(x).with_prec(prec)


def set_mant_exp_float(x: FloatLike, exp: int) -> BigFloat:
    """Return ``x * 2**exp`` with the precision of ``x``."""
    return new_float(x).ldexp(exp)


def _to_mpf(v: BigFloat):
    """Exact conversion of a finite value; the working precision must suffice."""
    return mpmath.ldexp(mpmath.mpf(-v.mant if v.neg else v.mant), v.exp)


def _from_mpf(r, prec: int) -> BigFloat:
    if mpmath.isnan(r):
        raise ValueError("result is not a number")
    if mpmath.isinf(r):
        return BigFloat.inf(r < 0).with_prec(prec)
    if not r:
        return BigFloat.from_int(0, prec)
    bits = mpmath.mp.prec
    fraction, exponent = mpmath.frexp(abs(r))
    mant = int(mpmath.ldexp(fraction, bits))
    exact = BigFloat.from_int(-mant if r < 0 else mant).ldexp(exponent - bits)
    return exact.with_prec(prec)


def exp_float(x: FloatLike) -> BigFloat:
    """Return ``e**x`` with the precision of ``x``."""
    v = new_float(x)
    prec = v.prec
    if v.form is _Form.ZERO:
        return BigFloat.from_int(1, prec)
    if v.form is _Form.INF:
        return BigFloat.from_int(0, prec) if v.neg else BigFloat.inf(False).with_prec(prec)
    with mpmath.workprec(prec + _GUARD_BITS):
        return _from_mpf(mpmath.exp(_to_mpf(v)), prec)


def log_float(x: FloatLike) -> BigFloat:
    """Return the natural logarithm of ``x`` with its precision.

    Zero gives negative infinity; negative values raise ValueError.
    """
    v = new_float(x)
    prec = v.prec
    if v.form is _Form.ZERO:
        return BigFloat.inf(True).with_prec(prec)
    if v.neg:
        raise ValueError("logarithm of a negative number")
    if v.form is _Form.INF:
        return BigFloat.inf(False).with_prec(prec)
    with mpmath.workprec(prec + _GUARD_BITS):
        return _from_mpf(mpmath.log(_to_mpf(v)), prec)


def pow_float(x: FloatLike, y: FloatLike) -> BigFloat:
    """Return ``x**y`` with the precision of ``x``; a negative base raises ValueError."""
    base, power = new_float(x), _operand(y)
    prec = base.prec
    if base.neg and base.form is not _Form.ZERO:
        raise ValueError("power of a negative base")
    if power.form is _Form.ZERO:
        return BigFloat.from_int(1, prec)
    if base.form is _Form.ZERO:
        return BigFloat.inf(False).with_prec(prec) if power.neg else BigFloat.from_int(0, prec)
    if base.form is _Form.INF:
        return BigFloat.from_int(0, prec) if power.neg else BigFloat.inf(False).with_prec(prec)
    if power.form is _Form.INF:
        side = base.cmp(1)
        if side == 0:
            raise ValueError("one raised to an infinite power")
        if (side > 0) != power.neg:
            return BigFloat.inf(False).with_prec(prec)
        return BigFloat.from_int(0, prec)
    with mpmath.workprec(max(prec, power.prec) + _GUARD_BITS):
        return _from_mpf(mpmath.power(_to_mpf(base), _to_mpf(power)), prec)


def fma_float(x: FloatLike, y: FloatLike, z: FloatLike) -> BigFloat:
    """Return ``x * y + z`` at the largest precision of the three inputs."""
    prec = max(_operand(v).prec for v in (x, y, z))
    return new_float(fma_rat(x, y, z)).with_prec(prec)


def log_base_float(a: FloatLike, b: FloatLike) -> BigFloat:
    """Return the logarithm of ``a`` in base ``b``."""
    return quo_float(log_float(a), log_float(b))