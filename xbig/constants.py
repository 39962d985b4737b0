"""Mathematical constants computed to a requested precision in bits."""

from __future__ import annotations

import math
from fractions import Fraction

from .floattype import MAX_PREC, BigFloat
from .floats import exp_float, new_float


def e(prec: int) -> BigFloat:
    """Euler's number with ``prec`` bits of precision."""
    return exp_float(new_float(1).with_prec(prec))


def pi(prec: int) -> BigFloat:
    """π with ``prec`` bits, by the Gauss-Legendre iteration.

    Raises ValueError when ``prec`` is not positive or not below MAX_PREC.
    """
    if prec <= 0:
        raise ValueError("precision must be > 0")
    if prec >= MAX_PREC:
        raise ValueError("precision is too large")
    work = min(prec + int(math.log2(prec)) + 32, MAX_PREC)
    one = BigFloat.from_int(1, work)
    two = BigFloat.from_int(2, work)
    four = BigFloat.from_int(4, work)
    half = BigFloat.from_fraction(Fraction(1, 2), work)

    a, b, t, p = one, half.sqrt(), one.quo(four), one
    for _ in range(int(math.log2(prec)) + 5):
        a_next = a.add(b).mul(half)
        b_next = a.mul(b).sqrt()
        diff = a.sub(a_next)
        t = t.sub(p.mul(diff.mul(diff)))
        a, b, p = a_next, b_next, two.mul(p)

    total = a.add(b)
    return total.mul(total).quo(four.mul(t)).with_prec(prec)


def phi(prec: int) -> BigFloat:
    """The golden ratio with ``prec`` bits of precision."""
    if prec < 0:
        raise ValueError("precision must not be negative")
    work = prec + 4
    root = BigFloat.from_int(5, work).sqrt()
    value = root.add(BigFloat.from_int(1, work)).quo(BigFloat.from_int(2, work))
    return value.with_prec(prec)