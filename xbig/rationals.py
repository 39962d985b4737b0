"""Exact rational arithmetic on mixed inputs.

Every function accepts ints, floats, fractions, BigFloat values and numeric
strings, leaves its inputs unchanged and returns a new Fraction.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Union

from .floattype import BigFloat, _parse_literal
from .integers import new_int

RatLike = Union[int, float, Fraction, BigFloat, str]


def _parse(text: str) -> Fraction:
    """Parse ``a/b`` with integer literals, or a number with optional exponent."""
    error = ValueError(f"invalid rational literal: {text!r}")
    numerator, sep, denominator = text.partition("/")
    if sep:
        if not denominator or denominator[0] in "+-":
            raise error
        try:
            num, den = new_int(numerator), new_int(denominator)
        except ValueError:
            raise error from None
        if den == 0:
            raise error
        return Fraction(num, den)
    neg, value, exp2 = _parse_literal(text)
    if value is None:
        raise error
    value *= Fraction(2) ** exp2
    return -value if neg else value


def _to_fraction(x: RatLike) -> Fraction:
    if isinstance(x, bool):
        raise TypeError("bool is not accepted as a rational value")
    if isinstance(x, Fraction):
        return x
    if isinstance(x, int):
        return Fraction(x)
    if isinstance(x, float):
        if not math.isfinite(x):
            raise ValueError(f"{x!r} cannot be represented as a rational")
        return Fraction(x)
    if isinstance(x, BigFloat):
        try:
            return x.to_fraction()
        except OverflowError:
            raise ValueError("infinity cannot be represented as a rational") from None
    if isinstance(x, str):
        return _parse(x)
    raise TypeError(f"unsupported rational value: {type(x).__name__}")


def new_rat(x: RatLike) -> Fraction:
    """Convert ``x`` exactly to a Fraction.

    Strings are either ``a/b`` with integer literals (the denominator unsigned
    and nonzero) or a decimal, ``0x``, ``0b`` or ``0o`` number with an optional
    ``e`` or ``p`` exponent. Non-finite values raise ValueError.
    """
    return _to_fraction(x)


def new_rat_frac(x: RatLike, y: RatLike) -> Fraction:
    """Return ``x / y``; raise ZeroDivisionError when ``y`` is zero."""
    return _to_fraction(x) / _to_fraction(y)


def add_rat(x: RatLike, y: RatLike) -> Fraction:
    return _to_fraction(x) + _to_fraction(y)


def sub_rat(x: RatLike, y: RatLike) -> Fraction:
    return _to_fraction(x) - _to_fraction(y)


def mul_rat(x: RatLike, y: RatLike) -> Fraction:
    return _to_fraction(x) * _to_fraction(y)


def quo_rat(x: RatLike, y: RatLike) -> Fraction:
    return _to_fraction(x) / _to_fraction(y)


def abs_rat(x: RatLike) -> Fraction:
    return abs(_to_fraction(x))


def neg_rat(x: RatLike) -> Fraction:
    return -_to_fraction(x)


def inv_rat(x: RatLike) -> Fraction:
    """Return ``1 / x``; raise ZeroDivisionError when ``x`` is zero."""
    return 1 / _to_fraction(x)


def cmp_rat(x: RatLike, y: RatLike) -> int:
    """Return -1, 0 or 1 as ``x`` is less than, equal to or greater than ``y``."""
    diff = _to_fraction(x) - _to_fraction(y)
    return (diff > 0) - (diff < 0)


def fma_rat(x: RatLike, y: RatLike, z: RatLike) -> Fraction:
    """Return ``x * y + z`` exactly."""
    return _to_fraction(x) * _to_fraction(y) + _to_fraction(z)