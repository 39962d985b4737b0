"""Binary floating-point numbers with arbitrary precision and rounding modes."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Optional, Union

MAX_PREC = (1 << 32) - 1


class RoundingMode(enum.IntEnum):
    TO_NEAREST_EVEN = 0
    TO_NEAREST_AWAY = 1
    TO_ZERO = 2
    AWAY_FROM_ZERO = 3
    TO_NEGATIVE_INF = 4
    TO_POSITIVE_INF = 5


class Accuracy(enum.IntEnum):
    """How a rounded result relates to the exact value."""

    BELOW = -1
    EXACT = 0
    ABOVE = 1


class _Form(enum.Enum):
    ZERO = 0
    FINITE = 1
    INF = 2


def _round(num: int, den: int, prec: int, mode: RoundingMode, negative: bool):
    """Round the positive value num/den to prec bits.

    Returns ``(mant, exp, acc)`` with ``mant * 2**exp`` the rounded magnitude.
    """
    shift = prec - (num.bit_length() - den.bit_length())
    while True:
        n = num << shift if shift >= 0 else num
        d = den if shift >= 0 else den << -shift
        q, r = divmod(n, d)
        if q >= 1 << prec:
            shift -= 1
        elif q < 1 << (prec - 1):
            shift += 1
        else:
            break
    if r == 0:
        return q, -shift, Accuracy.EXACT
    if mode is RoundingMode.TO_NEAREST_EVEN:
        up = 2 * r > d or (2 * r == d and q & 1 == 1)
    elif mode is RoundingMode.TO_NEAREST_AWAY:
        up = 2 * r >= d
    elif mode is RoundingMode.TO_ZERO:
        up = False
    elif mode is RoundingMode.AWAY_FROM_ZERO:
        up = True
    elif mode is RoundingMode.TO_NEGATIVE_INF:
        up = negative
    else:
        up = not negative
    if up:
        q += 1
        if q == 1 << prec:
            q >>= 1
            shift -= 1
    above = up != negative
    return q, -shift, Accuracy.ABOVE if above else Accuracy.BELOW


Number = Union["BigFloat", int, float, Fraction, str]


@dataclass(frozen=True, eq=False, repr=False)
class BigFloat:
    """An immutable value ``(-1)**neg * mant * 2**exp`` rounded to ``prec`` bits.

    Operations that have no defined result (such as ``inf - inf``) raise
    ValueError.
    """

    form: _Form
    neg: bool
    mant: int
    exp: int
    prec: int
    mode: RoundingMode = RoundingMode.TO_NEAREST_EVEN
    acc: Accuracy = Accuracy.EXACT

    # construction helpers

    @classmethod
    def _zero(cls, neg, prec, mode, acc=Accuracy.EXACT) -> BigFloat:
        return cls(_Form.ZERO, neg, 0, 0, prec, mode, acc)

    @classmethod
    def _infinity(cls, neg, prec, mode) -> BigFloat:
        return cls(_Form.INF, neg, 0, 0, prec, mode, Accuracy.EXACT)

    @classmethod
    def _finite(cls, neg, num, den, exp2, prec, mode) -> BigFloat:
        if num == 0:
            return cls._zero(neg, prec, mode)
        if prec == 0:
            acc = Accuracy.ABOVE if neg else Accuracy.BELOW
            return cls._zero(neg, prec, mode, acc)
        mant, exp, acc = _round(num, den, prec, mode, neg)
        trailing = (mant & -mant).bit_length() - 1
        return cls(_Form.FINITE, neg, mant >> trailing, exp + trailing + exp2, prec, mode, acc)

    @classmethod
    def from_int(cls, value: int, prec: Optional[int] = None) -> BigFloat:
        """Convert an int; the default precision is ``max(bit length, 64)``."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("an int is required")
        p = max(value.bit_length(), 64) if prec is None else _check_prec(prec)
        return cls._finite(value < 0, abs(value), 1, 0, p, RoundingMode.TO_NEAREST_EVEN)

    @classmethod
    def from_float(cls, value: float) -> BigFloat:
        """Convert a float exactly, with 53 bits of precision."""
        value = float(value)
        mode = RoundingMode.TO_NEAREST_EVEN
        if math.isnan(value):
            raise ValueError("NaN cannot be represented")
        neg = math.copysign(1.0, value) < 0
        if math.isinf(value):
            return cls._infinity(neg, 53, mode)
        if value == 0:
            return cls._zero(neg, 53, mode)
        num, den = abs(value).as_integer_ratio()
        return cls._finite(neg, num, den, 0, 53, mode)

    @classmethod
    def from_fraction(cls, value: Fraction, prec: Optional[int] = None) -> BigFloat:
        """Convert a rational; the default precision covers numerator and denominator."""
        value = Fraction(value)
        num, den = value.numerator, value.denominator
        p = max(abs(num).bit_length(), den.bit_length(), 64) if prec is None else _check_prec(prec)
        return cls._finite(num < 0, abs(num), den, 0, p, RoundingMode.TO_NEAREST_EVEN)

    @classmethod
    def parse(cls, text: str, prec: Optional[int] = None) -> BigFloat:
        """Parse a decimal, ``0x``, ``0b`` or ``0o`` literal with optional exponent.

        ``e`` scales by powers of ten, ``p`` by powers of two; ``Inf`` and
        ``inf`` are accepted. The default precision is 64 bits.
        """
        p = 64 if prec is None else _check_prec(prec)
        neg, value, exp2 = _parse_literal(text)
        if value is None:
            return cls._infinity(neg, p, RoundingMode.TO_NEAREST_EVEN)
        return cls._finite(
            neg, value.numerator, value.denominator, exp2, p, RoundingMode.TO_NEAREST_EVEN
        )

    @classmethod
    def inf(cls, sign: bool) -> BigFloat:
        """Return ``-Inf`` if ``sign`` is true, else ``+Inf``."""
        return cls._infinity(bool(sign), 0, RoundingMode.TO_NEAREST_EVEN)

    # precision and mode

    def with_prec(self, prec: int) -> BigFloat:
        """Round to ``prec`` bits with this value's mode; precision 0 gives zero."""
        if prec < 0:
            raise ValueError("precision must not be negative")
        prec = min(prec, MAX_PREC)
        if self.form is not _Form.FINITE:
            return replace(self, prec=prec, acc=Accuracy.EXACT)
        return self._rounded(self.neg, self.mant, 1, self.exp, prec, self.mode)

    def with_mode(self, mode: RoundingMode) -> BigFloat:
        return replace(self, mode=RoundingMode(mode), acc=Accuracy.EXACT)

    def _rounded(self, neg, num, den, exp2, prec, mode) -> BigFloat:
        return BigFloat._finite(neg, num, den, exp2, prec, mode)

    # arithmetic

    def add(self, other: Number) -> BigFloat:
        y = _coerce(other)
        prec, mode = max(self.prec, y.prec), self.mode
        if self.form is _Form.FINITE and y.form is _Form.FINITE:
            e = min(self.exp, y.exp)
            n = self._signed_mant() << (self.exp - e)
            n += y._signed_mant() << (y.exp - e)
            if n == 0:
                return BigFloat._zero(mode is RoundingMode.TO_NEGATIVE_INF, prec, mode)
            return BigFloat._finite(n < 0, abs(n), 1, e, prec, mode)
        if self.form is _Form.INF or y.form is _Form.INF:
            if self.form is _Form.INF and y.form is _Form.INF and self.neg != y.neg:
                raise ValueError("addition of infinities with opposite signs")
            source = self if self.form is _Form.INF else y
            return BigFloat._infinity(source.neg, prec, mode)
        if self.form is _Form.ZERO and y.form is _Form.ZERO:
            return BigFloat._zero(self.neg and y.neg, prec, mode)
        f = self if self.form is _Form.FINITE else y
        return BigFloat._finite(f.neg, f.mant, 1, f.exp, prec, mode)

    def sub(self, other: Number) -> BigFloat:
        return self.add(_coerce(other).neg())

    def mul(self, other: Number) -> BigFloat:
        y = _coerce(other)
        prec, mode = max(self.prec, y.prec), self.mode
        neg = self.neg != y.neg
        if self.form is _Form.FINITE and y.form is _Form.FINITE:
            return BigFloat._finite(neg, self.mant * y.mant, 1, self.exp + y.exp, prec, mode)
        if self.form is _Form.INF or y.form is _Form.INF:
            if self.form is _Form.ZERO or y.form is _Form.ZERO:
                raise ValueError("multiplication of zero with infinity")
            return BigFloat._infinity(neg, prec, mode)
        return BigFloat._zero(neg, prec, mode)

    def quo(self, other: Number) -> BigFloat:
        y = _coerce(other)
        prec, mode = max(self.prec, y.prec), self.mode
        neg = self.neg != y.neg
        if self.form is _Form.FINITE and y.form is _Form.FINITE:
            return BigFloat._finite(neg, self.mant, y.mant, self.exp - y.exp, prec, mode)
        if self.form is y.form:
            raise ValueError("division of zero by zero or infinity by infinity")
        if self.form is _Form.ZERO or y.form is _Form.INF:
            return BigFloat._zero(neg, prec, mode)
        return BigFloat._infinity(neg, prec, mode)

    def sqrt(self) -> BigFloat:
        """Square root, rounded to this value's precision."""
        if self.form is _Form.ZERO:
            return replace(self, acc=Accuracy.EXACT)
        if self.neg:
            raise ValueError("square root of a negative number")
        if self.form is _Form.INF:
            return replace(self, acc=Accuracy.EXACT)
        p = self.prec
        target = max(0, 2 * p + 4 - self.mant.bit_length())
        s = -((self.exp - target) // 2)
        root = math.isqrt(self.mant << (self.exp + 2 * s))
        exact = root * root == self.mant << (self.exp + 2 * s)
        if exact:
            return BigFloat._finite(False, root, 1, -s, p, self.mode)
        # root + 1/2 lies on the same side of every rounding boundary as the true root
        return BigFloat._finite(False, 2 * root + 1, 2, -s, p, self.mode)

    def neg(self) -> BigFloat:
        return replace(self, neg=not self.neg, acc=Accuracy.EXACT)

    def abs(self) -> BigFloat:
        return replace(self, neg=False, acc=Accuracy.EXACT)

    def cmp(self, other: Number) -> int:
        """Return -1, 0 or 1; negative and positive zero compare equal."""
        y = _coerce(other)
        a, b = self._order_key(), y._order_key()
        return (a > b) - (a < b)

    def ldexp(self, exp: int) -> BigFloat:
        """Return this value multiplied by ``2**exp``."""
        if self.form is not _Form.FINITE:
            return replace(self, acc=Accuracy.EXACT)
        return replace(self, exp=self.exp + exp, acc=Accuracy.EXACT)

    # inspection and conversion

    def is_int(self) -> bool:
        if self.form is _Form.ZERO:
            return True
        return self.form is _Form.FINITE and self.exp >= 0

    def to_int(self) -> int:
        """Return the value truncated toward zero."""
        if self.form is _Form.INF:
            raise OverflowError("cannot convert infinity to an int")
        if self.form is _Form.ZERO:
            return 0
        magnitude = self.mant << self.exp if self.exp >= 0 else self.mant >> -self.exp
        return -magnitude if self.neg else magnitude

    def to_fraction(self) -> Fraction:
        if self.form is _Form.INF:
            raise OverflowError("cannot convert infinity to a fraction")
        if self.form is _Form.ZERO:
            return Fraction(0)
        value = Fraction(self.mant) * Fraction(2) ** self.exp
        return -value if self.neg else value

    def to_float(self) -> float:
        """Return the nearest float (ties to even); overflow gives infinity."""
        sign = -1.0 if self.neg else 1.0
        if self.form is _Form.INF:
            return sign * math.inf
        if self.form is _Form.ZERO:
            return sign * 0.0
        try:
            return sign * float(self.to_fraction().__abs__())
        except OverflowError:
            return sign * math.inf

    def _signed_mant(self) -> int:
        return -self.mant if self.neg else self.mant

    def _order_key(self):
        if self.form is _Form.INF:
            return (-1 if self.neg else 1, Fraction(0))
        return (0, self.to_fraction())

    # Python protocols

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __mul__(self, other):
        return self.mul(other)

    def __truediv__(self, other):
        return self.quo(other)

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return self.abs()

    def __float__(self):
        return self.to_float()

    def __int__(self):
        return self.to_int()

    def __eq__(self, other):
        if not isinstance(other, (BigFloat, int, float, Fraction)) or isinstance(other, bool):
            return NotImplemented
        if isinstance(other, float) and math.isnan(other):
            return False
        return self.cmp(other) == 0

    def __lt__(self, other):
        return self.cmp(other) < 0

    def __le__(self, other):
        return self.cmp(other) <= 0

    def __gt__(self, other):
        return self.cmp(other) > 0

    def __ge__(self, other):
        return self.cmp(other) >= 0

    def __hash__(self):
        if self.form is _Form.INF:
            return hash(self.to_float())
        return hash(self.to_fraction())

    def __repr__(self):
        sign = "-" if self.neg else ""
        if self.form is _Form.INF:
            text = f"{sign}Inf"
        elif self.form is _Form.ZERO:
            text = f"{sign}0"
        else:
            text = f"{sign}{self.mant}p{self.exp}"
        return f"BigFloat('{text}', prec={self.prec})"


def _check_prec(prec: int) -> int:
    if prec < 0:
        raise ValueError("precision must not be negative")
    return min(prec, MAX_PREC)


def _coerce(value: Number) -> BigFloat:
    if isinstance(value, BigFloat):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not accepted as a number")
    if isinstance(value, int):
        return BigFloat.from_int(value)
    if isinstance(value, float):
        return BigFloat.from_float(value)
    if isinstance(value, Fraction):
        return BigFloat.from_fraction(value)
    if isinstance(value, str):
        return BigFloat.parse(value)
    raise TypeError(f"unsupported number: {type(value).__name__}")


_BASES = {"0x": 16, "0b": 2, "0o": 8}
_DIGITS = "0123456789abcdef"


def _parse_literal(text: str):
    """Return ``(negative, value, binary exponent)``; value is None for infinity."""
    error = ValueError(f"invalid number literal: {text!r}")
    if not isinstance(text, str) or not text:
        raise error
    neg = text[0] == "-"
    s = text[1:] if text[0] in "+-" else text
    if s in ("Inf", "inf"):
        return neg, None, 0
    base = _BASES.get(s[:2].lower(), 10)
    if base != 10:
        s = s[2:]
    exponent_part = None
    exponent_kind = ""
    for index, ch in enumerate(s):
        if ch in "pP" or (base == 10 and ch in "eE"):
            s, exponent_part, exponent_kind = s[:index], s[index + 1 :], ch.lower()
            break
    whole, _, frac = s.partition(".")
    valid = set(_DIGITS[:base]) | set(_DIGITS[:base].upper()) | {"_"}
    if not set(whole + frac) <= valid:
        raise error
    whole, frac = whole.replace("_", ""), frac.replace("_", "")
    if not whole + frac:
        raise error
    value = Fraction(int(whole + frac, base), base ** len(frac))
    exp2 = 0
    if exponent_part is not None:
        digits = exponent_part.replace("_", "")
        body = digits[1:] if digits[:1] in ("+", "-") else digits
        if not body.isdigit() or not body.isascii():
            raise error
        amount = int(digits)
        if exponent_kind == "p":
            exp2 = amount
        else:
            value *= Fraction(10) ** amount
    return neg, value, exp2