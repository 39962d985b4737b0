"""Arbitrary-precision integer operations that accept several kinds of input.

Every function converts its arguments with the same rules as :func:`new_int`
and returns new values; the inputs are never modified.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Union

WORD_BITS = 64
_WORD_LIMIT = 1 << WORD_BITS
_MAX_SHIFT = (1 << 64) - 1

IntLike = Union[int, str, bytes, bytearray, Sequence[int]]


def _parse(text: str) -> int:
    """Parse an integer literal, choosing the base from its prefix."""
    error = ValueError(f"invalid integer literal: {text!r}")
    if not text or text != text.strip():
        raise error
    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    if not body or body[0] in "+-":
        raise error
    try:
        if body[:2].lower() in ("0x", "0b", "0o"):
            value = int(body, 0)
        elif len(body) > 1 and body[0] == "0":
            rest = body[1:]
            if rest.startswith("_"):
                rest = rest[1:]
            value = int(rest, 8)
        else:
            value = int(body, 10)
    except ValueError:
        raise error from None
    return -value if negative else value


def _from_words(words: Sequence[int]) -> int:
    value = 0
    for position, word in enumerate(words):
        if not isinstance(word, int) or isinstance(word, bool) or not 0 <= word < _WORD_LIMIT:
            raise ValueError(f"invalid word: {word!r}")
        value |= word << (position * WORD_BITS)
    return value


def _to_int(x: IntLike) -> int:
    if isinstance(x, bool):
        raise TypeError("bool is not accepted as an integer value")
    if isinstance(x, int):
        return x
    if isinstance(x, str):
        return _parse(x)
    if isinstance(x, (bytes, bytearray)):
        return int.from_bytes(x, "big")
    if isinstance(x, Sequence):
        return _from_words(x)
    raise TypeError(f"unsupported integer value: {type(x).__name__}")


def new_int(x: IntLike) -> int:
    """Convert ``x`` to an int.

    Strings are parsed with their base taken from a ``0x``, ``0b``, ``0o`` or
    ``0`` prefix; bytes are read as a big-endian unsigned number; a sequence
    of ints is read as little-endian 64-bit words.
    """
    return _to_int(x)


def add_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) + _to_int(y)


def sub_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) - _to_int(y)


def mul_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) * _to_int(y)


def div_mod_int(x: IntLike, y: IntLike) -> tuple[int, int]:
    """Euclidean division: the remainder is always in ``[0, |y|)``."""
    a, b = _to_int(x), _to_int(y)
    m = a % abs(b)
    return (a - m) // b, m


def div_int(x: IntLike, y: IntLike) -> int:
    return div_mod_int(x, y)[0]


def mod_int(x: IntLike, y: IntLike) -> int:
    return div_mod_int(x, y)[1]


def quo_rem_int(x: IntLike, y: IntLike) -> tuple[int, int]:
    """Truncated division: the quotient is rounded toward zero."""
    a, b = _to_int(x), _to_int(y)
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def quo_int(x: IntLike, y: IntLike) -> int:
    return quo_rem_int(x, y)[0]


def rem_int(x: IntLike, y: IntLike) -> int:
    return quo_rem_int(x, y)[1]


def mod_inverse_int(x: IntLike, y: IntLike) -> int:
    """Return the inverse of ``x`` modulo ``|y|``; raise ValueError if none exists."""
    g, n = _to_int(x), abs(_to_int(y))
    if n == 0:
        raise ZeroDivisionError("modulus is zero")
    if n == 1:
        return 0
    try:
        return pow(g, -1, n)
    except ValueError:
        raise ValueError(f"{g} has no inverse modulo {n}") from None


def _jacobi(a: int, n: int) -> int:
    a %= n
    result = 1
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def mod_sqrt_int(x: IntLike, y: IntLike) -> int:
    """Return a square root of ``x`` modulo the odd prime ``y``.

    Raises ValueError if ``x`` is not a square modulo ``y``.
    """
    p = _to_int(y)
    if p < 1 or p % 2 == 0:
        raise ValueError("modulus must be a positive odd number")
    a = _to_int(x) % p
    symbol = _jacobi(a, p)
    if symbol == 0:
        return 0
    if symbol == -1:
        raise ValueError(f"{a} is not a square modulo {p}")
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    z = 2
    while _jacobi(z, p) != -1:
        z += 1
    m, c, t, r = s, pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m, c = i, b * b % p
        t, r = t * c % p, r * b % p
    return r


def exp_int(x: IntLike, y: IntLike) -> int:
    """Return ``x ** y``, or 1 when ``y <= 0``."""
    a, b = _to_int(x), _to_int(y)
    return 1 if b <= 0 else a**b


def exp_mod_int(x: IntLike, y: IntLike, z: IntLike) -> int:
    """Return ``x ** y mod |z|``; a zero modulus means no reduction.

    A negative exponent uses the modular inverse of ``x`` and raises
    ValueError when it does not exist.
    """
    a, b, m = _to_int(x), _to_int(y), abs(_to_int(z))
    if m == 0:
        return exp_int(a, b)
    if m == 1:
        return 0
    try:
        return pow(a, b, m)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {m}") from None


def gcd_poly_int(a: IntLike, b: IntLike) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``g = gcd(a, b) >= 0`` and ``a*x + b*y == g``."""
    p, q = _to_int(a), _to_int(b)
    if p == 0 and q == 0:
        return 0, 0, 0
    if p == 0:
        return 0, 1 if q > 0 else -1, abs(q)
    if q == 0:
        return 1 if p > 0 else -1, 0, abs(p)
    old_r, r = abs(p), abs(q)
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        k = old_r // r
        old_r, r = r, old_r - k * r
        old_s, s = s, old_s - k * s
        old_t, t = t, old_t - k * t
    return old_s * (1 if p > 0 else -1), old_t * (1 if q > 0 else -1), old_r


def gcd_int(x: IntLike, y: IntLike) -> int:
    return gcd_poly_int(x, y)[2]


def abs_int(x: IntLike) -> int:
    return abs(_to_int(x))


def neg_int(x: IntLike) -> int:
    return -_to_int(x)


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def cmp_int(x: IntLike, y: IntLike) -> int:
    """Return -1, 0 or 1 as ``x`` is less than, equal to or greater than ``y``."""
    return _sign(_to_int(x) - _to_int(y))


def cmp_abs_int(x: IntLike, y: IntLike) -> int:
    return _sign(abs(_to_int(x)) - abs(_to_int(y)))


def and_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) & _to_int(y)


def and_not_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) & ~_to_int(y)


def or_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) | _to_int(y)


def xor_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) ^ _to_int(y)


def not_int(x: IntLike) -> int:
    return ~_to_int(x)


def _shift_amount(y: IntLike) -> int:
    n = _to_int(y)
    if not 0 <= n <= _MAX_SHIFT:
        raise ValueError("shift too large")
    return n


def lsh_int(x: IntLike, y: IntLike) -> int:
    return _to_int(x) << _shift_amount(y)


def rsh_int(x: IntLike, y: IntLike) -> int:
    """Arithmetic right shift."""
    return _to_int(x) >> _shift_amount(y)


def rand_int(rng: random.Random, x: IntLike) -> int:
    """Return a random int in ``[0, x)``, or 0 when ``x <= 0``."""
    n = _to_int(x)
    if n <= 0:
        return 0
    return rng.randrange(n)


def fma_int(x: IntLike, y: IntLike, z: IntLike) -> int:
    return _to_int(x) * _to_int(y) + _to_int(z)