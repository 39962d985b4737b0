# xbig

Arbitrary-precision arithmetic with a forgiving interface. Every function
accepts several kinds of input, leaves its inputs unchanged and returns a new
value.

- `xbig.integers`: functions that return plain Python `int`s.
- `xbig.rationals`: functions that return exact `fractions.Fraction`s.
- `xbig.floats`: functions that return `BigFloat` values.
- `xbig.floattype`: the `BigFloat` type, with the `RoundingMode` and
  `Accuracy` enums.
- `xbig.constants`: e, π and the golden ratio to any precision.

## Installation

```
pip install xbig
```

## Integers

Integer arguments may be:

- `int`s;
- strings, with the base taken from a `0x`, `0b`, `0o` or leading `0` prefix;
- `bytes`, read as a big-endian unsigned number;
- sequences of ints, read as little-endian 64-bit words.

A malformed string raises `ValueError`. A `bool` raises `TypeError`.

```python
from xbig.integers import mul_int, exp_int, fma_int, gcd_poly_int, exp_mod_int

mul_int(-5, 2**64 - 1)            # -92233720368547758075
exp_int("2", "123")               # 2**123
fma_int(7, "3", -1)               # 20
x, y, g = gcd_poly_int(240, 46)   # g == 240*x + 46*y, g >= 0
exp_mod_int(4, 13, 497)           # 445
```

The module provides these groups of functions:

- Arithmetic: `new_int`, `add_int`, `sub_int`, `mul_int`, `fma_int`,
  `abs_int`, `neg_int`.
- Euclidean division, where the remainder is always in `[0, |y|)`: `div_int`,
  `mod_int`, `div_mod_int`.
- Truncated division, where the quotient is rounded toward zero: `quo_int`,
  `rem_int`, `quo_rem_int`.
- Powers: `exp_int` returns 1 for a non-positive exponent. `exp_mod_int`
  treats a zero modulus as "no reduction".
- Modular helpers: `mod_inverse_int` raises `ValueError` when no inverse
  exists. `mod_sqrt_int` needs an odd modulus and raises `ValueError` for a
  non-square.
- GCD: `gcd_int` and `gcd_poly_int`.
- Comparison: `cmp_int` and `cmp_abs_int` return -1, 0 or 1.
- Bitwise operations: `and_int`, `and_not_int`, `or_int`, `xor_int`,
  `not_int`.
- Shifts: `lsh_int` and `rsh_int`, where `rsh_int` is an arithmetic shift. A
  negative or oversized shift raises `ValueError`.
- Random numbers: `rand_int(rng, n)` draws from `[0, n)` using a
  `random.Random`, and returns 0 when `n <= 0`.

## Rationals

Rational arguments may be:

- `int`s and finite `float`s;
- `Fraction`s;
- finite `BigFloat`s;
- strings, either `a/b` with integer literals, or a decimal, `0x`, `0b` or `0o`
  number with an optional `e` (power of ten) or `p` (power of two) exponent.

Non-finite values raise `ValueError`.

```python
from xbig.rationals import new_rat, new_rat_frac, mul_rat, inv_rat
from xbig.integers import exp_int

new_rat("5.7")                 # Fraction(57, 10)
new_rat_frac(3, 6)             # Fraction(1, 2)
inv_rat(new_rat("2/3"))        # Fraction(3, 2)
mul_rat("5.7", exp_int(2, 123))
```

The remaining functions are `add_rat`, `sub_rat`, `quo_rat`, `abs_rat`,
`neg_rat`, `cmp_rat` and `fma_rat`. Division by zero raises
`ZeroDivisionError`.

## Floats

A `BigFloat` is an immutable binary floating-point value. Each value carries
its own precision in bits, its rounding mode and the accuracy of its last
rounding. The value may be zero (signed), finite or infinite. An operation
with no defined result, such as `inf - inf` or `0 * inf`, raises `ValueError`.

To build one:

- `BigFloat.from_int(value, prec)`
- `BigFloat.from_float(value)`
- `BigFloat.from_fraction(value, prec)`
- `BigFloat.parse(text, prec)`
- `BigFloat.inf(sign)`

Its methods are `with_prec`, `with_mode`, `add`, `sub`, `mul`, `quo`, `sqrt`,
`neg`, `abs`, `cmp`, `ldexp`, `is_int`, `to_int`, `to_fraction` and
`to_float`. The usual operators and comparisons work as well.

The functions in `xbig.floats` accept `BigFloat`s, `int`s, `float`s,
`Fraction`s and numeric strings. Inputs that are not `BigFloat`s get a default
precision:

| Input | Default precision |
| --- | --- |
| `int` | at least 64 bits |
| `float` | 53 bits |
| `Fraction` | enough bits for the numerator and denominator |
| string | 64 bits |

```python
from xbig.floats import sqrt_float, set_prec_float, log_base_float
from xbig.floattype import BigFloat, RoundingMode

root = sqrt_float(set_prec_float(2, 200))   # sqrt(2) to 200 bits
log_base_float(1024, 2).to_float()          # 10.0
BigFloat.parse("1.5", 53).with_mode(RoundingMode.TO_ZERO)
```

The functions are:

- Arithmetic: `new_float`, `add_float`, `sub_float`, `mul_float`,
  `quo_float`, `abs_float`, `neg_float`, `sqrt_float`.
- Comparison: `cmp_float`.
- Setting precision, mode and exponent: `set_mode_float`, `set_prec_float`,
  `set_mant_exp_float`.
- Transcendental functions: `exp_float`, `log_float`, `pow_float` and
  `log_base_float`. These are computed with mpmath and rounded to the
  precision of the first argument. `log_float` of zero gives negative
  infinity. A negative argument to `log_float` or a negative base to
  `pow_float` raises `ValueError`.
- `fma_float(x, y, z)`: computes `x*y + z` exactly and rounds it once, to the
  largest precision of the three inputs.

## Constants

```python
from xbig.constants import e, pi, phi

pi(64).to_float()      # 3.141592653589793
e(256)                 # e to 256 bits
phi(1000)              # golden ratio to 1000 bits
```

`pi` uses the Gauss–Legendre iteration with extra guard bits. Its precision
must be positive and below `xbig.floattype.MAX_PREC`, or it raises
`ValueError`.

## Scope

`xbig` is a library only. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```