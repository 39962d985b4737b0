"""Arbitrary-precision integers, exact rationals, binary floats and constants."""

__version__ = "0.1.0"
__all__ = ["constants", "floats", "floattype", "integers", "rationals"]