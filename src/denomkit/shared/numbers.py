# src/denomkit/shared/numbers.py
"""
Exact Numbers - Rational Coercion and Integer Grid Helpers

This module converts caller-supplied numeric values (int, Fraction, Decimal,
numeric strings, floats) into exact ``fractions.Fraction`` values, and
computes the common integer grid a set of magnitudes lives on.

Floats are converted through their shortest decimal representation, so
``0.1`` becomes ``1/10`` rather than the binary approximation.

Files that USE this module:
- denomkit.domain.models (magnitude and amount coercion, grid unit)
- denomkit.application.decomposition_service (amount coercion)
- denomkit.application.conversion_service (exchange factor coercion)

Files that this module USES:
- None (pure utility functions)
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction
from math import lcm
from numbers import Rational
from typing import Iterable, Union

Numeric = Union[int, float, str, Decimal, Fraction]

# Decimal exponents beyond this would build huge integers in Fraction()
MAX_EXPONENT = 1000


def to_fraction(value: Numeric, *, what: str = "amount") -> Fraction:
    """
    Convert a numeric value to an exact Fraction.

    Args:
        value: Value to convert
        what: Name of the value, used in error messages

    Returns:
        Exact Fraction equal to value

    Raises:
        TypeError: If value is not a supported numeric type
        ValueError: If value is not a finite number, is out of range, or is a
            string that does not parse (including a zero denominator)
    """
    if isinstance(value, bool):
        raise TypeError(f"{what} must be a number, got bool")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise ValueError(f"{what} must be finite, got {value!r}")
        return Fraction(str(value))
    if isinstance(value, Decimal):
        return _from_decimal(value, value, what)
    if isinstance(value, str):
        text = value.strip().replace("_", "")
        if not text:
            raise ValueError(f"{what} must not be empty")
        try:
            # Decimal first so "1e3" and "12.50" parse the usual way
            parsed = Decimal(text)
        except InvalidOperation:
            parsed = None
        if parsed is not None:
            return _from_decimal(parsed, value, what)
        try:
            return Fraction(text)  # "3/4"
        except (ValueError, ZeroDivisionError):
            raise ValueError(f"{what} is not a number: {value!r}") from None
    raise TypeError(f"{what} must be a number, got {type(value).__name__}")


def _from_decimal(parsed: Decimal, value, what: str) -> Fraction:
    if not parsed.is_finite():
        raise ValueError(f"{what} must be finite, got {value!r}")
    if parsed and abs(parsed.adjusted()) > MAX_EXPONENT:
        raise ValueError(f"{what} is out of range: {value!r}")
    return Fraction(parsed)


def grid_unit(magnitudes: Iterable[Fraction]) -> Fraction:
    """
    Smallest common unit every magnitude is an integer multiple of.

    Args:
        magnitudes: Exact magnitudes

    Returns:
        Fraction(1, lcm of all denominators); 1 for integer magnitudes
    """
    denominator = 1
    for magnitude in magnitudes:
        denominator = lcm(denominator, magnitude.denominator)
    return Fraction(1, denominator)


def fraction_to_str(value: Fraction) -> str:
    """Render integers plainly and everything else as p/q."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"
