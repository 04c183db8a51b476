# src/denomkit/application/conversion_service.py
"""
Conversion Service - Moving Decompositions Between Denomination Systems

This module holds the arithmetic for cross-system conversion: the source
amount is rebuilt from its counts and remainder, multiplied by the exchange
factor with full rational precision, and handed back to the engine to be
decomposed against the target set. Nothing is rounded on the way, so the
only place value can end up unexpressed is the target remainder.

Files that USE this module:
- denomkit.application.engine (DecompositionEngine.convert and convert_back)
- tests.test_conversion (unit tests)

Files that this module USES:
- denomkit.domain.models (Decomposition)
- denomkit.domain.errors (InvalidExchangeFactor)
- denomkit.shared.numbers (exact coercion)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from fractions import Fraction

from denomkit.domain.errors import InvalidExchangeFactor
from denomkit.domain.models import Decomposition
from denomkit.shared.numbers import Numeric, fraction_to_str, to_fraction


def coerce_factor(factor: Numeric) -> Fraction:
    """
    Convert an exchange factor to an exact, positive Fraction.

    Args:
        factor: Target units per one source unit

    Raises:
        InvalidExchangeFactor: If factor is not a positive finite number
    """
    try:
        value = to_fraction(factor, what="exchange factor")
    except (TypeError, ValueError) as e:
        raise InvalidExchangeFactor(str(e)) from e
    if value <= 0:
        raise InvalidExchangeFactor(f"Exchange factor must be positive, got {fraction_to_str(value)}")
    return value


def reconstitute(decomposition: Decomposition) -> Fraction:
    """Source amount rebuilt from counts and remainder."""
    return decomposition.represented + decomposition.remainder


def target_amount(decomposition: Decomposition, factor: Fraction) -> Fraction:
    """
    Amount in target units for a source decomposition.

    Args:
        decomposition: Source decomposition
        factor: Exact exchange factor (already coerced)

    Returns:
        reconstituted source amount * factor, exactly
    """
    return reconstitute(decomposition) * factor
