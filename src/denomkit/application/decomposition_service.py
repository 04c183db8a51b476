# src/denomkit/application/decomposition_service.py
"""
Decomposition Service - Breaking Amounts into Denomination Counts

This module contains the two decomposition algorithms:
- greedy: largest denomination first, O(number of denominations)
- optimal: minimum total count via dynamic programming over integer grid
  units, O(amount in grid units x number of denominations)

Greedy only minimizes the number of units for canonical sets such as
{1, 5, 10, 25}. That is a precondition the caller asserts; it is never
checked here. For {1, 3, 4} and amount 6 greedy gives 4 + 1 + 1 while
optimal gives 3 + 3.

Files that USE this module:
- denomkit.application.engine (DecompositionEngine dispatches to these functions)
- tests.test_decomposition (unit tests)

Files that this module USES:
- denomkit.domain.models (Decomposition, DenominationSet)
- denomkit.domain.errors (AmountTooLargeForOptimalDecomposition, NonIntegerGridMismatch, ...)
- denomkit.shared.numbers (exact coercion, rendering for messages)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
import math
from fractions import Fraction

from denomkit.domain.errors import (
    AmountTooLargeForOptimalDecomposition,
    InvalidAmount,
    NegativeAmount,
    NonIntegerGridMismatch,
)
from denomkit.domain.models import Decomposition, DenominationSet
from denomkit.shared.numbers import Numeric, fraction_to_str, to_fraction

logger = logging.getLogger(__name__)


def coerce_amount(amount: Numeric) -> Fraction:
    """
    Convert an amount to an exact, non-negative Fraction.

    Raises:
        InvalidAmount: If amount is not a finite number
        NegativeAmount: If amount is below zero
    """
    try:
        value = to_fraction(amount)
    except (TypeError, ValueError) as e:
        raise InvalidAmount(str(e)) from e
    if value < 0:
        raise NegativeAmount(f"Amount must be non-negative, got {fraction_to_str(value)}")
    return value


def greedy(amount: Fraction, denominations: DenominationSet) -> Decomposition:
    """
    Decompose by taking as many of each denomination as fit, largest first.

    Whatever is left after the smallest denomination becomes the remainder.
    Works on any non-negative rational amount.

    Args:
        amount: Exact non-negative amount
        denominations: Set to decompose against

    Returns:
        Decomposition satisfying the exactness invariant
    """
    remaining = amount
    counts = {}
    for denomination in denominations:
        count = int(remaining // denomination.magnitude)
        counts[denomination] = count
        remaining -= count * denomination.magnitude
    return Decomposition(amount=amount, denominations=denominations, counts=counts, remainder=remaining)


def grid_units(
    amount: Fraction,
    denominations: DenominationSet,
    max_units: int,
    off_grid_to_remainder: bool = False,
) -> tuple[int, Fraction]:
    """
    Scale an amount onto the denomination set's integer grid.

    Args:
        amount: Exact non-negative amount
        denominations: Set whose grid unit is used
        max_units: Largest number of grid units the caller allows
        off_grid_to_remainder: Carve the part below one grid unit off instead of failing

    Returns:
        (whole grid units, off-grid leftover value)

    Raises:
        NonIntegerGridMismatch: If amount is off the grid and carving is not allowed
        AmountTooLargeForOptimalDecomposition: If the whole grid units exceed max_units
    """
    unit = denominations.grid_unit
    scaled = amount / unit
    if scaled.denominator == 1:
        units, off_grid = scaled.numerator, Fraction(0)
    elif off_grid_to_remainder:
        units = math.floor(scaled)
        off_grid = amount - units * unit
        logger.debug(
            "Amount %s is off the %s grid, carving %s into the remainder",
            fraction_to_str(amount), fraction_to_str(unit), fraction_to_str(off_grid),
        )
    else:
        raise NonIntegerGridMismatch(fraction_to_str(amount), fraction_to_str(unit))

    if units > max_units:
        raise AmountTooLargeForOptimalDecomposition(units, max_units)
    return units, off_grid


def optimal(
    amount: Fraction,
    denominations: DenominationSet,
    max_units: int,
    off_grid_to_remainder: bool = False,
) -> Decomposition:
    """
    Decompose with the fewest total units using dynamic programming.

    The amount and magnitudes are scaled to whole grid units, then
    best[v] = min over denominations d <= v of best[v - d] + 1, for v in
    0..amount. On equal counts the larger denomination wins. When the amount
    itself cannot be reached exactly, the largest reachable value below it is
    used and the difference becomes the remainder, so the remainder is
    minimized first and the count second.

    The size check runs before the table is allocated.

    Args:
        amount: Exact non-negative amount
        denominations: Set to decompose against
        max_units: Largest amount, in grid units, the table may cover
        off_grid_to_remainder: Send the part of amount below one grid unit to
            the remainder instead of raising NonIntegerGridMismatch

    Returns:
        Minimum-count Decomposition satisfying the exactness invariant
    """
    units, off_grid = grid_units(amount, denominations, max_units, off_grid_to_remainder)
    unit = denominations.grid_unit
    # Descending order; the strict comparison below keeps the larger one on ties
    weights = [int(d.magnitude / unit) for d in denominations]

    unreachable = units + 1
    best = [0] + [unreachable] * units
    choice = [-1] * (units + 1)
    for value in range(1, units + 1):
        best_count = unreachable
        best_index = -1
        for index, weight in enumerate(weights):
            if weight > value:
                continue
            candidate = best[value - weight] + 1
            if candidate < best_count:
                best_count = candidate
                best_index = index
        best[value] = best_count
        choice[value] = best_index

    reached = units
    while best[reached] >= unreachable:
        reached -= 1

    tally = [0] * len(weights)
    value = reached
    while value > 0:
        index = choice[value]
        tally[index] += 1
        value -= weights[index]

    counts = dict(zip(denominations, tally))
    remainder = (units - reached) * unit + off_grid
    return Decomposition(amount=amount, denominations=denominations, counts=counts, remainder=remainder)
