# src/denomkit/application/engine.py
"""
Decomposition Engine - Entry Points for Decompose and Convert

This module exposes the engine's two public operations:
- decompose(amount, denominations, strategy)
- convert(decomposition, target, factor, strategy)

DecompositionEngine carries the one piece of configuration the algorithms
need, the optimal decomposition bound. It holds no other state, so a single
instance (the module-level ``engine``) can serve any number of concurrent
callers. Module-level functions delegate to that instance.

Files that USE this module:
- denomkit.application (re-exports engine, decompose, convert, convert_back)
- tests.test_engine, tests.test_conversion (unit tests)

Files that this module USES:
- denomkit.application.decomposition_service (greedy and optimal algorithms)
- denomkit.application.conversion_service (exchange arithmetic)
- denomkit.config (optimal_max_units and default_strategy settings)
- denomkit.domain.errors (InvalidStrategy)
- denomkit.domain.models (Decomposition, DenominationSet, Strategy)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Optional, Union

from denomkit.application.conversion_service import coerce_factor, target_amount
from denomkit.application import decomposition_service
from denomkit.config import settings
from denomkit.domain.errors import InvalidStrategy
from denomkit.domain.models import Decomposition, DenominationSet, Strategy
from denomkit.shared.numbers import Numeric, fraction_to_str

logger = logging.getLogger(__name__)

StrategyLike = Union[Strategy, str]


class DecompositionEngine:
    """
    Stateless decomposition and conversion engine.

    Args:
        max_optimal_units: Largest amount, in grid units, optimal decomposition
            may cover. None reads settings.optimal_max_units on every call.
    """

    def __init__(self, max_optimal_units: Optional[int] = None):
        if max_optimal_units is not None and max_optimal_units < 1:
            raise ValueError("max_optimal_units must be at least 1")
        self._max_optimal_units = max_optimal_units

    @property
    def max_optimal_units(self) -> int:
        if self._max_optimal_units is not None:
            return self._max_optimal_units
        return settings.optimal_max_units

    @staticmethod
    def _strategy(strategy: Optional[StrategyLike]) -> Strategy:
        if strategy is None:
            strategy = settings.default_strategy
        try:
            return Strategy(strategy)
        except ValueError:
            raise InvalidStrategy(
                f"Unknown strategy {strategy!r}; expected 'greedy' or 'optimal'"
            ) from None

    def greedy(self, amount: Numeric, denominations: DenominationSet) -> Decomposition:
        """Greedy decomposition; see decomposition_service.greedy."""
        return decomposition_service.greedy(decomposition_service.coerce_amount(amount), denominations)

    def optimal(
        self,
        amount: Numeric,
        denominations: DenominationSet,
        off_grid_to_remainder: bool = False,
    ) -> Decomposition:
        """Minimum-count decomposition; see decomposition_service.optimal."""
        return decomposition_service.optimal(
            decomposition_service.coerce_amount(amount),
            denominations,
            self.max_optimal_units,
            off_grid_to_remainder=off_grid_to_remainder,
        )

    def decompose(
        self,
        amount: Numeric,
        denominations: DenominationSet,
        strategy: Optional[StrategyLike] = None,
        *,
        off_grid_to_remainder: bool = False,
    ) -> Decomposition:
        """
        Break an amount into counts of the given denominations.

        Args:
            amount: Non-negative amount (int, Fraction, Decimal, numeric str or float)
            denominations: Set to decompose against
            strategy: Strategy.GREEDY or Strategy.OPTIMAL (or their names);
                None uses settings.default_strategy
            off_grid_to_remainder: For OPTIMAL, send value below one grid unit
                to the remainder instead of raising NonIntegerGridMismatch

        Returns:
            Decomposition whose counts and remainder add up to amount exactly

        Raises:
            InvalidAmount, NegativeAmount: For bad amounts
            InvalidStrategy: For an unknown strategy name
            NonIntegerGridMismatch: OPTIMAL with an off-grid amount
            AmountTooLargeForOptimalDecomposition: OPTIMAL above the bound
        """
        chosen = self._strategy(strategy)
        value = decomposition_service.coerce_amount(amount)
        logger.debug(
            "Decomposing %s over %d denominations with %s strategy",
            fraction_to_str(value), len(denominations), chosen.value,
        )
        if chosen is Strategy.OPTIMAL:
            return decomposition_service.optimal(
                value,
                denominations,
                self.max_optimal_units,
                off_grid_to_remainder=off_grid_to_remainder,
            )
        return decomposition_service.greedy(value, denominations)

    def convert(
        self,
        decomposition: Decomposition,
        target: DenominationSet,
        factor: Numeric,
        strategy: Optional[StrategyLike] = None,
        *,
        off_grid_to_remainder: bool = True,
    ) -> Decomposition:
        """
        Re-express a decomposition in another denomination system.

        The source amount (counts plus remainder) is multiplied by factor
        without rounding and decomposed against target. Any value the target
        set cannot express ends up in the result's remainder.

        Args:
            decomposition: Source decomposition
            target: Target denomination set
            factor: Target units per one source unit (positive)
            strategy: Strategy for the target decomposition
            off_grid_to_remainder: For OPTIMAL, send value below the target
                grid unit to the remainder (default) instead of raising

        Returns:
            New Decomposition of the converted amount against target

        Raises:
            InvalidExchangeFactor: If factor is not positive
        """
        rate = coerce_factor(factor)
        amount = target_amount(decomposition, rate)
        result = self.decompose(amount, target, strategy, off_grid_to_remainder=off_grid_to_remainder)
        if result.remainder:
            logger.warning(
                "Conversion of %s at factor %s left %s unexpressed in the target set",
                fraction_to_str(decomposition.amount), fraction_to_str(rate), fraction_to_str(result.remainder),
            )
        return result

    def convert_back(
        self,
        decomposition: Decomposition,
        source: DenominationSet,
        factor: Numeric,
        strategy: Optional[StrategyLike] = None,
        *,
        off_grid_to_remainder: bool = True,
    ) -> Decomposition:
        """Convert with the reciprocal of factor, undoing convert(..., factor)."""
        rate = coerce_factor(factor)
        return self.convert(
            decomposition, source, 1 / rate, strategy, off_grid_to_remainder=off_grid_to_remainder
        )


# Global engine instance
engine = DecompositionEngine()


def decompose(
    amount: Numeric,
    denominations: DenominationSet,
    strategy: Optional[StrategyLike] = None,
    *,
    off_grid_to_remainder: bool = False,
) -> Decomposition:
    """Decompose with the shared engine; see DecompositionEngine.decompose."""
    return engine.decompose(amount, denominations, strategy, off_grid_to_remainder=off_grid_to_remainder)


def convert(
    decomposition: Decomposition,
    target: DenominationSet,
    factor: Numeric,
    strategy: Optional[StrategyLike] = None,
    *,
    off_grid_to_remainder: bool = True,
) -> Decomposition:
    """Convert with the shared engine; see DecompositionEngine.convert."""
    return engine.convert(decomposition, target, factor, strategy, off_grid_to_remainder=off_grid_to_remainder)


def convert_back(
    decomposition: Decomposition,
    source: DenominationSet,
    factor: Numeric,
    strategy: Optional[StrategyLike] = None,
    *,
    off_grid_to_remainder: bool = True,
) -> Decomposition:
    """Convert back with the shared engine; see DecompositionEngine.convert_back."""
    return engine.convert_back(decomposition, source, factor, strategy, off_grid_to_remainder=off_grid_to_remainder)
