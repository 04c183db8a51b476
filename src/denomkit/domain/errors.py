"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised when a denomination,
denomination set, amount or exchange factor breaks a business rule, or when a
decomposition cannot be computed within the engine's limits.
"""


class DenomError(Exception):
    """Base exception for domain errors."""
    pass


class ValidationError(DenomError, ValueError):
    """Raised when an input value breaks a construction or entry rule."""
    pass


class ComputationError(DenomError):
    """Raised when a valid request cannot be computed as asked."""
    pass


class InvalidDenomination(ValidationError):
    """Raised when a denomination magnitude is not positive or its identity is invalid."""
    pass


class EmptySet(ValidationError):
    """Raised when a denomination set is built from an empty collection."""
    pass


class DuplicateMagnitude(ValidationError):
    """Raised when two denominations in one set share a magnitude."""

    def __init__(self, magnitude, identities):
        self.magnitude = magnitude
        self.identities = tuple(identities)
        super().__init__(
            f"Duplicate magnitude {magnitude} for denominations {', '.join(self.identities)}"
        )


class NegativeAmount(ValidationError):
    """Raised when a negative amount is passed for decomposition."""
    pass


class InvalidAmount(ValidationError):
    """Raised when an amount is not a finite number."""
    pass


class InvalidExchangeFactor(ValidationError):
    """Raised when an exchange factor is not a positive finite number."""
    pass


class InvalidStrategy(ValidationError):
    """Raised when a strategy name is neither greedy nor optimal."""
    pass


class InvalidDecomposition(ValidationError):
    """Raised when a hand-built decomposition breaks its invariants."""
    pass


class AmountTooLargeForOptimalDecomposition(ComputationError):
    """Raised before optimal decomposition when the scaled amount exceeds the configured bound."""

    def __init__(self, units: int, limit: int):
        self.units = units
        self.limit = limit
        super().__init__(
            f"Amount spans {units} grid units, above the optimal decomposition limit of {limit}; "
            "use the greedy strategy or pre-scale the amount"
        )


class NonIntegerGridMismatch(ComputationError):
    """Raised when an amount is not a whole number of the denomination set's grid unit."""

    def __init__(self, amount, grid_unit):
        self.amount = amount
        self.grid_unit = grid_unit
        super().__init__(
            f"Amount {amount} is not a whole multiple of the grid unit {grid_unit}"
        )
