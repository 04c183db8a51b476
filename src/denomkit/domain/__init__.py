"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from denomkit.domain.models import (
    Decomposition,
    Denomination,
    DenominationSet,
    Strategy,
)
from denomkit.domain.errors import (
    AmountTooLargeForOptimalDecomposition,
    ComputationError,
    DenomError,
    DuplicateMagnitude,
    EmptySet,
    InvalidAmount,
    InvalidDecomposition,
    InvalidDenomination,
    InvalidExchangeFactor,
    InvalidStrategy,
    NegativeAmount,
    NonIntegerGridMismatch,
    ValidationError,
)

__all__ = [
    "Denomination",
    "DenominationSet",
    "Decomposition",
    "Strategy",
    "DenomError",
    "ValidationError",
    "ComputationError",
    "InvalidDenomination",
    "EmptySet",
    "DuplicateMagnitude",
    "NegativeAmount",
    "InvalidAmount",
    "InvalidExchangeFactor",
    "InvalidStrategy",
    "InvalidDecomposition",
    "AmountTooLargeForOptimalDecomposition",
    "NonIntegerGridMismatch",
]
