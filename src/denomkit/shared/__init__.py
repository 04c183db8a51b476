"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Exact number coercion and integer grids
- Validation
- Logging configuration
"""

from denomkit.shared.numbers import Numeric, fraction_to_str, grid_unit, to_fraction
from denomkit.shared.validators import (
    validate_identity,
    validate_log_level,
    validate_strategy_name,
)

__all__ = [
    "Numeric",
    "to_fraction",
    "grid_unit",
    "fraction_to_str",
    "validate_identity",
    "validate_strategy_name",
    "validate_log_level",
]
