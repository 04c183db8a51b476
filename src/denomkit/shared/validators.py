# src/denomkit/shared/validators.py
"""
Input Validation Utilities - Labels and Configuration Values

This module provides small validation functions for denomination identities
and configuration values such as strategy names and log levels.

Files that USE this module:
- denomkit.domain.models (validate_identity for Denomination labels)
- denomkit.config.settings (uses validation functions in Settings field validators)
- denomkit.shared.logging_conf (validate_log_level for setup_logging level names)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re

STRATEGY_NAMES = ("greedy", "optimal")


def validate_identity(identity: str, max_length: int = 64) -> bool:
    """
    Validate a denomination identity label.

    Labels are free text (e.g. "€500", "quarter", "1 gram") but must not be
    blank, must not contain control characters and must fit max_length.

    Args:
        identity: Label to validate
        max_length: Maximum allowed length

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(identity, str) or not identity.strip():
        return False
    if len(identity) > max_length:
        return False
    return not re.search(r"[\x00-\x1f\x7f]", identity)


def validate_strategy_name(name: str) -> bool:
    """
    Validate a decomposition strategy name (case-insensitive).

    Args:
        name: Strategy name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name:
        return False
    return name.strip().lower() in STRATEGY_NAMES


def validate_log_level(level: str) -> bool:
    """Check that level is a standard logging level name."""
    if not level:
        return False
    return isinstance(logging.getLevelName(level.strip().upper()), int)
