"""
Application Layer - Use Cases and Services

This package contains the decomposition and conversion engine.
Pure computation: no I/O, no shared mutable state.
"""

from denomkit.application.engine import (
    DecompositionEngine,
    convert,
    convert_back,
    decompose,
    engine,
)

__all__ = [
    "DecompositionEngine",
    "engine",
    "decompose",
    "convert",
    "convert_back",
]
