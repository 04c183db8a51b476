"""
Adapters Layer - External Interfaces

This package contains adapters between the engine and the outside world:
- Catalog (denomination systems loaded from JSON configuration)
"""

__all__ = []
