"""
Catalog Adapters - Denomination System Configuration

This package loads named denomination systems from JSON configuration.
"""

from denomkit.adapters.catalog.loader import (
    CatalogError,
    load_catalog,
    parse_catalog,
    parse_denomination_set,
)

__all__ = [
    "CatalogError",
    "load_catalog",
    "parse_catalog",
    "parse_denomination_set",
]
