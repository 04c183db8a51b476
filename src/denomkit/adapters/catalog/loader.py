# src/denomkit/adapters/catalog/loader.py
"""
Catalog Loader - Denomination Systems from JSON Configuration

This module reads named denomination systems (e.g. "EUR", "USD", "coins")
from a JSON document and builds immutable DenominationSets from them. It only
reads; nothing computed by the engine is ever written back.

Expected document shape:

    {
      "systems": {
        "EUR": {
          "denominations": [
            {"identity": "€500", "magnitude": "500"},
            {"identity": "1c", "magnitude": "0.01"}
          ]
        }
      }
    }

Magnitudes may be JSON strings (exact, recommended for fractional values) or
JSON numbers. A system may also be given directly as the list of entries, or
as an {identity: magnitude} object.

Files that USE this module:
- Embedding applications (load_catalog to resolve denomination sets)
- tests.test_catalog_loader (unit tests)

Files that this module USES:
- denomkit.config (settings.catalog_file as the default path)
- denomkit.domain.models (Denomination, DenominationSet)
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from denomkit.config import settings
from denomkit.domain.models import Denomination, DenominationSet

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or has the wrong shape."""
    pass


def parse_denomination_set(entries: Any, name: str = "<set>") -> DenominationSet:
    """
    Build one DenominationSet from catalog entries.

    Args:
        entries: List of {"identity", "magnitude"} objects, or an
            {identity: magnitude} object
        name: System name, used in error messages

    Returns:
        Validated DenominationSet

    Raises:
        CatalogError: If entries have the wrong shape
        InvalidDenomination, EmptySet, DuplicateMagnitude: From domain validation
    """
    if isinstance(entries, Mapping):
        return DenominationSet.from_mapping(entries)
    if not isinstance(entries, list):
        raise CatalogError(f"System {name!r}: denominations must be a list or an object")

    denominations = []
    for position, entry in enumerate(entries):
        if isinstance(entry, Mapping):
            if "magnitude" not in entry:
                raise CatalogError(f"System {name!r}: entry {position} has no 'magnitude'")
            denominations.append(Denomination(entry["magnitude"], entry.get("identity") or ""))
        elif isinstance(entry, (int, float, str)) and not isinstance(entry, bool):
            denominations.append(Denomination(entry))
        else:
            raise CatalogError(f"System {name!r}: entry {position} is not an object or a number")
    return DenominationSet(tuple(denominations))


def parse_catalog(data: Any) -> dict[str, DenominationSet]:
    """
    Build every system of an already-decoded catalog document.

    Args:
        data: Decoded JSON document

    Returns:
        System name -> DenominationSet, in document order

    Raises:
        CatalogError: If the document has the wrong shape
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("systems"), Mapping):
        raise CatalogError("Catalog must be an object with a 'systems' object")

    catalog: dict[str, DenominationSet] = {}
    for name, system in data["systems"].items():
        if isinstance(system, Mapping) and "denominations" in system:
            entries = system["denominations"]
        else:
            entries = system
        catalog[name] = parse_denomination_set(entries, name)
    return catalog


def _catalog_path(path: Optional[Union[str, Path]]) -> Path:
    """
    Resolve the catalog path, falling back to settings.

    Raises:
        CatalogError: If neither path nor settings.catalog_file is set
    """
    if path is not None:
        return Path(path)
    if settings.catalog_file is None:
        raise CatalogError("No catalog path given and DENOMKIT_CATALOG_FILE is not set")
    return Path(settings.catalog_file)


def load_catalog(path: Optional[Union[str, Path]] = None) -> dict[str, DenominationSet]:
    """
    Load denomination systems from a JSON file.

    Args:
        path: Catalog file; None uses settings.catalog_file

    Returns:
        System name -> DenominationSet

    Raises:
        CatalogError: If the file is missing, unreadable, not JSON, or misshapen
    """
    p = _catalog_path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            # parse_float=str keeps JSON numbers like 0.1 exact
            data = json.load(f, parse_float=str)
    except FileNotFoundError as e:
        logger.error("Catalog file not found: %s", p)
        raise CatalogError(f"Catalog file not found: {p}") from e
    except json.JSONDecodeError as e:
        logger.error("Catalog file %s is not valid JSON: %s", p, e)
        raise CatalogError(f"Catalog file {p} is not valid JSON: {e}") from e
    except OSError as e:
        logger.error("Failed to read catalog file %s: %s", p, e)
        raise CatalogError(f"Failed to read catalog file {p}: {e}") from e

    catalog = parse_catalog(data)
    logger.info("Loaded %d denomination systems from %s: %s", len(catalog), p, ", ".join(catalog))
    return catalog
