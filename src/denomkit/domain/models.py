# src/denomkit/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Denominations (a unit magnitude with a stable label)
- Denomination sets (the units available to break an amount into)
- Decompositions (counts per denomination plus an exact remainder)
- Decomposition strategies

All models are immutable. Magnitudes and amounts are exact Fractions.

Files that USE this module:
- denomkit.application.* (services build and consume domain models)
- denomkit.adapters.catalog (builds DenominationSets from JSON)
- tests.* (tests use domain models for test data)

Files that this module USES:
- denomkit.domain.errors (validation exceptions)
- denomkit.shared.numbers (exact coercion, grid unit)
- denomkit.shared.validators (identity labels)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from enum import Enum  # Strategy tag
from fractions import Fraction  # Exact rational arithmetic
from types import MappingProxyType  # Read-only view over count mappings
from typing import Iterator, Mapping, Union

from denomkit.domain.errors import (
    DuplicateMagnitude,
    EmptySet,
    InvalidDecomposition,
    InvalidDenomination,
)
from denomkit.shared.numbers import Numeric, fraction_to_str, grid_unit, to_fraction
from denomkit.shared.validators import validate_identity


class Strategy(str, Enum):
    """
    Decomposition strategy.

    GREEDY is linear in the number of denominations and minimizes the total
    count only for canonical sets; canonicality is the caller's assertion.
    OPTIMAL always minimizes the count but costs time and memory proportional
    to the amount measured in grid units.
    """
    GREEDY = "greedy"
    OPTIMAL = "optimal"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


@dataclass(frozen=True)
class Denomination:
    """
    A single discrete unit (a coin, a note, a weight...).

    Attributes:
        magnitude: Positive exact value the unit represents
        identity: Stable label; defaults to the magnitude written out
    """
    magnitude: Fraction
    identity: str = ""

    def __post_init__(self):
        try:
            magnitude = to_fraction(self.magnitude, what="magnitude")
        except (TypeError, ValueError) as e:
            raise InvalidDenomination(str(e)) from e
        if magnitude <= 0:
            raise InvalidDenomination(f"Denomination magnitude must be positive, got {self.magnitude}")
        identity = self.identity or fraction_to_str(magnitude)
        if not validate_identity(identity):
            raise InvalidDenomination(f"Invalid denomination identity: {identity!r}")
        object.__setattr__(self, "magnitude", magnitude)
        object.__setattr__(self, "identity", identity)

    def __str__(self) -> str:
        return self.identity


@dataclass(frozen=True)
class DenominationSet:
    """
    The denominations available for decomposing an amount.

    Entries are unique by magnitude and by identity, and are kept in
    descending magnitude order. The set is immutable and safe to share
    between any number of concurrent requests.

    Attributes:
        denominations: Denominations in descending magnitude order
        grid_unit: 1 / lcm of all magnitude denominators; every magnitude is
            a whole multiple of it
    """
    denominations: tuple[Denomination, ...]
    grid_unit: Fraction = field(init=False, repr=False, compare=False)
    _by_identity: Mapping[str, Denomination] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        items = tuple(self.denominations)
        if not items:
            raise EmptySet("A denomination set needs at least one denomination")
        for item in items:
            if not isinstance(item, Denomination):
                raise TypeError(f"Expected Denomination, got {type(item).__name__}")

        by_magnitude: dict[Fraction, list[str]] = {}
        for item in items:
            by_magnitude.setdefault(item.magnitude, []).append(item.identity)
        for magnitude, identities in by_magnitude.items():
            if len(identities) > 1:
                raise DuplicateMagnitude(fraction_to_str(magnitude), identities)

        by_identity: dict[str, Denomination] = {}
        for item in items:
            if item.identity in by_identity:
                raise InvalidDenomination(f"Duplicate denomination identity: {item.identity!r}")
            by_identity[item.identity] = item

        ordered = tuple(sorted(items, key=lambda d: d.magnitude, reverse=True))
        object.__setattr__(self, "denominations", ordered)
        object.__setattr__(self, "grid_unit", grid_unit(d.magnitude for d in ordered))
        object.__setattr__(self, "_by_identity", MappingProxyType(by_identity))

    @classmethod
    def of(cls, *magnitudes: Numeric) -> DenominationSet:
        """Build a set from bare magnitudes, labelled by their values."""
        return cls(tuple(Denomination(m) for m in magnitudes))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Numeric]) -> DenominationSet:
        """
        Build a set from an identity -> magnitude mapping.

        Args:
            mapping: e.g. {"quarter": 25, "dime": 10, "nickel": 5, "penny": 1}

        Returns:
            DenominationSet with one Denomination per entry
        """
        return cls(tuple(Denomination(magnitude, identity) for identity, magnitude in mapping.items()))

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self.denominations)

    def __len__(self) -> int:
        return len(self.denominations)

    def __contains__(self, item) -> bool:
        return item in self.denominations

    @property
    def largest(self) -> Denomination:
        return self.denominations[0]

    @property
    def smallest(self) -> Denomination:
        return self.denominations[-1]

    @property
    def magnitudes(self) -> tuple[Fraction, ...]:
        return tuple(d.magnitude for d in self.denominations)

    def by_identity(self, identity: str) -> Denomination:
        """
        Look up a denomination by its label.

        Raises:
            KeyError: If no denomination carries that identity
        """
        return self._by_identity[identity]


@dataclass(frozen=True)
class Decomposition:
    """
    Counts of each denomination plus a remainder that together rebuild an amount.

    Invariant: sum(count * magnitude) + remainder == amount, exactly.
    A non-zero remainder is value the set could not express; it is a result,
    not an error.

    Attributes:
        amount: The amount that was decomposed
        denominations: The set it was decomposed against
        counts: Read-only Denomination -> count mapping covering the whole set
        remainder: Non-negative value left over
    """
    amount: Fraction
    denominations: DenominationSet
    counts: Mapping[Denomination, int] = field(hash=False)
    remainder: Fraction = Fraction(0)

    def __post_init__(self):
        try:
            amount = to_fraction(self.amount)
            remainder = to_fraction(self.remainder, what="remainder")
        except (TypeError, ValueError) as e:
            raise InvalidDecomposition(str(e)) from e

        supplied = dict(self.counts)
        for denomination in supplied:
            if denomination not in self.denominations:
                raise InvalidDecomposition(f"{denomination!r} is not part of the denomination set")
        counts: dict[Denomination, int] = {}
        for denomination in self.denominations:
            count = supplied.get(denomination, 0)
            if isinstance(count, bool) or not isinstance(count, int):
                raise InvalidDecomposition(f"Count for {denomination} must be an int, got {count!r}")
            if count < 0:
                raise InvalidDecomposition(f"Count for {denomination} must be non-negative, got {count}")
            counts[denomination] = count

        if remainder < 0:
            raise InvalidDecomposition(f"Remainder must be non-negative, got {remainder}")
        represented = sum((d.magnitude * c for d, c in counts.items()), Fraction(0))
        if represented + remainder != amount:
            raise InvalidDecomposition(
                f"Counts ({represented}) plus remainder ({remainder}) do not add up to amount ({amount})"
            )

        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "remainder", remainder)
        object.__setattr__(self, "counts", MappingProxyType(counts))

    @property
    def total_count(self) -> int:
        """Total number of units used."""
        return sum(self.counts.values())

    @property
    def represented(self) -> Fraction:
        """Value covered by the counted units (amount minus remainder)."""
        return sum((d.magnitude * c for d, c in self.counts.items()), Fraction(0))

    @property
    def is_exact(self) -> bool:
        return self.remainder == 0

    def nonzero(self) -> tuple[tuple[Denomination, int], ...]:
        """(denomination, count) pairs with a positive count, largest first."""
        return tuple((d, c) for d, c in self.counts.items() if c)

    def count_of(self, denomination: Union[Denomination, str]) -> int:
        """
        Count for one denomination, given as a Denomination or its identity.

        Raises:
            KeyError: If the denomination is not part of the set
        """
        if isinstance(denomination, str):
            denomination = self.denominations.by_identity(denomination)
        return self.counts[denomination]

    def as_dict(self) -> dict[str, int]:
        """Identity -> count for every denomination actually used."""
        return {d.identity: c for d, c in self.nonzero()}

    def describe(self) -> str:
        """Compact one-line rendering, e.g. '1 x 4, 2 x 1 (remainder 1/2)'."""
        text = ", ".join(f"{c} x {d.identity}" for d, c in self.nonzero()) or "nothing"
        if self.remainder:
            text += f" (remainder {fraction_to_str(self.remainder)})"
        return text
