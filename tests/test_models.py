# tests/test_models.py
"""
Domain Model Tests - Unit Tests for Denominations, Sets and Decompositions

This module contains unit tests for the immutable domain models: construction
validation, descending ordering, grid units and the decomposition exactness
invariant.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- denomkit.domain.models (Denomination, DenominationSet, Decomposition, Strategy)
- denomkit.domain.errors (validation exceptions)
- pytest (testing framework)
"""
import dataclasses
from decimal import Decimal
from fractions import Fraction

import pytest  # Testing framework for writing and running tests

from denomkit.domain.errors import (
    DenomError,
    DuplicateMagnitude,
    EmptySet,
    InvalidDecomposition,
    InvalidDenomination,
    ValidationError,
)
from denomkit.domain.models import Decomposition, Denomination, DenominationSet, Strategy


class TestDenomination:
    def test_magnitude_is_exact(self):
        d = Denomination("0.05", "5c")
        assert d.magnitude == Fraction(1, 20)
        assert d.identity == "5c"

    def test_float_magnitude_uses_decimal_repr(self):
        assert Denomination(0.1).magnitude == Fraction(1, 10)

    def test_identity_defaults_to_magnitude(self):
        assert Denomination(25).identity == "25"
        assert Denomination(Fraction(1, 2)).identity == "1/2"
        assert str(Denomination(Decimal("2.50"))) == "5/2"

    @pytest.mark.parametrize("magnitude", [0, -1, "-0.01", Fraction(0)])
    def test_non_positive_magnitude_rejected(self, magnitude):
        with pytest.raises(InvalidDenomination, match="positive"):
            Denomination(magnitude, "x")

    @pytest.mark.parametrize("magnitude", ["abc", None, True, float("nan"), "1/0"])
    def test_non_numeric_magnitude_rejected(self, magnitude):
        with pytest.raises(InvalidDenomination):
            Denomination(magnitude, "x")

    def test_control_characters_in_identity_rejected(self):
        with pytest.raises(InvalidDenomination, match="identity"):
            Denomination(1, "bad\nlabel")

    def test_immutable(self):
        d = Denomination(5, "five")
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.magnitude = Fraction(6)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Denomination(0)
        assert issubclass(InvalidDenomination, ValidationError)
        assert issubclass(ValidationError, DenomError)


class TestDenominationSet:
    def test_sorted_descending(self):
        s = DenominationSet.of(1, 25, 5, 10)
        assert s.magnitudes == (25, 10, 5, 1)
        assert s.largest.magnitude == 25
        assert s.smallest.magnitude == 1
        assert len(s) == 4
        assert [d.identity for d in s] == ["25", "10", "5", "1"]

    def test_denominations_are_read_only_tuple(self):
        s = DenominationSet.of(1, 5)
        assert isinstance(s.denominations, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.denominations = ()

    def test_empty_rejected(self):
        with pytest.raises(EmptySet):
            DenominationSet(())
        with pytest.raises(EmptySet):
            DenominationSet.of()

    def test_zero_magnitude_rejected(self):
        with pytest.raises(InvalidDenomination):
            DenominationSet.of(0, 5)

    def test_duplicate_magnitude_rejected(self):
        with pytest.raises(DuplicateMagnitude) as excinfo:
            DenominationSet.of(5, 5)
        assert excinfo.value.magnitude == "5"

    def test_duplicate_magnitude_with_different_identities(self):
        with pytest.raises(DuplicateMagnitude, match="fiver, five"):
            DenominationSet((Denomination(5, "fiver"), Denomination("5.00", "five")))

    def test_duplicate_identity_rejected(self):
        with pytest.raises(InvalidDenomination, match="identity"):
            DenominationSet((Denomination(5, "coin"), Denomination(1, "coin")))

    def test_non_denomination_rejected(self):
        with pytest.raises(TypeError):
            DenominationSet((5, 1))

    def test_from_mapping_and_lookup(self):
        s = DenominationSet.from_mapping({"penny": 1, "quarter": 25, "dime": 10})
        assert s.by_identity("dime").magnitude == 10
        assert s.largest.identity == "quarter"
        with pytest.raises(KeyError):
            s.by_identity("nickel")

    def test_grid_unit(self):
        assert DenominationSet.of(1, 5, 10).grid_unit == 1
        assert DenominationSet.of("0.01", "0.05", 1, 2).grid_unit == Fraction(1, 100)
        assert DenominationSet.of(Fraction(1, 3), Fraction(1, 2)).grid_unit == Fraction(1, 6)

    def test_equality_ignores_input_order(self):
        assert DenominationSet.of(1, 5) == DenominationSet.of(5, 1)
        assert hash(DenominationSet.of(1, 5)) == hash(DenominationSet.of(5, 1))


class TestDecomposition:
    def setup_method(self):
        self.coins = DenominationSet.of(4, 3, 1)
        self.four = self.coins.by_identity("4")
        self.three = self.coins.by_identity("3")
        self.one = self.coins.by_identity("1")

    def test_counts_cover_whole_set(self):
        d = Decomposition(amount=6, denominations=self.coins, counts={self.three: 2})
        assert dict(d.counts) == {self.four: 0, self.three: 2, self.one: 0}
        assert d.total_count == 2
        assert d.represented == 6
        assert d.is_exact
        assert d.as_dict() == {"3": 2}
        assert d.nonzero() == ((self.three, 2),)
        assert d.count_of("3") == 2
        assert d.count_of(self.four) == 0

    def test_remainder(self):
        d = Decomposition(
            amount=Fraction(13, 2), denominations=self.coins,
            counts={self.three: 2}, remainder=Fraction(1, 2),
        )
        assert not d.is_exact
        assert d.represented + d.remainder == d.amount
        assert d.describe() == "2 x 3 (remainder 1/2)"

    def test_counts_are_read_only(self):
        d = Decomposition(amount=6, denominations=self.coins, counts={self.three: 2})
        with pytest.raises(TypeError):
            d.counts[self.one] = 6

    def test_sum_mismatch_rejected(self):
        with pytest.raises(InvalidDecomposition, match="do not add up"):
            Decomposition(amount=7, denominations=self.coins, counts={self.three: 2})

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidDecomposition, match="non-negative"):
            Decomposition(amount=1, denominations=self.coins, counts={self.four: 1, self.three: -1})

    def test_negative_remainder_rejected(self):
        with pytest.raises(InvalidDecomposition, match="Remainder"):
            Decomposition(amount=3, denominations=self.coins, counts={self.four: 1}, remainder=-1)

    def test_foreign_denomination_rejected(self):
        with pytest.raises(InvalidDecomposition, match="not part"):
            Decomposition(amount=2, denominations=self.coins, counts={Denomination(2): 1})

    def test_non_integer_count_rejected(self):
        with pytest.raises(InvalidDecomposition, match="int"):
            Decomposition(amount=3, denominations=self.coins, counts={self.three: 1.0})

    def test_describe_empty(self):
        d = Decomposition(amount=0, denominations=self.coins, counts={})
        assert d.describe() == "nothing"


class TestStrategy:
    def test_parse_names(self):
        assert Strategy("greedy") is Strategy.GREEDY
        assert Strategy(" OPTIMAL ") is Strategy.OPTIMAL
        assert Strategy(Strategy.GREEDY) is Strategy.GREEDY

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            Strategy("fastest")
