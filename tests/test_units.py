"""
Tests for the units module.

This module tests the unit registry: catalog contents, unit magnitudes,
standards and unit lookup.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from datasize import DataSize, DataSizeParser
from datasize.core.errors import DataSizeError, InvalidArgumentError, UnknownUnitError
from datasize.core.types import ParsePolicy, StandardType, UnitKind
from datasize.core.units import (
    ALL,
    BIT,
    BYTE,
    IEC,
    JEDEC,
    SI,
    Unit,
    find_unit,
    match_unit,
    standard_of,
)


class TestUnitBasics:
    """Test basic unit functionality."""

    def test_reference_units(self):
        """Test the bit and byte reference units."""
        assert BYTE.abbreviation == "B"
        assert BYTE.name == "byte"
        assert BYTE.magnitude == 1
        assert BYTE.standard is None

        assert BIT.abbreviation == "bit"
        assert BIT.kind == UnitKind.BIT
        assert BIT.magnitude == Fraction(1, 8)

    def test_magnitudes(self):
        """Test exact sizes in bytes."""
        assert SI.KILOBYTE.magnitude == 1000
        assert IEC.KIBIBYTE.magnitude == 1024
        assert JEDEC.KILOBYTE.magnitude == 1024
        assert SI.YOTTABYTE.magnitude == 10**24
        assert IEC.YOBIBYTE.magnitude == 2**80
        assert SI.KILOBIT.magnitude == 125
        assert IEC.KIBIBIT.magnitude == 128
        assert JEDEC.GIGABIT.magnitude == Fraction(2**30, 8)

    def test_string_representation(self):
        """Test that units print as their abbreviation."""
        assert str(IEC.MEBIBYTE) == "MiB"
        assert repr(SI.GIGABYTE) == "Unit('GB', 'gigabyte', 10^9)"

    def test_plural(self):
        """Test plural names."""
        assert BYTE.plural == "bytes"
        assert SI.KILOBYTE.plural == "kilobytes"

    def test_value_equality(self):
        """Test that units compare by value."""
        assert SI.MEGABYTE != JEDEC.MEGABYTE
        assert SI.KILOBYTE == Unit("kB", "kilobyte", 10, 3, UnitKind.BYTE, StandardType.SI)
        assert len({SI.KILOBYTE, JEDEC.KILOBYTE, SI.KILOBYTE}) == 2

    def test_invalid_units(self):
        """Test that invalid bases and exponents are rejected."""
        with pytest.raises(InvalidArgumentError):
            Unit("X", "broken", 0, 1)
        with pytest.raises(InvalidArgumentError):
            Unit("X", "broken", 2, -1)

    @pytest.mark.parametrize("base", [3, 16, 1000])
    def test_only_binary_and_decimal_bases(self, base):
        """Test that bases other than 1, 2 and 10 are rejected as DataSizeErrors."""
        with pytest.raises(DataSizeError):
            Unit("tri", "trit-byte", base, 1)

    def test_custom_units_convert(self):
        """Test that any constructible unit converts without error."""
        block = Unit("blk", "block", 2, 9)
        assert DataSize(1, block).to_unit(SI.KILOBYTE).value == Decimal("0.512")
        assert DataSize(1, BYTE).to_unit(Unit("dk", "decabyte", 10, 1)).value == Decimal("0.1")


class TestStandards:
    """Test unit standards."""

    def test_membership(self):
        """Test has() and the in operator."""
        assert SI.has(SI.KILOBYTE)
        assert not SI.has(JEDEC.KILOBYTE)
        assert IEC.KIBIBIT in IEC
        assert BYTE not in SI
        assert "kB" not in SI

    def test_sizes(self):
        """Test the number of units per standard."""
        assert len(SI) == 16
        assert len(IEC) == 16
        assert len(JEDEC) == 6
        assert len(ALL) == 2 + 16 + 16 + 6

    def test_units_by_kind(self):
        """Test filtering units by kind."""
        assert [unit.abbreviation for unit in JEDEC.units(UnitKind.BYTE)] == ["KB", "MB", "GB"]
        assert [unit.abbreviation for unit in JEDEC.units(UnitKind.BIT)] == [
            "Kbit",
            "Mbit",
            "Gbit",
        ]
        assert all(unit.kind == UnitKind.BIT for unit in SI.units(UnitKind.BIT))

    def test_all_order(self):
        """Test that ALL lists bits before bytes and SI before JEDEC."""
        units = ALL.units()
        assert units[0] == BIT
        assert units.index(BYTE) == 1 + 8 + 8 + 3
        assert units.index(SI.KILOBYTE) < units.index(JEDEC.KILOBYTE)
        assert units.index(SI.KILOBIT) < units.index(JEDEC.KILOBIT)

    def test_unique_abbreviations(self):
        """Test that abbreviations are unique within a standard."""
        for standard in (SI, IEC, JEDEC):
            abbreviations = [unit.abbreviation for unit in standard]
            assert len(abbreviations) == len(set(abbreviations))

    def test_standard_of(self):
        """Test finding the standard of a unit."""
        assert standard_of(SI.TERABYTE) is SI
        assert standard_of(JEDEC.MEGABIT) is JEDEC
        assert standard_of(BYTE) is None


class TestFindUnit:
    """Test looking up units by text."""

    def test_by_abbreviation_name_and_plural(self):
        """Test the three accepted spellings."""
        assert find_unit("KiB") == IEC.KIBIBYTE
        assert find_unit("kibibyte") == IEC.KIBIBYTE
        assert find_unit("kibibytes") == IEC.KIBIBYTE

    def test_si_preferred(self):
        """Test that shared spellings resolve to SI."""
        assert find_unit("MB") == SI.MEGABYTE
        assert find_unit("kilobyte") == SI.KILOBYTE
        assert find_unit("KB") == JEDEC.KILOBYTE
        assert find_unit("KB", case_sensitive=False) == SI.KILOBYTE

    def test_unknown(self):
        """Test that unknown tokens raise."""
        with pytest.raises(UnknownUnitError):
            find_unit("parsec")
        with pytest.raises(UnknownUnitError):
            find_unit("kib")

    def test_complete_token_required(self):
        """Test that a unit followed by other text is not a match."""
        with pytest.raises(UnknownUnitError):
            find_unit("kBx")
        with pytest.raises(UnknownUnitError):
            find_unit("")


class TestMatchUnit:
    """Test matching a unit token inside a longer text."""

    def test_longest_token_wins(self):
        """Test that bit units are not cut short to byte units."""
        assert match_unit("kbit", case_sensitive=False) == (SI.KILOBIT, 4)
        assert match_unit("kibibytes and more", case_sensitive=False) == (IEC.KIBIBYTE, 9)

    def test_position(self):
        """Test matching from an offset."""
        assert match_unit("12 MiB", 3) == (IEC.MEBIBYTE, 3)
        assert match_unit("12 MiB", 2) is None

    def test_si_wins_ties(self):
        """Test that SI precedes JEDEC on equal length."""
        assert match_unit("KB", case_sensitive=False) == (SI.KILOBYTE, 2)
        assert match_unit("KB") == (JEDEC.KILOBYTE, 2)
        assert match_unit("GB") == (SI.GIGABYTE, 2)

    def test_agrees_with_parser(self):
        """Test that lookup and parsing resolve every catalog token alike."""
        strict = DataSizeParser(ParsePolicy.STRICT, locale="en_US")
        lenient = DataSizeParser(ParsePolicy.LENIENT, locale="en_US")
        for unit in ALL:
            for token in (unit.abbreviation, unit.name, unit.plural):
                assert find_unit(token) == strict.parse(f"1 {token}").unit
                assert find_unit(token, case_sensitive=False) == lenient.parse(f"1 {token}").unit
