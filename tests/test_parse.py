"""
Tests for parsing textual data sizes.
"""

from decimal import Decimal

import pytest

from datasize import (
    BIT,
    BYTE,
    IEC,
    JEDEC,
    SI,
    DataSize,
    DataSizeParser,
    MissingArgumentError,
    NegativeValueError,
    ParseConfigBuilder,
    ParseError,
    ParsePolicy,
    UnknownLocaleError,
    parse,
)

strict = DataSizeParser(ParsePolicy.STRICT, locale="en_US")
lenient = DataSizeParser(ParsePolicy.LENIENT, locale="en_US")


class TestLenientParsing:
    """Test the default, lenient policy."""

    @pytest.mark.parametrize("text", ["1 B", " 1 B", "1  B", "1B", "1 B ", "\t1\nB\t"])
    def test_whitespace_is_optional(self, text):
        """Test that any amount of whitespace is accepted."""
        assert lenient.parse(text) == DataSize(1, BYTE)

    def test_case_insensitive(self):
        """Test that letter case is ignored."""
        assert lenient.parse("1 kib").unit == IEC.KIBIBYTE
        assert lenient.parse("1 KILOBYTES").unit == SI.KILOBYTE
        assert lenient.parse("1 b").unit == BYTE

    def test_si_wins_over_jedec(self):
        """Test that ambiguous abbreviations resolve to SI."""
        assert lenient.parse("1 kB").unit == SI.KILOBYTE
        assert lenient.parse("1 KB").unit == SI.KILOBYTE
        assert lenient.parse("1 MB").unit == SI.MEGABYTE
        assert lenient.parse("1 Kbit").unit == SI.KILOBIT

    def test_data_size_parse(self):
        """Test the DataSize.parse shortcut."""
        assert DataSize.parse("2.42 kilobyte") == DataSize(Decimal("2.42"), SI.KILOBYTE)
        assert DataSize.parse("1 KB").unit == SI.KILOBYTE


class TestStrictParsing:
    """Test the strict policy."""

    def test_valid(self):
        """Test well formed input."""
        assert strict.parse("1 B") == DataSize(1, BYTE)
        assert strict.parse("3.14 kB") == DataSize(Decimal("3.14"), SI.KILOBYTE)
        assert strict.parse("1\tKiB").unit == IEC.KIBIBYTE

    @pytest.mark.parametrize(
        "text, position, reason",
        [
            (" 1 B", 0, "number expected"),
            ("1  B", 2, "unit expected"),
            ("1B", 1, "whitespace expected"),
            ("1 B ", 3, "end of input expected"),
        ],
    )
    def test_whitespace_rules(self, text, position, reason):
        """Test that whitespace must be exactly one character between the parts."""
        with pytest.raises(ParseError) as exc_info:
            strict.parse(text)
        assert exc_info.value.position == position
        assert exc_info.value.reason.startswith(reason)
        assert exc_info.value.text == text

    def test_case_sensitive(self):
        """Test that abbreviations must match exactly."""
        assert strict.parse("1 kB").unit == SI.KILOBYTE
        assert strict.parse("1 KB").unit == JEDEC.KILOBYTE
        assert strict.parse("1 MB").unit == SI.MEGABYTE
        assert strict.parse("1 GB").unit == SI.GIGABYTE
        assert strict.parse("1 Mbit").unit == JEDEC.MEGABIT
        assert strict.parse("1 mbit").unit == SI.MEGABIT

        with pytest.raises(ParseError):
            strict.parse("1 kib")
        with pytest.raises(ParseError):
            strict.parse("1 Kilobyte")


class TestUnits:
    """Test unit recognition."""

    def test_names_and_plurals(self):
        """Test that full names and plural names are accepted."""
        assert lenient.parse("1 byte").unit == BYTE
        assert lenient.parse("2 bytes").unit == BYTE
        assert lenient.parse("1 bit").unit == BIT
        assert lenient.parse("5 bits").unit == BIT
        assert strict.parse("3 mebibytes").unit == IEC.MEBIBYTE
        assert strict.parse("3 kilobits").unit == SI.KILOBIT

    def test_longest_token_wins(self):
        """Test that bit units are not mistaken for byte units."""
        assert lenient.parse("1 kbit").unit == SI.KILOBIT
        assert lenient.parse("1kibit").unit == IEC.KIBIBIT

    def test_unknown_unit(self):
        """Test that an unknown unit fails after the number."""
        with pytest.raises(ParseError) as exc_info:
            lenient.parse("12 parsecs")
        assert exc_info.value.position == 3
        assert exc_info.value.reason == "unit expected"

    def test_trailing_garbage(self):
        """Test that text after the unit is rejected."""
        with pytest.raises(ParseError) as exc_info:
            lenient.parse("1 kB extra")
        assert exc_info.value.position == 5


class TestNumbers:
    """Test the number part."""

    def test_grouping_and_precision(self):
        """Test grouped and high precision numbers."""
        assert lenient.parse("1,024 KiB").value == 1024
        assert lenient.parse("1,234,567.891 B").value == Decimal("1234567.891")
        assert lenient.parse(".5 MB").value == Decimal("0.5")
        assert lenient.parse("123456789012345678901234567890.123456789 B").value == Decimal(
            "123456789012345678901234567890.123456789"
        )

    @pytest.mark.parametrize("text", ["NaN B", "inf B", "kB", "", "   ", "abc"])
    def test_not_a_number(self, text):
        """Test that input without a number is rejected."""
        with pytest.raises(ParseError) as exc_info:
            lenient.parse(text)
        assert exc_info.value.reason.startswith("number expected")

    def test_negative_values(self):
        """Test that negative sizes fail at the start of the number."""
        with pytest.raises(ParseError) as exc_info:
            lenient.parse("  -5 kB")
        assert exc_info.value.position == 2
        assert isinstance(exc_info.value.__cause__, NegativeValueError)

        with pytest.raises(ParseError) as exc_info:
            strict.parse("-1 B")
        assert exc_info.value.position == 0

    def test_negative_zero(self):
        """Test that negative zero is zero."""
        assert lenient.parse("-0 B") == DataSize(0, BYTE)

    def test_none(self):
        """Test that None is rejected."""
        with pytest.raises(MissingArgumentError):
            lenient.parse(None)

    def test_parse_errors_are_value_errors(self):
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            parse("nothing")


class TestLocales:
    """Test locale-dependent number symbols."""

    def test_german(self):
        """Test German decimal comma and dot grouping."""
        parser = DataSizeParser(locale="de_DE")
        assert parser.parse("1.024,5 KiB") == DataSize(Decimal("1024.5"), IEC.KIBIBYTE)
        assert parser.parse("3,14 kB").value == Decimal("3.14")

    def test_hyphenated_identifier(self):
        """Test that BCP 47 style identifiers are accepted."""
        assert parse("2,5 MB", locale="de-DE").value == Decimal("2.5")

    def test_follows_default_locale(self, monkeypatch):
        """Test that the process default locale is read on every call."""
        parser = DataSizeParser()
        assert parser.parse("1.5 kB").value == Decimal("1.5")

        monkeypatch.setenv("LC_NUMERIC", "de_DE.UTF-8")
        assert parser.parse("1,5 kB").value == Decimal("1.5")

    def test_unknown_locale(self):
        """Test that unknown locales are reported."""
        with pytest.raises(UnknownLocaleError):
            parse("1 B", locale="zz_ZZ")

    def test_from_config(self):
        """Test building a parser from a config."""
        config = ParseConfigBuilder().locale("de_DE").strict().build()
        parser = DataSizeParser.from_config(config)

        assert parser.policy == ParsePolicy.STRICT
        assert parser.case_sensitive
        assert parser.parse("1,5 KB") == DataSize(Decimal("1.5"), JEDEC.KILOBYTE)
