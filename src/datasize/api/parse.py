"""
Parsing of textual data sizes.

Input has the form ``<number><whitespace><unit>``, for example "3.14 kB",
"1,024 KiB" or "2.42 kilobyte". The number follows the decimal and grouping
symbols of the configured locale and may have any magnitude and precision.
The unit may be given by abbreviation, name or plural name.

Two policies are available:

- LENIENT ignores letter case and accepts any amount of whitespace before
  the number, between number and unit, and after the unit.
- STRICT matches letter case exactly, allows no leading or trailing
  whitespace and requires exactly one whitespace character before the unit.

SI and JEDEC share most abbreviations. Units are always tried with SI before
JEDEC, so an ambiguous token means SI: leniently, "1 KB" and "1 kB" are both
one SI kilobyte. Only a strict parser tells them apart, reading "1 KB" as a
JEDEC kilobyte. "MB" and "GB" are SI under either policy.
"""

import re
from decimal import Decimal
from typing import Optional, Pattern, Tuple

from babel import Locale
from babel.numbers import (
    NumberFormatError,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
    parse_decimal,
)

from datasize.core.config import ParseConfig
from datasize.core.errors import InvalidArgumentError, MissingArgumentError, ParseError
from datasize.core.locales import LocaleLike, resolve_locale
from datasize.core.logging import get_logger
from datasize.core.size import DataSize
from datasize.core.types import ParsePolicy
from datasize.core.units import Unit, match_unit

log = get_logger(__name__)


def _numeral_pattern(locale: Locale) -> Pattern[str]:
    decimal = re.escape(get_decimal_symbol(locale))
    group = re.escape(get_group_symbol(locale))
    minus = re.escape(get_minus_sign_symbol(locale))
    return re.compile(
        rf"(?P<sign>{minus}|-)?"
        rf"(?P<number>[0-9]+(?:{group}[0-9]+)*(?:{decimal}[0-9]*)?|{decimal}[0-9]+)"
    )


class DataSizeParser:
    """
    Parser that turns text into DataSize objects.

    The locale is resolved on every call when none is given, so the parser
    follows changes to the process default locale.

    Example usage:
        parser = DataSizeParser(ParsePolicy.STRICT, locale="en_US")
        parser.parse("1 KB")  # one JEDEC kilobyte
        parser.parse("1 kB")  # one SI kilobyte
    """

    def __init__(
        self,
        policy: ParsePolicy = ParsePolicy.LENIENT,
        locale: Optional[LocaleLike] = None,
    ):
        """
        Initialize a new DataSizeParser.

        Args:
            policy: LENIENT or STRICT parsing
            locale: Locale of the number part, None for the current default
        """
        self._policy = policy
        self._locale = locale

    @classmethod
    def from_config(cls, config: ParseConfig) -> "DataSizeParser":
        """Create a parser from a ParseConfig."""
        return cls(config.policy, config.locale)

    @property
    def policy(self) -> ParsePolicy:
        """The parse policy."""
        return self._policy

    @property
    def case_sensitive(self) -> bool:
        """Whether unit tokens must match letter case exactly."""
        return self._policy == ParsePolicy.STRICT

    def parse(self, text: str) -> DataSize:
        """
        Parse text to produce a DataSize.

        Args:
            text: The text to parse

        Returns:
            The parsed data size

        Raises:
            MissingArgumentError: If text is None
            ParseError: If the text is not a valid data size, including
                negative values
        """
        if text is None:
            raise MissingArgumentError("text")

        locale = resolve_locale(self._locale)
        lenient = self._policy == ParsePolicy.LENIENT
        position = 0

        if lenient:
            position = _skip_whitespace(text, position)

        number_start = position
        value, position = self._parse_number(text, position, locale)

        if lenient:
            position = _skip_whitespace(text, position)
        elif position < len(text) and text[position].isspace():
            position += 1
        else:
            raise self._fail(text, position, "whitespace expected")

        unit, position = self._parse_unit(text, position)

        if lenient:
            position = _skip_whitespace(text, position)

        if position != len(text):
            raise self._fail(text, position, "end of input expected")

        try:
            return DataSize(value, unit)
        except InvalidArgumentError as exc:
            # Well-formed but negative
            raise ParseError(text, number_start, str(exc)) from exc

    def _parse_number(self, text: str, position: int, locale: Locale) -> Tuple[Decimal, int]:
        match = _numeral_pattern(locale).match(text, position)
        if match is None:
            raise self._fail(text, position, f"number expected in locale {locale}")

        try:
            value = parse_decimal(match.group("number"), locale=locale)
        except NumberFormatError as exc:
            raise ParseError(text, position, f"number expected in locale {locale}") from exc

        if match.group("sign"):
            value = -value

        return value, match.end()

    def _parse_unit(self, text: str, position: int) -> Tuple[Unit, int]:
        match = match_unit(text, position, self.case_sensitive)
        if match is None:
            raise self._fail(text, position, "unit expected")

        unit, length = match
        return unit, position + length

    def _fail(self, text: str, position: int, reason: str) -> ParseError:
        log.debug(f"Failed to parse {text!r} at {position}: {reason}")
        return ParseError(text, position, reason)


def _skip_whitespace(text: str, position: int) -> int:
    while position < len(text) and text[position].isspace():
        position += 1
    return position


def parse(
    text: str,
    policy: ParsePolicy = ParsePolicy.LENIENT,
    locale: Optional[LocaleLike] = None,
) -> DataSize:
    """
    Parse text to produce a DataSize.

    Args:
        text: The text to parse
        policy: LENIENT or STRICT parsing
        locale: Locale of the number part, None for the current default

    Raises:
        ParseError: If the text is not a valid data size
    """
    return DataSizeParser(policy, locale).parse(text)
