"""
The DataSize value object.

A DataSize is an exact, non-negative quantity of digital information paired
with a unit. All comparisons, including equality and hashing, look at the
value expressed in bytes, so ``DataSize(1000, BYTE) == DataSize(1, SI.KILOBYTE)``.

Example usage:
    size = DataSize.of(1536, BYTE)
    size.to_unit(IEC.KIBIBYTE)  # 1.5 KiB
    size.to_natural_unit()  # 1.536 kB
    DataSize.parse("2.42 kilobyte")
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Union

from datasize.core.convert import convert_value
from datasize.core.errors import (
    InvalidArgumentError,
    MissingArgumentError,
    NegativeValueError,
)
from datasize.core.locales import LocaleLike
from datasize.core.types import NaturalPolicy
from datasize.core.units import BYTE, Unit

Number = Union[int, float, Decimal]

_ONE = Decimal(1)


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        raise MissingArgumentError("value")
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got a boolean: {value}")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(f"Value must be finite: {value}")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Value must be finite: {value}")
        # Shortest repr, so 0.1 becomes Decimal("0.1") rather than its binary expansion
        return Decimal(repr(value))
    raise InvalidArgumentError(f"Expected int, float or Decimal, got {type(value).__name__}")


class DataSize:
    """
    An immutable quantity of digital information.

    Every operation that changes the value or unit returns a new instance.
    """

    __slots__ = ("_value", "_unit")

    def __init__(self, value: Number, unit: Unit):
        """
        Create a new data size.

        Args:
            value: A non-negative int, float or Decimal
            unit: The unit the value is expressed in

        Raises:
            MissingArgumentError: If value or unit is None
            NegativeValueError: If value is less than zero
            InvalidArgumentError: If value is not a finite number
        """
        decimal_value = _to_decimal(value)
        if unit is None:
            raise MissingArgumentError("unit")
        if not isinstance(unit, Unit):
            raise InvalidArgumentError(f"Expected a Unit, got {type(unit).__name__}")
        if decimal_value < 0:
            raise NegativeValueError(value)

        # Normalise -0 so it formats as 0
        self._value = decimal_value.copy_abs() if decimal_value.is_zero() else decimal_value
        self._unit = unit

    @classmethod
    def of(cls, value: Number, unit: Unit) -> "DataSize":
        """Create a new data size from a value and a unit."""
        return cls(value, unit)

    @classmethod
    def of_bytes(cls, buffer: Union[bytes, bytearray, memoryview]) -> "DataSize":
        """Create a data size measuring the length of a bytes-like object."""
        if buffer is None:
            raise MissingArgumentError("buffer")
        return cls(len(buffer), BYTE)

    @classmethod
    def parse(cls, text: str, locale: Optional[LocaleLike] = None) -> "DataSize":
        """
        Parse text such as "2.42 kB" or "2.42 kilobyte" leniently.

        Parsing is case insensitive and tolerates missing or extra whitespace,
        which makes SI and JEDEC abbreviations indistinguishable; SI always
        wins, so "1 KB" is one SI kilobyte. Use a strict DataSizeParser to
        get JEDEC kilobytes.

        Args:
            text: The text to parse
            locale: Locale of the number, None for the current default

        Raises:
            ParseError: If the text is not a valid data size
        """
        from datasize.api.parse import DataSizeParser

        return DataSizeParser(locale=locale).parse(text)

    @staticmethod
    def max(first: "DataSize", second: "DataSize") -> "DataSize":
        """Return the greater size, or the first one if they are equal."""
        return first if first >= second else second

    @staticmethod
    def min(first: "DataSize", second: "DataSize") -> "DataSize":
        """Return the lesser size, or the first one if they are equal."""
        return first if first <= second else second

    @property
    def value(self) -> Decimal:
        """The exact value, expressed in ``unit``."""
        return self._value

    @property
    def unit(self) -> Unit:
        """The unit the value is expressed in."""
        return self._unit

    @property
    def bytes(self) -> Fraction:
        """Exact size in bytes."""
        return Fraction(self._value) * self._unit.magnitude

    def to_unit(self, unit: Unit) -> "DataSize":
        """Return an equal data size expressed in another unit."""
        if unit is None:
            raise MissingArgumentError("unit")
        return DataSize(convert_value(self._value, self._unit, unit), unit)

    def to_natural_unit(self, policy: NaturalPolicy = NaturalPolicy.SIMPLE) -> "DataSize":
        """
        Return an equal data size in a more readable unit.

        See datasize.api.natural.to_natural for the rules.
        """
        from datasize.api.natural import to_natural

        return to_natural(self, policy)

    def format(
        self,
        locale: Optional[LocaleLike] = None,
        precision: Optional[int] = 2,
        natural: Optional[NaturalPolicy] = None,
    ) -> str:
        """
        Format as "<number> <abbreviation>".

        Args:
            locale: Locale of the number, None for the current default
            precision: Maximum fraction digits, None for no rounding
            natural: Convert to the natural unit with this policy first
        """
        from datasize.api.format import DataSizeFormatter

        return DataSizeFormatter(locale, precision, natural).format(self)

    def add(self, other: "DataSize") -> "DataSize":
        """Return the sum, expressed in this size's unit."""
        if other is None:
            raise MissingArgumentError("other")
        return DataSize(self._value + other.to_unit(self._unit).value, self._unit)

    def subtract(self, other: "DataSize") -> "DataSize":
        """Return the difference in this size's unit, capped at zero."""
        if other is None:
            raise MissingArgumentError("other")
        difference = self._value - other.to_unit(self._unit).value
        return DataSize(max(difference, Decimal(0)), self._unit)

    def increment(self) -> "DataSize":
        """Return a size one unit greater."""
        return DataSize(self._value + _ONE, self._unit)

    def decrement(self) -> "DataSize":
        """Return a size one unit smaller, capped at zero."""
        return DataSize(max(self._value - _ONE, Decimal(0)), self._unit)

    def __add__(self, other: "DataSize") -> "DataSize":
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "DataSize") -> "DataSize":
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other: Any) -> bool:
        """Check if two sizes hold the same number of bytes."""
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.bytes == other.bytes

    def __lt__(self, other: "DataSize") -> bool:
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.bytes < other.bytes

    def __gt__(self, other: "DataSize") -> bool:
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.bytes > other.bytes

    def __le__(self, other: "DataSize") -> bool:
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.bytes <= other.bytes

    def __ge__(self, other: "DataSize") -> bool:
        if not isinstance(other, DataSize):
            return NotImplemented
        return self.bytes >= other.bytes

    def __hash__(self) -> int:
        return hash(self.bytes)

    def __reduce__(self):
        return (DataSize, (self._value, self._unit))

    def __str__(self) -> str:
        return self.format(locale="en_US", precision=2)

    def __repr__(self) -> str:
        return f"DataSize({str(self._value)!r}, {self._unit.abbreviation})"
