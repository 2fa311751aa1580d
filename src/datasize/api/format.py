"""
Formatting of data sizes.

Output has the form ``<number> <abbreviation>``. The number uses the
locale's default decimal pattern from Babel (grouping and symbols), rounded
HALF_UP to at most ``precision`` fraction digits. Trailing zeros are shown
up to the value's own precision but never invented: at precision 2, 1.001
becomes "1.00", 1.5 stays "1.5" and 1000 is "1,000" in en_US.

A formatter configured with a natural unit policy first converts the size to
its most readable unit and then formats it the same way.
"""

import copy
import decimal
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from babel import Locale

from datasize.api.natural import to_natural
from datasize.core.config import DEFAULT_PRECISION, FormatConfig
from datasize.core.convert import decimal_scale
from datasize.core.errors import MissingArgumentError
from datasize.core.locales import LocaleLike, resolve_locale
from datasize.core.size import DataSize
from datasize.core.types import NaturalPolicy


def format_number(value: Decimal, locale: Locale, precision: Optional[int]) -> str:
    """
    Format a decimal with the locale's number pattern.

    Args:
        value: The value to format
        locale: The Babel locale
        precision: Maximum fraction digits, None or negative for all digits

    Returns:
        The localized number
    """
    scale = decimal_scale(value)
    integer_digits = max(value.adjusted() + 1, 1)

    with decimal.localcontext() as context:
        # Keep every digit; the default 28 would round large values
        context.prec = max(context.prec, integer_digits + max(scale, precision or 0) + 2)
        context.rounding = ROUND_HALF_UP

        if precision is None or precision < 0:
            min_fraction = max_fraction = scale
        else:
            value = value.quantize(Decimal(1).scaleb(-precision))
            min_fraction = min(precision, scale)
            max_fraction = precision

        pattern = copy.copy(locale.decimal_formats[None])
        pattern.frac_prec = (min_fraction, max_fraction)
        return pattern.apply(value, locale)


class DataSizeFormatter:
    """
    Formatter that renders DataSize objects as text.

    The locale is resolved on every call when none is given, so the formatter
    follows changes to the process default locale.

    Example usage:
        formatter = DataSizeFormatter(locale="en_US", precision=2)
        formatter.format(DataSize(math.pi, SI.KILOBYTE))  # "3.14 kB"

        smart = DataSizeFormatter.smart(locale="en_US")
        smart.format(DataSize(1024, IEC.KIBIBYTE))  # "1 MiB"
    """

    def __init__(
        self,
        locale: Optional[LocaleLike] = None,
        precision: Optional[int] = DEFAULT_PRECISION,
        natural: Optional[NaturalPolicy] = None,
    ):
        """
        Initialize a new DataSizeFormatter.

        Args:
            locale: Locale of the number part, None for the current default
            precision: Maximum fraction digits, None or negative for all digits
            natural: Convert to the natural unit with this policy before formatting
        """
        self._config = FormatConfig(locale=locale, precision=precision, natural=natural)

    @classmethod
    def from_config(cls, config: FormatConfig) -> "DataSizeFormatter":
        """Create a formatter from a FormatConfig."""
        return cls(config.locale, config.precision, config.natural)

    @classmethod
    def smart(
        cls,
        locale: Optional[LocaleLike] = None,
        precision: Optional[int] = DEFAULT_PRECISION,
    ) -> "DataSizeFormatter":
        """Create a formatter that picks the most readable unit (SMART policy)."""
        return cls(locale, precision, NaturalPolicy.SMART)

    @property
    def config(self) -> FormatConfig:
        """Return the formatter configuration."""
        return self._config

    def format(self, size: DataSize) -> str:
        """
        Format a data size as "<number> <abbreviation>".

        Args:
            size: The data size to format

        Returns:
            The formatted text

        Raises:
            MissingArgumentError: If size is None
        """
        if size is None:
            raise MissingArgumentError("size")

        if self._config.natural is not None:
            size = to_natural(size, self._config.natural)

        locale = resolve_locale(self._config.locale)
        precision = None if self._config.unlimited_precision else self._config.precision
        number = format_number(size.value, locale, precision)

        return f"{number} {size.unit.abbreviation}"


def format_size(
    size: DataSize,
    locale: Optional[LocaleLike] = None,
    precision: Optional[int] = DEFAULT_PRECISION,
    natural: Optional[NaturalPolicy] = None,
) -> str:
    """
    Format a data size as "<number> <abbreviation>".

    Args:
        size: The data size to format
        locale: Locale of the number part, None for the current default
        precision: Maximum fraction digits, None or negative for all digits
        natural: Convert to the natural unit with this policy before formatting
    """
    return DataSizeFormatter(locale, precision, natural).format(size)
