"""
Exact unit conversion.

Every unit's size in bytes is a power of 2 or 10, optionally divided by 8,
so the ratio between two units is a fraction whose denominator only has the
prime factors 2 and 5. Multiplying a Decimal by such a ratio always gives a
terminating decimal, which is computed here without rounding.
"""

from decimal import Decimal
from fractions import Fraction
from functools import lru_cache

from datasize.core.errors import MissingArgumentError
from datasize.core.logging import get_logger
from datasize.core.units import Unit

log = get_logger(__name__)


@lru_cache(maxsize=None)
def conversion_ratio(source: Unit, target: Unit) -> Fraction:
    """
    Get the exact factor that converts a value in one unit to another.

    Results are cached process-wide; the cache is safe to share between
    threads and never changes the result.

    Args:
        source: The unit the value is expressed in
        target: The unit to convert to

    Returns:
        source.magnitude / target.magnitude
    """
    ratio = source.magnitude / target.magnitude
    log.debug(f"Computed conversion ratio {source} -> {target}: {ratio}")
    return ratio


def fraction_to_decimal(fraction: Fraction) -> Decimal:
    """
    Convert a fraction with a 2^a * 5^b denominator to an exact Decimal.

    Trailing fractional zeros are dropped, integral results keep exponent 0.

    Raises:
        ValueError: If the fraction has no terminating decimal expansion
    """
    denominator = fraction.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        raise ValueError(f"{fraction} has no terminating decimal expansion")

    scale = max(twos, fives)
    coefficient = fraction.numerator * 10**scale // fraction.denominator
    while scale > 0 and coefficient % 10 == 0:
        coefficient //= 10
        scale -= 1

    # The string constructor is exact regardless of the context precision
    return Decimal(f"{coefficient}E-{scale}") if scale else Decimal(coefficient)


def convert_value(value: Decimal, source: Unit, target: Unit) -> Decimal:
    """
    Convert a value from one unit to another without losing precision.

    Args:
        value: The value expressed in the source unit
        source: The unit of the value
        target: The unit to convert to

    Returns:
        The exact value expressed in the target unit
    """
    if source == target:
        return value
    return fraction_to_decimal(Fraction(value) * conversion_ratio(source, target))


def decimal_scale(value: Decimal) -> int:
    """Number of significant fraction digits, ignoring trailing zeros."""
    if not value.is_finite() or value.is_zero():
        return 0
    sign, digits, exponent = value.as_tuple()
    if exponent >= 0:
        return 0
    trailing = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return max(0, -exponent - trailing)


def convert(size, target: Unit):
    """
    Convert a data size to another unit.

    Args:
        size: The DataSize to convert
        target: The unit to express it in

    Returns:
        An equal DataSize whose value is expressed in ``target``

    Raises:
        MissingArgumentError: If size or target is None
    """
    if size is None:
        raise MissingArgumentError("size")
    if target is None:
        raise MissingArgumentError("target")
    return size.to_unit(target)
