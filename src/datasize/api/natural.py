"""
Natural unit selection.

Picks the unit in which a data size reads best. Both policies share the same
steps and only differ in which units they consider and when a candidate
replaces the current best:

1. Sizes in units outside the catalog are returned untouched.
2. Anything below 8 bits is shown in bits.
3. Anything below 1000 bytes is shown in bytes.
4. Otherwise every candidate unit that keeps the value at or above 1 is
   considered, and the smallest such value wins.

The SIMPLE policy stays within the unit's own standard. The SMART policy also
lets SI and IEC compete with each other, considers every catalog unit for
plain bits and bytes, and accepts a candidate with fewer fraction digits
while the best value found so far is still 1000 or more.

JEDEC sizes only ever convert to JEDEC units, with either policy.
"""

from decimal import Decimal
from typing import List

from datasize.core.convert import decimal_scale
from datasize.core.errors import MissingArgumentError
from datasize.core.logging import get_logger
from datasize.core.size import DataSize
from datasize.core.types import NaturalPolicy
from datasize.core.units import ALL, BIT, BYTE, IEC, JEDEC, SI, Unit, standard_of

log = get_logger(__name__)

BIT_THRESHOLD = Decimal(8)
BYTE_THRESHOLD = Decimal(1000)
_ONE = Decimal(1)


def candidate_units(unit: Unit, policy: NaturalPolicy) -> List[Unit]:
    """
    List the units a size in ``unit`` may be converted to, in order of preference.

    Args:
        unit: A catalog unit
        policy: The natural unit policy

    Returns:
        The candidate units
    """
    smart = policy == NaturalPolicy.SMART
    own = standard_of(unit)

    if own is None:
        if smart:
            return ALL.units()
        standards = [SI, IEC]
    elif own is JEDEC:
        standards = [JEDEC]
    elif smart:
        # SI and IEC compete, the unit's own standard first
        standards = [own, IEC if own is SI else SI]
    else:
        standards = [own]

    return [candidate for standard in standards for candidate in standard.units(unit.kind)]


def _is_better(candidate: Decimal, best: Decimal, policy: NaturalPolicy) -> bool:
    if candidate < best:
        return True
    if policy == NaturalPolicy.SMART and best >= BYTE_THRESHOLD:
        return decimal_scale(candidate) < decimal_scale(best)
    return False


def to_natural(size: DataSize, policy: NaturalPolicy = NaturalPolicy.SIMPLE) -> DataSize:
    """
    Convert a data size to its most readable unit.

    Args:
        size: The data size to convert
        policy: SIMPLE or SMART selection rules

    Returns:
        An equal data size, possibly in another unit. For units outside the
        catalog this is the very same object that was passed in.

    Raises:
        MissingArgumentError: If size is None
    """
    if size is None:
        raise MissingArgumentError("size")

    if not ALL.has(size.unit):
        log.debug(f"Unknown unit {size.unit!r}, keeping it")
        return size

    in_bits = size.to_unit(BIT)
    if in_bits.value < BIT_THRESHOLD:
        return in_bits

    in_bytes = size.to_unit(BYTE)
    if in_bytes.value < BYTE_THRESHOLD:
        return in_bytes

    best = size
    for unit in candidate_units(size.unit, policy):
        converted = size.to_unit(unit)

        # Fractional values are not considered readable
        if converted.value < _ONE:
            continue

        if _is_better(converted.value, best.value, policy):
            best = converted

    log.debug(f"Natural unit for {size!r} ({policy.name}): {best.unit}")
    return best


class NaturalUnitConverter:
    """
    Converter that applies natural unit selection with a fixed policy.

    Example usage:
        converter = NaturalUnitConverter(NaturalPolicy.SMART)
        converter.convert(DataSize(1024, IEC.KIBIBYTE))  # 1 MiB
    """

    def __init__(self, policy: NaturalPolicy = NaturalPolicy.SIMPLE):
        self._policy = policy

    @property
    def policy(self) -> NaturalPolicy:
        """The policy used for conversions."""
        return self._policy

    def convert(self, size: DataSize) -> DataSize:
        """Convert a data size to its most readable unit."""
        return to_natural(size, self._policy)

    def __call__(self, size: DataSize) -> DataSize:
        return self.convert(size)
