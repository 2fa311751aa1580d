"""
Units of digital information.

This module defines the unit registry: the bit and byte reference units and
their SI, IEC and JEDEC multiples. Every unit knows its abbreviation, full
name, base, exponent, kind and standard, and its exact size in bytes.

Example usage:
    >>> SI.KILOBYTE.magnitude
    Fraction(1000, 1)
    >>> IEC.has(IEC.KIBIBYTE)
    True
    >>> [unit.abbreviation for unit in JEDEC.units(UnitKind.BYTE)]
    ['KB', 'MB', 'GB']

The catalog is a public contract: parsing depends on the exact set of
abbreviations and names, so entries are never added or removed lightly.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterator, List, Optional, Tuple

from datasize.core.errors import InvalidArgumentError, UnknownUnitError
from datasize.core.types import StandardType, UnitKind

BITS_PER_BYTE = 8

VALID_BASES = (1, 2, 10)


@dataclass(frozen=True)
class Unit:
    """
    An immutable unit of digital information.

    Attributes:
        abbreviation: Short symbol, e.g. "KiB"
        name: Full lowercase name, e.g. "kibibyte"
        base: 1 for the reference units, otherwise 2 or 10
        exponent: Non-negative power of the base
        kind: Whether the unit counts bits or bytes
        standard: The standard the unit belongs to, None for bit and byte
    """

    abbreviation: str
    name: str
    base: int
    exponent: int
    kind: UnitKind = UnitKind.BYTE
    standard: Optional[StandardType] = None

    def __post_init__(self):
        # Only these bases keep every conversion a terminating decimal
        if self.base not in VALID_BASES:
            raise InvalidArgumentError(f"Unit base must be 1, 2 or 10: {self.base}")
        if self.exponent < 0:
            raise InvalidArgumentError(
                f"Unit exponent must not be negative: {self.exponent}"
            )

    @property
    def magnitude(self) -> Fraction:
        """Exact size of one of this unit, in bytes."""
        size = Fraction(self.base) ** self.exponent
        if self.kind == UnitKind.BIT:
            return size / BITS_PER_BYTE
        return size

    @property
    def plural(self) -> str:
        """Plural form of the full name."""
        return f"{self.name}s"

    def __str__(self) -> str:
        return self.abbreviation

    def __repr__(self) -> str:
        return f"Unit({self.abbreviation!r}, {self.name!r}, {self.base}^{self.exponent})"


class Standard:
    """
    A named, ordered group of units.

    Units are reachable as attributes (``SI.KILOBYTE``) and through
    ``units()``, which keeps declaration order.
    """

    def __init__(self, name: str, units: Dict[str, Unit]):
        self.name = name
        self._units = dict(units)
        for attribute, unit in self._units.items():
            setattr(self, attribute, unit)

    def has(self, unit: Unit) -> bool:
        """Check whether a unit is a member of this standard."""
        return unit in self._units.values()

    def units(self, kind: Optional[UnitKind] = None) -> List[Unit]:
        """
        List the units of this standard.

        Args:
            kind: Restrict the result to bit or byte units

        Returns:
            The units in declaration order
        """
        if kind is None:
            return list(self._units.values())
        return [unit for unit in self._units.values() if unit.kind == kind]

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, Unit) and self.has(unit)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"Standard({self.name}, {len(self)} units)"


BIT = Unit("bit", "bit", 1, 0, UnitKind.BIT)
BYTE = Unit("B", "byte", 1, 0, UnitKind.BYTE)


def _si(abbreviation: str, name: str, exponent: int, kind: UnitKind) -> Unit:
    return Unit(abbreviation, name, 10, exponent, kind, StandardType.SI)


def _iec(abbreviation: str, name: str, exponent: int, kind: UnitKind) -> Unit:
    return Unit(abbreviation, name, 2, exponent, kind, StandardType.IEC)


def _jedec(abbreviation: str, name: str, exponent: int, kind: UnitKind) -> Unit:
    return Unit(abbreviation, name, 2, exponent, kind, StandardType.JEDEC)


SI = Standard(
    "SI",
    {
        "KILOBIT": _si("kbit", "kilobit", 3, UnitKind.BIT),
        "MEGABIT": _si("mbit", "megabit", 6, UnitKind.BIT),
        "GIGABIT": _si("gbit", "gigabit", 9, UnitKind.BIT),
        "TERABIT": _si("tbit", "terabit", 12, UnitKind.BIT),
        "PETABIT": _si("pbit", "petabit", 15, UnitKind.BIT),
        "EXABIT": _si("ebit", "exabit", 18, UnitKind.BIT),
        "ZETTABIT": _si("zbit", "zettabit", 21, UnitKind.BIT),
        "YOTTABIT": _si("ybit", "yottabit", 24, UnitKind.BIT),
        "KILOBYTE": _si("kB", "kilobyte", 3, UnitKind.BYTE),
        "MEGABYTE": _si("MB", "megabyte", 6, UnitKind.BYTE),
        "GIGABYTE": _si("GB", "gigabyte", 9, UnitKind.BYTE),
        "TERABYTE": _si("TB", "terabyte", 12, UnitKind.BYTE),
        "PETABYTE": _si("PB", "petabyte", 15, UnitKind.BYTE),
        "EXABYTE": _si("EB", "exabyte", 18, UnitKind.BYTE),
        "ZETTABYTE": _si("ZB", "zettabyte", 21, UnitKind.BYTE),
        "YOTTABYTE": _si("YB", "yottabyte", 24, UnitKind.BYTE),
    },
)

IEC = Standard(
    "IEC",
    {
        "KIBIBIT": _iec("Kibit", "kibibit", 10, UnitKind.BIT),
        "MEBIBIT": _iec("Mibit", "mebibit", 20, UnitKind.BIT),
        "GIBIBIT": _iec("Gibit", "gibibit", 30, UnitKind.BIT),
        "TEBIBIT": _iec("Tibit", "tebibit", 40, UnitKind.BIT),
        "PEBIBIT": _iec("Pibit", "pebibit", 50, UnitKind.BIT),
        "EXBIBIT": _iec("Eibit", "exbibit", 60, UnitKind.BIT),
        "ZEBIBIT": _iec("Zibit", "zebibit", 70, UnitKind.BIT),
        "YOBIBIT": _iec("Yibit", "yobibit", 80, UnitKind.BIT),
        "KIBIBYTE": _iec("KiB", "kibibyte", 10, UnitKind.BYTE),
        "MEBIBYTE": _iec("MiB", "mebibyte", 20, UnitKind.BYTE),
        "GIBIBYTE": _iec("GiB", "gibibyte", 30, UnitKind.BYTE),
        "TEBIBYTE": _iec("TiB", "tebibyte", 40, UnitKind.BYTE),
        "PEBIBYTE": _iec("PiB", "pebibyte", 50, UnitKind.BYTE),
        "EXBIBYTE": _iec("EiB", "exbibyte", 60, UnitKind.BYTE),
        "ZEBIBYTE": _iec("ZiB", "zebibyte", 70, UnitKind.BYTE),
        "YOBIBYTE": _iec("YiB", "yobibyte", 80, UnitKind.BYTE),
    },
)

JEDEC = Standard(
    "JEDEC",
    {
        "KILOBIT": _jedec("Kbit", "kilobit", 10, UnitKind.BIT),
        "MEGABIT": _jedec("Mbit", "megabit", 20, UnitKind.BIT),
        "GIGABIT": _jedec("Gbit", "gigabit", 30, UnitKind.BIT),
        "KILOBYTE": _jedec("KB", "kilobyte", 10, UnitKind.BYTE),
        "MEGABYTE": _jedec("MB", "megabyte", 20, UnitKind.BYTE),
        "GIGABYTE": _jedec("GB", "gigabyte", 30, UnitKind.BYTE),
    },
)

STANDARDS: Dict[StandardType, Standard] = {
    StandardType.SI: SI,
    StandardType.IEC: IEC,
    StandardType.JEDEC: JEDEC,
}


def _ordered_catalog() -> Dict[str, Unit]:
    # Bits before bytes; within a kind SI always precedes JEDEC so that
    # case-insensitive lookups resolve colliding abbreviations to SI.
    catalog = {}
    for kind, reference in ((UnitKind.BIT, BIT), (UnitKind.BYTE, BYTE)):
        catalog[reference.name.upper()] = reference
        for standard in (SI, IEC, JEDEC):
            for unit in standard.units(kind):
                catalog[f"{standard.name}_{unit.name.upper()}"] = unit
    return catalog


ALL = Standard("ALL", _ordered_catalog())


def standard_of(unit: Unit) -> Optional[Standard]:
    """Return the catalog standard a unit belongs to, if any."""
    for standard in STANDARDS.values():
        if standard.has(unit):
            return standard
    return None


def _token_matches(text: str, position: int, token: str, case_sensitive: bool) -> bool:
    candidate = text[position : position + len(token)]
    if case_sensitive:
        return candidate == token
    return candidate.lower() == token.lower()


def match_unit(
    text: str, position: int = 0, case_sensitive: bool = True
) -> Optional[Tuple[Unit, int]]:
    """
    Find the catalog unit whose token starts at ``position`` in ``text``.

    Abbreviations, names and plural names are all tried. The longest token
    wins; on equal length the unit listed first in ALL wins, so an
    ambiguous token such as "MB" resolves to the SI unit.

    Args:
        text: The text to scan
        position: Offset at which the token must start
        case_sensitive: Whether letter case must match exactly

    Returns:
        The unit and the length of the matched token, or None
    """
    best: Optional[Unit] = None
    best_length = 0

    for unit in ALL:
        for token in (unit.plural, unit.name, unit.abbreviation):
            length = len(token)
            if length > best_length and _token_matches(text, position, token, case_sensitive):
                best = unit
                best_length = length

    if best is None:
        return None
    return best, best_length


def find_unit(token: str, case_sensitive: bool = True) -> Unit:
    """
    Look up a catalog unit by abbreviation, name or plural name.

    Args:
        token: The text to look up, which must be a complete unit token
        case_sensitive: Whether letter case must match exactly

    Returns:
        The matching unit

    Raises:
        UnknownUnitError: If no unit matches
    """
    match = match_unit(token, 0, case_sensitive)
    if match is None or match[1] != len(token):
        raise UnknownUnitError(token)
    return match[0]
