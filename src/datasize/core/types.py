"""
Core enumerations for data size handling.

This module defines the small closed sets of values used throughout the
datasize library: unit kinds, unit standards and the policies that drive
natural unit selection and parsing.
"""

from enum import Enum, auto

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NEVER IMPORT ANYTHING FROM THE DATASIZE LIBRARY           #
#                                                                                 #
###################################################################################


class UnitKind(Enum):
    """Whether a unit counts bits or bytes."""

    BIT = auto()
    BYTE = auto()


class StandardType(Enum):
    """The standard a prefixed unit belongs to."""

    SI = auto()  # Decimal prefixes, 10^3 steps
    IEC = auto()  # Binary prefixes, 2^10 steps
    JEDEC = auto()  # Binary values with decimal names


class NaturalPolicy(Enum):
    """Policy used when picking the most readable unit for a value."""

    SIMPLE = auto()  # Stay within the unit's own standard
    SMART = auto()  # Mix SI and IEC, prefer shorter decimal expansions

    @classmethod
    def from_string(cls, policy_str: str) -> "NaturalPolicy":
        """Convert a string such as 'smart' to a NaturalPolicy."""
        try:
            return cls[policy_str.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown natural unit policy: {policy_str}")


class ParsePolicy(Enum):
    """Policy used when parsing textual data sizes."""

    LENIENT = auto()  # Case insensitive, any whitespace
    STRICT = auto()  # Case sensitive, exactly one space before the unit

    @classmethod
    def from_string(cls, policy_str: str) -> "ParsePolicy":
        """Convert a string such as 'strict' to a ParsePolicy."""
        try:
            return cls[policy_str.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown parse policy: {policy_str}")
