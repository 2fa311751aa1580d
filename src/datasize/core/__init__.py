"""
Core components for data sizes.

This package contains the unit registry, exact conversion arithmetic and the
DataSize value object used throughout the datasize library.
"""

from datasize.core import types, units
from datasize.core.convert import conversion_ratio, convert, convert_value
from datasize.core.size import DataSize
from datasize.core.units import (
    ALL,
    BIT,
    BYTE,
    IEC,
    JEDEC,
    SI,
    Standard,
    Unit,
    find_unit,
    match_unit,
    standard_of,
)
