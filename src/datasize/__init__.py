"""
Datasize: exact quantities of digital information

A Python library for working with bits and bytes across the SI, IEC and
JEDEC unit standards: exact conversion, natural unit selection and
locale-aware parsing and formatting.
"""

from datasize.api import (
    DataSizeFormatter,
    DataSizeParser,
    NaturalUnitConverter,
    format_size,
    parse,
    to_natural,
    unit_catalog,
)
from datasize.core import types, units
from datasize.core.config import (
    FormatConfig,
    FormatConfigBuilder,
    ParseConfig,
    ParseConfigBuilder,
)
from datasize.core.convert import convert
from datasize.core.errors import (
    DataSizeError,
    InvalidArgumentError,
    MissingArgumentError,
    NegativeValueError,
    ParseError,
    UnknownLocaleError,
    UnknownUnitError,
)
from datasize.core.logging import configure_logging, get_logger
from datasize.core.size import DataSize
from datasize.core.types import NaturalPolicy, ParsePolicy, StandardType, UnitKind
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
)

__all__ = [
    # Data model
    "DataSize",
    "Unit",
    "Standard",
    "UnitKind",
    "StandardType",
    "BIT",
    "BYTE",
    "SI",
    "IEC",
    "JEDEC",
    "ALL",
    "find_unit",
    "match_unit",
    # Operations
    "convert",
    "to_natural",
    "NaturalUnitConverter",
    "NaturalPolicy",
    "parse",
    "DataSizeParser",
    "ParsePolicy",
    "format_size",
    "DataSizeFormatter",
    "unit_catalog",
    # Configuration
    "FormatConfig",
    "FormatConfigBuilder",
    "ParseConfig",
    "ParseConfigBuilder",
    # Errors
    "DataSizeError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "NegativeValueError",
    "ParseError",
    "UnknownLocaleError",
    "UnknownUnitError",
    # Modules
    "types",
    "units",
]

# Configure logging once at import time
configure_logging()
log = get_logger(__name__)
