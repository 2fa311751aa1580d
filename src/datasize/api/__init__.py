"""
API for data sizes.

This package contains the user-facing converters, parsers and formatters
built on top of the core data model.
"""

from datasize.api.catalog import unit_catalog
from datasize.api.format import DataSizeFormatter, format_size
from datasize.api.natural import NaturalUnitConverter, to_natural
from datasize.api.parse import DataSizeParser, parse

__all__ = [
    "DataSizeFormatter",
    "DataSizeParser",
    "NaturalUnitConverter",
    "format_size",
    "parse",
    "to_natural",
    "unit_catalog",
]
