"""
Unit catalog as a table.

Exposes the unit registry as a Polars DataFrame, one row per unit, which is
handy for documentation, lookups and joining against other data.
"""

from typing import Any, Dict, List

import polars as pl

from datasize.core.units import ALL, Standard, Unit

CATALOG_SCHEMA = {
    "abbreviation": pl.Utf8,
    "name": pl.Utf8,
    "kind": pl.Utf8,
    "standard": pl.Utf8,
    "base": pl.Int64,
    "exponent": pl.Int64,
}


def unit_to_dict(unit: Unit) -> Dict[str, Any]:
    """
    Flatten a unit into a dictionary suitable for DataFrame creation.

    The standard of the bit and byte reference units is None.
    """
    return {
        "abbreviation": unit.abbreviation,
        "name": unit.name,
        "kind": unit.kind.name.lower(),
        "standard": unit.standard.name if unit.standard is not None else None,
        "base": unit.base,
        "exponent": unit.exponent,
    }


def unit_catalog(standard: Standard = ALL) -> pl.DataFrame:
    """
    Get the units of a standard as a DataFrame.

    Args:
        standard: The standard to list, all known units by default

    Returns:
        A DataFrame with the columns of CATALOG_SCHEMA, in catalog order
    """
    rows: List[Dict[str, Any]] = [unit_to_dict(unit) for unit in standard]
    return pl.DataFrame(rows, schema=CATALOG_SCHEMA)
