"""
Tests for the unit catalog DataFrame.
"""

import polars as pl

from datasize import ALL, IEC, JEDEC, unit_catalog
from datasize.api.catalog import CATALOG_SCHEMA, unit_to_dict


class TestUnitCatalog:
    """Test the catalog table."""

    def test_shape_and_schema(self):
        """Test one row per unit with the declared columns."""
        catalog = unit_catalog()
        assert catalog.height == len(ALL)
        assert catalog.columns == list(CATALOG_SCHEMA)
        assert catalog.schema["base"] == pl.Int64

    def test_order(self):
        """Test that rows follow catalog order."""
        abbreviations = unit_catalog()["abbreviation"].to_list()
        assert abbreviations == [unit.abbreviation for unit in ALL]
        assert abbreviations.index("kB") < abbreviations.index("KB")

    def test_filtering(self):
        """Test querying the catalog with Polars expressions."""
        catalog = unit_catalog()

        jedec = catalog.filter(pl.col("standard") == "JEDEC")
        assert jedec.height == len(JEDEC)

        references = catalog.filter(pl.col("standard").is_null())
        assert references["abbreviation"].to_list() == ["bit", "B"]

        binary_bytes = catalog.filter((pl.col("base") == 2) & (pl.col("kind") == "byte"))
        assert binary_bytes.height == 8 + 3

    def test_single_standard(self):
        """Test listing a single standard."""
        catalog = unit_catalog(IEC)
        assert catalog.height == 16
        assert catalog["exponent"].max() == 80

    def test_unit_to_dict(self):
        """Test flattening a unit."""
        assert unit_to_dict(IEC.KIBIBIT) == {
            "abbreviation": "Kibit",
            "name": "kibibit",
            "kind": "bit",
            "standard": "IEC",
            "base": 2,
            "exponent": 10,
        }
