"""Tests for the thermal reference tables."""

import json
import tempfile
import unittest

from coldload.core.config import save_config
from coldload.tables import (
    DEFAULT_TABLES,
    INSULATION_THICKNESSES_MM,
    ZERO_PRODUCT,
    InsulationType,
    ProductType,
    StorageType,
    ThermalPropertyTables,
    load_tables,
)


class TestEnumParsing(unittest.TestCase):
    """Test closed enumerations of table keys."""

    def test_parse_display_value(self):
        """Test parsing the value shown in the input layer."""
        self.assertIs(InsulationType.parse("Rockwool"), InsulationType.ROCKWOOL)
        self.assertIs(ProductType.parse("Ice Cream"), ProductType.ICE_CREAM)
        self.assertIs(StorageType.parse("Boxed"), StorageType.BOXED)

    def test_parse_is_case_insensitive(self):
        """Test that case and surrounding spaces are ignored."""
        self.assertIs(InsulationType.parse(" puf "), InsulationType.PUF)
        self.assertIs(ProductType.parse("BEEF"), ProductType.BEEF)

    def test_parse_member_name(self):
        """Test parsing the enum member name."""
        self.assertIs(ProductType.parse("ICE_CREAM"), ProductType.ICE_CREAM)

    def test_parse_member_passthrough(self):
        """Test that a member parses to itself."""
        self.assertIs(StorageType.parse(StorageType.BULK), StorageType.BULK)

    def test_parse_unknown(self):
        """Test that unknown keys give None instead of raising."""
        self.assertIsNone(InsulationType.parse("Cork"))
        self.assertIsNone(ProductType.parse(""))
        self.assertIsNone(StorageType.parse(None))
        self.assertIsNone(StorageType.parse(42))


class TestDefaultTables(unittest.TestCase):
    """Test the built-in reference data."""

    def test_every_insulation_has_every_thickness(self):
        """Test the U-factor table is complete."""
        for insulation in InsulationType:
            self.assertEqual(
                DEFAULT_TABLES.thicknesses_for(insulation), list(INSULATION_THICKNESSES_MM)
            )

    def test_u_factor_decreases_with_thickness(self):
        """Test thicker panels insulate better."""
        for insulation in InsulationType:
            values = [
                DEFAULT_TABLES.lookup_u_factor(insulation, mm) for mm in INSULATION_THICKNESSES_MM
            ]
            self.assertEqual(values, sorted(values, reverse=True))

    def test_puf_150(self):
        """Test the recommended panel value."""
        self.assertEqual(DEFAULT_TABLES.lookup_u_factor(InsulationType.PUF, 150), 0.15)

    def test_every_product_tabulated(self):
        """Test each product type has properties."""
        for product in ProductType:
            properties = DEFAULT_TABLES.lookup_product(product)
            self.assertIsNotNone(properties)
            self.assertGreater(properties.specific_heat_above, properties.specific_heat_below)
            self.assertLess(properties.freezing_point, 0.0)
            self.assertTrue(0.0 < properties.storage_efficiency <= 1.0)

    def test_every_storage_type_tabulated(self):
        """Test each storage type has a factor in (0, 1]."""
        for storage in StorageType:
            factor = DEFAULT_TABLES.lookup_storage_factor(storage)
            self.assertTrue(0.0 < factor <= 1.0)

    def test_lookup_missing_returns_none(self):
        """Test not-found outcomes are explicit."""
        self.assertIsNone(DEFAULT_TABLES.lookup_u_factor(InsulationType.PUF, 90))
        self.assertIsNone(DEFAULT_TABLES.lookup_u_factor(None, 150))
        self.assertIsNone(DEFAULT_TABLES.lookup_product(None))
        self.assertIsNone(DEFAULT_TABLES.lookup_storage_factor(None))


class TestProductEnergy(unittest.TestCase):
    """Test per-kg energy used by the pull-down estimate."""

    def test_energy_per_kg_beef(self):
        """Test freezing beef from 25°C to -18°C."""
        beef = DEFAULT_TABLES.lookup_product(ProductType.BEEF)
        # 3.14 * 26.7 + 233 + 1.67 * 16.3
        expected = 3.14 * 26.7 + 233.0 + 1.67 * 16.3
        self.assertAlmostEqual(beef.energy_per_kg(25.0, -18.0), expected, places=9)

    def test_energy_per_kg_already_frozen(self):
        """Test that only latent and below-freezing terms count when arriving frozen."""
        beef = DEFAULT_TABLES.lookup_product(ProductType.BEEF)
        self.assertAlmostEqual(beef.energy_per_kg(-5.0, -18.0), 233.0 + 1.67 * 16.3, places=9)

    def test_zero_product(self):
        """Test the fallback record removes no heat."""
        self.assertEqual(ZERO_PRODUCT.energy_per_kg(25.0, -18.0), 0.0)


class TestTablesSerialization(unittest.TestCase):
    """Test loading tables owned outside the package."""

    def test_from_dict_defaults(self):
        """Test that an empty dictionary gives the built-in tables."""
        self.assertEqual(ThermalPropertyTables.from_dict({}), DEFAULT_TABLES)

    def test_from_dict_overrides_section(self):
        """Test replacing a single section."""
        tables = ThermalPropertyTables.from_dict(
            {"version": "site-7", "storage_factors": {"Boxed": 0.75}}
        )
        self.assertEqual(tables.version, "site-7")
        self.assertEqual(tables.lookup_storage_factor(StorageType.BOXED), 0.75)
        self.assertIsNone(tables.lookup_storage_factor(StorageType.BULK))
        self.assertEqual(tables.products, DEFAULT_TABLES.products)

    def test_from_dict_unknown_key(self):
        """Test that unknown keys in a tables file are rejected."""
        with self.assertRaises(ValueError):
            ThermalPropertyTables.from_dict({"u_factors": {"Cork": {"100": 0.4}}})

    def test_to_dict_round_trip(self):
        """Test to_dict output loads back into equal tables."""
        data = DEFAULT_TABLES.to_dict()
        self.assertEqual(data["u_factors"]["PUF"]["150"], 0.15)
        self.assertEqual(ThermalPropertyTables.from_dict(data), DEFAULT_TABLES)

    def test_load_tables_json(self):
        """Test loading tables from a JSON file."""
        data = DEFAULT_TABLES.to_dict()
        data["version"] = "json-test"
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump(data, f)
        tables = load_tables(f.name)
        self.assertEqual(tables.version, "json-test")
        self.assertEqual(tables.u_factors, DEFAULT_TABLES.u_factors)

    def test_load_tables_yaml(self):
        """Test loading tables saved as YAML."""
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as f:
            path = f.name
        save_config(DEFAULT_TABLES.to_dict(), path)
        self.assertEqual(load_tables(path), DEFAULT_TABLES)


if __name__ == "__main__":
    unittest.main()
