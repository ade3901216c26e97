"""Tests for room geometry and insulation resolution."""

import unittest

from coldload.construction import evaluate_construction, rank_insulation_types
from coldload.core.diagnostics import DiagnosticCode, coerce_float
from coldload.core.records import Construction, RoomGeometry
from coldload.geometry import calculate_geometry
from coldload.tables import InsulationType, ThermalPropertyTables


class TestCoerceFloat(unittest.TestCase):
    """Test raw input coercion."""

    def test_numbers_and_numeric_strings(self):
        """Test values that parse cleanly add no diagnostics."""
        diagnostics = []
        self.assertEqual(coerce_float(4, "x", diagnostics), 4.0)
        self.assertEqual(coerce_float(" 2.5 ", "x", diagnostics), 2.5)
        self.assertEqual(coerce_float("-18", "x", diagnostics), -18.0)
        self.assertEqual(diagnostics, [])

    def test_unparsable_values(self):
        """Test that unparsable values become 0 with a diagnostic each."""
        diagnostics = []
        for raw in ("", "abc", None, "nan", "inf", [1]):
            self.assertEqual(coerce_float(raw, "room.length", diagnostics), 0.0)
        self.assertEqual(len(diagnostics), 6)
        self.assertTrue(all(d.code is DiagnosticCode.UNPARSABLE_VALUE for d in diagnostics))
        self.assertEqual(diagnostics[0].field, "room.length")

    def test_minimum_clamp(self):
        """Test clamping below a minimum."""
        diagnostics = []
        self.assertEqual(coerce_float(-3, "room.width", diagnostics, minimum=0.0), 0.0)
        self.assertEqual(diagnostics[0].code, DiagnosticCode.NEGATIVE_VALUE_CLAMPED)

    def test_out_of_range_then_clamped(self):
        """Test a huge negative dimension is bounded and then clamped to the minimum."""
        diagnostics = []
        self.assertEqual(coerce_float("-1e12", "room.width", diagnostics, minimum=0.0), 0.0)
        self.assertEqual(
            [d.code for d in diagnostics],
            [DiagnosticCode.VALUE_OUT_OF_RANGE, DiagnosticCode.NEGATIVE_VALUE_CLAMPED],
        )


class TestGeometry(unittest.TestCase):
    """Test derived areas and volume."""

    def test_default_room(self):
        """Test the 4 x 3 x 2.5 m default room."""
        geometry = calculate_geometry(RoomGeometry())
        self.assertAlmostEqual(geometry.wall_area, 35.0)
        self.assertAlmostEqual(geometry.ceiling_area, 12.0)
        self.assertAlmostEqual(geometry.floor_area, 12.0)
        self.assertAlmostEqual(geometry.door_area, 2.0)
        self.assertAlmostEqual(geometry.volume, 30.0)

    def test_string_dimensions(self):
        """Test dimensions arriving as text from the input layer."""
        geometry = calculate_geometry(RoomGeometry(length="6", width="4.5", height="3"))
        self.assertEqual(geometry.volume, 6 * 4.5 * 3)

    def test_unparsable_dimension(self):
        """Test an unparsable length zeroes dependent values without raising."""
        diagnostics = []
        geometry = calculate_geometry(RoomGeometry(length="four"), diagnostics)
        self.assertEqual(geometry.length, 0.0)
        self.assertEqual(geometry.volume, 0.0)
        self.assertEqual(geometry.ceiling_area, 0.0)
        self.assertAlmostEqual(geometry.wall_area, 2 * 3.0 * 2.5)
        self.assertEqual(diagnostics[0].field, "room.length")

    def test_negative_dimension_clamped(self):
        """Test that a negative dimension never produces a negative area."""
        diagnostics = []
        geometry = calculate_geometry(RoomGeometry(width=-3.0), diagnostics)
        self.assertEqual(geometry.width, 0.0)
        self.assertEqual(geometry.volume, 0.0)
        self.assertEqual(geometry.floor_area, 0.0)
        self.assertAlmostEqual(geometry.wall_area, 2 * 4.0 * 2.5)
        self.assertEqual(diagnostics[0].code, DiagnosticCode.NEGATIVE_VALUE_CLAMPED)

    def test_zero_door(self):
        """Test a room with no door."""
        geometry = calculate_geometry(RoomGeometry(door_width=0))
        self.assertEqual(geometry.door_area, 0.0)


class TestConstruction(unittest.TestCase):
    """Test U-factor and R-value resolution."""

    def test_puf_150(self):
        """Test the tabulated U-factor and its exact reciprocal."""
        result = evaluate_construction(Construction("PUF", 150))
        self.assertEqual(result.u_factor, 0.15)
        self.assertEqual(result.r_value, 1 / result.u_factor)
        self.assertIs(result.insulation_type, InsulationType.PUF)
        self.assertEqual(result.thickness_mm, 150)
        self.assertTrue(result.found)

    def test_string_thickness(self):
        """Test thickness arriving as text."""
        result = evaluate_construction(Construction("EPS", "100"))
        self.assertEqual(result.u_factor, 0.35)

    def test_unknown_type(self):
        """Test unknown insulation gives zero U-factor and undefined R-value."""
        diagnostics = []
        result = evaluate_construction(Construction("Cork", 150), diagnostics=diagnostics)
        self.assertEqual(result.u_factor, 0.0)
        self.assertIsNone(result.r_value)
        self.assertFalse(result.found)
        self.assertEqual(result.type_label, "Cork")
        codes = [d.code for d in diagnostics]
        self.assertIn(DiagnosticCode.UNKNOWN_INSULATION, codes)
        self.assertIn(DiagnosticCode.UNDEFINED_R_VALUE, codes)
        self.assertNotIn("tabulated:", diagnostics[0].message)

    def test_untabulated_thickness(self):
        """Test a thickness missing from the table."""
        diagnostics = []
        result = evaluate_construction(Construction("PUF", 90), diagnostics=diagnostics)
        self.assertEqual(result.u_factor, 0.0)
        self.assertIsNone(result.r_value)
        self.assertIn("(tabulated: 75, 100, 125, 150, 200 mm)", diagnostics[0].message)

    def test_fractional_thickness(self):
        """Test a non-integer thickness is never matched."""
        result = evaluate_construction(Construction("PUF", 150.5))
        self.assertIsNone(result.thickness_mm)
        self.assertFalse(result.found)

    def test_custom_tables(self):
        """Test resolution against tables supplied by the caller."""
        tables = ThermalPropertyTables(u_factors={InsulationType.PUF: {160: 0.14}})
        result = evaluate_construction(Construction("PUF", 160), tables)
        self.assertEqual(result.u_factor, 0.14)


class TestInsulationRanking(unittest.TestCase):
    """Test the best-to-worst insulation ordering."""

    def test_ranking_at_150(self):
        """Test PUF beats EPS beats Rockwool."""
        ranking = rank_insulation_types(150)
        self.assertEqual(
            [insulation for insulation, _ in ranking],
            [InsulationType.PUF, InsulationType.EPS, InsulationType.ROCKWOOL],
        )

    def test_ranking_untabulated_thickness(self):
        """Test no types are ranked at an unknown thickness."""
        self.assertEqual(rank_insulation_types(90), [])


if __name__ == "__main__":
    unittest.main()
