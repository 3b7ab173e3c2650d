"""
Test Suite for the Savings Calculator

Run with: python -m pytest tests/test_savings_calculator.py
"""

import copy
import unittest

from constants import DEVICE_CATALOG
from savings_wizard import Segment, SavingsResult
from savings_wizard.services import SavingsCalculator, calculate_savings
from savings_wizard.services.savings_calculator import BREAKDOWN_COLUMNS


class TestZeroInputs(unittest.TestCase):
    """Empty and all-zero inputs produce an all-zero estimate"""

    def test_no_segment_is_all_zero(self):
        result = calculate_savings(None, {"Treadmills": 10})
        self.assertEqual(result, SavingsResult())

    def test_every_segment_with_empty_quantities(self):
        for segment in Segment:
            with self.subTest(segment=segment):
                result = calculate_savings(segment, {})
                self.assertEqual(result.annual_energy_waste, 0)
                self.assertEqual(result.annual_gross, 0)
                self.assertEqual(result.monthly_savings, 0)
                self.assertEqual(result.gain_share, 0)
                self.assertEqual(result.final_savings, 0)
                self.assertEqual(result.number_of_plugs, 0)

    def test_every_segment_with_all_zero_quantities(self):
        for segment in Segment:
            with self.subTest(segment=segment):
                quantities = {name: 0 for name in DEVICE_CATALOG[segment.value]}
                self.assertEqual(calculate_savings(segment, quantities), SavingsResult())


class TestSavingsArithmetic(unittest.TestCase):
    """Monetary derivation from annual energy waste"""

    def test_office_desk_lamps_example(self):
        """10 units at 50 kWh/yr with no packing rule"""
        result = calculate_savings(Segment.OFFICE, {"Desk Lamps": 10})
        self.assertAlmostEqual(result.annual_energy_waste, 500.0)
        self.assertAlmostEqual(result.annual_gross, 90.00)
        self.assertAlmostEqual(result.monthly_savings, 7.50)
        self.assertAlmostEqual(result.gain_share, 3.75)
        self.assertAlmostEqual(result.final_savings, 3.75)
        self.assertEqual(result.number_of_plugs, 10)

    def test_multiple_devices_sum(self):
        result = calculate_savings(Segment.HOTEL, {"Televisions": 20, "Ice Machines": 2})
        expected_waste = 20 * 100.0 + 2 * 350.0
        self.assertAlmostEqual(result.annual_energy_waste, expected_waste)
        self.assertAlmostEqual(result.annual_gross, expected_waste * 0.18)
        self.assertAlmostEqual(result.monthly_savings, expected_waste * 0.18 / 12)
        self.assertEqual(result.number_of_plugs, 22)

    def test_final_savings_is_monthly_minus_gain_share(self):
        result = calculate_savings(Segment.SCHOOL, {"Projectors": 7, "Computers": 31})
        self.assertAlmostEqual(result.final_savings, result.monthly_savings - result.gain_share)
        self.assertAlmostEqual(result.gain_share, result.monthly_savings * 0.5)

    def test_devices_outside_segment_are_ignored(self):
        result = calculate_savings(Segment.OFFICE, {"Desk Lamps": 1, "Treadmills": 5})
        self.assertAlmostEqual(result.annual_energy_waste, 50.0)
        self.assertEqual(result.number_of_plugs, 1)

    def test_custom_catalog(self):
        catalog = {"Gym": {"Saunas": 1000.0}}
        result = calculate_savings(Segment.GYM, {"Saunas": 3}, catalog=catalog)
        self.assertAlmostEqual(result.annual_energy_waste, 3000.0)
        self.assertAlmostEqual(result.annual_gross, 540.0)

    def test_negative_quantity_counts_as_zero(self):
        quantities = {"Desk Lamps": 10, "Printers": -3}
        result = calculate_savings(Segment.OFFICE, quantities)
        self.assertAlmostEqual(result.annual_energy_waste, 500.0)
        self.assertEqual(result.number_of_plugs, 10)

        df = SavingsCalculator.device_breakdown(Segment.OFFICE, quantities)
        self.assertAlmostEqual(df['Annual Waste (kWh)'].sum(), result.annual_energy_waste)

    def test_segment_missing_from_catalog(self):
        result = calculate_savings(Segment.HOTEL, {"Televisions": 3}, catalog={"Gym": {}})
        self.assertEqual(result, SavingsResult())


class TestPlugPacking(unittest.TestCase):
    """Grouped devices share plugs"""

    def test_elliptical_five_units_two_plugs(self):
        self.assertEqual(SavingsCalculator.plugs_for("Elliptical Machines", 5), 2)

    def test_elliptical_four_units_one_plug(self):
        self.assertEqual(SavingsCalculator.plugs_for("Elliptical Machines", 4), 1)

    def test_exercise_bikes_three_units_two_plugs(self):
        self.assertEqual(SavingsCalculator.plugs_for("Exercise Bikes", 3), 2)

    def test_other_devices_one_plug_per_unit(self):
        self.assertEqual(SavingsCalculator.plugs_for("Treadmills", 7), 7)

    def test_zero_units_zero_plugs(self):
        self.assertEqual(SavingsCalculator.plugs_for("Exercise Bikes", 0), 0)

    def test_gym_total_plugs(self):
        result = calculate_savings(Segment.GYM, {
            "Elliptical Machines": 5,
            "Exercise Bikes": 3,
            "Treadmills": 4,
        })
        self.assertEqual(result.number_of_plugs, 2 + 2 + 4)
        # Energy waste still counts every unit
        self.assertAlmostEqual(result.annual_energy_waste, 5 * 120.0 + 3 * 90.0 + 4 * 250.0)


class TestPurity(unittest.TestCase):
    """Calculation is deterministic and leaves inputs untouched"""

    def test_repeated_calls_identical(self):
        quantities = {"Computers": 12, "Printers": 3}
        first = calculate_savings(Segment.OFFICE, quantities)
        second = calculate_savings(Segment.OFFICE, quantities)
        self.assertEqual(first, second)

    def test_inputs_not_mutated(self):
        quantities = {"Computers": 12, "Treadmills": 3}
        before = dict(quantities)
        catalog_before = copy.deepcopy(DEVICE_CATALOG)
        calculate_savings(Segment.OFFICE, quantities)
        SavingsCalculator.device_breakdown(Segment.OFFICE, quantities)
        self.assertEqual(quantities, before)
        self.assertEqual(DEVICE_CATALOG, catalog_before)


class TestDeviceBreakdown(unittest.TestCase):
    """Per-device breakdown table"""

    def test_columns_and_rows(self):
        df = SavingsCalculator.device_breakdown(
            Segment.GYM, {"Exercise Bikes": 3, "Treadmills": 0, "Elliptical Machines": 8}
        )
        self.assertEqual(list(df.columns), BREAKDOWN_COLUMNS)
        # Catalog order, zero-quantity rows dropped
        self.assertEqual(df['Device'].tolist(), ["Elliptical Machines", "Exercise Bikes"])
        self.assertEqual(df['Plugs'].tolist(), [2, 2])
        self.assertAlmostEqual(df['Annual Waste (kWh)'].sum(), 8 * 120.0 + 3 * 90.0)

    def test_matches_totals(self):
        quantities = {"Televisions": 40, "Mini Fridges": 40, "Coffee Makers": 5}
        df = SavingsCalculator.device_breakdown(Segment.HOTEL, quantities)
        result = calculate_savings(Segment.HOTEL, quantities)
        self.assertAlmostEqual(df['Annual Waste (kWh)'].sum(), result.annual_energy_waste)
        self.assertAlmostEqual(df['Annual Savings'].sum(), result.annual_gross)
        self.assertEqual(df['Plugs'].sum(), result.number_of_plugs)

    def test_no_segment_empty_frame(self):
        df = SavingsCalculator.device_breakdown(None, {"Computers": 2})
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), BREAKDOWN_COLUMNS)


if __name__ == '__main__':
    unittest.main()
