"""
Test Suite for the quantity table helpers

Run with: python -m pytest tests/test_quantity_entry.py
"""

import unittest

import pandas as pd

from constants import DEVICE_CATALOG
from savings_wizard import Segment, WizardState
from savings_wizard.components import build_quantity_table, apply_quantity_edits
from savings_wizard.services import StepController


class TestBuildQuantityTable(unittest.TestCase):

    def test_rows_follow_catalog(self):
        df = build_quantity_table(Segment.SCHOOL, {"Projectors": 4})
        self.assertEqual(df['Device'].tolist(), list(DEVICE_CATALOG["School"]))
        projectors = df.loc[df['Device'] == "Projectors", 'Quantity'].iloc[0]
        self.assertEqual(projectors, 4)
        self.assertEqual(df['Quantity'].sum(), 4)

    def test_no_segment_empty(self):
        df = build_quantity_table(None, {})
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), ['Device', 'Waste per Unit (kWh/yr)', 'Quantity'])


class TestApplyQuantityEdits(unittest.TestCase):

    def setUp(self):
        self.controller = StepController(WizardState(current_step=2))
        self.controller.select_segment(Segment.GYM)

    def _edited(self, **quantities):
        df = build_quantity_table(Segment.GYM, self.controller.state.quantities)
        df['Quantity'] = df['Quantity'].astype(object)
        for device, value in quantities.items():
            df.loc[df['Device'] == device, 'Quantity'] = value
        return df

    def test_valid_edits_applied(self):
        errors = apply_quantity_edits(self.controller, self._edited(Treadmills=6))
        self.assertEqual(errors, {})
        self.assertEqual(self.controller.state.quantities["Treadmills"], 6)
        self.assertTrue(self.controller.is_next_enabled)

    def test_cleared_cell_counts_as_zero(self):
        self.controller.set_quantity("Treadmills", 3)
        df = pd.DataFrame([{'Device': "Treadmills", 'Quantity': float('nan')}])
        errors = apply_quantity_edits(self.controller, df)
        self.assertEqual(errors, {})
        self.assertEqual(self.controller.state.quantities["Treadmills"], 0)

    def test_invalid_edit_keeps_previous_value(self):
        self.controller.set_quantity("Exercise Bikes", 2)
        errors = apply_quantity_edits(self.controller, self._edited(**{"Exercise Bikes": "lots"}))
        self.assertIn("Exercise Bikes", errors)
        self.assertEqual(self.controller.state.quantities["Exercise Bikes"], 2)

    def test_negative_edit_clamped(self):
        apply_quantity_edits(self.controller, self._edited(**{"Rowing Machines": -5}))
        self.assertEqual(self.controller.state.quantities["Rowing Machines"], 0)


if __name__ == '__main__':
    unittest.main()
