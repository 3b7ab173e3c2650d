"""
UI Components for the Savings Wizard.

Each component is a Streamlit-based function that renders one step or the
navigation bar. app.py composes them.
"""

from .segment_selection import render_segment_selection
from .quantity_entry import render_quantity_entry, build_quantity_table, apply_quantity_edits
from .facility_location import render_facility_location
from .savings_summary import render_savings_summary
from .navigation_bar import render_navigation_bar, render_progress_indicator

__all__ = [
    'render_segment_selection',
    'render_quantity_entry',
    'build_quantity_table',
    'apply_quantity_edits',
    'render_facility_location',
    'render_savings_summary',
    'render_navigation_bar',
    'render_progress_indicator',
]
