"""
Quantity Entry Component (Step 2)

Editable table of the selected segment's devices. Next is enabled once at
least one device has a non-zero quantity.
"""

import logging
from typing import Dict, Mapping, Optional

import pandas as pd
import streamlit as st

from savings_wizard import Segment
from savings_wizard.services import SavingsCalculator, StepController
from savings_wizard.utils.validation import parse_quantity

logger = logging.getLogger(__name__)


def build_quantity_table(
    segment: Optional[Segment],
    quantities: Mapping[str, int]
) -> pd.DataFrame:
    """
    Build the editable device table for a segment.

    Args:
        segment: Selected segment
        quantities: Current device -> count mapping

    Returns:
        DataFrame with 'Device', 'Waste per Unit (kWh/yr)' and 'Quantity'
    """
    devices = SavingsCalculator.segment_devices(segment)
    return pd.DataFrame(
        [
            {
                'Device': name,
                'Waste per Unit (kWh/yr)': waste,
                'Quantity': int(quantities.get(name, 0)),
            }
            for name, waste in devices.items()
        ],
        columns=['Device', 'Waste per Unit (kWh/yr)', 'Quantity'],
    )


def apply_quantity_edits(controller: StepController, edited_df: pd.DataFrame) -> Dict[str, str]:
    """
    Push edited quantities into the controller.

    Rows that don't parse keep their previous value.

    Returns:
        Dict of device -> error message for rejected rows
    """
    errors = {}
    for row in edited_df.to_dict('records'):
        device = row['Device']
        raw = row['Quantity']
        if raw is not None and pd.isna(raw):
            raw = None
        quantity, error = parse_quantity(raw)
        if quantity is None:
            errors[device] = error
            logger.info(f"Rejected quantity for {device}: {error}")
            continue
        controller.set_quantity(device, quantity)
    return errors


def render_quantity_entry(controller: StepController) -> None:
    """
    Render the quantity table for the selected segment.

    Args:
        controller: StepController holding the wizard state
    """
    state = controller.state
    if state.selected_segment is None:
        st.info("Select a segment first.")
        return

    st.markdown(f"How many of each device does your **{state.selected_segment.value}** have?")

    edited_df = st.data_editor(
        build_quantity_table(state.selected_segment, state.quantities),
        num_rows="fixed",
        hide_index=True,
        width="stretch",
        key=f"quantity_editor_{state.selected_segment.value}",
        disabled=['Device', 'Waste per Unit (kWh/yr)'],
        column_config={
            'Device': st.column_config.TextColumn('Device', width='medium'),
            'Waste per Unit (kWh/yr)': st.column_config.NumberColumn(
                'Standby Waste (kWh/yr)', format='%.0f', width='small'
            ),
            'Quantity': st.column_config.NumberColumn(
                'Quantity', min_value=0, step=1, format='%d', width='small'
            ),
        },
    )

    errors = apply_quantity_edits(controller, edited_df)
    for device, error in errors.items():
        st.warning(f"{device}: {error}")

    total_units = sum(state.quantities.values())
    if total_units == 0:
        st.caption("Enter a quantity for at least one device to continue.")
    else:
        st.caption(f"{total_units:,} devices entered")
