"""
Facility Location Component (Step 3)

Free-text location. Any non-blank text enables Next.
"""

import streamlit as st

from savings_wizard.services import StepController


def render_facility_location(controller: StepController) -> None:
    """
    Render the facility location input.

    Args:
        controller: StepController holding the wizard state
    """
    location = st.text_input(
        "Where is your facility located?",
        value=controller.state.facility_location,
        placeholder="City, State or ZIP code",
        key="facility_location_input",
        disabled=controller.state.is_transitioning,
    )
    controller.set_location(location)

    if not controller.is_step_valid(3):
        st.caption("Enter your facility's location to see your estimated savings.")
