"""
Navigation Bar Component

Back | Segment - Quantity - Location | Next

Hidden on the savings step. Buttons are disabled while a transition is
in flight.
"""

import streamlit as st

from constants import LAST_STEP, STEP_NAMES
from savings_wizard.services import StepController


def render_progress_indicator(current_step: int) -> str:
    """
    Build the progress indicator HTML for the input steps.

    Args:
        current_step: Current wizard step

    Returns:
        HTML string
    """
    parts = []
    for step in range(1, LAST_STEP):
        if step < current_step:
            css = "wizard-progress-step wizard-progress-step--done"
        elif step == current_step:
            css = "wizard-progress-step wizard-progress-step--active"
        else:
            css = "wizard-progress-step"
        if parts:
            parts.append('<div class="wizard-progress-line"></div>')
        parts.append(f'<div class="{css}">{STEP_NAMES[step]}</div>')

    return f'<div class="wizard-progress">{"".join(parts)}</div>'


def render_navigation_bar(controller: StepController) -> None:
    """
    Render Back/Next with the progress indicator between them.

    Args:
        controller: StepController holding the wizard state
    """
    if not controller.show_navigation:
        return

    in_flight = controller.state.is_transitioning
    back_col, progress_col, next_col = st.columns([1, 4, 1])

    with back_col:
        st.button(
            "Back",
            key="nav_back",
            on_click=controller.request_back,
            disabled=in_flight or not controller.can_go_back,
            width="stretch",
        )

    with progress_col:
        st.markdown(
            render_progress_indicator(controller.state.current_step),
            unsafe_allow_html=True
        )

    with next_col:
        st.button(
            "Next",
            key="nav_next",
            on_click=controller.request_next,
            disabled=in_flight or not controller.is_next_enabled,
            type="primary",
            width="stretch",
        )
