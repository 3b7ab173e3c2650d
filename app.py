"""
Smart Plug Savings Estimator - Main Application
Streamlit lead capture wizard: segment -> quantity -> location -> estimated savings
"""

import sys
import time
import logging
from pathlib import Path

# Add current directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from savings_wizard.config import WizardConfig, configure_logging

# Configure logging BEFORE importing streamlit
configure_logging()
logger = logging.getLogger(__name__)

import streamlit as st

from constants import APP_CONFIG, STEP_TITLES
from savings_wizard import WizardState
from savings_wizard.services import StepController, calculate_savings
from savings_wizard.utils import WIZARD_CSS, get_canonical_url, transition_key
from savings_wizard.components import (
    render_segment_selection,
    render_quantity_entry,
    render_facility_location,
    render_savings_summary,
    render_navigation_bar,
)

# Widget keys that hold user input outside WizardState
INPUT_WIDGET_PREFIXES = ('quantity_editor_', 'facility_location_input')


# Page configuration
st.set_page_config(
    page_title=APP_CONFIG['title'],
    page_icon=APP_CONFIG['icon'],
    layout=APP_CONFIG['layout'],
    initial_sidebar_state=APP_CONFIG['initial_sidebar_state']
)


@st.cache_resource
def get_wizard_config() -> WizardConfig:
    """Load the wizard configuration once per server process."""
    config = WizardConfig.load()
    logger.info(
        f"Wizard config: step change {config.step_change_delay_ms}ms, "
        f"transition {config.transition_duration_ms}ms"
    )
    return config


def initialize_session_state():
    """Initialize session state variables"""
    if 'wizard_state' not in st.session_state:
        st.session_state.wizard_state = WizardState()


def start_over(controller: StepController) -> None:
    """Reset the wizard and clear the input widgets."""
    controller.reset()
    for key in list(st.session_state.keys()):
        if str(key).startswith(INPUT_WIDGET_PREFIXES):
            del st.session_state[key]


def render_page_meta(config: WizardConfig) -> None:
    """
    Canonical link and description for the page.

    Streamlit renders these into the page body, not <head>, so they are
    informational for link previews and embedding pages. Search engines only
    honor a canonical link set by the hosting page.
    """
    canonical_url = get_canonical_url(config.app_base_url)
    st.markdown(
        f'<link rel="canonical" href="{canonical_url}">'
        f'<meta name="description" content="{APP_CONFIG["description"]}">',
        unsafe_allow_html=True
    )


def render_step(controller: StepController, config: WizardConfig) -> None:
    """Render the current step's content inside its slide container."""
    state = controller.state
    direction = state.transition_direction.value if state.transition_direction else None

    with st.container(key=transition_key(direction)):
        st.markdown(
            f'<div class="wizard-title">{STEP_TITLES[state.current_step]}</div>',
            unsafe_allow_html=True
        )

        if state.current_step == 1:
            render_segment_selection(controller)
        elif state.current_step == 2:
            render_quantity_entry(controller)
        elif state.current_step == 3:
            render_facility_location(controller)
        elif state.current_step == 4:
            result = calculate_savings(state.selected_segment, state.quantities)
            logger.debug(f"Savings estimate: {result.to_dict()}")
            render_savings_summary(
                controller,
                result,
                config.order_url,
                on_start_over=lambda: start_over(controller),
            )
        else:
            st.error(f"Unknown step: {state.current_step}")


def wait_for_transition(controller: StepController) -> None:
    """Sleep until the next transition phase is due, then rerun."""
    delay = controller.seconds_until_next_event()
    if delay is None:
        return
    time.sleep(delay)
    st.rerun()


def main():
    """Main application entry point"""
    initialize_session_state()

    config = get_wizard_config()
    controller = StepController(st.session_state.wizard_state, config)
    controller.advance()

    st.markdown(WIZARD_CSS, unsafe_allow_html=True)
    render_page_meta(config)

    render_step(controller, config)
    render_navigation_bar(controller)

    wait_for_transition(controller)


if __name__ == "__main__":
    main()
