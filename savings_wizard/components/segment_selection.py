"""
Segment Selection Component (Step 1)

One card per customer segment. Clicking a card selects the segment, which
enables Next and loads that segment's device catalog for step 2.
"""

import streamlit as st

from constants import SEGMENT_ICONS
from savings_wizard import Segment
from savings_wizard.services import StepController


def render_segment_selection(controller: StepController) -> None:
    """
    Render the four segment cards.

    Args:
        controller: StepController holding the wizard state
    """
    selected = controller.state.selected_segment
    cols = st.columns(len(Segment))

    for col, segment in zip(cols, Segment):
        with col:
            is_selected = segment == selected
            card_class = "segment-card segment-card--selected" if is_selected else "segment-card"

            st.markdown(
                f'<div class="{card_class}">'
                f'<div class="segment-card-icon">{SEGMENT_ICONS.get(segment.value, "")}</div>'
                f'<div class="segment-card-name">{segment.value}</div>'
                f'</div>',
                unsafe_allow_html=True
            )

            st.button(
                "✓ Selected" if is_selected else "Select",
                key=f"segment_{segment.value}",
                width="stretch",
                type="primary" if is_selected else "secondary",
                on_click=controller.select_segment,
                args=(segment,),
                disabled=controller.state.is_transitioning,
            )

    st.markdown("""
    <style>
    .segment-card {
        background: #f8fafc;
        border: 2px solid #e2e8f0;
        border-radius: 12px;
        padding: 20px 8px;
        text-align: center;
        margin-bottom: 8px;
        transition: all 0.2s ease;
    }
    .segment-card--selected {
        background: #eff6ff;
        border-color: #3b82f6;
        box-shadow: 0 0 0 3px rgba(59, 130, 246, 0.1);
    }
    .segment-card-icon {
        font-size: 36px;
        margin-bottom: 6px;
    }
    .segment-card-name {
        font-size: 16px;
        font-weight: 600;
        color: #1e293b;
    }
    </style>
    """, unsafe_allow_html=True)
