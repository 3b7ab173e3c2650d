"""
Savings Summary Component (Step 4)

Shows the savings estimate, the per-device breakdown and the order
call-to-action:

| Card | Value |
|------|-------|
| 1 | Monthly Savings (your share, after gain share) |
| 2 | Annual Energy Waste (kWh) |
| 3 | Smart Plugs Needed |
"""

from typing import Callable, Optional

import streamlit as st

from constants import GAIN_SHARE_RATE
from savings_wizard import SavingsResult
from savings_wizard.services import SavingsCalculator, StepController
from savings_wizard.utils.formatting import (
    escape_markdown,
    format_currency,
    format_kwh,
    format_plugs,
    render_metric_card,
)
from visualization_helpers import generate_savings_split_chart, generate_device_waste_chart


def render_savings_summary(
    controller: StepController,
    result: SavingsResult,
    order_url: str,
    on_start_over: Optional[Callable[[], None]] = None
) -> None:
    """
    Render the estimated savings step.

    Args:
        controller: StepController holding the wizard state
        result: Savings estimate for the current state
        order_url: Destination of the order button
        on_start_over: Callback for "Start over", defaults to controller.reset
    """
    state = controller.state
    segment_name = state.selected_segment.value if state.selected_segment else "—"
    location = escape_markdown(state.facility_location.strip())
    st.markdown(f"Estimate for your **{segment_name}** in **{location}**")

    cols = st.columns(3)
    cards = [
        render_metric_card(
            "Monthly Savings", format_currency(result.final_savings), "per month", "success"
        ),
        render_metric_card(
            "Annual Energy Waste", format_kwh(result.annual_energy_waste), "eliminated per year"
        ),
        render_metric_card(
            "Smart Plugs Needed", f"{result.number_of_plugs:,}", format_plugs(result.number_of_plugs)
        ),
    ]
    for col, card in zip(cols, cards):
        with col:
            st.markdown(card, unsafe_allow_html=True)

    with st.expander("How we calculated this", expanded=False):
        st.markdown(
            f"- Annual savings: {format_currency(result.annual_gross)}\n"
            f"- Monthly savings: {format_currency(result.monthly_savings)}\n"
            f"- Gain share ({GAIN_SHARE_RATE:.0%}): -{format_currency(result.gain_share)}\n"
            f"- **Your monthly savings: {format_currency(result.final_savings)}**"
        )

        breakdown_df = SavingsCalculator.device_breakdown(state.selected_segment, state.quantities)
        if not breakdown_df.empty:
            display_df = breakdown_df.copy()
            display_df['Annual Savings'] = display_df['Annual Savings'].apply(format_currency)
            st.dataframe(display_df, hide_index=True, width="stretch")

            chart_col1, chart_col2 = st.columns(2)
            with chart_col1:
                st.plotly_chart(generate_savings_split_chart(result), width="stretch")
            with chart_col2:
                st.plotly_chart(generate_device_waste_chart(breakdown_df), width="stretch")

    st.markdown("---")
    order_col, restart_col = st.columns([3, 1])
    with order_col:
        st.link_button("🛒 Order Smart Plugs", order_url, type="primary", width="stretch")
    with restart_col:
        st.button("Start over", key="start_over", on_click=on_start_over or controller.reset, width="stretch")
