"""
Visualization Helpers for the Smart Plug Savings Estimator

Chart generation functions for the Estimated Savings step.
"""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from savings_wizard import SavingsResult


def generate_savings_split_chart(
    result: SavingsResult,
    title: str = 'Monthly Savings Split'
) -> go.Figure:
    """
    Generate a donut chart splitting monthly savings into customer savings
    and gain share.

    Args:
        result: Savings estimate
        title: Chart title

    Returns:
        Plotly Figure object
    """
    fig = go.Figure(
        data=[go.Pie(
            labels=['Your Savings', 'Gain Share'],
            values=[result.final_savings, result.gain_share],
            hole=0.55,
            marker=dict(colors=['#16a34a', '#93c5fd']),
            textinfo='label+percent',
            sort=False,
        )]
    )

    fig.update_layout(
        title=title,
        showlegend=False,
        height=320,
        margin=dict(t=50, b=10, l=10, r=10),
    )

    return fig


def generate_device_waste_chart(
    breakdown_df: pd.DataFrame,
    title: str = 'Annual Energy Waste by Device'
) -> go.Figure:
    """
    Generate a horizontal bar chart of annual energy waste per device.

    Args:
        breakdown_df: Device breakdown from SavingsCalculator.device_breakdown
        title: Chart title

    Returns:
        Plotly Figure object
    """
    sorted_df = breakdown_df.sort_values('Annual Waste (kWh)', ascending=True)

    fig = px.bar(
        sorted_df,
        x='Annual Waste (kWh)',
        y='Device',
        orientation='h',
        title=title,
        color='Annual Waste (kWh)',
        color_continuous_scale='Blues',
    )

    fig.update_layout(showlegend=False, coloraxis_showscale=False, height=320)
    fig.update_xaxes(title='kWh / year')
    fig.update_yaxes(title='')

    return fig
