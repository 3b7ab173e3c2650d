"""
Formatting utilities and CSS for the Savings Wizard components.
"""

import re
from html import escape as html_escape
from typing import Optional

from constants import CURRENCY_DECIMALS


def format_currency(value: float, decimals: int = CURRENCY_DECIMALS) -> str:
    """
    Format a number as currency.

    Args:
        value: The numeric value to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "$1,234.56"
    """
    if value is None:
        return "—"
    if value < 0:
        return f"-${abs(value):,.{decimals}f}"
    return f"${value:,.{decimals}f}"


def format_kwh(value: float) -> str:
    """Format an energy amount in kWh."""
    if value is None:
        return "—"
    return f"{value:,.0f} kWh"


def format_plugs(count: int) -> str:
    """Format a plug count with the right plural."""
    return f"{count:,} plug" if count == 1 else f"{count:,} plugs"


MARKDOWN_SPECIAL_CHARS = re.compile(r'([\\`*_{}\[\]()#+\-.!|~$])')


def escape_markdown(text: str) -> str:
    """Escape user text so st.markdown shows it literally."""
    return MARKDOWN_SPECIAL_CHARS.sub(r'\\\1', html_escape(text, quote=False))


def render_metric_card(
    label: str,
    value: str,
    sublabel: Optional[str] = None,
    variant: str = "default"
) -> str:
    """
    Render a metric card as HTML.

    Args:
        label: The metric label (e.g., "Monthly Savings")
        value: The formatted value (e.g., "$7.50")
        sublabel: Optional secondary text (e.g., "per month")
        variant: Card style variant (default, success, primary)

    Returns:
        HTML string for the metric card
    """
    variant_classes = {
        "default": "",
        "success": "metric-card--success",
        "primary": "metric-card--primary",
    }
    variant_class = variant_classes.get(variant, "")

    sublabel_html = f'<span class="metric-sublabel">{sublabel}</span>' if sublabel else ""

    return (
        f'<div class="metric-card {variant_class}">'
        f'<span class="metric-label">{label}</span>'
        f'<span class="metric-value">{value}</span>'
        f'{sublabel_html}'
        f'</div>'
    )


def transition_key(direction_value: Optional[str]) -> str:
    """
    Container key for the step content given the slide direction value.

    Streamlit adds a `st-key-<key>` class to keyed containers. A new key
    also remounts the container, which restarts its CSS animation.
    """
    if direction_value == "right":
        return "wizard-step-exit-left"
    if direction_value == "left":
        return "wizard-step-exit-right"
    return "wizard-step-enter"


# =============================================================================
# CSS STYLES
# =============================================================================

WIZARD_CSS = """
<style>
:root {
    --gray-100: #f3f4f6;
    --gray-200: #e5e7eb;
    --gray-500: #6b7280;
    --gray-800: #1f2937;

    --green-50: #f0fdf4;
    --green-600: #16a34a;

    --blue-50: #eff6ff;
    --blue-500: #3b82f6;
    --blue-600: #2563eb;
}

/* Step content slide transitions */
.st-key-wizard-step-enter {
    animation: wizard-slide-in 0.5s ease both;
}
.st-key-wizard-step-exit-left {
    animation: wizard-slide-out-left 0.5s ease forwards;
}
.st-key-wizard-step-exit-right {
    animation: wizard-slide-out-right 0.5s ease forwards;
}
@keyframes wizard-slide-in {
    from { opacity: 0; transform: translateY(12px); }
    to { opacity: 1; transform: translateY(0); }
}
@keyframes wizard-slide-out-left {
    from { opacity: 1; transform: translateX(0); }
    to { opacity: 0; transform: translateX(-100%); }
}
@keyframes wizard-slide-out-right {
    from { opacity: 1; transform: translateX(0); }
    to { opacity: 0; transform: translateX(100%); }
}

.wizard-title {
    font-size: 28px;
    font-weight: 700;
    color: var(--gray-800);
    text-align: center;
    margin-bottom: 16px;
}

/* Progress indicator */
.wizard-progress {
    display: flex;
    align-items: center;
    justify-content: center;
    gap: 8px;
    margin: 12px 0;
}
.wizard-progress-step {
    padding: 6px 14px;
    border-radius: 999px;
    border: 2px solid var(--gray-200);
    color: var(--gray-500);
    font-size: 13px;
    font-weight: 600;
}
.wizard-progress-step--active {
    border-color: var(--blue-500);
    background: var(--blue-50);
    color: var(--blue-600);
}
.wizard-progress-step--done {
    border-color: var(--green-600);
    color: var(--green-600);
}
.wizard-progress-line {
    width: 32px;
    height: 2px;
    background: var(--gray-200);
}

/* Metric cards */
.metric-card {
    background: var(--gray-100);
    border-radius: 12px;
    padding: 16px;
    display: flex;
    flex-direction: column;
    gap: 4px;
    margin-bottom: 12px;
}
.metric-card--success {
    background: var(--green-50);
    border: 2px solid var(--green-600);
}
.metric-card--primary {
    background: var(--blue-50);
    border: 2px solid var(--blue-500);
}
.metric-label {
    font-size: 13px;
    color: var(--gray-500);
}
.metric-value {
    font-size: 24px;
    font-weight: 700;
    color: var(--gray-800);
}
.metric-sublabel {
    font-size: 12px;
    color: var(--gray-500);
}
</style>
"""
