"""
Utility functions for the Savings Wizard.
"""

from .formatting import (
    WIZARD_CSS,
    escape_markdown,
    format_currency,
    format_kwh,
    format_plugs,
    render_metric_card,
    transition_key,
)

from .validation import (
    clamp_quantity,
    parse_quantity,
    validate_location,
)

from .links import get_canonical_url

__all__ = [
    'WIZARD_CSS',
    'escape_markdown',
    'format_currency',
    'format_kwh',
    'format_plugs',
    'render_metric_card',
    'transition_key',
    'clamp_quantity',
    'parse_quantity',
    'validate_location',
    'get_canonical_url',
]
