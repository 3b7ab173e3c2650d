"""
Input validation helpers for the wizard steps.
"""

import numbers
from typing import Optional, Tuple, Union


def clamp_quantity(value: Union[int, float]) -> int:
    """Clamp a quantity to a non-negative whole number."""
    return max(0, int(value))


def parse_quantity(raw: Union[str, int, float, None]) -> Tuple[Optional[int], str]:
    """
    Parse a quantity entered as free text.

    Blank input counts as 0 and negative numbers are clamped to 0.

    Args:
        raw: Text or number from the quantity field

    Returns:
        Tuple of (quantity, error_message). quantity is None when the input
        is not a whole number.
    """
    if raw is None:
        return 0, ""

    if isinstance(raw, bool):
        return None, "Quantity must be a whole number"

    if isinstance(raw, numbers.Real):
        value = float(raw)
    else:
        text = str(raw).strip().replace(',', '')
        if not text:
            return 0, ""
        try:
            value = float(text)
        except ValueError:
            return None, f"'{str(raw).strip()}' is not a number"

    if value != value or value in (float('inf'), float('-inf')):
        return None, "Quantity must be a whole number"
    if not value.is_integer():
        return None, "Quantity must be a whole number"

    return clamp_quantity(value), ""


def validate_location(location: Optional[str]) -> Tuple[bool, str]:
    """
    Validate the facility location.

    Any non-blank text is accepted.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not location or not location.strip():
        return False, "Facility location is required"
    return True, ""
