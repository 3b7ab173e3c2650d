"""
Constants and reference data for the Smart Plug Savings Estimator
Includes the per-segment device catalog and savings rates
"""

# App configuration
APP_CONFIG = {
    'title': 'Smart Plug Savings Estimator',
    'description': 'Estimate how much your facility could save with smart plugs',
    'icon': '🔌',
    'layout': 'centered',
    'initial_sidebar_state': 'collapsed',
}

SEGMENT_ICONS = {
    "Gym": "🏋️",
    "Office": "🏢",
    "School": "🏫",
    "Hotel": "🏨",
}

# ==============================================================================
# DEVICE CATALOG
# ==============================================================================
# Annual standby energy waste per unit, in kWh/year.
# Keyed by segment, then by device name.

DEVICE_CATALOG = {
    "Gym": {
        "Treadmills": 250.0,
        "Elliptical Machines": 120.0,
        "Exercise Bikes": 90.0,
        "Stair Climbers": 180.0,
        "Rowing Machines": 60.0,
        "Televisions": 100.0,
    },
    "Office": {
        "Computers": 120.0,
        "Monitors": 65.0,
        "Printers": 85.0,
        "Coffee Makers": 70.0,
        "Desk Lamps": 50.0,
        "Water Coolers": 150.0,
    },
    "School": {
        "Computers": 120.0,
        "Projectors": 95.0,
        "Printers": 85.0,
        "Interactive Whiteboards": 110.0,
        "Vending Machines": 400.0,
    },
    "Hotel": {
        "Televisions": 100.0,
        "Mini Fridges": 180.0,
        "Coffee Makers": 70.0,
        "Ice Machines": 350.0,
        "Vending Machines": 400.0,
    },
}

# Devices that share one smart plug across a group of units.
# Everything not listed here needs one plug per unit.
PLUG_GROUP_SIZES = {
    "Elliptical Machines": 4,
    "Exercise Bikes": 2,
}

# ==============================================================================
# SAVINGS RATES
# ==============================================================================

ENERGY_RATE_PER_KWH = 0.18  # USD per kWh
MONTHS_PER_YEAR = 12
GAIN_SHARE_RATE = 0.5  # Provider keeps 50% of monthly savings

# ==============================================================================
# WIZARD STEPS
# ==============================================================================

FIRST_STEP = 1
LAST_STEP = 4

STEP_NAMES = {
    1: "Segment",
    2: "Quantity",
    3: "Location",
    4: "Savings",
}

STEP_TITLES = {
    1: "Select Segment",
    2: "Select Quantity",
    3: "Facility Location",
    4: "Estimated Savings",
}

# Transition timing (milliseconds)
DEFAULT_STEP_CHANGE_DELAY_MS = 500
DEFAULT_TRANSITION_DURATION_MS = 1000

# External links
DEFAULT_ORDER_URL = "https://reverttechnologies.com"
DEFAULT_APP_BASE_URL = "http://localhost:8501"

# Logging
DEFAULT_LOG_LEVEL = "INFO"

# Display formats
CURRENCY_DECIMALS = 2
