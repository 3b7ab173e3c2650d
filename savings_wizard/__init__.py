"""
Savings Wizard Module

Four-step lead capture flow for the smart plug savings estimate:

- Step 1: Select Segment (Gym, Office, School, Hotel)
- Step 2: Select Quantity (devices from the segment's catalog)
- Step 3: Facility Location
- Step 4: Estimated Savings

The savings calculation and the step state machine live in services and do
not depend on Streamlit. Components render the steps on top of them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Optional

from constants import FIRST_STEP


class Segment(Enum):
    """Customer vertical selected on step 1. Selects the device catalog."""
    GYM = "Gym"
    OFFICE = "Office"
    SCHOOL = "School"
    HOTEL = "Hotel"


class TransitionDirection(Enum):
    """
    Slide direction of the in-flight step transition.

    RIGHT: moving forward (Next)
    LEFT: moving backward (Back)
    """
    LEFT = "left"
    RIGHT = "right"


@dataclass
class WizardState:
    """
    All mutable state of the wizard.

    Only the StepController writes to it. The transition bookkeeping fields
    let a transition started on one Streamlit run finish on a later one.
    """
    current_step: int = FIRST_STEP
    selected_segment: Optional[Segment] = None
    quantities: Dict[str, int] = field(default_factory=dict)  # device -> count
    facility_location: str = ""
    transition_direction: Optional[TransitionDirection] = None
    is_transitioning: bool = False

    # Transition bookkeeping
    transition_started_at: Optional[float] = None  # clock reading, seconds
    pending_step_delta: int = 0  # +1 for Next, -1 for Back


@dataclass(frozen=True)
class SavingsResult:
    """
    Savings estimate derived from the segment and quantities.

    Recomputed on every render, never stored.
    """
    annual_energy_waste: float = 0.0  # kWh/year
    annual_gross: float = 0.0
    monthly_savings: float = 0.0
    gain_share: float = 0.0
    final_savings: float = 0.0
    number_of_plugs: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for display and logging."""
        return {
            "annual_energy_waste": self.annual_energy_waste,
            "annual_gross": self.annual_gross,
            "monthly_savings": self.monthly_savings,
            "gain_share": self.gain_share,
            "final_savings": self.final_savings,
            "number_of_plugs": self.number_of_plugs,
        }

