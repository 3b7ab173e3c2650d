"""
Step Controller for the Savings Wizard.

State machine over the four wizard steps:

    1 Select Segment -> 2 Select Quantity -> 3 Facility Location -> 4 Estimated Savings

Next/Back start a timed transition. Halfway through (step change delay) the
step changes and the slide direction clears; at the end (transition duration)
the in-flight flag clears. Only one transition can be in flight at a time.

Time comes from an injectable clock so transitions can be driven
deterministically in tests.
"""

import time
import logging
from typing import Callable, Optional

from constants import FIRST_STEP, LAST_STEP, STEP_NAMES
from savings_wizard import Segment, TransitionDirection, WizardState
from savings_wizard.config import WizardConfig
from savings_wizard.services.savings_calculator import SavingsCalculator
from savings_wizard.utils.validation import clamp_quantity, validate_location

logger = logging.getLogger(__name__)


class StepController:
    """
    Owns all writes to a WizardState.

    Usage:
        controller = StepController(state)
        controller.select_segment(Segment.GYM)
        if controller.request_next():
            ...
        controller.advance()  # apply any timer phase that is due
    """

    def __init__(
        self,
        state: WizardState,
        config: Optional[WizardConfig] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Args:
            state: Wizard state to drive
            config: Transition timing, defaults to WizardConfig()
            clock: Returns the current time in seconds
        """
        self.state = state
        self.config = config or WizardConfig()
        self._clock = clock

    # ------------------------------------------------------------------ Inputs

    def select_segment(self, segment: Segment) -> None:
        """Select a segment. Switching segments resets quantities."""
        if segment == self.state.selected_segment:
            return
        self.state.selected_segment = segment
        devices = SavingsCalculator.segment_devices(segment)
        self.state.quantities = {name: 0 for name in devices}
        logger.info(f"Segment selected: {segment.value}")

    def set_quantity(self, device_name: str, value: int) -> None:
        """Set the unit count for a device, clamped to >= 0."""
        if device_name not in self.state.quantities:
            logger.warning(
                f"Ignoring quantity for {device_name!r}: not in the "
                f"{self._segment_label()} catalog"
            )
            return
        self.state.quantities[device_name] = clamp_quantity(value)

    def set_location(self, location: str) -> None:
        """Set the facility location text."""
        self.state.facility_location = location

    def reset(self) -> None:
        """Return to a fresh wizard on step 1."""
        self.state.current_step = FIRST_STEP
        self.state.selected_segment = None
        self.state.quantities = {}
        self.state.facility_location = ""
        self._clear_transition()
        logger.info("Wizard reset")

    # -------------------------------------------------------------- Validity

    def is_step_valid(self, step: int) -> bool:
        """Whether the inputs governed by `step` allow moving past it."""
        if step == 1:
            return self.state.selected_segment is not None
        if step == 2:
            return any(q > 0 for q in self.state.quantities.values())
        if step == 3:
            is_valid, _ = validate_location(self.state.facility_location)
            return is_valid
        return False

    @property
    def is_next_enabled(self) -> bool:
        """Next is enabled when the current step is valid (never on the last step)."""
        if self.state.current_step >= LAST_STEP:
            return False
        return self.is_step_valid(self.state.current_step)

    @property
    def can_go_back(self) -> bool:
        return self.state.current_step > FIRST_STEP

    @property
    def show_navigation(self) -> bool:
        """The navigation bar is hidden on the savings step."""
        return self.state.current_step < LAST_STEP

    # ------------------------------------------------------------ Transitions

    def request_next(self) -> bool:
        """
        Start a forward transition.

        Returns:
            True if the transition started, False if it was rejected
        """
        if not self.is_next_enabled:
            logger.debug(f"Next rejected on step {self.state.current_step}: step not valid")
            return False
        return self._start_transition(TransitionDirection.RIGHT, 1)

    def request_back(self) -> bool:
        """
        Start a backward transition.

        Returns:
            True if the transition started, False if it was rejected
        """
        if not self.can_go_back:
            logger.debug("Back rejected: already on the first step")
            return False
        return self._start_transition(TransitionDirection.LEFT, -1)

    def advance(self) -> None:
        """Apply every transition phase that is due at the current time."""
        state = self.state
        if not state.is_transitioning or state.transition_started_at is None:
            return

        elapsed = self._clock() - state.transition_started_at

        if state.pending_step_delta and elapsed >= self.config.step_change_delay:
            previous = state.current_step
            state.current_step = min(
                LAST_STEP, max(FIRST_STEP, previous + state.pending_step_delta)
            )
            state.pending_step_delta = 0
            state.transition_direction = None
            logger.info(
                f"Step {previous} ({STEP_NAMES[previous]}) -> "
                f"{state.current_step} ({STEP_NAMES[state.current_step]})"
            )

        if elapsed >= self.config.transition_duration:
            self._clear_transition()

    def seconds_until_next_event(self) -> Optional[float]:
        """
        Time until the next transition phase is due.

        Returns:
            Seconds to wait (0 if already due), or None if nothing is in flight
        """
        state = self.state
        if not state.is_transitioning or state.transition_started_at is None:
            return None

        elapsed = self._clock() - state.transition_started_at
        if state.pending_step_delta:
            deadline = self.config.step_change_delay
        else:
            deadline = self.config.transition_duration
        return max(0.0, deadline - elapsed)

    # ---------------------------------------------------------------- Helpers

    def _start_transition(self, direction: TransitionDirection, delta: int) -> bool:
        state = self.state
        if state.is_transitioning:
            logger.debug(f"{direction.value} transition rejected: one already in flight")
            return False

        state.is_transitioning = True
        state.transition_direction = direction
        state.transition_started_at = self._clock()
        state.pending_step_delta = delta
        return True

    def _clear_transition(self) -> None:
        self.state.is_transitioning = False
        self.state.transition_direction = None
        self.state.transition_started_at = None
        self.state.pending_step_delta = 0

    def _segment_label(self) -> str:
        segment = self.state.selected_segment
        return segment.value if segment else "empty"
