"""
Services for the Savings Wizard.

These hold the savings arithmetic and the step state machine, keeping
components focused on presentation.
"""

from .savings_calculator import SavingsCalculator, calculate_savings
from .step_controller import StepController

__all__ = [
    'SavingsCalculator',
    'calculate_savings',
    'StepController',
]
