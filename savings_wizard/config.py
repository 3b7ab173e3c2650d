"""
Runtime configuration for the Savings Wizard.

Values come from environment variables (optionally from a .env file).
Reference data and fixed rates live in constants.py.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from constants import (
    DEFAULT_STEP_CHANGE_DELAY_MS,
    DEFAULT_TRANSITION_DURATION_MS,
    DEFAULT_ORDER_URL,
    DEFAULT_APP_BASE_URL,
    DEFAULT_LOG_LEVEL,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


def configure_logging(dotenv_path: Optional[str] = None) -> int:
    """
    Configure root logging from LOG_LEVEL.

    Reads .env first so a level set there is honored. An unknown level
    falls back to DEFAULT_LOG_LEVEL with a warning.

    Returns:
        The numeric level applied to the root logger
    """
    load_dotenv(dotenv_path)

    raw = os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL)
    name = raw.strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    invalid = not isinstance(level, int)
    if invalid:
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%H:%M:%S',
        force=True  # Override any existing config
    )
    if invalid:
        logger.warning(f"LOG_LEVEL={raw!r} is not a logging level, using {DEFAULT_LOG_LEVEL}")
    return level


@dataclass
class WizardConfig:
    """Configuration for the wizard's transitions and external links."""
    step_change_delay_ms: int = DEFAULT_STEP_CHANGE_DELAY_MS
    transition_duration_ms: int = DEFAULT_TRANSITION_DURATION_MS
    order_url: str = DEFAULT_ORDER_URL
    app_base_url: str = DEFAULT_APP_BASE_URL

    @classmethod
    def from_environment(cls) -> "WizardConfig":
        """Load configuration from environment variables."""
        return cls(
            step_change_delay_ms=_int_from_env(
                "WIZARD_STEP_CHANGE_DELAY_MS", DEFAULT_STEP_CHANGE_DELAY_MS
            ),
            transition_duration_ms=_int_from_env(
                "WIZARD_TRANSITION_DURATION_MS", DEFAULT_TRANSITION_DURATION_MS
            ),
            order_url=os.getenv("ORDER_URL", DEFAULT_ORDER_URL),
            app_base_url=os.getenv("APP_BASE_URL", DEFAULT_APP_BASE_URL),
        )

    @classmethod
    def load(cls) -> "WizardConfig":
        """Load from the environment, using defaults if the result is invalid."""
        config = cls.from_environment()
        is_valid, error = config.validate()
        if not is_valid:
            logger.warning(f"Invalid wizard configuration ({error}), using defaults")
            return cls()
        return config

    def validate(self) -> Tuple[bool, str]:
        """Validate configuration. Returns (is_valid, error_message)."""
        if self.step_change_delay_ms < 0:
            return False, "WIZARD_STEP_CHANGE_DELAY_MS must not be negative"
        if self.transition_duration_ms < self.step_change_delay_ms:
            return False, (
                "WIZARD_TRANSITION_DURATION_MS must be at least "
                "WIZARD_STEP_CHANGE_DELAY_MS"
            )
        if not self.order_url.startswith(("http://", "https://")):
            return False, "ORDER_URL must be an http(s) URL"
        if not self.app_base_url.startswith(("http://", "https://")):
            return False, "APP_BASE_URL must be an http(s) URL"
        return True, ""

    @property
    def step_change_delay(self) -> float:
        """Step change delay in seconds."""
        return self.step_change_delay_ms / 1000

    @property
    def transition_duration(self) -> float:
        """Total transition duration in seconds."""
        return self.transition_duration_ms / 1000
