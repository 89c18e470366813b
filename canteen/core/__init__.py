"""
Core module initialization.
Exports configuration, logging utilities and domain errors.
"""

from canteen.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from canteen.core.errors import (
    CanteenError,
    InvalidRequestError,
    InvalidStatusTransitionError,
    NotFoundError,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "CanteenError",
    "InvalidRequestError",
    "InvalidStatusTransitionError",
    "NotFoundError",
]
