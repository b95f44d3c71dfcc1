"""Utilities for scripturequiz."""

from .determinism import set_determinism
from .logging_config import configure_logging
from .validation import DataIntegrityError, InsufficientDataError, ValidationError

__all__ = [
    "configure_logging",
    "set_determinism",
    "ValidationError",
    "DataIntegrityError",
    "InsufficientDataError",
]
