"""
Package 'config':
    Settings for logging and for a validation run.
"""

from .logging import logging_settings, LoggingSettings
from .validation import ValidationConfig

__all__ = [
    "logging_settings",
    "LoggingSettings",
    "ValidationConfig",
]
