"""
Settings for jsonexpect

This package loads and validates the optional YAML settings file that
selects a reporter and the logging level.

Settings file:
    reporter: collect        # collect | raise | log | console
    log_level: WARNING       # DEBUG | INFO | WARNING | ERROR | CRITICAL
    max_value_length: 100    # truncation of values in failure messages

Usage:
    from jsonexpect.config import load_settings

    settings, result = load_settings("jsonexpect.yaml")
    if not result.is_valid:
        print(result)
"""

# Public API
from .loader import load_settings, settings_from_yaml

# Models
from .models import LogLevel, ReporterType, Settings

# Validation
from .validation import SettingsValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_settings",
    "settings_from_yaml",
    # Models
    "Settings",
    "ReporterType",
    "LogLevel",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SettingsValidator",
]
