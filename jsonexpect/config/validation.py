"""
Validation for jsonexpect settings files.

This module checks raw parsed YAML against the settings schema and
reports errors with helpful messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import LogLevel, ReporterType


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "reporter"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of settings validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Settings validation passed"
        lines = [f"Settings validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class SettingsValidator:
    """Validates raw parsed YAML against the settings schema."""

    KNOWN_KEYS = {"reporter", "log_level", "max_value_length"}
    VALID_REPORTERS = {t.value for t in ReporterType}
    VALID_LOG_LEVELS = {level.value for level in LogLevel}
    MIN_VALUE_LENGTH = 10

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_keys()
        self._validate_reporter()
        self._validate_log_level()
        self._validate_max_value_length()
        return self.result

    def _validate_keys(self) -> None:
        for key in sorted(set(self.data.keys()) - self.KNOWN_KEYS):
            self.result.add_error(
                str(key),
                f"Unknown setting '{key}'",
                suggestion=f"Valid settings are: {', '.join(sorted(self.KNOWN_KEYS))}"
            )

    def _validate_reporter(self) -> None:
        if "reporter" not in self.data:
            return
        reporter = self.data["reporter"]
        if not isinstance(reporter, str) or reporter not in self.VALID_REPORTERS:
            self.result.add_error(
                "reporter",
                "Invalid reporter type",
                value=reporter,
                suggestion=f"Use one of: {', '.join(sorted(self.VALID_REPORTERS))}"
            )

    def _validate_log_level(self) -> None:
        if "log_level" not in self.data:
            return
        level = self.data["log_level"]
        if not isinstance(level, str) or level.upper() not in self.VALID_LOG_LEVELS:
            self.result.add_error(
                "log_level",
                "Invalid log level",
                value=level,
                suggestion=f"Use one of: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

    def _validate_max_value_length(self) -> None:
        if "max_value_length" not in self.data:
            return
        length = self.data["max_value_length"]
        if not isinstance(length, int) or isinstance(length, bool):
            self.result.add_error(
                "max_value_length",
                "Must be an integer",
                value=length,
            )
        elif length < self.MIN_VALUE_LENGTH:
            self.result.add_error(
                "max_value_length",
                f"Must be at least {self.MIN_VALUE_LENGTH}",
                value=length,
            )
