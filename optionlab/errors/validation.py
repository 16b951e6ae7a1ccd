"""Validation issue types for leg and market input checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Severity level for validation issues."""

    WARNING = "warning"
    """Input is tolerated but contributes nothing (e.g. an unpriced leg)."""

    ERROR = "error"
    """Input would make a calculation fail."""


@dataclass
class ValidationIssue:
    """A single problem found while checking calculation input."""

    severity: ErrorSeverity
    """Severity level of the issue."""

    error_type: str
    """Error type identifier."""

    message: str
    """Human-readable description."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional context."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "severity": self.severity.value,
            "error_type": self.error_type,
            "message": self.message,
            "details": self.details,
        }
