# File: src/deck_designer/core/errors.py
"""
Exception hierarchy for the deck design engine.

Invalid numeric input is a ValueError so that callers validating user input
can catch it the usual way. Degenerate geometry is never an error.
"""

from typing import Any, Dict, Optional


class DeckDesignerError(Exception):
    """Base class for all deck designer errors."""

    def __init__(self, detail: str, extra: Optional[Dict[str, Any]] = None):
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)


class InvalidSpacingError(DeckDesignerError, ValueError):
    """Raised when a member spacing is missing, non-numeric or not positive."""

    def __init__(self, field: str, value: Any, unit: str = "meters"):
        self.field = field
        self.value = value
        self.unit = unit
        super().__init__(
            f"{field} must be a positive number of {unit}, got {value!r}",
            extra={"field": field, "value": repr(value), "unit": unit},
        )


class InvalidMeasurementError(DeckDesignerError, ValueError):
    """Raised by strict parsers for malformed measurement text."""

    def __init__(self, text: Any, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(
            f"Invalid measurement {text!r}: {reason}",
            extra={"text": repr(text), "reason": reason},
        )


class ProjectFileError(DeckDesignerError, ValueError):
    """Raised when a project file cannot be read or fails validation."""

    def __init__(self, detail: str, errors: Optional[list] = None):
        self.errors = errors or []
        super().__init__(detail, extra={"errors": self.errors})


class ComputationError(DeckDesignerError):
    """Wraps an unexpected failure inside layout or BOM math."""

    def __init__(self, component: str, cause: Exception):
        self.component = component
        self.cause = cause
        super().__init__(
            f"{component} failed: {cause}",
            extra={"component": component, "cause": type(cause).__name__},
        )
