"""Validation Failure Exception

Validators report failure as data. ``ValidationFailed`` exists only for
boundaries that prefer raising: it carries the complete, ordered error list
of one run.

Error Format:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "origin": "signup_form",
        "error_count": 2,
        "errors": [
            {"field": "email", "code": "E2001_REQUIRED_FIELD_MISSING", "message": "email is required"},
            "age is not a number"
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from formverify.errors import FieldError


@dataclass
class ValidationFailed(Exception):
    """Raised by ``parse_or_raise`` when a validator fails."""
    errors: list[Any]
    origin: str = ""
    message: str = "Validation failed"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        prefix = f"{self.origin}: " if self.origin else ""
        if len(self.errors) == 1: return f"{prefix}{self.errors[0]}"
        return f"{prefix}{self.message} ({len(self.errors)} errors)"

    @property
    def first_error(self) -> Any: return self.errors[0] if self.errors else None

    @property
    def field_errors(self) -> dict[str, list[FieldError]]:
        """Group FieldError entries by field path; other error values are skipped."""
        result: dict[str, list[FieldError]] = {}
        for error in self.errors:
            if isinstance(error, FieldError): result.setdefault(error.field, []).append(error)
        return result

    def to_dict(self, *, sensitive_fields: frozenset[str] | None = None) -> dict[str, Any]:
        """Serialize for API responses. FieldErrors use their own ``to_dict``, anything else ``str``."""
        return {"error": {"type": "validation_error", "message": self.message, "origin": self.origin,
            "error_count": len(self.errors), "errors": [_serialize(e, sensitive_fields) for e in self.errors]}}


def _serialize(error: Any, sensitive_fields: frozenset[str] | None) -> Any:
    if isinstance(error, FieldError): return error.redact(sensitive_fields).to_dict()
    return str(error)
