"""Field Error Builders

Ergonomic constructors for FieldError values, one per validation code.
Builders return plain errors (not Err) so they slot straight into
``fail``, ``required`` and ``from_predicate``.
"""
from typing import Any

from .types import ErrorCode, FieldError


def field_error(
    field: str,
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    value: Any = None,
    suggested_fix: str | None = None,
    **metadata,
) -> FieldError:
    """Create a generic field error."""
    return FieldError(
        field=field,
        message=message,
        code=code,
        value=value,
        suggested_fix=suggested_fix,
        metadata={k: v for k, v in metadata.items() if v is not None},
    )


def required_field(field: str) -> FieldError:
    return field_error(
        field,
        f"{field} is required",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        suggested_fix="This field is required - provide a value",
    )


def invalid_format(field: str, expected: str, value: Any = None) -> FieldError:
    return field_error(
        field,
        f"{field} must be {expected}",
        code=ErrorCode.E2002_INVALID_FORMAT,
        value=value,
        expected=expected,
    )


def out_of_range(
    field: str,
    value: Any = None,
    *,
    min_value: Any = None,
    max_value: Any = None,
) -> FieldError:
    if min_value is not None and max_value is not None:
        msg = f"{field} must be between {min_value} and {max_value}"
    elif min_value is not None:
        msg = f"{field} must be at least {min_value}"
    elif max_value is not None:
        msg = f"{field} must be at most {max_value}"
    else:
        msg = f"{field} is out of range"
    return field_error(
        field,
        msg,
        code=ErrorCode.E2003_OUT_OF_RANGE,
        value=value,
        min_value=min_value,
        max_value=max_value,
    )


def invalid_type(field: str, expected: str, value: Any = None) -> FieldError:
    actual = type(value).__name__
    return field_error(
        field,
        f"{field} must be of type {expected}, got {actual}",
        code=ErrorCode.E2004_INVALID_TYPE,
        value=value,
        expected=expected,
        actual=actual,
    )


def constraint_violation(field: str, constraint: str, value: Any = None) -> FieldError:
    return field_error(
        field,
        f"{field} violates constraint: {constraint}",
        code=ErrorCode.E2005_CONSTRAINT_VIOLATION,
        value=value,
        constraint=constraint,
    )
