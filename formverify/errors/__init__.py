"""Result and Error Types

Key components:
- Result[T, E]: Ok/Err container every validator returns
- ErrorCode: validation error code taxonomy
- FieldError: structured per-field error value
- Builder functions: ergonomic FieldError construction

Usage:
    from formverify.errors import Ok, Err, required_field

    match validator.run(form):
        case Ok(signup):
            save(signup)
        case Err(errors):
            return [e.to_dict() for e in errors]
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    ErrorCode,
    FieldError,
    # Constructors
    ok,
    err,
    try_result,
)

from .builders import (
    field_error,
    required_field,
    invalid_format,
    out_of_range,
    invalid_type,
    constraint_violation,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "ErrorCode",
    "FieldError",
    # Constructors
    "ok",
    "err",
    "try_result",
    # Builders
    "field_error",
    "required_field",
    "invalid_format",
    "out_of_range",
    "invalid_type",
    "constraint_violation",
]
