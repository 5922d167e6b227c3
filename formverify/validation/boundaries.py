"""Validation at System Boundaries

Run a validator where untrusted data enters the application (form posts,
request bodies, imported rows). Failures are logged once, here, and either
returned as data (``parse``) or raised (``parse_or_raise``).
"""
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from formverify.config import get_settings
from formverify.errors import Err, Ok, Result
from formverify.logging import validation_logger
from .errors import ValidationFailed
from .validator import Validator

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
R = TypeVar("R")


def parse(validator: Validator[A, E, B], data: A, *, origin: str = "") -> Result[B, list[E]]:
    """Run ``validator`` on ``data`` and log a failure event. The Result is returned unchanged."""
    result = validator.run(data)
    if result.is_err() and (settings := get_settings()).LOG_FAILURES:
        errors = result.unwrap_err()
        validation_logger().warning(
            "validation_failed",
            origin=origin or None,
            error_count=len(errors),
            errors=[str(e) for e in errors[: settings.LOG_MAX_ERRORS]],
        )
    return result


def parse_or_raise(validator: Validator[A, E, B], data: A, *, origin: str = "") -> B:
    """Like ``parse`` but return the value, raising ``ValidationFailed`` with every error on failure."""
    match parse(validator, data, origin=origin):
        case Ok(value):
            return value
        case Err(errors):
            raise ValidationFailed(errors=list(errors), origin=origin)


def validated(validator: Validator[A, E, B], *, origin: str = "") -> Callable[[Callable[[B], R]], Callable[[A], R]]:
    """Decorator validating a function's single argument at the boundary.

    Usage:
        @validated(signup_validator, origin="signup_form")
        def register(signup: Signup) -> User:
            ...

        register(request.form)  # raises ValidationFailed listing every bad field
    """
    def decorator(func: Callable[[B], R]) -> Callable[[A], R]:
        @wraps(func)
        def wrapper(data: A, *args: Any, **kwargs: Any) -> R:
            return func(parse_or_raise(validator, data, origin=origin or func.__qualname__), *args, **kwargs)
        return wrapper
    return decorator
