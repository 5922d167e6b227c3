"""Validator Adapters

Lift plain Python callables, predicates, optionals and pydantic models into
Validators, so existing conversion code plugs into field pipelines.

Usage:
    age = from_callable(int, "age is not a number")
    adult = from_predicate(lambda n: n >= 18, "must be an adult")
    address = from_model(AddressModel)
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from formverify.errors import Err, FieldError, Ok, Result, try_result
from .validator import Validator

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
M = TypeVar("M", bound=BaseModel)


def from_callable(
    fn: Callable[[A], B],
    error: E | Callable[[Exception], E],
    *,
    catch: tuple[type[Exception], ...] = (ValueError, TypeError),
) -> Validator[A, E, B]:
    """Validator that converts with ``fn``.

    An exception listed in ``catch`` becomes a single error: ``error`` itself,
    or ``error(exc)`` when ``error`` is callable. Other exceptions propagate.
    """
    def _run(value: A) -> Result[B, list[E]]:
        match try_result(lambda: fn(value), catch=catch):
            case Ok(converted):
                return Ok(converted)
            case Err(exc):
                return Err([error(exc) if callable(error) else error])
    return Validator(_run)


def from_predicate(predicate: Callable[[A], bool], error: E) -> Validator[A, E, A]:
    """Validator that passes the value through when ``predicate`` holds."""
    return Validator(lambda value: Ok(value) if predicate(value) else Err([error]))


def from_optional(error: E) -> Validator[A | None, E, A]:
    """Validator that rejects ``None`` with ``error`` and passes anything else through."""
    return Validator(lambda value: Err([error]) if value is None else Ok(value))


def from_model(model: type[M], *, strict: bool = False) -> Validator[Mapping[str, Any], FieldError, M]:
    """Validator backed by a pydantic model.

    Each pydantic error becomes a FieldError, in the order pydantic reports
    them.
    """
    def _run(data: Mapping[str, Any]) -> Result[M, list[FieldError]]:
        try:
            return Ok(model.model_validate(data, strict=strict))
        except PydanticValidationError as e:
            errors = [FieldError.from_pydantic_error(detail) for detail in e.errors()]
            return Err(errors)
    return Validator(_run)
