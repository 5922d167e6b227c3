"""Validator Combinators

Generic ways to transform and chain validators, independent of fields.

Two propagation policies coexist:
- Accumulating (map2, and_map): both sides always run against the same
  input and the error lists of failing sides are concatenated.
- Short-circuiting (and_then, compose): the second step is skipped when
  the first fails.
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from formverify.errors import Err, Ok, Result
from .validator import Validator

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
E2 = TypeVar("E2")


def apply_results(
    r1: Result[Callable[[B], C], list[E]],
    r2: Result[B, list[E]],
) -> Result[C, list[E]]:
    """Apply a wrapped function to a wrapped value, accumulating errors.

    | r1         | r2         | result           |
    |------------|------------|------------------|
    | Ok(f)      | Ok(x)      | Ok(f(x))         |
    | Err(e1)    | Err(e2)    | Err(e1 + e2)     |
    | Err(e1)    | Ok(_)      | Err(e1)          |
    | Ok(_)      | Err(e2)    | Err(e2)          |
    """
    match r1, r2:
        case Ok(f), Ok(x):
            return Ok(f(x))
        case Err(e1), Err(e2):
            return Err([*e1, *e2])
        case Err(e1), Ok(_):
            return Err(list(e1))
        case Ok(_), Err(e2):
            return Err(list(e2))
    raise TypeError(f"Expected Ok or Err, got {type(r1).__name__} and {type(r2).__name__}")


def map_(f: Callable[[B], C], validator: Validator[A, E, B]) -> Validator[A, E, C]:
    """Transform a successful output with ``f``; errors pass through unchanged."""
    return Validator(lambda value: validator.run(value).map(f))


def map2(
    f: Callable[[B, C], D],
    v1: Validator[A, E, B],
    v2: Validator[A, E, C],
) -> Validator[A, E, D]:
    """Run both validators on the same input and combine their outputs.

    Never short-circuits: when both fail, v1's errors come first, then v2's.
    """
    def _run(value: A) -> Result[D, list[E]]:
        curried = v1.run(value).map(lambda b: lambda c: f(b, c))
        return apply_results(curried, v2.run(value))
    return Validator(_run)


def and_map(vb: Validator[A, E, B], vf: Validator[A, E, Callable[[B], C]]) -> Validator[A, E, C]:
    """Apply the function from ``vf`` to the value from ``vb``.

    The value validator comes first and the function validator second, so a
    builder stays on the right of a left-to-right pipeline. Errors merge as
    in ``map2``: the value side's errors precede the function side's.
    """
    return map2(lambda b, f: f(b), vb, vf)


def and_then(f: Callable[[B], Validator[A, E, C]], validator: Validator[A, E, B]) -> Validator[A, E, C]:
    """Chain a dependent validator.

    On success the output picks the next validator, which runs against the
    original input. On failure ``f`` is never called.
    """
    def _run(value: A) -> Result[C, list[E]]:
        match validator.run(value):
            case Ok(b):
                return f(b).run(value)
            case failure:
                return failure
    return Validator(_run)


def map_errors(f: Callable[[E], E2], validator: Validator[A, E, B]) -> Validator[A, E2, B]:
    """Transform every error of a failure; successes are untouched."""
    return Validator(lambda value: validator.run(value).map_err(lambda errors: [f(e) for e in errors]))


def compose(second: Validator[B, E, C], first: Validator[A, E, B]) -> Validator[A, E, C]:
    """Run ``first``, then run ``second`` on first's output.

    Typical use is a conversion followed by a check on the converted value:

        age = compose(from_predicate(lambda n: n >= 18, "too young"), from_callable(int, "not a number"))
    """
    return Validator(lambda value: first.run(value).and_then(second.run))


def all_of(*validators: Validator[A, E, Any]) -> Validator[A, E, A]:
    """Run every validator on the input, keep the input, and collect all errors."""
    def _run(value: A) -> Result[A, list[E]]:
        result: Result[A, list[E]] = Ok(value)
        for v in validators:
            result = apply_results(result.map(lambda kept: lambda _: kept), v.run(value))
        return result
    return Validator(_run)
