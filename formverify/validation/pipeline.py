"""Field Pipelines

Build a record validator one field at a time. Start from ``succeed`` holding
a curried constructor, then thread it through ``required``/``optional``
(or ``field``/``keep``) once per constructor argument:

    @dataclass
    class Signup:
        email: str
        age: int | None

    signup = optional(
        itemgetter("age"), is_blank, None, from_callable(int, "age is not a number"),
        required(
            itemgetter("email"), is_blank, "email is required", custom(Ok),
            succeed(curry(Signup)),
        ),
    )

    signup.run({"email": "", "age": "x"})
    # Err(["email is required", "age is not a number"])

Every step runs its field and the builder so far against the same input, so
a single run reports every failing field, in declaration order.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar

from formverify.errors import Err, Ok, Result
from .combinators import apply_results
from .emptiness import predicate_maybe
from .validator import Validator

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")


def required(
    accessor: Callable[[A], B],
    is_empty: Callable[[B], bool],
    err: E,
    field_validator: Validator[B, E, C],
    builder: Validator[A, E, Callable[[C], D]],
) -> Validator[A, E, D]:
    """Validate a field that must be present.

    An empty raw value fails with ``[err]`` and ``field_validator`` is not
    run. Otherwise the field validator's outcome is merged with the
    builder's; the builder's errors (earlier fields) come first.
    """
    def _run(value: A) -> Result[D, list[E]]:
        match predicate_maybe(is_empty, accessor(value)):
            case None:
                field_result = Err([err])
            case present:
                field_result = field_validator.run(present.value)
        return apply_results(builder.run(value), field_result)
    return Validator(_run)


def optional(
    accessor: Callable[[A], B],
    is_empty: Callable[[B], bool],
    default: C,
    field_validator: Validator[B, E, C],
    builder: Validator[A, E, Callable[[C], D]],
) -> Validator[A, E, D]:
    """Validate a field that may be missing.

    An empty raw value contributes ``default`` and is never an error. A
    non-empty value goes through ``field_validator``, whose failure is.
    """
    def _run(value: A) -> Result[D, list[E]]:
        match predicate_maybe(is_empty, accessor(value)):
            case None:
                field_result = Ok(default)
            case present:
                field_result = field_validator.run(present.value)
        return apply_results(builder.run(value), field_result)
    return Validator(_run)


def field(
    accessor: Callable[[A], B],
    field_validator: Validator[B, E, C],
    builder: Validator[A, E, Callable[[C], D]],
) -> Validator[A, E, D]:
    """Validate a field with no emptiness check."""
    return Validator(lambda value: apply_results(builder.run(value), field_validator.run(accessor(value))))


def keep(accessor: Callable[[A], C], builder: Validator[A, E, Callable[[C], D]]) -> Validator[A, E, D]:
    """Pass a field's raw value to the constructor unvalidated."""
    return Validator(lambda value: apply_results(builder.run(value), Ok(accessor(value))))


def ignore(check: Validator[A, E, Any], builder: Validator[A, E, B]) -> Validator[A, E, B]:
    """Run ``check`` against the whole input for its errors only.

    Useful for cross-field rules ("passwords must match") that contribute
    errors without consuming a constructor argument.
    """
    def _run(value: A) -> Result[B, list[E]]:
        kept = builder.run(value).map(lambda b: lambda _: b)
        return apply_results(kept, check.run(value))
    return Validator(_run)


def curry(fn: Callable[..., D], arity: int | None = None) -> Any:
    """Turn an n-ary callable into nested one-argument callables.

    ``curry(Signup)("a@b.c")(30) == Signup("a@b.c", 30)``. ``arity`` defaults
    to the number of required positional parameters. A zero-arity callable
    is called immediately and the constructed value is returned instead of a
    callable.
    """
    if arity is None:
        params = inspect.signature(fn).parameters.values()
        arity = sum(
            1 for p in params
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
        )
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")
    if arity == 0:
        return fn()

    def _collect(args: tuple) -> Callable[[Any], Any]:
        def _next(arg: Any) -> Any:
            collected = (*args, arg)
            return fn(*collected) if len(collected) == arity else _collect(collected)
        return _next
    return _collect(())
