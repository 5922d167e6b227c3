"""Validator Primitive

A Validator is an opaque, frozen wrapper around a pure function from an
input value to ``Ok(output)`` or ``Err([error, ...])``. Construction goes
through ``custom``, ``succeed``, ``fail``, the adapters and the combinators;
the only thing a Validator does is ``run``.

Methods on Validator delegate to the module-level combinators so pipelines
read left to right:

    signup = (
        succeed(curry(Signup))
        .required(itemgetter("email"), is_blank, "email is required", email_check)
        .optional(itemgetter("age"), is_blank, None, age_check)
    )
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, final

from formverify.errors import Err, Ok, Result

if TYPE_CHECKING:
    from .emptiness import EmptinessCheck

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
E2 = TypeVar("E2")


@final
@dataclass(frozen=True, slots=True, repr=False)
class Validator(Generic[A, E, B]):
    """Opaque validating function ``A -> Result[B, list[E]]``.

    Build instances with ``custom``, ``succeed``, ``fail``, the adapters or
    the combinators; calling the class directly is not part of the public
    API. The wrapped function is private and only reachable through ``run``.
    """
    _fn: Callable[[A], Result[B, list[E]]]

    def run(self, value: A) -> Result[B, list[E]]:
        """Apply the wrapped function to ``value``."""
        return self._fn(value)

    def __call__(self, value: A) -> Result[B, list[E]]: return self._fn(value)

    def __repr__(self) -> str: return f"<Validator {getattr(self._fn, '__qualname__', type(self._fn).__name__)}>"

    # -- combinators ---------------------------------------------------------

    def map(self, f: Callable[[B], C]) -> Validator[A, E, C]:
        from .combinators import map_
        return map_(f, self)

    def map_errors(self, f: Callable[[E], E2]) -> Validator[A, E2, B]:
        from .combinators import map_errors
        return map_errors(f, self)

    def and_then(self, f: Callable[[B], Validator[A, E, C]]) -> Validator[A, E, C]:
        from .combinators import and_then
        return and_then(f, self)

    def compose(self, second: Validator[B, E, C]) -> Validator[A, E, C]:
        """Feed this validator's output into ``second``."""
        from .combinators import compose
        return compose(second, self)

    def and_map(self: Validator[A, E, Callable[[C], D]], vb: Validator[A, E, C]) -> Validator[A, E, D]:
        from .combinators import and_map
        return and_map(vb, self)

    # -- field pipeline ------------------------------------------------------

    def required(
        self: Validator[A, E, Callable[[C], D]],
        accessor: Callable[[A], Any],
        is_empty: EmptinessCheck,
        err: E,
        field_validator: Validator[Any, E, C],
    ) -> Validator[A, E, D]:
        from .pipeline import required
        return required(accessor, is_empty, err, field_validator, self)

    def optional(
        self: Validator[A, E, Callable[[C], D]],
        accessor: Callable[[A], Any],
        is_empty: EmptinessCheck,
        default: C,
        field_validator: Validator[Any, E, C],
    ) -> Validator[A, E, D]:
        from .pipeline import optional
        return optional(accessor, is_empty, default, field_validator, self)

    def field(
        self: Validator[A, E, Callable[[C], D]],
        accessor: Callable[[A], Any],
        field_validator: Validator[Any, E, C],
    ) -> Validator[A, E, D]:
        from .pipeline import field
        return field(accessor, field_validator, self)

    def keep(self: Validator[A, E, Callable[[C], D]], accessor: Callable[[A], C]) -> Validator[A, E, D]:
        from .pipeline import keep
        return keep(accessor, self)

    def ignore(self, check: Validator[A, E, Any]) -> Validator[A, E, B]:
        from .pipeline import ignore
        return ignore(check, self)


def custom(f: Callable[[A], Result[B, list[E]]]) -> Validator[A, E, B]:
    """Wrap an arbitrary validating function verbatim.

    ``f`` must return ``Ok(value)`` or ``Err([error, ...])``.
    """
    return Validator(f)


def run(validator: Validator[A, E, B], value: A) -> Result[B, list[E]]:
    """Run ``validator`` against ``value``."""
    return validator.run(value)


def succeed(value: B) -> Validator[Any, Any, B]:
    """Validator that ignores its input and always yields ``Ok(value)``.

    Seeds a field pipeline with the (curried) constructor to fill.
    """
    return Validator(lambda _: Ok(value))


def fail(error: E) -> Validator[Any, E, Any]:
    """Validator that ignores its input and always yields ``Err([error])``."""
    return Validator(lambda _: Err([error]))
