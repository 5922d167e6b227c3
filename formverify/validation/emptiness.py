"""Emptiness Predicates

Field pipelines decide between "validate this value" and "treat as missing"
with a caller-supplied emptiness check. A few stock checks for form data
live here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

EmptinessCheck = Callable[[Any], bool]


@dataclass(frozen=True, slots=True)
class Present(Generic[T]):
    """A value that passed the emptiness check. Distinguishes a present ``None`` from absence."""
    value: T


def predicate_maybe(is_empty: Callable[[T], bool], value: T) -> Present[T] | None:
    """Return ``Present(value)`` unless ``is_empty(value)`` holds, else ``None``."""
    return None if is_empty(value) else Present(value)


def is_none(value: Any) -> bool:
    return value is None


def is_empty(value: Any) -> bool:
    """True for None and for anything of length zero ("", [], {})."""
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


def is_blank(value: Any) -> bool:
    """True for None, "" and whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
