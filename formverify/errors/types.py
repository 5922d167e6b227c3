"""Monadic Result Types

Implements the Result/Either pair every validator returns. Ok wraps a
validated value, Err wraps the failure payload (for validators, a non-empty
list of errors in discovery order). Both variants are frozen and support
structural pattern matching.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class ErrorCode(Enum):
    """Validation error code taxonomy (E2xxx)."""
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005


@dataclass(frozen=True, slots=True)
class FieldError:
    """Structured error for a single field.

    A ready-made error value for pipelines that want more than a plain
    message. Validators never inspect it; it is threaded through like any
    other caller-supplied error.

    - field: dotted path to the offending field (e.g. "user.email")
    - message: human-readable description
    - code: error code from the taxonomy
    - value: the raw value that failed (may be redacted)
    - suggested_fix: actionable hint for the caller
    """
    field: str
    message: str
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC
    value: Any = None
    suggested_fix: str | None = None
    metadata: dict = field(default_factory=dict)

    def with_field(self, field_path: str) -> FieldError:
        """Re-home the error under another field path."""
        return FieldError(field=field_path, message=self.message, code=self.code, value=self.value,
            suggested_fix=self.suggested_fix, metadata=self.metadata)

    def redact(self, sensitive_fields: frozenset[str] | set[str] | None = None) -> FieldError:
        """Replace the offending value when the field path touches a sensitive name."""
        if not sensitive_fields: return self
        parts = self.field.replace("[", ".").replace("]", "").split(".")
        if any(part in sensitive_fields for part in parts):
            return FieldError(field=self.field, message=self.message, code=self.code, value="[REDACTED]",
                suggested_fix=self.suggested_fix, metadata=self.metadata)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        result = {"field": self.field, "code": self.code.name, "message": self.message}
        if self.value is not None: result["value"] = self.value
        if self.suggested_fix: result["suggested_fix"] = self.suggested_fix
        if self.metadata: result["metadata"] = self.metadata
        return result

    @classmethod
    def from_pydantic_error(cls, error: dict[str, Any]) -> FieldError:
        """Create from a pydantic error dict (one entry of ``exc.errors()``)."""
        err_type = error.get("type", "")
        # pydantic reports the enclosing object as the input of a missing field
        value = None if err_type == "missing" else error.get("input")
        return cls(field=cls._format_path(error.get("loc", ())), message=error.get("msg", "Validation failed"),
            code=_PYDANTIC_CODES.get(err_type, ErrorCode.E2000_VALIDATION_GENERIC), value=value,
            suggested_fix=cls._suggested_fix(err_type, error.get("ctx") or {}))

    @staticmethod
    def _format_path(loc: tuple[str | int, ...] | list[str | int]) -> str:
        """Format a pydantic location tuple as a JSON path."""
        if not loc: return "$"
        parts = []
        for segment in loc:
            if isinstance(segment, int): parts.append(f"[{segment}]")
            elif parts: parts.append(f".{segment}")
            else: parts.append(str(segment))
        return "".join(parts)

    @staticmethod
    def _suggested_fix(err_type: str, ctx: dict[str, Any]) -> str | None:
        fix_generators = {
            "missing": lambda: "This field is required - provide a value",
            "string_too_short": lambda: f"Value must be at least {ctx.get('min_length', '?')} characters",
            "string_too_long": lambda: f"Truncate to {ctx.get('max_length', '?')} characters or less",
            "string_pattern_mismatch": lambda: f"Value must match pattern: {ctx.get('pattern', '?')}",
            "greater_than": lambda: f"Use a value greater than {ctx.get('gt', '?')}",
            "greater_than_equal": lambda: f"Use a value of {ctx.get('ge', '?')} or more",
            "less_than": lambda: f"Use a value less than {ctx.get('lt', '?')}",
            "less_than_equal": lambda: f"Use a value of {ctx.get('le', '?')} or less",
            "int_parsing": lambda: "Provide a valid integer number",
            "float_parsing": lambda: "Provide a valid decimal number",
            "bool_parsing": lambda: "Provide true or false",
            "extra_forbidden": lambda: "Remove this field - it is not allowed",
        }
        if err_type in fix_generators: return fix_generators[err_type]()
        return ctx.get("message") if isinstance(ctx.get("message"), str) else None

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


_PYDANTIC_CODES = {
    "missing": ErrorCode.E2001_REQUIRED_FIELD_MISSING,
    "string_pattern_mismatch": ErrorCode.E2002_INVALID_FORMAT,
    "int_parsing": ErrorCode.E2002_INVALID_FORMAT,
    "float_parsing": ErrorCode.E2002_INVALID_FORMAT,
    "bool_parsing": ErrorCode.E2002_INVALID_FORMAT,
    "string_too_short": ErrorCode.E2003_OUT_OF_RANGE,
    "string_too_long": ErrorCode.E2003_OUT_OF_RANGE,
    "greater_than": ErrorCode.E2003_OUT_OF_RANGE,
    "greater_than_equal": ErrorCode.E2003_OUT_OF_RANGE,
    "less_than": ErrorCode.E2003_OUT_OF_RANGE,
    "less_than_equal": ErrorCode.E2003_OUT_OF_RANGE,
    "string_type": ErrorCode.E2004_INVALID_TYPE,
    "int_type": ErrorCode.E2004_INVALID_TYPE,
    "float_type": ErrorCode.E2004_INVALID_TYPE,
    "bool_type": ErrorCode.E2004_INVALID_TYPE,
    "extra_forbidden": ErrorCode.E2005_CONSTRAINT_VIOLATION,
}


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result.

    Wraps a successful value. Immutable and hashable when T is hashable.
    """
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Extract the value. Safe because Ok always contains a value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        return self.value

    def expect(self, msg: str) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, Any]:
        """Transform the success value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self

    def flat_map(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Chain operations that may fail."""
        return f(self.value)

    def and_then(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Alias for flat_map."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], Result[T, F]]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self

    def match(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result.

    Wraps the failure payload. Validators always put a non-empty list of
    errors here.
    """
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def unwrap_err(self) -> E:
        """Extract the error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        raise ValueError(f"{msg}: {self.error}")

    def map(self, f: Callable[[Any], U]) -> Result[U, E]:
        """No-op for Err variant."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Result[Any, F]:
        """Transform the error."""
        return Err(f(self.error))

    def flat_map(self, f: Callable[[Any], Result[U, E]]) -> Result[U, E]:
        """No-op for Err variant."""
        return self

    def and_then(self, f: Callable[[Any], Result[U, E]]) -> Result[U, E]:
        """No-op for Err variant."""
        return self

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Try to recover from error."""
        return f(self.error)

    def match(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return err(self.error)

    def __iter__(self) -> Iterator:
        return iter([])


# Type alias for Result
Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Construct Ok variant."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Construct Err variant."""
    return Err(error)


def try_result(
    f: Callable[[], T],
    catch: tuple[type[BaseException], ...] = (Exception,),
) -> Result[T, Exception]:
    """Execute function and wrap its outcome in a Result.

    Only exceptions listed in ``catch`` become Err; anything else propagates.
    """
    try:
        return Ok(f())
    except catch as e:
        return Err(e)
