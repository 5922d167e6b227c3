"""Accumulating Validators

Validators wrap pure functions ``input -> Ok(value) | Err([errors])`` and
compose so that one run over a form reports every invalid field, not just
the first.

Key Features:
- Opaque, frozen Validator with custom/succeed/fail constructors
- map_/map2/and_map (accumulating) and and_then/compose (short-circuiting)
- required/optional field pipelines threading a curried constructor
- Adapters for plain callables, predicates and pydantic models
- Boundary helpers that log failures and optionally raise

Usage:
    from formverify.validation import succeed, required, optional, curry, is_blank, from_callable

    person = (
        succeed(curry(Person))
        .required(itemgetter("name"), is_blank, "name is required", from_callable(str.strip, "bad name"))
        .optional(itemgetter("age"), is_blank, None, from_callable(int, "age is not a number"))
    )

    match person.run(form):
        case Ok(p): ...
        case Err(errors): ...
"""

from .validator import (
    Validator,
    custom,
    run,
    succeed,
    fail,
)

from .combinators import (
    apply_results,
    map_,
    map2,
    and_map,
    and_then,
    map_errors,
    compose,
    all_of,
)

from .pipeline import (
    required,
    optional,
    field,
    keep,
    ignore,
    curry,
)

from .emptiness import (
    EmptinessCheck,
    Present,
    predicate_maybe,
    is_none,
    is_empty,
    is_blank,
)

from .adapters import (
    from_callable,
    from_predicate,
    from_optional,
    from_model,
)

from .errors import ValidationFailed

from .boundaries import (
    parse,
    parse_or_raise,
    validated,
)

__all__ = [
    # Primitive
    "Validator",
    "custom",
    "run",
    "succeed",
    "fail",
    # Combinators
    "apply_results",
    "map_",
    "map2",
    "and_map",
    "and_then",
    "map_errors",
    "compose",
    "all_of",
    # Field pipeline
    "required",
    "optional",
    "field",
    "keep",
    "ignore",
    "curry",
    # Emptiness
    "EmptinessCheck",
    "Present",
    "predicate_maybe",
    "is_none",
    "is_empty",
    "is_blank",
    # Adapters
    "from_callable",
    "from_predicate",
    "from_optional",
    "from_model",
    # Boundaries
    "ValidationFailed",
    "parse",
    "parse_or_raise",
    "validated",
]
