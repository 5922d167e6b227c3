"""formverify: accumulating validators for form-like data.

    from formverify import Ok, Err, succeed, curry, is_blank, from_callable

    signup = (
        succeed(curry(Signup))
        .required(itemgetter("email"), is_blank, "email is required", from_callable(str.lower, "bad email"))
        .optional(itemgetter("age"), is_blank, None, from_callable(int, "age is not a number"))
    )
"""
__version__ = "0.1.0"

from .errors import (
    Result,
    Ok,
    Err,
    ErrorCode,
    FieldError,
    field_error,
    required_field,
    invalid_format,
    out_of_range,
    invalid_type,
    constraint_violation,
)

from .validation import (
    Validator,
    custom,
    run,
    succeed,
    fail,
    apply_results,
    map_,
    map2,
    and_map,
    and_then,
    map_errors,
    compose,
    all_of,
    required,
    optional,
    field,
    keep,
    ignore,
    curry,
    Present,
    predicate_maybe,
    is_none,
    is_empty,
    is_blank,
    from_callable,
    from_predicate,
    from_optional,
    from_model,
    ValidationFailed,
    parse,
    parse_or_raise,
    validated,
)

__all__ = [
    "__version__",
    # Results and errors
    "Result",
    "Ok",
    "Err",
    "ErrorCode",
    "FieldError",
    "field_error",
    "required_field",
    "invalid_format",
    "out_of_range",
    "invalid_type",
    "constraint_violation",
    # Validators
    "Validator",
    "custom",
    "run",
    "succeed",
    "fail",
    "apply_results",
    "map_",
    "map2",
    "and_map",
    "and_then",
    "map_errors",
    "compose",
    "all_of",
    "required",
    "optional",
    "field",
    "keep",
    "ignore",
    "curry",
    "Present",
    "predicate_maybe",
    "is_none",
    "is_empty",
    "is_blank",
    "from_callable",
    "from_predicate",
    "from_optional",
    "from_model",
    "ValidationFailed",
    "parse",
    "parse_or_raise",
    "validated",
]
