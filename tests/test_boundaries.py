"""Tests for boundary helpers and ValidationFailed."""

from operator import itemgetter

import pytest
from structlog.testing import capture_logs

from formverify import (
    FieldError,
    Ok,
    ValidationFailed,
    custom,
    fail,
    from_callable,
    is_blank,
    parse,
    parse_or_raise,
    required_field,
    succeed,
    validated,
)

signup = (
    succeed(lambda email: lambda age: {"email": email, "age": age})
    .required(itemgetter("email"), is_blank, required_field("email"), custom(Ok))
    .required(itemgetter("age"), is_blank, required_field("age"), from_callable(int, "age is not a number"))
)


class TestParse:
    def test_success_not_logged(self):
        with capture_logs() as logs:
            assert parse(signup, {"email": "a@b.c", "age": "30"}) == Ok({"email": "a@b.c", "age": 30})
        assert logs == []

    def test_failure_returned_and_logged(self):
        with capture_logs() as logs:
            result = parse(signup, {"email": "", "age": "x"}, origin="signup_form")
        assert result.unwrap_err() == [required_field("email"), "age is not a number"]
        assert len(logs) == 1
        event = logs[0]
        assert event["event"] == "validation_failed"
        assert event["log_level"] == "warning"
        assert event["origin"] == "signup_form"
        assert event["error_count"] == 2
        assert event["errors"] == ["email: email is required", "age is not a number"]

    def test_logged_errors_capped_by_settings(self, monkeypatch):
        monkeypatch.setenv("FORMVERIFY_LOG_MAX_ERRORS", "1")
        with capture_logs() as logs:
            parse(signup, {"email": "", "age": ""})
        assert logs[0]["error_count"] == 2
        assert logs[0]["errors"] == ["email: email is required"]

    def test_failure_logging_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("FORMVERIFY_LOG_FAILURES", "false")
        with capture_logs() as logs:
            assert parse(fail("nope"), None).is_err()
        assert logs == []


class TestParseOrRaise:
    def test_returns_value(self):
        assert parse_or_raise(signup, {"email": "a@b.c", "age": "1"}) == {"email": "a@b.c", "age": 1}

    def test_raises_with_every_error(self):
        with pytest.raises(ValidationFailed) as exc_info:
            parse_or_raise(signup, {"email": " ", "age": " "}, origin="signup_form")
        exc = exc_info.value
        assert exc.errors == [required_field("email"), required_field("age")]
        assert exc.origin == "signup_form"
        assert str(exc) == "signup_form: Validation failed (2 errors)"


class TestValidated:
    def test_passes_validated_value(self):
        @validated(signup)
        def register(data, source="web"):
            return data["email"], data["age"], source

        assert register({"email": "a@b.c", "age": "5"}) == ("a@b.c", 5, "web")
        assert register({"email": "a@b.c", "age": "5"}, source="api") == ("a@b.c", 5, "api")

    def test_raises_with_function_name_as_origin(self):
        @validated(signup)
        def register(data):
            return data

        with pytest.raises(ValidationFailed) as exc_info:
            register({"email": "", "age": "1"})
        assert exc_info.value.origin.endswith("register")
        assert register.__name__ == "register"


class TestValidationFailed:
    def test_single_error_str(self):
        assert str(ValidationFailed(errors=["only one"])) == "only one"

    def test_first_error(self):
        assert ValidationFailed(errors=["a", "b"]).first_error == "a"
        assert ValidationFailed(errors=[]).first_error is None

    def test_field_errors_groups_structured_errors(self):
        exc = ValidationFailed(errors=[required_field("a"), "plain", FieldError("a", "again")])
        assert list(exc.field_errors) == ["a"]
        assert len(exc.field_errors["a"]) == 2

    def test_to_dict_mixes_structured_and_plain_errors(self):
        exc = ValidationFailed(
            errors=[FieldError("password", "too short", value="abc"), "age is not a number"],
            origin="signup_form",
        )
        payload = exc.to_dict(sensitive_fields=frozenset({"password"}))["error"]
        assert payload["type"] == "validation_error"
        assert payload["origin"] == "signup_form"
        assert payload["error_count"] == 2
        assert payload["errors"][0]["value"] == "[REDACTED]"
        assert payload["errors"][1] == "age is not a number"

    def test_is_exception(self):
        with pytest.raises(Exception):
            raise ValidationFailed(errors=["x"])
