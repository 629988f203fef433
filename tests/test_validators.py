"""
Tests for app/core/validators.py - employee payload validation.
"""
import pytest

from app.core.validators import (
    EMPTY_FIELDS,
    INVALID_EMAIL,
    MISSING_FIELDS,
    strip_whitespace,
    validate_employee_payload,
)

VALID = {"name": "John Doe", "email": "john@example.com", "position": "Developer"}


def with_fields(**overrides):
    payload = dict(VALID)
    for key, value in overrides.items():
        if value is ...:
            payload.pop(key)
        else:
            payload[key] = value
    return payload


class TestRequiredFields:

    def test_valid_payload_passes(self):
        assert validate_employee_payload(VALID) is None

    @pytest.mark.parametrize("field", ["name", "email", "position"])
    def test_missing_field(self, field):
        assert validate_employee_payload(with_fields(**{field: ...})) == MISSING_FIELDS

    @pytest.mark.parametrize("field", ["name", "email", "position"])
    def test_null_field(self, field):
        assert validate_employee_payload(with_fields(**{field: None})) == MISSING_FIELDS

    def test_non_string_field_counts_as_missing(self):
        assert validate_employee_payload(with_fields(name=42)) == MISSING_FIELDS

    def test_empty_payload(self):
        assert validate_employee_payload({}) == MISSING_FIELDS


class TestEmptyFields:

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    @pytest.mark.parametrize("field", ["name", "email", "position"])
    def test_blank_after_trim(self, field, value):
        assert validate_employee_payload(with_fields(**{field: value})) == EMPTY_FIELDS

    def test_missing_wins_over_empty(self):
        payload = {"name": "", "email": "john@example.com"}
        assert validate_employee_payload(payload) == MISSING_FIELDS


class TestEmailFormat:

    @pytest.mark.parametrize(
        "email",
        [
            "john@example.com",
            "j.doe+work@mail.example.co.uk",
            "a@b.c",
        ],
    )
    def test_valid_emails(self, email):
        assert validate_employee_payload(with_fields(email=email)) is None

    @pytest.mark.parametrize(
        "email",
        [
            "invalid-email",
            "john@example",
            "@example.com",
            "john@.com",
            "john@example.",
            "john@@example.com",
            "john doe@example.com",
            "john@exa mple.com",
            " john@example.com",
            "john@example.com\n",
        ],
    )
    def test_invalid_emails(self, email):
        assert validate_employee_payload(with_fields(email=email)) == INVALID_EMAIL

    def test_empty_wins_over_format(self):
        assert validate_employee_payload(with_fields(name=" ", email="bad")) == EMPTY_FIELDS


class TestWhitespace:

    @pytest.mark.parametrize("value", ["\ufeff", "\u00a0", "\u3000", "\u2028", " \u2003 "])
    def test_unicode_blanks_are_empty(self, value):
        assert validate_employee_payload(with_fields(name=value)) == EMPTY_FIELDS

    @pytest.mark.parametrize("email", ["a\ufeff@b.c", "a@b\u00a0.c", "a@b.c\u3000"])
    def test_unicode_blanks_break_email(self, email):
        assert validate_employee_payload(with_fields(email=email)) == INVALID_EMAIL

    @pytest.mark.parametrize("char", ["\x1c", "\x1f", "\x85"])
    def test_separator_controls_are_not_whitespace(self, char):
        assert validate_employee_payload(with_fields(name=char)) is None
        assert validate_employee_payload(with_fields(email=f"a{char}@b.c")) is None

    def test_strip_whitespace(self):
        assert strip_whitespace("\ufeff John Doe\u00a0\n") == "John Doe"
        assert strip_whitespace("\x1cJohn") == "\x1cJohn"
