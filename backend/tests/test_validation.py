"""
PhotoStudio Backend — Validation Outcome Tests
================================================

What:  validate_payload() returns Valid / Invalid instead of raising, and
       Invalid converts into the 400-class ValidationError.
"""

from datetime import date

import pytest

from photostudio.exceptions import ValidationError
from photostudio.schemas.entities import (
    BookingCreate,
    ContactCreate,
    MessageCreate,
    PortfolioItemUpdate,
)
from photostudio.schemas.validation import FieldError, Invalid, Valid, field_errors, validate_payload


class TestValidatePayload:

    def test_valid_contact(self):
        outcome = validate_payload(ContactCreate, {
            "name": "  Ada ",
            "email": "ada@example.com",
            "subject": "Wedding",
            "message": "Are you free in June?",
        })
        assert isinstance(outcome, Valid)
        assert outcome.value.name == "  Ada "

    def test_missing_email_is_invalid(self):
        outcome = validate_payload(ContactCreate, {"name": "Ada", "subject": "s", "message": "m"})
        assert isinstance(outcome, Invalid)
        assert [e.field for e in outcome.errors] == ["email"]

    def test_malformed_email_is_invalid(self):
        outcome = validate_payload(ContactCreate, {
            "name": "Ada", "email": "not-an-address", "subject": "s", "message": "m",
        })
        assert isinstance(outcome, Invalid)
        assert outcome.errors[0].field == "email"

    def test_empty_required_string_is_invalid(self):
        outcome = validate_payload(MessageCreate, {"sender": "", "body": "hi"})
        assert isinstance(outcome, Invalid)
        assert outcome.errors[0].field == "sender"

    @pytest.mark.parametrize("payload", [None, [], "text", 42])
    def test_non_object_body_is_invalid(self, payload):
        outcome = validate_payload(MessageCreate, payload)
        assert isinstance(outcome, Invalid)
        assert outcome.errors == (FieldError("__root__", "Request body must be a JSON object"),)

    def test_extra_keys_are_ignored(self):
        outcome = validate_payload(MessageCreate, {"id": 7, "sender": "A", "body": "hi"})
        assert isinstance(outcome, Valid)
        assert "id" not in outcome.value.to_values()

    def test_booking_date_is_parsed(self):
        outcome = validate_payload(BookingCreate, {
            "name": "Dana",
            "email": "dana@example.com",
            "event_type": "portrait",
            "event_date": "2026-11-02",
        })
        assert outcome.value.event_date == date(2026, 11, 2)

    def test_booking_bad_date(self):
        outcome = validate_payload(BookingCreate, {
            "name": "Dana",
            "email": "dana@example.com",
            "event_type": "portrait",
            "event_date": "next tuesday",
        })
        assert isinstance(outcome, Invalid)
        assert outcome.errors[0].field == "event_date"


class TestPortfolioPatch:

    def test_only_sent_fields_are_applied(self):
        outcome = validate_payload(PortfolioItemUpdate, {"title": "New"})
        assert outcome.value.to_values() == {"title": "New"}

    def test_description_may_be_cleared(self):
        outcome = validate_payload(PortfolioItemUpdate, {"description": None})
        assert outcome.value.to_values() == {"description": None}

    @pytest.mark.parametrize("field", ["title", "image_url", "category"])
    def test_required_columns_cannot_be_nulled(self, field):
        outcome = validate_payload(PortfolioItemUpdate, {field: None})
        assert isinstance(outcome, Invalid)

    def test_empty_patch_is_valid(self):
        outcome = validate_payload(PortfolioItemUpdate, {})
        assert outcome.value.to_values() == {}


class TestInvalidToError:

    def test_to_error_carries_field_errors(self):
        invalid = Invalid(errors=(FieldError("email", "Field required"),))
        err = invalid.to_error()
        assert isinstance(err, ValidationError)
        assert err.message == "Invalid input data"
        assert err.context == {"errors": [{"field": "email", "message": "Field required"}]}

    def test_field_errors_drops_request_sections(self):
        errors = field_errors([
            {"loc": ("body", "email"), "msg": "Field required"},
            {"loc": ("path", "item_id"), "msg": "Input should be a valid integer"},
            {"loc": ("body",), "msg": "JSON decode error"},
        ])
        assert [e.field for e in errors] == ["email", "item_id", "__root__"]
