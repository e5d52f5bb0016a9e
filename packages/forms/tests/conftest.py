"""Pytest configuration and fixtures for forms package tests."""

import pytest

from formknobs_forms import FieldSchema, FormModel, ValidationType, Validator


@pytest.fixture
def model():
    """An empty form model."""
    return FormModel()


@pytest.fixture
def email_schema():
    """Schema for a required email field."""
    return FieldSchema(
        key="email",
        default_value="",
        validators=[
            Validator()
            .required("Required")
            .type_check(ValidationType.EMAIL, "Bad email")
        ],
    )


@pytest.fixture
def signup_definition():
    """Declarative definition of a small signup form."""
    return {
        "fields": [
            {
                "type": "text",
                "key": "email",
                "label": "Email",
                "placeholder": "you@example.com",
                "validators": [
                    {"rule": "required", "message": "Required"},
                    {"rule": "type", "kind": "email", "message": "Bad email"},
                ],
            },
            {
                "type": "text",
                "key": "username",
                "label": "Username",
                "validators": [
                    {"rule": "min_length", "length": 3, "message": "Too short"},
                    {"rule": "max_length", "length": 12, "message": "Too long"},
                    {"rule": "pattern", "regex": "^[a-z0-9_]+$", "message": "Lowercase only"},
                ],
            },
            {"type": "toggle", "key": "subscribe", "label": "Subscribe", "default": True},
            {
                "type": "picker",
                "key": "plan",
                "label": "Plan",
                "options": ["free", "pro"],
                "default": "free",
            },
        ]
    }
