"""Tests for chainable validation rules."""

import logging

import pytest

from formknobs_forms.validation import (
    FieldValidator,
    MinLengthRule,
    RequiredRule,
    ValidationType,
    Validator,
)
from formknobs_forms.values import Blob


class TestRequired:
    """Test the required rule."""

    @pytest.mark.parametrize("value", ["", "   ", "\n\t "])
    def test_blank_strings_fail(self, value):
        assert Validator().required("msg").validate(value) == "msg"

    def test_non_blank_passes(self):
        assert Validator().required("msg").validate("x") is None

    @pytest.mark.parametrize("value", [True, False, 0, 42, 3.5, Blob("payload")])
    def test_non_strings_are_treated_as_empty(self, value):
        assert Validator().required("msg").validate(value) == "msg"


class TestLength:
    """Test min_length and max_length rules."""

    def test_min_length(self):
        validator = Validator().min_length(3, "msg")
        assert validator.validate("ab") == "msg"
        assert validator.validate("abc") is None

    def test_min_length_fails_closed_on_type_mismatch(self):
        assert Validator().min_length(3, "msg").validate(42) == "msg"

    def test_max_length(self):
        validator = Validator().max_length(3, "msg")
        assert validator.validate("abcd") == "msg"
        assert validator.validate("abc") is None
        assert validator.validate("") is None

    def test_max_length_fails_closed_on_type_mismatch(self):
        assert Validator().max_length(3, "msg").validate(True) == "msg"

    @pytest.mark.parametrize("value", ["\U0001F1FA\U0001F1F8", "e\u0301"])
    def test_counts_grapheme_clusters(self, value):
        assert Validator().max_length(1, "long").validate(value) is None
        assert Validator().min_length(1, "short").validate(value) is None
        assert Validator().min_length(2, "short").validate(value) == "short"

    def test_counts_mixed_text(self):
        validator = Validator().min_length(4, "short").max_length(4, "long")
        assert validator.validate("caf\u00e9") is None
        assert validator.validate("cafe\u0301") is None
        assert validator.validate("\U0001F1FA\U0001F1F8\U0001F1EC\U0001F1E7ab") is None


class TestTypeCheck:
    """Test the format checks."""

    @pytest.mark.parametrize("value", ["a@b.com", "first.last+tag@sub.example.org"])
    def test_valid_email(self, value):
        assert Validator().type_check(ValidationType.EMAIL, "bad").validate(value) is None

    @pytest.mark.parametrize("value", ["abc", "a@b", "a@b.c", "@b.com", "a b@c.com", "a@b.com\n"])
    def test_invalid_email(self, value):
        assert Validator().type_check(ValidationType.EMAIL, "bad").validate(value) == "bad"

    @pytest.mark.parametrize("value,expected", [
        ("12345", None),
        ("", None),
        ("-1", "bad"),
        ("1.5", "bad"),
        ("1e5", "bad"),
        ("12a", "bad"),
    ])
    def test_numeric(self, value, expected):
        assert Validator().type_check(ValidationType.NUMERIC, "bad").validate(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("42", None),
        ("-42", None),
        ("+7", None),
        ("4.2", "bad"),
        (" 42", "bad"),
        ("1_000", "bad"),
        ("\u0661\u0662", "bad"),
        ("", "bad"),
    ])
    def test_integer(self, value, expected):
        assert Validator().type_check(ValidationType.INTEGER, "bad").validate(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("3.14", None),
        ("-2", None),
        ("1e-3", None),
        ("abc", "bad"),
        ("1_0", "bad"),
        (" 1.0", "bad"),
        ("\u0661\u0662", "bad"),
        ("\uff11\uff12.\uff15", "bad"),
        ("", "bad"),
    ])
    def test_decimal(self, value, expected):
        assert Validator().type_check(ValidationType.DECIMAL, "bad").validate(value) == expected

    @pytest.mark.parametrize("kind", list(ValidationType))
    def test_non_string_fails(self, kind):
        assert Validator().type_check(kind, "bad").validate(12) == "bad"


class TestPattern:
    """Test the pattern rule."""

    def test_matches_anywhere(self):
        validator = Validator().pattern(r"\d", "needs a digit")
        assert validator.validate("abc1def") is None
        assert validator.validate("abcdef") == "needs a digit"

    def test_anchored_pattern(self):
        validator = Validator().pattern(r"^[a-z]+$", "lowercase")
        assert validator.validate("abc") is None
        assert validator.validate("aBc") == "lowercase"

    def test_non_string_fails(self):
        assert Validator().pattern(".*", "msg").validate(None) == "msg"

    def test_invalid_regex_fails_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="formknobs_forms.validation"):
            validator = Validator().pattern("([a-z", "msg")
        assert "Invalid validation pattern" in caplog.text

        assert validator.validate("abc") == "msg"

    def test_invalid_regex_warns_once(self, caplog):
        with caplog.at_level(logging.WARNING, logger="formknobs_forms.validation"):
            validator = Validator().pattern("(?P<user", "msg")
            for value in ["a", "ab", "abc"]:
                assert validator.validate(value) == "msg"
        warnings = [r for r in caplog.records if "Invalid validation pattern" in r.getMessage()]
        assert len(warnings) == 1


class TestCustom:
    """Test custom rules."""

    def test_receives_raw_value(self):
        seen = []

        def check(value):
            seen.append(value)
            return None if value is True else "must accept"

        validator = Validator().custom(check)
        assert validator.validate(False) == "must accept"
        assert validator.validate(True) is None
        assert seen == [False, True]

    def test_exceptions_propagate(self):
        def explode(value):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            Validator().custom(explode).validate("x")


class TestValidatorChain:
    """Test ordering and builder behavior."""

    def test_empty_validator_passes(self):
        assert Validator().validate("anything") is None
        assert Validator().validate(None) is None

    def test_builder_returns_same_instance(self):
        validator = Validator()
        assert validator.required("a") is validator
        assert validator.min_length(1, "b").max_length(5, "c") is validator
        assert len(validator) == 3

    def test_first_failure_wins(self):
        validator = Validator().required("Required").min_length(3, "Too short")
        assert validator.validate("") == "Required"
        assert validator.validate("ab") == "Too short"
        assert validator.validate("abc") is None

    def test_order_is_append_order(self):
        validator = Validator().min_length(3, "Too short").required("Required")
        assert validator.validate("") == "Too short"

    def test_later_rules_not_evaluated_after_failure(self):
        calls = []
        validator = Validator().required("Required").custom(lambda v: calls.append(v))
        validator.validate("")
        assert calls == []

    def test_rules_snapshot(self):
        validator = Validator().required("Required").min_length(2, "Short")
        assert validator.rules == (RequiredRule("Required"), MinLengthRule(2, "Short"))
        assert [rule.name for rule in validator] == ["required", "min_length"]
        assert repr(validator) == "Validator([required, min_length])"

    def test_is_field_validator(self):
        assert isinstance(Validator(), FieldValidator)
