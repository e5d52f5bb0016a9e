"""Chainable field validation rules.

A ``Validator`` holds an ordered list of rules and reports the message of
the first rule that fails. Rules never raise for bad input; a rule that
expects text fails closed when handed anything that is not a string.

Example:
    ```python
    from formknobs_forms.validation import ValidationType, Validator

    email = (
        Validator()
        .required("Email is required")
        .type_check(ValidationType.EMAIL, "Enter a valid email")
    )
    email.validate("")           # 'Email is required'
    email.validate("abc")        # 'Enter a valid email'
    email.validate("a@b.com")    # None
    ```
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Iterator, Protocol, Union, runtime_checkable

import regex

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class FieldValidator(Protocol):
    """Anything that checks one raw field value.

    Returns an error message if the value is invalid, or None if valid.
    """

    def validate(self, value: Any) -> str | None: ...


class ValidationType(Enum):
    """Built-in format checks for text values."""

    EMAIL = "email"
    NUMERIC = "numeric"
    INTEGER = "integer"
    DECIMAL = "decimal"


def _is_decimal(text: str) -> bool:
    # float() tolerates padding, digit separators and non-ASCII digits; a typed value must not.
    if not text.isascii() or text != text.strip() or "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


_TYPE_CHECKS: dict[ValidationType, Callable[[str], bool]] = {
    ValidationType.EMAIL: lambda text: EMAIL_PATTERN.fullmatch(text) is not None,
    ValidationType.NUMERIC: lambda text: all(ch.isdecimal() for ch in text),
    ValidationType.INTEGER: lambda text: INTEGER_PATTERN.fullmatch(text) is not None,
    ValidationType.DECIMAL: _is_decimal,
}


def _char_count(text: str) -> int:
    # grapheme clusters, so a flag or a letter with a combining accent counts once
    return len(regex.findall(r"\X", text))


@functools.lru_cache(maxsize=128)
def _compile(expression: str) -> re.Pattern[str] | None:
    try:
        return re.compile(expression)
    except re.error as e:
        logger.warning("Invalid validation pattern %r: %s", expression, e)
        return None


@dataclass(frozen=True)
class RequiredRule:
    """Fails when the value is empty after trimming whitespace.

    Non-string values are treated as empty text.
    """

    message: str
    name: ClassVar[str] = "required"

    def check(self, value: Any) -> str | None:
        text = value.strip() if isinstance(value, str) else ""
        return self.message if not text else None


@dataclass(frozen=True)
class MinLengthRule:
    """Fails when text is shorter than ``length`` characters.

    Characters are counted as a reader sees them (grapheme clusters), so
    ``"🇺🇸"`` and ``"é"`` are one character each.
    """

    length: int
    message: str
    name: ClassVar[str] = "min_length"

    def check(self, value: Any) -> str | None:
        if not isinstance(value, str) or _char_count(value) < self.length:
            return self.message
        return None


@dataclass(frozen=True)
class MaxLengthRule:
    """Fails when text is longer than ``length`` characters."""

    length: int
    message: str
    name: ClassVar[str] = "max_length"

    def check(self, value: Any) -> str | None:
        if not isinstance(value, str) or _char_count(value) > self.length:
            return self.message
        return None


@dataclass(frozen=True)
class TypeRule:
    """Fails when text does not have the expected format."""

    kind: ValidationType
    message: str
    name: ClassVar[str] = "type"

    def check(self, value: Any) -> str | None:
        if not isinstance(value, str) or not _TYPE_CHECKS[self.kind](value):
            return self.message
        return None


@dataclass(frozen=True)
class PatternRule:
    """Fails when the regular expression matches nowhere in the text.

    An expression that does not compile fails every value. Compiles are
    cached per expression, failures included, so the warning for a bad
    expression is logged once.
    """

    regex: str
    message: str
    name: ClassVar[str] = "pattern"

    def check(self, value: Any) -> str | None:
        if not isinstance(value, str):
            return self.message
        compiled = _compile(self.regex)
        if compiled is None or compiled.search(value) is None:
            return self.message
        return None


@dataclass(frozen=True)
class CustomRule:
    """Delegates to a function returning an optional error message."""

    fn: Callable[[Any], str | None]
    name: ClassVar[str] = "custom"

    def check(self, value: Any) -> str | None:
        return self.fn(value)


Rule = Union[RequiredRule, MinLengthRule, MaxLengthRule, TypeRule, PatternRule, CustomRule]


class Validator:
    """An ordered chain of rules producing at most one error per check.

    Builder methods append a rule and return the validator itself, so
    chains read left to right in evaluation order.
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def _append(self, rule: Rule) -> Validator:
        self._rules.append(rule)
        return self

    def required(self, message: str) -> Validator:
        """Add a "must not be blank" rule."""
        return self._append(RequiredRule(message))

    def min_length(self, length: int, message: str) -> Validator:
        """Add a minimum-length rule for text."""
        return self._append(MinLengthRule(length, message))

    def max_length(self, length: int, message: str) -> Validator:
        """Add a maximum-length rule for text."""
        return self._append(MaxLengthRule(length, message))

    def type_check(self, kind: ValidationType, message: str) -> Validator:
        """Add a format check (email, numeric, integer, decimal)."""
        return self._append(TypeRule(kind, message))

    def pattern(self, regex: str, message: str) -> Validator:
        """Add a regular-expression rule.

        The expression is compiled here, so an invalid one is reported
        when the rule is added rather than on the first check.
        """
        _compile(regex)
        return self._append(PatternRule(regex, message))

    def custom(self, fn: Callable[[Any], str | None]) -> Validator:
        """Add a fully custom rule."""
        return self._append(CustomRule(fn))

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Snapshot of the rules in evaluation order."""
        return tuple(self._rules)

    def validate(self, value: Any) -> str | None:
        """Run the rules in order, returning the first error or None."""
        for rule in self._rules:
            error = rule.check(value)
            if error is not None:
                return error
        return None

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"Validator([{names}])"


__all__ = [
    "FieldValidator",
    "ValidationType",
    "Validator",
    "Rule",
    "RequiredRule",
    "MinLengthRule",
    "MaxLengthRule",
    "TypeRule",
    "PatternRule",
    "CustomRule",
]
