"""Field value kinds supported by the form engine.

A field holds one of a closed set of value kinds: text, booleans, numbers,
or an opaque custom payload wrapped in ``Blob``. The state engine stores
values without checking them; ``value_kind`` is available to callers that
want to branch on, or strictly check, the kind of a value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from formknobs_common.exceptions import ValidationError


@dataclass(frozen=True)
class Blob:
    """An opaque custom field value.

    Attributes:
        payload: The wrapped value (a date, a file handle, a domain object...)
        kind: Optional tag describing the payload for serializers
    """

    payload: Any
    kind: str | None = None


FieldValue = Union[str, bool, int, float, Blob]


class ValueKind(Enum):
    """Kinds of values a field can hold."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    CUSTOM = "custom"


def value_kind(value: Any) -> ValueKind:
    """Classify a field value.

    Booleans are checked before numbers since ``bool`` is an ``int``.

    Raises:
        ValidationError: If the value is not one of the supported kinds
    """
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, Blob):
        return ValueKind.CUSTOM
    raise ValidationError(
        f"Unsupported field value type: {type(value).__name__}",
        context={"type": type(value).__name__},
    )


def is_field_value(value: Any) -> bool:
    """Check whether a value belongs to the supported value kinds."""
    return isinstance(value, (str, bool, int, float, Blob))


__all__ = ["Blob", "FieldValue", "ValueKind", "value_kind", "is_field_value"]
