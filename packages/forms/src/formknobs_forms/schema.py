"""Per-field schema metadata registered with a form model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from formknobs_forms.validation import FieldValidator
from formknobs_forms.values import FieldValue


@runtime_checkable
class FieldSerializable(Protocol):
    """Turns a raw field value into the value sent on submission.

    Returning None omits the field from the submission payload.
    """

    def serialize(self, value: Any) -> FieldValue | None: ...


@dataclass
class FieldSchema:
    """Metadata for one field: default value, validators and serializer.

    Attributes:
        key: Unique field key within a form
        default_value: Value used until the field is explicitly set
        validators: Validators run in order; the first error wins
        serializer: Optional transform applied on serialization. Returning
            None omits the field. When absent, values pass through unchanged.

    Example:
        ```python
        schema = FieldSchema(
            key="age",
            default_value="",
            validators=[Validator().required("Required")],
            serializer=lambda v: int(v) if v else None,
        )
        schema.validate("")      # 'Required'
        schema.serialize("42")   # 42
        ```
    """

    key: str
    default_value: FieldValue = ""
    validators: Sequence[FieldValidator] = field(default_factory=list)
    serializer: Callable[[Any], FieldValue | None] | None = None

    def validate(self, value: Any) -> str | None:
        """Run each validator in order, returning the first error or None."""
        for validator in self.validators:
            error = validator.validate(value)
            if error is not None:
                return error
        return None

    def serialize(self, value: Any) -> FieldValue | None:
        """Return the submission value for ``value``, or None to omit it."""
        if self.serializer is None:
            return value
        return self.serializer(value)


__all__ = ["FieldSchema", "FieldSerializable"]
