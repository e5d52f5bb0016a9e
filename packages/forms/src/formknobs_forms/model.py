"""Form state engine.

``FormModel`` owns three maps for one interactive form session:

- values: what the user entered, keyed by field key
- touched: which fields the user has interacted with
- schema: the registered ``FieldSchema`` for each active field

Validity and the submission payload are derived from these maps on demand.
Fields register lazily, typically when a presentation layer first shows
them, so every operation tolerates keys that are not registered (yet):
reads return defaults and writes are plain map updates. Nothing here raises.

A model is owned by a single thread or task; it performs no locking.

Example:
    ```python
    from formknobs_forms import FieldSchema, FormModel, ValidationType, Validator

    model = FormModel()
    model.register_field(
        "email",
        FieldSchema(
            key="email",
            default_value="",
            validators=[
                Validator()
                .required("Required")
                .type_check(ValidationType.EMAIL, "Bad email")
            ],
        ),
    )

    model.set_value("abc", "email")
    model.error("email")       # 'Bad email'
    model.set_value("a@b.com", "email")
    model.is_valid()           # True
    model.serialize_all()      # {'email': 'a@b.com'}
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from formknobs_forms.schema import FieldSchema
from formknobs_forms.values import FieldValue

logger = logging.getLogger(__name__)


class FieldBinding:
    """Two-way accessor for one field of a model.

    Presentation layers bind a control to ``get``/``set``. By default a
    write also marks the field touched, as a user edit would.
    """

    def __init__(self, model: FormModel, key: str, touch_on_set: bool = True) -> None:
        self._model = model
        self._key = key
        self._touch_on_set = touch_on_set

    @property
    def key(self) -> str:
        return self._key

    def get(self) -> FieldValue | None:
        return self._model.value(self._key)

    def set(self, value: FieldValue) -> None:
        self._model.set_value(value, self._key)
        if self._touch_on_set:
            self._model.mark_touched(self._key)

    def __repr__(self) -> str:
        return f"FieldBinding(key={self._key!r}, value={self.get()!r})"


class FormModel:
    """Owns form values, touched flags and registered field schemas."""

    def __init__(self) -> None:
        self._values: Dict[str, FieldValue] = {}
        self._touched: Dict[str, bool] = {}
        self._schema: Dict[str, FieldSchema] = {}

    # Registration

    def register_field(self, key: str, schema: FieldSchema) -> None:
        """Register (or replace) the schema for ``key``.

        The schema's default seeds the value only when no value is set, so
        re-registering never reverts what the user entered.
        """
        previous = self._schema.get(key)
        if previous is not None and previous.default_value != schema.default_value:
            logger.debug(
                "Re-registered field %r with new default %r (was %r)",
                key,
                schema.default_value,
                previous.default_value,
            )
        self._schema[key] = schema
        if key not in self._values:
            self._values[key] = schema.default_value
        logger.debug("Registered field %r", key)

    def is_registered(self, key: str) -> bool:
        return key in self._schema

    def schema_for(self, key: str) -> FieldSchema | None:
        return self._schema.get(key)

    def registered_keys(self) -> List[str]:
        """Keys of all registered fields, in registration order."""
        return list(self._schema)

    # Values

    def set_value(self, value: FieldValue, key: str) -> None:
        """Overwrite the value for ``key``. Does not mark it touched."""
        self._values[key] = value

    def value(self, key: str) -> FieldValue | None:
        """Current value, else the registered default, else None."""
        if key in self._values:
            return self._values[key]
        schema = self._schema.get(key)
        return schema.default_value if schema is not None else None

    def string_value(self, key: str) -> str:
        """Current value when it is text, otherwise an empty string."""
        value = self.value(key)
        return value if isinstance(value, str) else ""

    def bind(self, key: str, touch_on_set: bool = True) -> FieldBinding:
        """Create a two-way accessor for ``key``."""
        return FieldBinding(self, key, touch_on_set=touch_on_set)

    @property
    def values(self) -> Dict[str, FieldValue]:
        """Copy of the value map."""
        return dict(self._values)

    # Touched state

    def mark_touched(self, key: str) -> None:
        self._touched[key] = True

    def is_touched(self, key: str) -> bool:
        return self._touched.get(key, False)

    @property
    def touched(self) -> Dict[str, bool]:
        """Copy of the touched map."""
        return dict(self._touched)

    def reset(self) -> None:
        """Clear every touched flag. Values are kept."""
        for key in self._touched:
            self._touched[key] = False
        logger.debug("Reset touched state for %d fields", len(self._touched))

    # Validation

    def _effective_value(self, key: str, schema: FieldSchema) -> Any:
        return self._values[key] if key in self._values else schema.default_value

    def error(self, key: str) -> str | None:
        """First validation error for ``key``, or None if valid or unregistered."""
        schema = self._schema.get(key)
        if schema is None:
            return None
        return schema.validate(self._effective_value(key, schema))

    def errors(self) -> Dict[str, str]:
        """Map of every registered key that currently fails to its error."""
        result: Dict[str, str] = {}
        for key, schema in self._schema.items():
            error = schema.validate(self._effective_value(key, schema))
            if error is not None:
                result[key] = error
        return result

    def is_valid(self) -> bool:
        """True when no registered field has a validation error."""
        return all(
            schema.validate(self._effective_value(key, schema)) is None
            for key, schema in self._schema.items()
        )

    def validate_all(self) -> None:
        """Mark every registered field touched so its errors become visible."""
        for key in self._schema:
            self._touched[key] = True
        logger.debug("Marked %d registered fields touched", len(self._schema))

    # Serialization

    def serialize_all(self) -> Dict[str, Any]:
        """Serialize every registered field, omitting those serialized to None."""
        output: Dict[str, Any] = {}
        for key, schema in self._schema.items():
            serialized = schema.serialize(self._effective_value(key, schema))
            if serialized is not None:
                output[key] = serialized
        return output

    def __repr__(self) -> str:
        return (
            f"FormModel(fields={len(self._schema)}, "
            f"touched={sum(self._touched.values())})"
        )


__all__ = ["FormModel", "FieldBinding"]
