"""Field types that make up a form.

Each field knows its key, label, default value and validators. It builds
the ``FieldSchema`` it registers with a ``FormModel`` when activated, and
describes itself as a ``FieldView`` for rendering.

Example:
    ```python
    from formknobs_forms import FormModel, TextField, Validator

    name = TextField(
        key="name",
        label="Name",
        placeholder="Jane Appleseed",
        validators=[Validator().required("Name is required")],
    )

    model = FormModel()
    view = name.to_element().render(model)
    view.value   # ''
    view.error   # None (not touched yet)
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from formknobs_forms.elements import FieldKind, FieldView, FormElement
from formknobs_forms.model import FormModel
from formknobs_forms.schema import FieldSchema
from formknobs_forms.validation import FieldValidator
from formknobs_forms.values import FieldValue


class FormField(ABC):
    """Base class for all field types.

    Args:
        key: Unique identifier used to store the field's value in the model
        label: User-facing label
        default_value: Value seeded into the model on registration
        validators: Validators applied in order; the first error is shown
    """

    kind: FieldKind

    def __init__(
        self,
        key: str,
        label: str,
        default_value: FieldValue,
        validators: Iterable[FieldValidator] = (),
    ) -> None:
        self.key = key
        self.label = label
        self.default_value = default_value
        self.validators: Sequence[FieldValidator] = tuple(validators)

    def schema(self) -> FieldSchema:
        """Schema registered with the model for this field."""
        return FieldSchema(
            key=self.key,
            default_value=self.default_value,
            validators=list(self.validators),
        )

    def activate(self, model: FormModel) -> None:
        """Register this field's schema with ``model``."""
        model.register_field(self.key, self.schema())

    def to_element(self) -> FormElement:
        return FormElement(id=self.key, field=self)

    def _view(self, model: FormModel, value: FieldValue | None, **extra: Any) -> FieldView:
        touched = model.is_touched(self.key)
        return FieldView(
            key=self.key,
            label=self.label,
            kind=self.kind,
            value=value,
            error=model.error(self.key) if touched else None,
            touched=touched,
            **extra,
        )

    @abstractmethod
    def describe(self, model: FormModel) -> FieldView:
        """Default rendering of this field against the model's state."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, label={self.label!r})"


class TextField(FormField):
    """Single-line text input."""

    kind = FieldKind.TEXT

    def __init__(
        self,
        key: str,
        label: str,
        placeholder: str = "",
        default_value: str = "",
        validators: Iterable[FieldValidator] = (),
    ) -> None:
        super().__init__(key, label, default_value, validators)
        self.placeholder = placeholder

    def describe(self, model: FormModel) -> FieldView:
        return self._view(model, model.string_value(self.key), placeholder=self.placeholder)


class ToggleField(FormField):
    """On/off switch bound to a boolean value."""

    kind = FieldKind.TOGGLE

    def __init__(
        self,
        key: str,
        label: str,
        default_value: bool = False,
        validators: Iterable[FieldValidator] = (),
    ) -> None:
        super().__init__(key, label, default_value, validators)

    def describe(self, model: FormModel) -> FieldView:
        value = model.value(self.key)
        return self._view(model, value if isinstance(value, bool) else self.default_value)


class PickerField(FormField):
    """Selection of one value out of a fixed list of options."""

    kind = FieldKind.PICKER

    def __init__(
        self,
        key: str,
        label: str,
        options: Iterable[str],
        default_value: str = "",
        validators: Iterable[FieldValidator] = (),
    ) -> None:
        super().__init__(key, label, default_value, validators)
        self.options = tuple(options)

    def describe(self, model: FormModel) -> FieldView:
        value = model.value(self.key)
        return self._view(
            model,
            value if isinstance(value, str) else self.default_value,
            options=self.options,
        )


__all__ = ["FormField", "TextField", "ToggleField", "PickerField"]
