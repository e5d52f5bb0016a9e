"""Rendering-agnostic field descriptors.

A ``FormElement`` pairs a field id with the field that knows how to
describe itself. Rendering an element never produces toolkit widgets: by
default it yields a ``FieldView``, a plain snapshot of everything a
presentation layer needs (label, current value, visible error, options).
Overrides registered in a ``RendererRegistry`` may return anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Tuple

from formknobs_forms.values import FieldValue

if TYPE_CHECKING:
    from formknobs_forms.fields import FormField
    from formknobs_forms.model import FormModel
    from formknobs_forms.rendering import RendererRegistry


class FieldKind(Enum):
    """Kinds of fields a form can contain."""

    TEXT = "text"
    TOGGLE = "toggle"
    PICKER = "picker"


@dataclass(frozen=True)
class FieldView:
    """Snapshot of one field as a presentation layer should show it.

    ``error`` is only populated once the field has been touched.
    """

    key: str
    label: str
    kind: FieldKind
    value: FieldValue | None
    error: str | None = None
    touched: bool = False
    placeholder: str = ""
    options: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "kind": self.kind.value,
            "value": self.value,
            "error": self.error,
            "touched": self.touched,
            "placeholder": self.placeholder,
            "options": list(self.options),
        }


@dataclass(frozen=True, eq=False)
class FormElement:
    """A field id plus the field that renders it.

    Elements compare and hash by id only.
    """

    id: str
    field: FormField

    def render(self, model: FormModel, registry: RendererRegistry | None = None) -> Any:
        """Activate the field in ``model`` and render it.

        A renderer registered for this id takes precedence over the
        field's default ``FieldView``.
        """
        self.field.activate(model)
        if registry is not None:
            renderer = registry.custom_renderer(self.id)
            if renderer is not None:
                return renderer(self, model)
        return self.field.describe(model)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormElement):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


__all__ = ["FieldKind", "FieldView", "FormElement"]
