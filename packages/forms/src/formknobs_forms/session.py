"""Form session: renders a schema against a model and handles submission.

``FormSession`` drives the full lifecycle a presentation layer needs:

1. ``render()`` every element in schema order, activating fields as they
   are shown.
2. Read ``can_submit`` to enable or disable a submit control, or take a
   ``snapshot()`` holding both as plain dictionaries.
3. ``submit()`` to surface all errors and, when the form is valid, obtain
   the payload to hand to whatever performs the actual submission.

Example:
    ```python
    session = FormSession(
        FormSchema(
            TextField("email", "Email", validators=[Validator().required("Required")]),
        )
    )
    session.render()
    session.model.set_value("a@b.com", "email")

    submission = session.submit()
    submission.valid     # True
    submission.payload   # {'email': 'a@b.com'}
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from formknobs_common.serialization import is_serializable, serialize
from formknobs_forms.elements import FormElement
from formknobs_forms.form_schema import FormSchema
from formknobs_forms.model import FormModel
from formknobs_forms.rendering import RendererRegistry

logger = logging.getLogger(__name__)

FieldContent = Callable[[FormElement, FormModel], Any]


@dataclass
class Submission:
    """Outcome of submitting a form.

    Attributes:
        valid: Whether every registered field passed validation
        payload: Serialized values; empty when the form is invalid
        errors: First error of every failing field
    """

    valid: bool
    payload: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "payload": dict(self.payload),
            "errors": dict(self.errors),
        }


class FormSession:
    """One interactive session over a form schema.

    Args:
        schema: Fields to render, in order
        model: State engine to use; a fresh one is created when omitted
        registry: Optional per-field renderer overrides
        field_content: Optional renderer applied to every element, taking
            precedence over both the registry and the default rendering
    """

    def __init__(
        self,
        schema: FormSchema,
        model: FormModel | None = None,
        registry: RendererRegistry | None = None,
        field_content: FieldContent | None = None,
    ) -> None:
        self.schema = schema
        self.model = model if model is not None else FormModel()
        self.registry = registry
        self._field_content = field_content

    def render_field(self, element: FormElement) -> Any:
        if self._field_content is not None:
            element.field.activate(self.model)
            return self._field_content(element, self.model)
        return element.render(self.model, self.registry)

    def render(self) -> List[Any]:
        """Render every element in schema order."""
        return [self.render_field(element) for element in self.schema]

    def snapshot(self) -> Dict[str, Any]:
        """Render the form into plain dictionaries.

        Rendered output that has no ``to_dict()``, such as the result of a
        custom renderer, is included as is.
        """
        fields = [
            serialize(rendered) if is_serializable(rendered) else rendered
            for rendered in self.render()
        ]
        return {"fields": fields, "can_submit": self.can_submit}

    @property
    def can_submit(self) -> bool:
        return self.model.is_valid()

    def submit(self) -> Submission:
        """Reveal all errors and serialize the form if it is valid."""
        self.model.validate_all()
        if not self.model.is_valid():
            errors = self.model.errors()
            logger.info("Form submission rejected: %d invalid fields", len(errors))
            return Submission(valid=False, errors=errors)
        payload = self.model.serialize_all()
        logger.info("Form submission accepted with %d fields", len(payload))
        return Submission(valid=True, payload=payload)


__all__ = ["FieldContent", "FormSession", "Submission"]
