"""Declarative form definition and validation.

The formknobs-forms package tracks per-field values, touched state and
validation rules for a form, and serializes the form for submission. It
does not render anything: fields describe themselves as plain ``FieldView``
snapshots that any presentation layer can display.

## Modules

### validation - Chainable rules
``Validator`` runs required, length, format, pattern and custom rules in
order and reports the first failure.

### schema - Field metadata
``FieldSchema`` bundles a field's default value, validators and optional
serializer.

### model - State engine
``FormModel`` owns values, touched flags and registered schemas, and
derives errors, validity and the submission payload.

### fields, elements, form_schema - Form structure
``TextField``, ``ToggleField`` and ``PickerField`` become ``FormElement``
descriptors collected in an immutable ``FormSchema``.

### rendering, session - Presentation hooks
``RendererRegistry`` holds per-field renderer overrides; ``FormSession``
renders a schema and handles submission.

### loader - Declarative definitions
Build a ``FormSchema`` from a dictionary or a YAML/JSON file.

## Quick Example

```python
from formknobs_forms import (
    FormSchema, FormSession, TextField, ToggleField, ValidationType, Validator,
)

schema = FormSchema(
    TextField(
        "email",
        "Email",
        validators=[
            Validator()
            .required("Required")
            .type_check(ValidationType.EMAIL, "Bad email")
        ],
    ),
    ToggleField("subscribe", "Subscribe"),
)

session = FormSession(schema)
session.render()
session.model.bind("email").set("a@b.com")

submission = session.submit()
submission.payload   # {'email': 'a@b.com', 'subscribe': False}
```
"""

from formknobs_forms.elements import FieldKind, FieldView, FormElement
from formknobs_forms.fields import FormField, PickerField, TextField, ToggleField
from formknobs_forms.form_schema import FormSchema
from formknobs_forms.loader import (
    build_field,
    build_form_schema,
    build_validator,
    load_form_schema,
)
from formknobs_forms.model import FieldBinding, FormModel
from formknobs_forms.rendering import Renderer, RendererRegistry
from formknobs_forms.schema import FieldSchema, FieldSerializable
from formknobs_forms.session import FormSession, Submission
from formknobs_forms.validation import (
    FieldValidator,
    ValidationType,
    Validator,
)
from formknobs_forms.values import Blob, FieldValue, ValueKind, is_field_value, value_kind

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Values
    "Blob",
    "FieldValue",
    "ValueKind",
    "value_kind",
    "is_field_value",
    # Validation
    "FieldValidator",
    "ValidationType",
    "Validator",
    # Schema and state
    "FieldSchema",
    "FieldSerializable",
    "FormModel",
    "FieldBinding",
    # Structure
    "FieldKind",
    "FieldView",
    "FormElement",
    "FormField",
    "TextField",
    "ToggleField",
    "PickerField",
    "FormSchema",
    # Presentation hooks
    "Renderer",
    "RendererRegistry",
    "FormSession",
    "Submission",
    # Loader
    "build_validator",
    "build_field",
    "build_form_schema",
    "load_form_schema",
]
