"""Build forms from declarative definitions.

A form definition is a mapping with a ``fields`` list, given directly as a
dictionary or stored in a YAML or JSON file:

```yaml
fields:
  - type: text
    key: email
    label: Email
    placeholder: you@example.com
    validators:
      - rule: required
        message: Email is required
      - rule: type
        kind: email
        message: Enter a valid email
  - type: toggle
    key: subscribe
    label: Subscribe to updates
    default: true
  - type: picker
    key: plan
    label: Plan
    options: [free, pro]
    default: free
```

Supported rules are ``required``, ``min_length`` and ``max_length``
(``length``), ``type`` (``kind``: email, numeric, integer, decimal) and
``pattern`` (``regex``). Every rule needs a ``message``. Custom rules can
only be attached in code.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence, Union

import yaml  # type: ignore[import-untyped]

from formknobs_common.exceptions import ConfigurationError, NotFoundError
from formknobs_forms.fields import FormField, PickerField, TextField, ToggleField
from formknobs_forms.form_schema import FormSchema
from formknobs_forms.validation import ValidationType, Validator

logger = logging.getLogger(__name__)


def _require(spec: Mapping[str, Any], name: str, expected: type, where: Dict[str, Any]) -> Any:
    if name not in spec:
        raise ConfigurationError(f"Missing '{name}'", context={**where, "missing": name})
    value = spec[name]
    # bool is an int, but never a valid length
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigurationError(
            f"'{name}' must be of type {expected.__name__}, got {type(value).__name__}",
            context={**where, "attribute": name},
        )
    return value


def _add_length_rule(validator: Validator, method: str, spec: Mapping[str, Any], where: Dict[str, Any]) -> None:
    length = _require(spec, "length", int, where)
    if length < 0:
        raise ConfigurationError("'length' must not be negative", context={**where, "length": length})
    getattr(validator, method)(length, _require(spec, "message", str, where))


def _add_type_rule(validator: Validator, spec: Mapping[str, Any], where: Dict[str, Any]) -> None:
    kind = _require(spec, "kind", str, where)
    try:
        validation_type = ValidationType(kind.lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown validation type: {kind}",
            context={**where, "kind": kind, "available": [t.value for t in ValidationType]},
        ) from None
    validator.type_check(validation_type, _require(spec, "message", str, where))


_RULE_BUILDERS: Dict[str, Callable[[Validator, Mapping[str, Any], Dict[str, Any]], None]] = {
    "required": lambda v, spec, where: v.required(_require(spec, "message", str, where)),
    "min_length": lambda v, spec, where: _add_length_rule(v, "min_length", spec, where),
    "max_length": lambda v, spec, where: _add_length_rule(v, "max_length", spec, where),
    "type": _add_type_rule,
    "pattern": lambda v, spec, where: v.pattern(
        _require(spec, "regex", str, where), _require(spec, "message", str, where)
    ),
}


def build_validator(rules: Sequence[Mapping[str, Any]], key: str | None = None) -> Validator:
    """Build a validator from a list of rule definitions.

    Raises:
        ConfigurationError: If a rule is unknown or malformed
    """
    if not isinstance(rules, list):
        raise ConfigurationError("'validators' must be a list", context={"key": key})
    validator = Validator()
    for index, spec in enumerate(rules):
        where = {"key": key, "rule_index": index}
        if not isinstance(spec, dict):
            raise ConfigurationError("Rule definition must be a mapping", context=where)
        name = _require(spec, "rule", str, where)
        builder = _RULE_BUILDERS.get(name)
        if builder is None:
            raise ConfigurationError(
                f"Unknown validation rule: {name}",
                context={**where, "rule": name, "available": sorted(_RULE_BUILDERS)},
            )
        builder(validator, spec, where)
    return validator


def _optional(spec: Mapping[str, Any], name: str, expected: type, default: Any, where: Dict[str, Any]) -> Any:
    return _require(spec, name, expected, where) if name in spec else default


def _label(spec: Mapping[str, Any], where: Dict[str, Any]) -> str:
    return _optional(spec, "label", str, spec["key"], where)


def _text_field(spec: Mapping[str, Any], validators: List[Validator], where: Dict[str, Any]) -> FormField:
    return TextField(
        key=spec["key"],
        label=_label(spec, where),
        placeholder=_optional(spec, "placeholder", str, "", where),
        default_value=_optional(spec, "default", str, "", where),
        validators=validators,
    )


def _toggle_field(spec: Mapping[str, Any], validators: List[Validator], where: Dict[str, Any]) -> FormField:
    return ToggleField(
        key=spec["key"],
        label=_label(spec, where),
        default_value=_optional(spec, "default", bool, False, where),
        validators=validators,
    )


def _picker_field(spec: Mapping[str, Any], validators: List[Validator], where: Dict[str, Any]) -> FormField:
    options = _require(spec, "options", list, where)
    if not all(isinstance(option, str) for option in options):
        raise ConfigurationError("Picker options must be strings", context=where)
    default = _optional(spec, "default", str, "", where)
    if "default" in spec and default not in options:
        raise ConfigurationError(
            f"Picker default '{default}' is not one of its options",
            context={**where, "default": default, "options": options},
        )
    return PickerField(
        key=spec["key"],
        label=_label(spec, where),
        options=options,
        default_value=default,
        validators=validators,
    )


_FIELD_BUILDERS: Dict[str, Callable[[Mapping[str, Any], List[Validator], Dict[str, Any]], FormField]] = {
    "text": _text_field,
    "toggle": _toggle_field,
    "picker": _picker_field,
}


def build_field(spec: Mapping[str, Any], index: int | None = None) -> FormField:
    """Build one field from its definition.

    Raises:
        ConfigurationError: If the field type is unknown or the definition malformed
    """
    where: Dict[str, Any] = {"index": index}
    if not isinstance(spec, dict):
        raise ConfigurationError("Field definition must be a mapping", context=where)
    key = _require(spec, "key", str, where)
    where["key"] = key
    field_type = spec.get("type", "text")
    builder = _FIELD_BUILDERS.get(field_type)
    if builder is None:
        raise ConfigurationError(
            f"Unknown field type: {field_type}",
            context={**where, "type": field_type, "available": sorted(_FIELD_BUILDERS)},
        )
    rules = spec.get("validators", [])
    validators = [build_validator(rules, key=key)] if rules else []
    return builder(spec, validators, where)


def build_form_schema(config: Mapping[str, Any]) -> FormSchema:
    """Build a form schema from a definition mapping.

    Raises:
        ConfigurationError: If the definition is malformed
    """
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Form definition must be a mapping, got {type(config).__name__}",
            context={"type": type(config).__name__},
        )
    fields = config.get("fields")
    if not isinstance(fields, list):
        raise ConfigurationError("Form definition needs a 'fields' list", context={"keys": list(config)})
    schema = FormSchema.from_fields(build_field(spec, index) for index, spec in enumerate(fields))
    logger.debug("Built form schema with fields %s", list(schema.field_ids))
    return schema


def load_form_schema(path: Union[str, Path]) -> FormSchema:
    """Load a form schema from a YAML or JSON file.

    Raises:
        NotFoundError: If the file does not exist
        ConfigurationError: If the file format is unsupported or the content invalid
    """
    path = Path(path)
    if not path.exists():
        raise NotFoundError(f"Form definition not found: {path}", context={"path": str(path)})

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        try:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}", context={"path": str(path)}
                )
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Failed to parse form definition: {e}", context={"path": str(path)}
            ) from e

    logger.debug("Loaded form definition from %s", path)
    return build_form_schema(data)


__all__ = ["build_validator", "build_field", "build_form_schema", "load_form_schema"]
