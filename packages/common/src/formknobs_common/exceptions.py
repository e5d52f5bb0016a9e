"""Common exception hierarchy for all formknobs packages.

The form engine itself reports validation failures as data (error message
strings), never as exceptions. The exceptions below are raised only at the
edges of the system: loading declarative form definitions, strict registry
lookups, and explicit type classification of field values.

Every exception carries an optional ``context`` dictionary with structured
details (field keys, indexes, offending values) to make failures easy to
diagnose.

Example:
    ```python
    from formknobs_common.exceptions import ConfigurationError, FormknobsError

    try:
        schema = load_form_schema("signup.yaml")
    except ConfigurationError as e:
        logger.error(f"Bad form definition: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class FormknobsError(Exception):
    """Base exception for all formknobs packages.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field keys, indexes, etc.)
        details: Alternative to context (takes precedence when both are given)

    Example:
        ```python
        error = FormknobsError(
            "Field definition rejected",
            context={"key": "email", "index": 2}
        )
        str(error)
        # 'Field definition rejected'
        error.context
        # {'key': 'email', 'index': 2}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (replaces context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(FormknobsError):
    """Raised when a value cannot be classified or checked strictly.

    Validation *rules* never raise; they return messages. This exception is
    for callers that opt into strict checks, such as classifying a value
    that falls outside the supported field value kinds.

    Example:
        ```python
        raise ValidationError(
            "Unsupported field value type",
            context={"type": "list"}
        )
        ```
    """

    pass


class ConfigurationError(FormknobsError):
    """Raised when a declarative form definition is invalid.

    Common scenarios include:
    - Unknown field type or validation rule name
    - Missing required keys such as ``key`` or ``message``
    - Wrongly typed parameters (non-integer lengths, non-list options)

    Example:
        ```python
        raise ConfigurationError(
            "Unknown field type: slider",
            context={"index": 3, "type": "slider"}
        )
        ```
    """

    pass


class NotFoundError(FormknobsError):
    """Raised when a requested item is not found.

    Example:
        ```python
        raise NotFoundError(
            "Renderer not found",
            context={"key": "email", "registry": "renderers"}
        )
        ```
    """

    pass


class OperationError(FormknobsError):
    """Raised when an operation cannot be carried out.

    Example:
        ```python
        raise OperationError(
            "Item 'email' already registered in renderers",
            context={"key": "email", "registry": "renderers"}
        )
        ```
    """

    pass


class SerializationError(FormknobsError):
    """Raised when an object cannot be converted to its dictionary form.

    Example:
        ```python
        raise SerializationError(
            "Object of type Widget is not serializable (missing to_dict method)",
            context={"type": "Widget"}
        )
        ```
    """

    pass


__all__ = [
    "FormknobsError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "SerializationError",
]
