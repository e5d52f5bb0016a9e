"""Common utilities and base classes for formknobs packages.

This package provides shared functionality used across formknobs packages:

- **Exceptions**: Unified exception hierarchy with context support
- **Registry**: Generic registry pattern for managing named items
- **Serialization**: Protocol and helpers for the to_dict pattern

Example:
    ```python
    from formknobs_common import ConfigurationError, Registry, serialize

    registry = Registry[str]("labels")
    registry.register("email", "Email address")

    data = serialize(submission)
    ```
"""

from formknobs_common.exceptions import (
    ConfigurationError,
    FormknobsError,
    NotFoundError,
    OperationError,
    SerializationError,
    ValidationError,
)
from formknobs_common.registry import Registry
from formknobs_common.serialization import (
    Serializable,
    is_serializable,
    serialize,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FormknobsError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "SerializationError",
    # Registry
    "Registry",
    # Serialization
    "Serializable",
    "serialize",
    "is_serializable",
]
