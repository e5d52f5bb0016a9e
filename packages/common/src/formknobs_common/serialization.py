"""Serialization protocol and helpers for formknobs packages.

Objects handed across a package boundary (submission results, field view
snapshots) expose ``to_dict()`` so a presentation layer or a submission
collaborator can consume them as plain dictionaries.

Example:
    ```python
    from formknobs_common.serialization import serialize

    submission = session.submit()
    data = serialize(submission)
    # {'valid': True, 'payload': {...}, 'errors': {}}
    ```
"""

from typing import Any, Dict, Protocol, runtime_checkable

from formknobs_common.exceptions import SerializationError


@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that can be converted to a dictionary.

    The @runtime_checkable decorator allows isinstance() checks at runtime.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary representation."""
        ...


def serialize(obj: Any) -> Dict[str, Any]:
    """Serialize an object to a dictionary.

    Args:
        obj: Object to serialize (must have a to_dict method)

    Returns:
        Serialized dictionary

    Raises:
        SerializationError: If object doesn't support serialization or
            its to_dict() fails or returns something other than a dict
    """
    if not hasattr(obj, "to_dict"):
        raise SerializationError(
            f"Object of type {type(obj).__name__} is not serializable (missing to_dict method)",
            context={"type": type(obj).__name__},
        )

    try:
        result = obj.to_dict()
    except Exception as e:
        raise SerializationError(
            f"Failed to serialize {type(obj).__name__}: {e}",
            context={"type": type(obj).__name__, "error": str(e)},
        ) from e

    if not isinstance(result, dict):
        raise SerializationError(
            f"to_dict() must return a dict, got {type(result).__name__}",
            context={"type": type(obj).__name__, "result_type": type(result).__name__},
        )
    return result


def is_serializable(obj: Any) -> bool:
    """Check whether an object can be passed to serialize()."""
    return isinstance(obj, Serializable)


__all__ = [
    "Serializable",
    "serialize",
    "is_serializable",
]
