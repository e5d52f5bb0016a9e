"""Generic registry pattern for managing named items.

Packages extend ``Registry`` to hold collections of items addressed by a
unique string key, such as per-field renderer overrides.

A registry is an ordinary object: it is constructed by whoever composes the
application and passed explicitly to the code that needs it. There is no
module-level shared instance.

Example:
    ```python
    from formknobs_common.registry import Registry

    class RendererRegistry(Registry[Renderer]):
        def __init__(self):
            super().__init__("renderers")

    renderers = RendererRegistry()
    renderers.register("email", render_email_field)
    renderer = renderers.get_optional("email")
    ```
"""

import threading
from typing import Dict, Generic, Iterator, List, TypeVar

from formknobs_common.exceptions import NotFoundError, OperationError

T = TypeVar("T")


class Registry(Generic[T]):
    """Base registry for managing named items.

    Operations are guarded by a re-entrant lock, so a registry shared by
    several components stays consistent as long as one of them owns writes.

    Attributes:
        name: Name of the registry (for logging/debugging)

    Args:
        name: Name for this registry instance

    Example:
        ```python
        registry = Registry[str]("labels")
        registry.register("email", "Email address")
        registry.get("email")
        # 'Email address'
        registry.count()
        # 1
        ```
    """

    def __init__(self, name: str):
        """Initialize the registry.

        Args:
            name: Registry name for identification
        """
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to allow replacing an existing item

        Raises:
            OperationError: If item already exists and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item

    def unregister(self, key: str) -> T:
        """Unregister and return an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name},
                )
            return self._items.pop(key)

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[key]

    def get_optional(self, key: str) -> T | None:
        """Get an item by key, returning None if not found."""
        with self._lock:
            return self._items.get(key)

    def has(self, key: str) -> bool:
        """Check if item exists."""
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        """List all registered keys in registration order."""
        with self._lock:
            return list(self._items.keys())

    def items(self) -> List[tuple[str, T]]:
        """Get all key-item pairs."""
        with self._lock:
            return list(self._items.items())

    def count(self) -> int:
        """Get count of registered items."""
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        """Clear all items from registry."""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, count={self.count()})"


__all__ = ["Registry"]
