"""Per-field renderer overrides.

A ``RendererRegistry`` maps field ids to renderers that replace a field's
default ``FieldView``. The application creates the registry and passes it
to the code that renders forms; there is no shared global instance.

Example:
    ```python
    registry = RendererRegistry()
    registry.register_renderer(
        "email",
        lambda element, model: f"<input name={element.id} value={model.string_value(element.id)}>",
    )
    session = FormSession(schema, registry=registry)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from formknobs_common.registry import Registry

if TYPE_CHECKING:
    from formknobs_forms.elements import FormElement
    from formknobs_forms.model import FormModel

logger = logging.getLogger(__name__)

Renderer = Callable[["FormElement", "FormModel"], Any]


class RendererRegistry(Registry[Renderer]):
    """Custom renderers keyed by field id."""

    def __init__(self, name: str = "renderers") -> None:
        super().__init__(name)

    def register_renderer(self, field_id: str, renderer: Renderer) -> None:
        """Register ``renderer`` for ``field_id``, replacing any previous one."""
        self.register(field_id, renderer, allow_overwrite=True)
        logger.debug("Registered renderer for field %r in %s", field_id, self.name)

    def unregister_renderer(self, field_id: str) -> None:
        """Remove the renderer for ``field_id`` if there is one."""
        with self._lock:
            if self.has(field_id):
                self.unregister(field_id)

    def reset(self) -> None:
        """Remove all renderers."""
        self.clear()

    def custom_renderer(self, field_id: str) -> Renderer | None:
        """Renderer for ``field_id``, or None to use the default."""
        return self.get_optional(field_id)


__all__ = ["Renderer", "RendererRegistry"]
