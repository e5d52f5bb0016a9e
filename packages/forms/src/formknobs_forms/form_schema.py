"""Ordered, immutable form structure."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union

from formknobs_forms.elements import FormElement
from formknobs_forms.fields import FormField

FormItem = Union[FormField, FormElement]


class FormSchema:
    """The fields of a form, in display order.

    Built once from fields or elements and never changed afterwards. Ids
    are not checked for uniqueness; when two elements share an id the one
    registered last with a model wins.

    Example:
        ```python
        schema = FormSchema(
            TextField("name", "Name"),
            ToggleField("subscribe", "Subscribe"),
        )
        schema.field_ids   # ('name', 'subscribe')
        ```
    """

    def __init__(self, *items: FormItem) -> None:
        self._fields: Tuple[FormElement, ...] = tuple(
            item.to_element() if isinstance(item, FormField) else item for item in items
        )

    @classmethod
    def from_fields(cls, items: Iterable[FormItem]) -> FormSchema:
        """Build a schema from any iterable of fields or elements."""
        return cls(*items)

    @property
    def fields(self) -> Tuple[FormElement, ...]:
        return self._fields

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(element.id for element in self._fields)

    def get(self, field_id: str) -> FormElement | None:
        """Last element with ``field_id``, or None."""
        for element in reversed(self._fields):
            if element.id == field_id:
                return element
        return None

    def __iter__(self) -> Iterator[FormElement]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FormSchema({list(self.field_ids)!r})"


__all__ = ["FormSchema"]
