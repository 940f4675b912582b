"""Field access over heterogeneous response items.

Architecture:
    Items reach the indexer in several shapes: raw decoded JSON (mappings),
    parsed models that expose a ``get_field`` capability, or plain objects
    with attributes. ``read_field`` is the single boundary that resolves a
    field name against any of those shapes and turns every kind of miss into
    a FieldLookupError.

Resolution order:
    1. ``Mapping``: key lookup
    2. ``FieldSource``: ``item.get_field(name)``
    3. anything else: attribute lookup

A field whose value is ``None`` counts as missing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .exceptions import FieldLookupError


@runtime_checkable
class FieldSource(Protocol):
    """Protocol for items that resolve their own fields by name.

    Implementations raise ``KeyError`` (or FieldLookupError) when the field
    does not exist.
    """

    def get_field(self, name: str) -> Any:
        """Return the value of field ``name``."""
        ...


def read_field(item: Any, name: str, index: int | None = None) -> Any:
    """Read field ``name`` from ``item``.

    Args:
        item: Mapping, FieldSource or plain object
        name: Field name
        index: Position of the item in its sequence, used in error messages

    Returns:
        The field value

    Raises:
        FieldLookupError: If the field is absent or ``None``
    """
    position = f" at position {index}" if index is not None else ""
    try:
        if isinstance(item, Mapping):
            value = item[name]
        elif isinstance(item, FieldSource):
            value = item.get_field(name)
        else:
            value = getattr(item, name)
    except FieldLookupError:
        raise
    except (KeyError, AttributeError) as e:
        raise FieldLookupError(
            f"Field '{name}' not found on item{position}",
            field=name,
            index=index,
        ) from e

    if value is None:
        raise FieldLookupError(
            f"Field '{name}' is empty on item{position}",
            field=name,
            index=index,
        )
    return value
