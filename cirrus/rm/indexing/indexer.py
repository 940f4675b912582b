"""Name derivation for collections of response items.

This module provides the NameIndexer class that derives a display name for
each item of a list response from one or more of its fields, and pairs the
items with those names in a NamedCollection.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence
from typing import Any

from ..config import DEFAULT_NAME_FIELD, NAME_SEPARATOR
from ..core.exceptions import ConfigurationError, DuplicateNameWarning
from ..core.fields import read_field
from .named_collection import NamedCollection
from .telemetry import log_collection_built, log_duplicate_names


class NameIndexer:
    """Derives names for items and detects duplicates.

    With a single field, an item's name is that field's value. With several
    fields, the values are joined with ``"/"`` in the order the fields were
    given, e.g. ``("name", "location")`` yields ``"vm1/eastus"``.
    """

    def __init__(self, fields: str | Sequence[str] = (DEFAULT_NAME_FIELD,)) -> None:
        """Initialize name indexer.

        Args:
            fields: Field name, or ordered non-empty sequence of field names

        Raises:
            ConfigurationError: If ``fields`` is not a non-empty sequence of strings
        """
        self._fields = self._validate_fields(fields)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def build(self, items: Iterable[Any] | None = None) -> NamedCollection[Any]:
        """Pair ``items`` with their derived names.

        Args:
            items: Items to name; ``None`` is treated as empty

        Returns:
            NamedCollection in the order of ``items``

        Raises:
            FieldLookupError: If an item lacks one of the fields
        """
        items = list(items) if items is not None else []
        if not items:
            return NamedCollection()

        names = [self.derive_name(item, index) for index, item in enumerate(items)]
        collection = NamedCollection(items, names)

        log_collection_built(fields=self._fields, total_items=len(collection))

        duplicated = collection.duplicated_names()
        if duplicated:
            log_duplicate_names(fields=self._fields, duplicated=duplicated)
            warnings.warn(
                "Some names are duplicated: " + " ".join(duplicated),
                DuplicateNameWarning,
                stacklevel=2,
            )
        return collection

    def derive_name(self, item: Any, index: int | None = None) -> str:
        """Derive the name of a single item."""
        values = [str(read_field(item, field, index)) for field in self._fields]
        if len(values) == 1:
            return values[0]
        return NAME_SEPARATOR.join(values)

    @staticmethod
    def _validate_fields(fields: Any) -> tuple[str, ...]:
        if isinstance(fields, str):
            fields = (fields,)
        if not isinstance(fields, Sequence):
            raise ConfigurationError(
                f"Name fields must be a sequence of strings, got {type(fields).__name__}"
            )
        if not fields:
            raise ConfigurationError("At least one name field is required")
        for field in fields:
            if not isinstance(field, str) or not field:
                raise ConfigurationError(f"Invalid name field: {field!r}")
        return tuple(fields)


def named_list(
    items: Iterable[Any] | None = None,
    name_fields: str | Sequence[str] = DEFAULT_NAME_FIELD,
) -> NamedCollection[Any]:
    """Name the items of a list response.

    Args:
        items: Items to name
        name_fields: Field or fields the names are built from

    Returns:
        NamedCollection pairing each item with its name

    Examples:
        >>> named_list([{"name": "vm1", "location": "eastus"}], ["name", "location"]).names
        ('vm1/eastus',)
        >>> len(named_list(None))
        0
    """
    return NameIndexer(name_fields).build(items)
