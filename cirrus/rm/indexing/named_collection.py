"""Ordered collection of items paired with derived names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


class NamedCollection(Sequence[T], Generic[T]):
    """Items in their original order, each paired with a name.

    Behaves as a sequence of items. Names are case-sensitive as stored but
    are not guaranteed unique; lookup by name resolves to the last item
    carrying that name.
    """

    __slots__ = ("_items", "_names")

    def __init__(self, items: Iterable[T] = (), names: Iterable[str] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._names: tuple[str, ...] = tuple(names)
        if len(self._items) != len(self._names):
            raise ValueError(
                f"Got {len(self._names)} names for {len(self._items)} items"
            )

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> NamedCollection[T]: ...

    def __getitem__(self, index: int | slice) -> T | NamedCollection[T]:
        if isinstance(index, slice):
            return NamedCollection(self._items[index], self._names[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedCollection):
            return NotImplemented
        return self._names == other._names and self._items == other._items

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name!r}: {item!r}" for name, item in self.pairs())
        return f"NamedCollection({{{pairs}}})"

    def pairs(self) -> list[tuple[str, T]]:
        """(name, item) pairs in order, duplicates included."""
        return list(zip(self._names, self._items))

    def get(self, name: str, default: Any = None) -> T | Any:
        """Return the last item stored under ``name``."""
        for i in range(len(self._names) - 1, -1, -1):
            if self._names[i] == name:
                return self._items[i]
        return default

    def has_name(self, name: str) -> bool:
        return name in self._names

    def to_dict(self) -> dict[str, T]:
        """Name-to-item dict; later duplicates overwrite earlier ones."""
        return dict(self.pairs())

    def duplicated_names(self) -> list[str]:
        """Distinct names that repeat an earlier name, ignoring case.

        Each reported name is spelled as at its first repeated position.
        """
        seen: set[str] = set()
        reported: set[str] = set()
        duplicated: list[str] = []
        for name in self._names:
            folded = name.lower()
            if folded not in seen:
                seen.add(folded)
                continue
            if name not in reported:
                reported.add(name)
                duplicated.append(name)
        return duplicated
