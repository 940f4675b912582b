"""Paging metadata definitions and policy structures.

This module defines the data structures used to describe how a paged list
response is laid out and how far its continuation chain may be followed.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ...config import DEFAULT_NEXT_FIELD, DEFAULT_VALUE_FIELD

# fetch(reference, credential) -> next page
PageFetcher = Callable[[str, Any], Awaitable[Mapping[str, Any]]]


@dataclass(frozen=True)
class PageHint:
    """Field names used by a paged list response.

    Attributes:
        value_field: Field holding the batch of items (default: "value")
        next_field: Field holding the continuation reference (default: "nextLink")
    """

    value_field: str = DEFAULT_VALUE_FIELD
    next_field: str = DEFAULT_NEXT_FIELD

    def __post_init__(self) -> None:
        if not self.value_field or not self.next_field:
            raise ValueError("PageHint field names cannot be empty")


@dataclass(frozen=True)
class PagePolicy:
    """Paging policy for a continuation chain.

    Attributes:
        max_pages: Maximum number of pages, first page included (None = unlimited)
    """

    max_pages: int | None = None

    def __post_init__(self) -> None:
        if self.max_pages is not None and self.max_pages < 1:
            raise ValueError("PagePolicy max_pages must be at least 1")
