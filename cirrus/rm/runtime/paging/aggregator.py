"""Page aggregation for paged list responses.

This module provides the PageAggregator class that follows the continuation
references of a paged list response and concatenates every page's items.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from time import perf_counter
from typing import Any

from ...core.exceptions import PageShapeError, PaginationLimitError
from ...utils.checks import is_empty
from .definitions import PageFetcher, PageHint, PagePolicy
from .telemetry import log_page_fetched, log_paging_complete, log_paging_error


class PageAggregator:
    """Follows continuation references and aggregates page values.

    The aggregator never builds requests itself: the first page is supplied
    by the caller and every further page comes from the injected fetch
    capability. Errors raised by the fetch capability propagate unchanged
    and are never retried.
    """

    def __init__(
        self,
        hint: PageHint | None = None,
        policy: PagePolicy | None = None,
    ) -> None:
        """Initialize page aggregator.

        Args:
            hint: Optional field names of the value and next-link slots
            policy: Optional paging policy (default: follow the chain until it ends)
        """
        self._hint = hint or PageHint()
        self._policy = policy or PagePolicy()

    @property
    def hint(self) -> PageHint:
        return self._hint

    @property
    def policy(self) -> PagePolicy:
        return self._policy

    async def collect(
        self,
        first_page: Mapping[str, Any],
        fetch: PageFetcher,
        credential: Any = None,
    ) -> list[Any]:
        """Aggregate all items reachable from ``first_page``.

        Args:
            first_page: Page already returned by the initial list call
            fetch: Async function taking a continuation reference and the
                credential and returning the next page
            credential: Opaque credential handed to ``fetch``

        Returns:
            Items of every page, earlier pages first

        Raises:
            PageShapeError: If a page lacks its value slot or has a malformed next link
            PaginationLimitError: If the chain is longer than ``policy.max_pages``
        """
        page = first_page
        items = list(self._extract_values(page))
        pages_used = 1

        while (reference := self._extract_next(page)) is not None:
            if self._policy.max_pages is not None and pages_used >= self._policy.max_pages:
                raise PaginationLimitError(
                    f"List response has more than {self._policy.max_pages} pages",
                    max_pages=self._policy.max_pages,
                )

            page_start = perf_counter()
            try:
                page = await fetch(reference, credential)
            except Exception as e:
                log_paging_error(
                    page_index=pages_used,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            latency_ms = (perf_counter() - page_start) * 1000.0

            values = self._extract_values(page)
            items.extend(values)

            log_page_fetched(
                page_index=pages_used,
                rows_aggregated=len(values),
                latency_ms=latency_ms,
            )
            pages_used += 1

        log_paging_complete(pages_used=pages_used, total_items=len(items))
        return items

    def _extract_values(self, page: Any) -> Sequence[Any]:
        field = self._hint.value_field
        if not isinstance(page, Mapping):
            raise PageShapeError(
                f"Expected a page mapping, got {type(page).__name__}", field=field
            )
        if field not in page:
            raise PageShapeError(f"Page has no '{field}' field", field=field)

        values = page[field]
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise PageShapeError(
                f"Page field '{field}' is not a list: {type(values).__name__}", field=field
            )
        return values

    def _extract_next(self, page: Mapping[str, Any]) -> str | None:
        """Continuation reference of ``page``, or None when the chain ends."""
        field = self._hint.next_field
        reference = page.get(field)
        if is_empty(reference):
            return None
        if not isinstance(reference, str):
            raise PageShapeError(
                f"Page field '{field}' is not a string: {type(reference).__name__}",
                field=field,
            )
        return reference


async def get_paged_list(
    page: Mapping[str, Any],
    fetch: PageFetcher,
    credential: Any = None,
    *,
    value_field: str | None = None,
    next_field: str | None = None,
) -> list[Any]:
    """Reassemble a paged list response into a single list.

    Args:
        page: First page of the response
        fetch: Async fetch capability for continuation references
        credential: Opaque credential handed to ``fetch``
        value_field: Field holding the items (default: "value")
        next_field: Field holding the next link (default: "nextLink")

    Returns:
        All items in page order
    """
    hint = PageHint()
    if value_field is not None or next_field is not None:
        hint = PageHint(
            value_field=value_field if value_field is not None else hint.value_field,
            next_field=next_field if next_field is not None else hint.next_field,
        )
    return await PageAggregator(hint=hint).collect(page, fetch, credential)
