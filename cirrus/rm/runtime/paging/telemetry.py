"""Structured logging for paging operations."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    page_index: int,
    rows_aggregated: int,
    latency_ms: float | None = None,
) -> None:
    """Log a page fetched from a continuation reference.

    Args:
        page_index: Zero-based index of the page (the first page is 0)
        rows_aggregated: Number of items taken from this page
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "page_index": page_index,
            "rows_aggregated": rows_aggregated,
            "latency_ms": latency_ms,
        },
    )


def log_paging_complete(*, pages_used: int, total_items: int) -> None:
    """Log completion of a continuation chain.

    Args:
        pages_used: Number of pages consumed, first page included
        total_items: Number of items aggregated
    """
    logger.info(
        "paging_complete",
        extra={
            "pages_used": pages_used,
            "total_items": total_items,
        },
    )


def log_paging_error(
    *,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "TransportError")
        error_message: Error message
    """
    logger.error(
        "paging_error",
        extra={
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
