"""Structured logging for named-collection construction."""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def log_collection_built(*, fields: Sequence[str], total_items: int) -> None:
    """Log construction of a named collection.

    Args:
        fields: Field names the keys were derived from
        total_items: Number of items in the collection
    """
    logger.debug(
        "named_collection_built",
        extra={
            "fields": list(fields),
            "total_items": total_items,
        },
    )


def log_duplicate_names(*, fields: Sequence[str], duplicated: Sequence[str]) -> None:
    """Log detection of duplicated names.

    Args:
        fields: Field names the keys were derived from
        duplicated: Distinct duplicated names
    """
    logger.warning(
        "duplicate_names_detected",
        extra={
            "fields": list(fields),
            "duplicated": list(duplicated),
        },
    )
