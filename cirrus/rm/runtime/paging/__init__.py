"""Aggregation of paged list responses.

Many Resource Manager list operations return paged output: each response
holds a subset of the items plus a link to query for the next subset. This
package follows those links and returns all items as a single list.

Architecture:
    - definitions.py: Paging metadata (PageHint, PagePolicy, PageFetcher)
    - aggregator.py: PageAggregator, follows the continuation chain
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .aggregator import PageAggregator, get_paged_list
from .definitions import PageFetcher, PageHint, PagePolicy

__all__ = [
    "PageAggregator",
    "PageFetcher",
    "PageHint",
    "PagePolicy",
    "get_paged_list",
]
