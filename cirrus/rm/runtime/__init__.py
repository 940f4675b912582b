"""Runtime components: REST transport and paged-list aggregation."""

from .paging import PageAggregator, PageHint, PagePolicy, get_paged_list
from .rest import HTTPClient

__all__ = [
    "HTTPClient",
    "PageAggregator",
    "PageHint",
    "PagePolicy",
    "get_paged_list",
]
