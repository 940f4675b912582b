"""Cirrus RM - Resource Manager client helpers."""

from .core import (
    AuthenticationError,
    ConfigurationError,
    DuplicateNameWarning,
    FieldLookupError,
    FieldSource,
    PageShapeError,
    PaginationLimitError,
    RateLimitError,
    ResourceManagerError,
    TransportError,
    read_field,
)
from .indexing import NamedCollection, NameIndexer, named_list
from .models import AccessToken, Resource
from .runtime import HTTPClient, PageAggregator, PageHint, PagePolicy, get_paged_list
from .utils import (
    add_creator_tag,
    construct_path,
    delete_confirmed,
    is_empty,
    is_url,
)

__version__ = "0.1.0"

__all__ = [
    # Named collections
    "NameIndexer",
    "NamedCollection",
    "named_list",
    "FieldSource",
    "read_field",
    # Paging
    "PageAggregator",
    "PageHint",
    "PagePolicy",
    "get_paged_list",
    "HTTPClient",
    # Models
    "AccessToken",
    "Resource",
    # Helpers
    "add_creator_tag",
    "construct_path",
    "delete_confirmed",
    "is_empty",
    "is_url",
    # Exceptions
    "ResourceManagerError",
    "ConfigurationError",
    "FieldLookupError",
    "PageShapeError",
    "PaginationLimitError",
    "TransportError",
    "AuthenticationError",
    "RateLimitError",
    "DuplicateNameWarning",
]
