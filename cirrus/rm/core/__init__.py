"""Core components."""

from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    DuplicateNameWarning,
    FieldLookupError,
    PageShapeError,
    PaginationLimitError,
    RateLimitError,
    ResourceManagerError,
    TransportError,
)
from .fields import FieldSource, read_field

__all__ = [
    "ResourceManagerError",
    "ConfigurationError",
    "FieldLookupError",
    "PageShapeError",
    "PaginationLimitError",
    "TransportError",
    "AuthenticationError",
    "RateLimitError",
    "DuplicateNameWarning",
    # Field access
    "FieldSource",
    "read_field",
]
