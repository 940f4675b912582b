"""Custom exception hierarchy."""

from __future__ import annotations


class ResourceManagerError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(ResourceManagerError, ValueError):
    """Invalid arguments supplied when configuring a component.

    Raised immediately and never retried, e.g. when the list of name fields
    handed to a NameIndexer is empty or not a sequence of strings.
    """

    pass


class FieldLookupError(ResourceManagerError, LookupError):
    """A field requested for indexing is missing from an item."""

    def __init__(self, message: str, field: str | None = None, index: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.index = index


class PageShapeError(ResourceManagerError):
    """A page of a list response does not have the expected shape."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class PaginationLimitError(ResourceManagerError):
    """A continuation chain ran past the configured page cap."""

    def __init__(self, message: str, max_pages: int) -> None:
        super().__init__(message)
        self.max_pages = max_pages


class TransportError(ResourceManagerError):
    """Error from the remote Resource Manager endpoint."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(TransportError):
    """Credential was rejected by the endpoint."""

    pass


class RateLimitError(TransportError):
    """Endpoint rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class DuplicateNameWarning(UserWarning):
    """Some derived names in a named collection are duplicated."""

    pass
