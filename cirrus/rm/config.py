"""Shared Resource Manager constants.

This module centralizes the endpoint, response field names and tag defaults
used by the indexing, paging and helper modules so callers can pass them
explicitly instead of relying on hidden globals.
"""

from __future__ import annotations

# Resource Manager REST endpoint; list responses page through absolute
# nextLink urls rooted here.
RESOURCE_MANAGER_URL = "https://management.azure.com/"

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30.0

# Named collections
DEFAULT_NAME_FIELD = "name"
NAME_SEPARATOR = "/"

# Paged list responses: {"value": [...], "nextLink": "https://..."}
DEFAULT_VALUE_FIELD = "value"
DEFAULT_NEXT_FIELD = "nextLink"

# Tag stamped onto resources created through this library
CREATOR_TAG_KEY = "createdBy"
DEFAULT_CREATOR_TAG = {CREATOR_TAG_KEY: "cirrus-rm"}


def get_default_creator_tag() -> dict[str, str]:
    """Return a fresh copy of the default creator tag.

    Returns:
        Dict mapping the creator tag key to this library's name

    Examples:
        >>> get_default_creator_tag()
        {'createdBy': 'cirrus-rm'}
    """
    return dict(DEFAULT_CREATOR_TAG)
