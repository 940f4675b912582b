"""Lightweight value checks."""

from __future__ import annotations

import re
from typing import Any

_HTTP_URL = re.compile(r"^https?://")
_HTTPS_URL = re.compile(r"^https://")


def is_url(x: Any, https_only: bool = False) -> bool:
    """Whether ``x`` is a string that looks like an http(s) URL.

    Examples:
        >>> is_url("https://management.azure.com/subscriptions")
        True
        >>> is_url("http://example.com", https_only=True)
        False
        >>> is_url(["https://example.com"])
        False
    """
    if not isinstance(x, str):
        return False
    pattern = _HTTPS_URL if https_only else _HTTP_URL
    return pattern.match(x) is not None


def is_empty(x: Any) -> bool:
    """True for None and zero-length objects."""
    if x is None:
        return True
    try:
        return len(x) == 0
    except TypeError:
        return False
