"""Path construction shared by resource urls and local files."""

from __future__ import annotations

import re
from os import PathLike

_TRAILING_SLASH = re.compile(r"/$")


def construct_path(*parts: str | PathLike[str]) -> str:
    """Join ``parts`` with "/" and drop one trailing "/".

    The separator is always "/", whatever the platform.

    Examples:
        >>> construct_path("subscriptions", "sub-id", "resourcegroups/")
        'subscriptions/sub-id/resourcegroups'
    """
    joined = "/".join(str(part) for part in parts)
    return _TRAILING_SLASH.sub("", joined)
