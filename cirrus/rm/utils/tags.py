"""Creator tag stamping for created resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import get_default_creator_tag


def add_creator_tag(
    tags: Any,
    creator_tag: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Merge user tags over the creator tag.

    User tags win over the creator tag; a tag set to ``None`` is removed,
    which is how a caller drops the creator tag altogether. Anything other
    than a mapping is treated as no tags.

    Args:
        tags: User supplied tags
        creator_tag: Tag identifying this library (default: ``{"createdBy": "cirrus-rm"}``)

    Returns:
        New tags dict

    Examples:
        >>> add_creator_tag({"env": "dev"})
        {'createdBy': 'cirrus-rm', 'env': 'dev'}
        >>> add_creator_tag({"createdBy": None})
        {}
    """
    merged: dict[str, Any] = (
        dict(creator_tag) if creator_tag is not None else get_default_creator_tag()
    )
    if not isinstance(tags, Mapping):
        return merged
    for key, value in tags.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged
