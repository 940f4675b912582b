"""Utility functions."""

from .checks import is_empty, is_url
from .paths import construct_path
from .prompts import delete_confirmed, is_interactive
from .tags import add_creator_tag

__all__ = [
    "add_creator_tag",
    "construct_path",
    "delete_confirmed",
    "is_empty",
    "is_interactive",
    "is_url",
]
