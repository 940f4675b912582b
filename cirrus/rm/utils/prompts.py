"""Interactive confirmation prompts."""

from __future__ import annotations

import sys

import click


def is_interactive() -> bool:
    """Whether both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def delete_confirmed(
    confirm: bool,
    name: str,
    type_: str,
    quote_name: bool = True,
    interactive: bool | None = None,
) -> bool:
    """Ask the user to confirm deleting a resource.

    No prompt is shown, and deletion is allowed, when ``confirm`` is false
    or the session is not interactive. An empty answer means "no".

    Args:
        confirm: Whether confirmation was requested
        name: Name of the object to delete
        type_: Kind of object, e.g. "resource group"
        quote_name: Whether to quote ``name`` in the prompt
        interactive: Override terminal detection

    Returns:
        True if deletion may proceed
    """
    if interactive is None:
        interactive = is_interactive()
    if not interactive or not confirm:
        return True

    shown = f"'{name}'" if quote_name else name
    return bool(click.confirm(f"Do you really want to delete the {type_} {shown}?", default=False))
