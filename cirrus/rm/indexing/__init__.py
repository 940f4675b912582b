"""Named collections built from list responses.

Architecture:
    - named_collection.py: NamedCollection, items paired with names
    - indexer.py: NameIndexer and named_list, name derivation and duplicate detection
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .indexer import NameIndexer, named_list
from .named_collection import NamedCollection

__all__ = [
    "NameIndexer",
    "NamedCollection",
    "named_list",
]
