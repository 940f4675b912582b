"""Data models for Resource Manager responses and credentials.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    Models are immutable (frozen=True) so that items collected from list
    responses cannot be modified while they are indexed or aggregated.

Model Categories:
    - Resources: Resource
    - Credentials: AccessToken
"""

from .resource import Resource
from .token import AccessToken

__all__ = [
    "AccessToken",
    "Resource",
]
