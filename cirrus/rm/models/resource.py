"""Resource descriptor data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Resource(BaseModel):
    """Resource descriptor as returned by a Resource Manager list call.

    Fields not declared here are kept as extras so that indexing can use any
    property the service returns (``kind``, ``sku``, ...).
    """

    id: str | None = None
    name: str | None = None
    type: str | None = None
    location: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("tags", mode="before")
    @classmethod
    def _untagged(cls, value: Any) -> Any:
        # untagged resources come back with "tags": null
        return {} if value is None else value

    def get_field(self, name: str) -> Any:
        """Return a declared or extra field by name.

        Raises:
            KeyError: If the response carried no such field
        """
        if name in type(self).model_fields:
            return getattr(self, name)
        extra = self.model_extra or {}
        if name in extra:
            return extra[name]
        raise KeyError(name)
