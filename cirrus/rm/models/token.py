"""Bearer credential data model."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class AccessToken(BaseModel):
    """OAuth access token used to authorize Resource Manager calls."""

    token: str = Field(..., min_length=1, repr=False)
    token_type: str = "Bearer"
    expires_on: datetime | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def is_expired(self) -> bool:
        if self.expires_on is None:
            return False
        expires_on = self.expires_on
        if expires_on.tzinfo is None:
            expires_on = expires_on.replace(tzinfo=UTC)
        return expires_on <= datetime.now(UTC)

    def authorization_header(self) -> dict[str, str]:
        """Headers carrying this credential."""
        return {"Authorization": f"{self.token_type} {self.token}"}
