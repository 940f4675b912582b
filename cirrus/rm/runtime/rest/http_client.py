"""HTTP client helper."""

from __future__ import annotations

import json
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT, RESOURCE_MANAGER_URL
from ...core.exceptions import (
    AuthenticationError,
    PageShapeError,
    RateLimitError,
    TransportError,
)
from ...models import AccessToken


class HTTPClient:
    """Async HTTP client wrapper for Resource Manager calls."""

    def __init__(
        self, base_url: str | None = RESOURCE_MANAGER_URL, timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def resolve_url(self, url: str) -> str:
        # nextLink values are absolute; only relative paths get the base url
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        Raises:
            AuthenticationError: On 401/403
            RateLimitError: On 429
            TransportError: On any other HTTP or network failure
        """
        url = self.resolve_url(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status in (401, 403):
                    raise AuthenticationError(
                        f"Request to {url} was not authorized", status_code=response.status
                    )
                if response.status == 429:
                    retry_after = response.headers.get("Retry-After", "60")
                    raise RateLimitError(
                        f"Rate limited by {url}",
                        retry_after=int(retry_after) if retry_after.isdigit() else 60,
                    )
                response.raise_for_status()
                return await response.json()
        except aiohttp.ClientResponseError as e:
            raise TransportError(
                f"Request to {url} failed: {e.message}", status_code=e.status
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        except TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e
        except json.JSONDecodeError as e:
            raise TransportError(f"Malformed JSON from {url}: {e}") from e

    async def fetch_page(
        self, reference: str, credential: AccessToken | None
    ) -> dict[str, Any]:
        """Fetch one page of a list response.

        Matches the fetch capability expected by PageAggregator.

        Raises:
            AuthenticationError: If no credential is given or it has expired
        """
        if credential is None:
            raise AuthenticationError(f"No credential supplied for {reference}")
        if credential.is_expired:
            raise AuthenticationError(f"Credential expired before requesting {reference}")
        body = await self.get(reference, headers=credential.authorization_header())
        if not isinstance(body, dict):
            raise PageShapeError(
                f"Expected a JSON object from {reference}, got {type(body).__name__}"
            )
        return body

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
