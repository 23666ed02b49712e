"""Shared HTTP plumbing for upstream provider clients.

Every provider call goes through ``JsonHttpClient.get_json``, which turns
transport errors, non-2xx statuses and undecodable bodies into a failed
ProviderResult instead of raising.
"""

import logging
from typing import Any

import httpx

from weather_lookup.entities import ProviderError, ProviderResult

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Base class for synchronous JSON-over-HTTP provider clients."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Provider base URL, without trailing slash
            timeout: Request timeout in seconds
            client: Preconfigured httpx.Client. If None, one is created lazily.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-load the HTTP client.

        Returns:
            The httpx.Client instance
        """
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> ProviderResult:
        """Issue a GET request and decode a JSON object body.

        Args:
            path: Path appended to the base URL
            params: Query parameters

        Returns:
            ProviderResult with the decoded object, or a tagged failure
        """
        url = f"{self._base_url}{path}"

        try:
            response = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            return ProviderResult.failure(ProviderError.TRANSPORT, f"{type(e).__name__}: {e}")

        if not response.is_success:
            return ProviderResult.failure(
                ProviderError.HTTP_STATUS,
                f"HTTP error {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            return ProviderResult.failure(
                ProviderError.MALFORMED_BODY,
                f"Invalid JSON body: {e}",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            return ProviderResult.failure(
                ProviderError.MALFORMED_BODY,
                f"Expected a JSON object, got {type(data).__name__}",
                status_code=response.status_code,
            )

        return ProviderResult.success(data, status_code=response.status_code)

    def close(self) -> None:
        """Close the underlying HTTP client, if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None
