"""HTTP client for the New Relic SCIM v2 provisioning API, built on httpx."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .config.settings import Settings, get_settings
from .constants import BASE_URL, DEFAULT_TIMEOUT
from .errors import TransportError
from .groups import GroupOperations
from .users import UserOperations

logger = logging.getLogger(__name__)


class Client(UserOperations, GroupOperations):
    """Synchronous SCIM client.

    Every operation performs a single HTTP round trip. Network failures and
    non-2xx statuses raise :class:`~newrelic_scim.errors.TransportError`;
    SCIM error payloads returned with a 2xx status come back as the
    ``error_response`` of the result.

    The client holds no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")

        self.base_url = base_url
        self.api_token = api_token
        self.timeout = timeout
        self.http_client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "Client":
        """Build a client from environment configuration."""

        settings = settings or get_settings()
        if not settings.scim_api_token:
            raise ValueError("SCIM_API_TOKEN is required to call the New Relic SCIM API.")

        return cls(
            settings.scim_api_token,
            base_url=settings.scim_base_url,
            timeout=settings.scim_timeout,
            **kwargs,
        )

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }

    def _do_request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> bytes:
        """Send one authenticated request and return the raw response body."""

        url = f"{self.base_url}{path}"
        logger.debug("SCIM request %s %s params=%s", method, url, dict(params or {}))

        try:
            response = self.http_client.request(
                method,
                url,
                headers=self._headers(),
                params=params,
                json=body,
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning("SCIM request %s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if not 200 <= response.status_code <= 299:
            logger.warning("SCIM request %s %s returned status %s", method, url, response.status_code)
            raise TransportError.from_status(response.status_code, response.content)

        return response.content


def new_client(api_token: str) -> Client:
    """Return a client for the fixed New Relic endpoint with a 20 second timeout."""

    return Client(api_token)
