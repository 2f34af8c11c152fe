"""
HTTP Executor

Thin wrapper over httpx.AsyncClient that speaks to the ConfigCat API:
- a Basic-Authentication header computed once from the credentials
- fixed Accept / Content-Type / User-Agent headers
- any non-2xx status raises UpstreamFailure carrying status, reason,
  body text and rate-limit headers

One HTTP call per invocation. No retries, no caching.
"""

from __future__ import annotations

import base64
import logging

import httpx

from .binder import BoundRequest
from .config import (
    HTTP_TIMEOUT_SECONDS,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
    USER_AGENT,
    Credentials,
)
from .errors import TransportFailure, UpstreamFailure

logger = logging.getLogger(__name__)


def basic_auth_header(credentials: Credentials) -> str:
    token = f"{credentials.username}:{credentials.password}".encode()
    return "Basic " + base64.b64encode(token).decode("ascii")


class ConfigCatHttpClient:
    """Issues authenticated requests against the ConfigCat API."""

    def __init__(
        self,
        base_url: str,
        credentials: Credentials,
        *,
        user_agent: str = USER_AGENT,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._auth_header = basic_auth_header(credentials)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Clean up HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Fixed headers, then per-call headers; Authorization always wins."""
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "user-agent": self.user_agent,
        }
        for name, value in (extra or {}).items():
            headers[name.lower()] = value
        headers["authorization"] = self._auth_header
        return headers

    async def execute(self, request: BoundRequest) -> httpx.Response:
        """
        Send a bound request and return the 2xx response.

        Raises:
            UpstreamFailure: The API answered with a non-2xx status.
            TransportFailure: The request never got a response.
        """
        logger.debug("%s %s%s", request.method, self.base_url, request.path)
        try:
            response = await self.client.request(
                method=request.method,
                url=request.path,
                params=request.query or None,
                headers=self.build_headers(request.headers),
                json=request.body if request.has_body else None,
            )
        except httpx.HTTPError as e:
            raise TransportFailure(f"HTTP error: {e!s}", cause=e) from e

        if not response.is_success:
            raise self._failure(response)
        return response

    async def fetch(self, url: str) -> httpx.Response:
        """
        Plain GET of an absolute URL, without credentials.

        Non-2xx responses are returned as-is; only transport errors raise.
        """
        try:
            return await self.client.get(url, headers={"user-agent": self.user_agent})
        except httpx.HTTPError as e:
            raise TransportFailure(f"HTTP error: {e!s}", cause=e) from e

    def _failure(self, response: httpx.Response) -> UpstreamFailure:
        try:
            body = response.text
        except Exception:  # noqa: BLE001 - body is best-effort diagnostics
            body = ""

        rate_limit = {
            "remaining": response.headers.get(RATE_LIMIT_REMAINING_HEADER),
            "reset": response.headers.get(RATE_LIMIT_RESET_HEADER),
        }
        logger.warning(
            "ConfigCat API returned %d %s (rate limit remaining: %s)",
            response.status_code,
            response.reason_phrase,
            rate_limit["remaining"],
        )
        return UpstreamFailure(
            status_code=response.status_code,
            reason=response.reason_phrase,
            url=str(response.request.url),
            body=body,
            rate_limit=rate_limit,
        )
