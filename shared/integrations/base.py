"""
Integration Client Base
=======================

Shared HTTP plumbing for third-party SaaS clients: one httpx.AsyncClient per
instance with bounded timeouts, uniform error translation, and tenacity
retries for idempotent reads.

Version: 0.1.0
"""

from typing import Any, Self, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from shared.config import settings
from shared.logging import get_logger


logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class ExternalServiceError(Exception):
    """A third-party service call failed (transport, auth, or server error)."""

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code
        self.transient = transient


class ConfigurationError(Exception):
    """Required provider credentials or identifiers are missing."""


def is_transient(exc: BaseException) -> bool:
    """Whether a failed call is worth retrying."""
    return isinstance(exc, ExternalServiceError) and exc.transient


class IntegrationClient:
    """
    Base class for async HTTP integration clients.

    Subclasses set `service_name` and call `_request` / `_request_idempotent`.
    Usable as an async context manager; the underlying connection pool is
    created lazily and released by `close()`.
    """

    service_name = "integration"

    def __init__(
        self,
        base_url: str = "",
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int | None = None,
        retry_backoff_seconds: float | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Base URL prepended to relative request paths
            headers: Default headers (auth, content negotiation)
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            max_retries: Attempts for idempotent reads (default from settings)
            retry_backoff_seconds: Exponential backoff multiplier (default from settings)
        """
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json", **(headers or {})}
        self._transport = transport
        self._max_retries = max_retries or settings.http.max_retries
        self._retry_backoff = (
            retry_backoff_seconds
            if retry_backoff_seconds is not None
            else settings.http.retry_backoff_seconds
        )
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        await self._get_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            timeout = httpx.Timeout(
                settings.http.read_timeout,
                connect=settings.http.connect_timeout,
            )
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers,
                timeout=timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make a single HTTP request.

        Raises:
            ExternalServiceError: On transport failure or a non-2xx response
        """
        client = await self._get_client()

        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                "integration_request_failed",
                service=self.service_name,
                method=method,
                url=url,
                status=status_code,
            )
            raise ExternalServiceError(
                self.service_name,
                f"{method} {url} returned {status_code}",
                status_code=status_code,
                transient=status_code == 429 or status_code >= 500,
            ) from e
        except httpx.TransportError as e:
            logger.warning(
                "integration_transport_failed",
                service=self.service_name,
                method=method,
                url=url,
                error=str(e),
            )
            raise ExternalServiceError(
                self.service_name,
                f"{method} {url} failed: {e}",
                transient=True,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # Malformed URLs surface as InvalidURL or a bare ValueError from the parser
            logger.warning(
                "integration_request_invalid",
                service=self.service_name,
                method=method,
                error=str(e),
            )
            raise ExternalServiceError(
                self.service_name,
                f"{method} request could not be sent: {e}",
            ) from e

        logger.debug(
            "integration_request",
            service=self.service_name,
            method=method,
            url=url,
            status=response.status_code,
        )
        return response

    def _parse(self, response: httpx.Response, schema: type[M]) -> M:
        """
        Decode a JSON response body into a model.

        Raises:
            ExternalServiceError: If the body is not JSON or does not match the schema
        """
        try:
            return schema.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "integration_response_invalid",
                service=self.service_name,
                url=str(response.request.url),
                status=response.status_code,
                errors=e.error_count(),
            )
            raise ExternalServiceError(
                self.service_name,
                f"unexpected response body from {response.request.url.path}",
                status_code=response.status_code,
            ) from e

    async def _request_idempotent(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make a read request, retrying transient failures with backoff."""
        async for attempt in AsyncRetrying(
            retry=retry_if_exception(is_transient),
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=self._retry_backoff, max=30),
            before_sleep=lambda retry_state: logger.warning(
                "integration_retry",
                service=self.service_name,
                attempt=retry_state.attempt_number,
            ),
            reraise=True,
        ):
            with attempt:
                return await self._request(method, url, **kwargs)

        raise RuntimeError(f"{self.service_name} retry loop exited without a response")
