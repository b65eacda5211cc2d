"""Async HTTP client shared by the Zuri repositories."""

from dataclasses import dataclass, field
from typing import Any

import httpx

from zurichat.core.failures import (
    AuthFailure,
    Failure,
    ForbiddenFailure,
    InputFailure,
    NetworkFailure,
    NotFoundFailure,
    RateLimitFailure,
    ServerFailure,
    TimeoutFailure,
)
from zurichat.utils.logger import logger


@dataclass
class ApiResponse:
    """Status code and parsed JSON body of a successful response."""

    status_code: int
    data: Any = None
    headers: dict[str, str] = field(default_factory=dict)


class ApiClient:
    """Async client for a base-URL-scoped JSON API.

    Error statuses and transport errors are raised as Failure subclasses;
    every other response is returned as an ApiResponse.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Base URL every request path is resolved against
            timeout: Request timeout in seconds
            transport: Optional httpx transport (mock transports in tests)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ApiClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _ensure_client(self) -> None:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(
        self,
        path: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> ApiResponse:
        return await self._request("GET", path, headers=headers, params=params)

    async def post(
        self,
        path: str,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> ApiResponse:
        return await self._request(
            "POST", path, body=body, headers=headers, files=files
        )

    async def patch(
        self,
        path: str,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> ApiResponse:
        return await self._request(
            "PATCH", path, body=body, headers=headers, files=files
        )

    async def _request(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> ApiResponse:
        """Send one request and map error responses to failures.

        Args:
            method: HTTP method (GET, POST, PATCH)
            path: API path relative to the base URL
            body: JSON body, or multipart form fields when files are given
            headers: Request headers
            params: Query parameters
            files: Multipart files as accepted by httpx

        Returns:
            ApiResponse for any status below 400

        Raises:
            Failure: For error statuses and transport errors
        """
        await self._ensure_client()

        request_kwargs: dict[str, Any] = {"headers": headers, "params": params}
        if files is not None:
            request_kwargs["data"] = body
            request_kwargs["files"] = files
        elif body is not None:
            request_kwargs["json"] = body

        try:
            response = await self._client.request(method, path, **request_kwargs)
        except httpx.TimeoutException as e:
            raise TimeoutFailure(
                f"Request to {path} timed out",
                timeout_duration=self.timeout,
                original_error=e,
            ) from e
        except httpx.RequestError as e:
            raise NetworkFailure(f"Request error: {e}", original_error=e) from e

        data = self._parse_body(response)
        logger.debug(
            "API response received",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code >= 400:
            raise self._failure_for(response, data)

        return ApiResponse(
            status_code=response.status_code,
            data=data,
            headers=dict(response.headers),
        )

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _failure_for(response: httpx.Response, data: Any) -> Failure:
        status_code = response.status_code
        message = None
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
        message = str(message) if message else response.text or response.reason_phrase

        if status_code in (400, 422):
            return InputFailure(message, status_code=status_code, response_data=data)
        elif status_code == 401:
            return AuthFailure(message, response_data=data)
        elif status_code == 403:
            return ForbiddenFailure(message, response_data=data)
        elif status_code == 404:
            return NotFoundFailure(message, response_data=data)
        elif status_code == 429:
            retry_after = response.headers.get("Retry-After")
            return RateLimitFailure(
                message,
                response_data=data,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        return ServerFailure(message, status_code=status_code, response_data=data)
