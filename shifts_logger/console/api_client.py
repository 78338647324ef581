"""API HTTP 클라이언트.

HTTP client for the Shifts Logger API.

Wraps httpx.Client and always hands back a response envelope. Transport
failures (connection refused, timeouts) and non-JSON bodies become a failed
envelope with response_code 500, so callers only ever inspect
``request_failed`` and ``message``.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from shifts_logger.config import settings
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.utils.logger import get_logger

logger = get_logger(__name__)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset query parameters."""
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None and v != ""}


def failed(message: str, status_code: int = 500) -> ApiResponse[Any]:
    return ApiResponse[Any](request_failed=True, response_code=status_code, message=message)


class ApiClient:
    """Thin synchronous client returning envelopes.

    Args:
        base_url: API root, e.g. ``http://localhost:8000``
        timeout: Request timeout in seconds
        client: Pre-built httpx.Client (tests pass one with a MockTransport)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._client: httpx.Client = client or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.API_TIMEOUT_SECONDS,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any] | ApiResponse[Any]:
        """Send a request and decode its JSON body, or return a failed envelope."""
        try:
            response: httpx.Response = self._client.request(
                method, path, params=_clean_params(params), json=json
            )
        except httpx.TimeoutException:
            logger.warning("%s %s timed out", method, path)
            return failed("The API did not respond in time. Please try again.")
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return failed(f"Could not reach the API at {self._client.base_url}. Is the server running?")

        try:
            body = response.json()
        except ValueError:
            return failed(f"Unexpected response from the API (HTTP {response.status_code}).")
        if not isinstance(body, dict):
            return failed(f"Unexpected response from the API (HTTP {response.status_code}).")
        return body

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> ApiResponse[Any]:
        body = self._send(method, path, params, json)
        if isinstance(body, ApiResponse):
            return body
        try:
            return ApiResponse[Any].model_validate(body)
        except ValidationError:
            return failed("Unexpected response from the API.")

    def request_page(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> PaginatedApiResponse[Any]:
        """GET a paginated list endpoint."""
        body = self._send("GET", path, params)
        if isinstance(body, ApiResponse):
            return PaginatedApiResponse[Any](**body.model_dump())
        try:
            return PaginatedApiResponse[Any].model_validate(body)
        except ValidationError:
            return PaginatedApiResponse[Any](
                request_failed=True, response_code=500, message="Unexpected response from the API."
            )

    def get(self, path: str, params: dict[str, Any] | None = None) -> ApiResponse[Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: dict[str, Any]) -> ApiResponse[Any]:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: dict[str, Any]) -> ApiResponse[Any]:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> ApiResponse[Any]:
        return self.request("DELETE", path)
