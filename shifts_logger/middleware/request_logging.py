"""요청 로깅 미들웨어.

Request logging middleware.
Logs every API request with method, path, status code, duration, the
request body and, for failures, the envelope message. When Axiom
credentials are configured the same event is also ingested into Axiom.
Worker contact details (email, phone number) are masked before an event
leaves the process.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shifts_logger.config import settings
from shifts_logger.utils.logger import get_logger

logger = get_logger(__name__)

# 개인 연락처 필드 (Personal contact fields masked in bodies and query params)
_PERSONAL_KEYS = re.compile(r"^(email|phone_number)$", re.IGNORECASE)

# Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask_value(value: Any) -> Any:
    """Keep only whether a contact value was sent, not the value itself."""
    if value is None or value == "":
        return value
    return "***"


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """Recursively mask personal contact fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: _mask_value(v) if _PERSONAL_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _error_detail(body: bytes) -> str:
    """Pull the human-readable reason out of an error response body."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]
    if isinstance(payload, dict):
        detail = payload.get("message") or payload.get("detail") or payload
    else:
        detail = payload
    detail = detail if isinstance(detail, str) else str(detail)
    return detail[:500] + "..." if len(detail) > 500 else detail


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs all API requests and responses.

    Captures: method, path, query params, request body, status code, error detail.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        query_params = dict(request.query_params) if request.query_params else None

        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    request_body = _mask_dict(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    request_body = "(non-json body)"

        response = await call_next(request)
        status_code: int = response.status_code

        error_detail: str | None = None
        if status_code >= 400:
            # Consume the streamed body to read the reason, then re-wrap it
            resp_body = b""
            async for chunk in response.body_iterator:
                resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
            error_detail = _error_detail(resp_body)
            response = Response(
                content=resp_body,
                status_code=status_code,
                headers=dict(response.headers),
                media_type=response.media_type,
            )

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log_event: dict[str, Any] = {
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        }
        if query_params:
            log_event["query_params"] = _mask_dict(query_params)
        if request_body is not None:
            log_event["request_body"] = request_body
        if error_detail:
            log_event["error"] = error_detail

        level = "warning" if status_code >= 400 else "info"
        getattr(logger, level)(
            "%s %s -> %s (%.2f ms)%s",
            method, path, status_code, duration_ms,
            f" {error_detail}" if error_detail else "",
        )
        self._ship(log_event)
        return response

    def _ship(self, log_event: dict[str, Any]) -> None:
        """Ingest an event into Axiom; failures are logged and never reach the client."""
        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [log_event])
        except Exception:
            logger.exception("Axiom ingest failed for %s %s", log_event["method"], log_event["path"])
