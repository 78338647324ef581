"""미처리 예외 미들웨어.

Unhandled error middleware.

Any exception escaping a route is logged with its traceback and answered
with the generic 500 envelope. HTTPExceptions never reach this point; the
FastAPI exception handlers render them first.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from shifts_logger.schemas.common import error_envelope
from shifts_logger.utils.exceptions import INTERNAL_ERROR_MESSAGE
from shifts_logger.utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=500,
                content=error_envelope(500, INTERNAL_ERROR_MESSAGE),
            )
