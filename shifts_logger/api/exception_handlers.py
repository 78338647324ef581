"""예외 핸들러 모듈.

Exception handlers rendering failures as response envelopes.

Services raise HTTPException subclasses (NotFoundError, BadRequestError);
request parsing raises RequestValidationError. Both become the uniform
envelope with request_failed=True and the status mirrored in response_code.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shifts_logger.schemas.common import error_envelope


def _describe(error: dict) -> str:
    """Render one pydantic error as ``field: message``."""
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message: str = error.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {message}" if location else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and query strings are bad requests."""
    message = "Validation failed: " + "; ".join(_describe(e) for e in exc.errors())
    return JSONResponse(status_code=400, content=error_envelope(400, message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
