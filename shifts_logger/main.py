"""FastAPI 애플리케이션 진입점.

FastAPI application entry point: middleware, exception handlers and routers.

Run with ``uvicorn shifts_logger.main:app``.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shifts_logger.api import api_router
from shifts_logger.api.exception_handlers import register_exception_handlers
from shifts_logger.config import settings
from shifts_logger.middleware.error_handling import ErrorHandlingMiddleware
from shifts_logger.middleware.request_logging import RequestLoggingMiddleware

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Middleware added later wraps middleware added earlier: the error middleware
# sits innermost so its 500 envelope is still seen by request logging.
app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for load balancers and monitoring."""
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")
