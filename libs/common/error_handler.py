"""Global exception handlers.

Failures that escape a route are turned into a JSON body here so that no
error reaches the server loop. Driver messages are echoed back to the caller
only outside production.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from libs.common.config import get_settings
from libs.common.logging import get_logger
from libs.db.executor import QueryError

logger = get_logger(__name__)


def _error_body(message: str, detail: str) -> dict:
    body = {"message": message}
    if not get_settings().is_production:
        body["error"] = detail
    return body


async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.message, exc.detail),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", str(exc)),
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on ``app``."""
    app.add_exception_handler(QueryError, query_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
