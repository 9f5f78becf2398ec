"""Exception handlers for the application.

Page routes are fetched by browsers and by HTMX-style fragment loaders, so a
request that accepts HTML gets an error fragment; everything else gets the
structured JSON error body.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from markupsafe import Markup
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from forge_ui.exceptions import ErrorCode, ForgeUIException
from forge_ui.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def error_fragment(code: str, message: str) -> str:
    """Escaped HTML error message for page routes."""
    return Markup('<div class="ui negative message" data-error-code="{}"><p>{}</p></div>').format(code, message)


def _error_response(request: Request, status_code: int, error: dict[str, Any]) -> HTMLResponse | JSONResponse:
    if wants_html(request):
        return HTMLResponse(error_fragment(error["code"], error["message"]), status_code=status_code)
    return JSONResponse(status_code=status_code, content={"error": error})


async def forge_ui_exception_handler(request: Request, exc: ForgeUIException) -> HTMLResponse | JSONResponse:
    """Turn a ``ForgeUIException`` into an error response with its status code.

    Client errors are logged as warnings, server errors as errors.
    """
    log_with_context(
        logger,
        "warning" if exc.status_code < 500 else "error",
        "Request failed",
        error_code=exc.code.value,
        error_message=exc.message,
        error_details=exc.details,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type="forge_ui_error",
    )
    return _error_response(
        request,
        exc.status_code,
        {"code": exc.code.value, "message": exc.message, "details": exc.details},
    )


async def general_exception_handler(request: Request, exc: Exception) -> HTMLResponse | JSONResponse:
    """Log an unexpected exception and answer with a generic 500."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Internal details stay in the log
    return _error_response(
        request,
        500,
        {"code": ErrorCode.INTERNAL_ERROR.value, "message": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ForgeUIException, forge_ui_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
