"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from jinja2 import TemplateError

from form_splices.exceptions import ErrorCode, SpliceException
from form_splices.logging_config import get_logger, log_with_context
from form_splices.models import ErrorResponse

logger = get_logger(__name__)


async def splice_exception_handler(request: Request, exc: SpliceException) -> JSONResponse:
    """Handle splice exceptions with proper HTTP status codes.

    These are raised while rendering a form page and mean the template and
    the form view disagree, so they are logged as errors.
    """
    log_with_context(
        logger,
        "error",
        "Splice error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="splice_error",
    )

    error = ErrorResponse(code=exc.code.value, message=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content={"error": error.model_dump()})


async def template_exception_handler(request: Request, exc: TemplateError) -> JSONResponse:
    """Handle Jinja2 errors, e.g. a form tag missing its ref at compile time."""
    log_with_context(
        logger,
        "error",
        "Template error",
        error=str(exc),
        error_type=type(exc).__name__,
        template=getattr(exc, "name", None),
        template_lineno=getattr(exc, "lineno", None),
        method=request.method,
        url=str(request.url),
        event_type="template_error",
    )

    error = ErrorResponse(code=ErrorCode.TEMPLATE_ERROR.value, message=str(exc))
    return JSONResponse(status_code=500, content={"error": error.model_dump()})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    # Also log the traceback separately for debugging
    logger.error("Exception traceback:", exc_info=True)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(SpliceException, splice_exception_handler)
    app.add_exception_handler(TemplateError, template_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
