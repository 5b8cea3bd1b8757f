"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from form_splices import __version__
from form_splices.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so shutdown failures surface.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting form splices demo",
        version=__version__,
        event_type="app_startup",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_lifespan_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down form splices demo",
            uptime_seconds=round(time.time() - app.state.startup_time, 1),
            event_type="app_shutdown",
        )
