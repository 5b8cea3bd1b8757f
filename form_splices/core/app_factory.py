"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from form_splices import __version__
from form_splices.core.lifespan import lifespan
from form_splices.middleware.error_handlers import register_error_handlers
from form_splices.routers import health_router, signup_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Form Splices Demo",
        description="""
        Signup form rendered with the **df_*** Jinja2 form tags.

        - `GET /signup` - empty form
        - `POST /signup` - validate; re-render with errors or confirm
        - `/health` - basic health check
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    # Register exception handlers
    register_error_handlers(app)

    # View routes (HTML pages) - no prefix
    app.include_router(signup_router.router, tags=["views"])

    # Health endpoint
    app.include_router(health_router.router, tags=["health"])

    return app
