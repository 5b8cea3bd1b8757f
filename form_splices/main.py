"""Main FastAPI application entry point for the demo."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi.responses import RedirectResponse

from form_splices.config import get_settings
from form_splices.core.app_factory import create_app
from form_splices.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

# Create application
app = create_app()


@app.get("/", include_in_schema=False)
async def root():
    """Send visitors to the signup form."""
    return RedirectResponse(url="/signup")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "form_splices.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
