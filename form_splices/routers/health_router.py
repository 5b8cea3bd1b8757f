"""Health endpoint."""

from fastapi import APIRouter

from form_splices import __version__
from form_splices.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__)
