"""Signup page routes: render the form and handle its submission."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from form_splices.logging_config import get_logger, log_with_context
from form_splices.model_view import form_payload, view_from_model
from form_splices.models import SignupForm
from form_splices.views.template_renderer import SIGNUP_FORM_NAME, TemplateRenderer

router = APIRouter()
logger = get_logger(__name__)


@router.get("/signup", response_class=HTMLResponse)
async def signup_page(request: Request):
    """Render an empty signup form."""
    view = view_from_model(SIGNUP_FORM_NAME, SignupForm)
    return TemplateRenderer.render_signup(request, view)


@router.post("/signup", response_class=HTMLResponse)
async def submit_signup(request: Request):
    """Validate a submitted signup form.

    Re-renders the form with the submitted values and validation errors
    (HTTP 422) when validation fails, otherwise renders a confirmation page.
    """
    data = await request.form()
    try:
        signup = SignupForm.model_validate(form_payload(SIGNUP_FORM_NAME, SignupForm, data))
    except ValidationError as e:
        log_with_context(
            logger,
            "info",
            "Signup rejected",
            error_count=e.error_count(),
            fields=sorted({".".join(str(part) for part in item["loc"]) for item in e.errors()}),
            event_type="signup_invalid",
        )
        view = view_from_model(SIGNUP_FORM_NAME, SignupForm, data=data, error=e)
        return TemplateRenderer.render_signup(request, view, status_code=422)

    log_with_context(
        logger,
        "info",
        "Signup accepted",
        role=signup.role.value,
        event_type="signup_valid",
    )
    return TemplateRenderer.render_signup_success(request, signup)
