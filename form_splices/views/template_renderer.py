"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from form_splices.config import get_settings
from form_splices.extension import bind_form_splices, form_context
from form_splices.logging_config import get_logger, log_with_context
from form_splices.models import SignupForm
from form_splices.view import FormView

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)
bind_form_splices(templates.env, get_settings())

SIGNUP_FORM_NAME = "signup"


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the demo pages."""

    @staticmethod
    def render_signup(request: Request, view: FormView, status_code: int = 200) -> HTMLResponse:
        """Render the signup form.

        Args:
            request: FastAPI request object
            view: Form view holding current inputs and errors
            status_code: 200 for a fresh form, 422 when re-rendering with errors

        Returns:
            HTMLResponse with the rendered form
        """
        log_with_context(
            logger,
            "debug",
            "Rendering signup form",
            form=view.name,
            error_count=len(view.child_errors("")),
            event_type="signup_render",
        )
        return templates.TemplateResponse(
            request,
            "signup.html",
            {**form_context(view, get_settings()), "has_errors": bool(view.field_errors)},
            status_code=status_code,
        )

    @staticmethod
    def render_signup_success(request: Request, signup: SignupForm) -> HTMLResponse:
        """Render the confirmation page after a valid signup.

        Args:
            request: FastAPI request object
            signup: Validated signup data

        Returns:
            HTMLResponse with the confirmation page
        """
        return templates.TemplateResponse(
            request,
            "signup_success.html",
            {"signup": signup},
        )
