"""Jinja2 splices that render form views as HTML."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("form-splices")
except PackageNotFoundError:
    __version__ = "dev"

from form_splices.extension import FormExtension, bind_form_splices, form_context
from form_splices.splices import form_splices
from form_splices.view import Choice, EncType, FormView

__all__ = [
    "Choice",
    "EncType",
    "FormExtension",
    "FormView",
    "bind_form_splices",
    "form_context",
    "form_splices",
    "__version__",
]
