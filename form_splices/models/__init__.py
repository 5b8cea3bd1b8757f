"""Form splices demo models"""

from form_splices.models.base_models import ErrorResponse, HealthResponse
from form_splices.models.signup import Address, Role, SignupForm

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "Address",
    "Role",
    "SignupForm",
]
