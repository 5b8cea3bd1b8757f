"""Custom exceptions for form splices with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    SPLICE_ERROR = "SPLICE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Template authoring errors
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    MISSING_REF = "MISSING_REF"
    VIEW_NOT_BOUND = "VIEW_NOT_BOUND"
    ASYNC_ENVIRONMENT = "ASYNC_ENVIRONMENT"

    # View lookup errors
    VIEW_ERROR = "VIEW_ERROR"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    FIELD_TYPE_MISMATCH = "FIELD_TYPE_MISMATCH"


class SpliceException(Exception):
    """Base exception for splice errors with HTTP status code support.

    All custom exceptions inherit from this class so the demo application
    can report them consistently.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SPLICE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize splice exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TemplateAuthoringException(SpliceException):
    """A template uses a form tag incorrectly."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, 500, details)


class MissingRefException(TemplateAuthoringException):
    """A form tag that needs a ref attribute has none."""

    def __init__(self, tag: str, details: dict[str, Any] | None = None):
        super().__init__(
            f"{tag}: missing ref",
            code=ErrorCode.MISSING_REF,
            details={"tag": tag, **(details or {})},
        )
        self.tag = tag


class ViewNotBoundException(TemplateAuthoringException):
    """A form tag was rendered without a form view in the template context."""

    def __init__(self, tag: str, variable: str):
        super().__init__(
            f"{tag}: no form view bound to '{variable}'",
            code=ErrorCode.VIEW_NOT_BOUND,
            details={"tag": tag, "variable": variable},
        )


class AsyncEnvironmentException(TemplateAuthoringException):
    """The form tags were used with a Jinja2 environment that renders asynchronously."""

    def __init__(self, tag: str | None = None):
        where = f"{tag}: " if tag else ""
        super().__init__(
            f"{where}form tags need a synchronous Jinja2 environment (enable_async=False)",
            code=ErrorCode.ASYNC_ENVIRONMENT,
            details={"tag": tag} if tag else {},
        )


class ViewException(SpliceException):
    """Form view lookup errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, 500, details)


class UnknownFieldException(ViewException):
    """A ref does not name a field of the form."""

    def __init__(self, path: str, form: str):
        super().__init__(
            f"{form}: unknown field '{path}'",
            code=ErrorCode.UNKNOWN_FIELD,
            details={"path": path, "form": form},
        )
        self.path = path


class FieldTypeException(ViewException):
    """A field was looked up as the wrong kind of input."""

    def __init__(self, path: str, expected: str, actual: str):
        super().__init__(
            f"field '{path}' is {actual}, not {expected}",
            code=ErrorCode.FIELD_TYPE_MISMATCH,
            details={"path": path, "expected": expected, "actual": actual},
        )
        self.path = path
