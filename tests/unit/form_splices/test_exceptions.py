"""Tests for custom exception classes."""

from form_splices.exceptions import (
    AsyncEnvironmentException,
    ErrorCode,
    FieldTypeException,
    MissingRefException,
    SpliceException,
    TemplateAuthoringException,
    UnknownFieldException,
    ViewException,
    ViewNotBoundException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.SPLICE_ERROR == "SPLICE_ERROR"
        assert ErrorCode.MISSING_REF == "MISSING_REF"
        assert ErrorCode.UNKNOWN_FIELD == "UNKNOWN_FIELD"


class TestSpliceException:
    """Tests for SpliceException."""

    def test_splice_exception_basic(self):
        """Test creating basic splice exception."""
        exc = SpliceException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.SPLICE_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_splice_exception_with_details(self):
        """Test splice exception with details."""
        exc = SpliceException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestTemplateAuthoringExceptions:
    """Tests for template authoring errors."""

    def test_missing_ref(self):
        """Test missing ref error."""
        exc = MissingRefException("df_label", details={"template": "signup.html"})

        assert isinstance(exc, TemplateAuthoringException)
        assert exc.message == "df_label: missing ref"
        assert exc.code == ErrorCode.MISSING_REF
        assert exc.details == {"tag": "df_label", "template": "signup.html"}

    def test_view_not_bound(self):
        """Test unbound view error."""
        exc = ViewNotBoundException("df_form", "df_view")

        assert isinstance(exc, TemplateAuthoringException)
        assert exc.code == ErrorCode.VIEW_NOT_BOUND
        assert "df_view" in exc.message

    def test_async_environment(self):
        """Test async environment error with and without a tag."""
        exc = AsyncEnvironmentException("df_form")

        assert isinstance(exc, TemplateAuthoringException)
        assert exc.code == ErrorCode.ASYNC_ENVIRONMENT
        assert exc.message.startswith("df_form: ")
        assert exc.details == {"tag": "df_form"}
        assert AsyncEnvironmentException().details == {}


class TestViewExceptions:
    """Tests for view lookup errors."""

    def test_unknown_field(self):
        """Test unknown field error."""
        exc = UnknownFieldException("address.zip", "signup")

        assert isinstance(exc, ViewException)
        assert exc.message == "signup: unknown field 'address.zip'"
        assert exc.status_code == 500

    def test_field_type(self):
        """Test field type mismatch error."""
        exc = FieldTypeException("newsletter", "text", "bool")

        assert isinstance(exc, ViewException)
        assert exc.code == ErrorCode.FIELD_TYPE_MISMATCH
        assert exc.message == "field 'newsletter' is bool, not text"
