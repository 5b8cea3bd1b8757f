from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # form-splices/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FORM_METHODS = ("GET", "POST")


class Settings(BaseSettings):
    """Settings for the splices and the demo application.

    Every field has a default, so Settings() works without any environment.
    Values are read from FORM_SPLICES_* environment variables or the .env file.
    """

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Path | None = Field(default=None, description="JSON log file (console only when unset)")

    # Splices
    form_method: str = Field(default="POST", description="HTTP method written by the df_form tag")
    view_variable: str = Field(default="df_view", description="Template variable holding the form view")

    # Demo application server
    app_host: str = Field(default="127.0.0.1", min_length=1, description="Demo server host")
    app_port: int = Field(ge=1, le=65535, default=8000, description="Demo server port")

    model_config = SettingsConfigDict(
        env_prefix="FORM_SPLICES_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level is a standard logging level name."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("form_method", mode="after")
    @classmethod
    def validate_form_method(cls, v: str) -> str:
        """HTML forms only submit with GET or POST."""
        v = v.strip().upper()
        if v not in FORM_METHODS:
            raise ValueError(f"form_method must be one of {', '.join(FORM_METHODS)}")
        return v

    @field_validator("view_variable", mode="after")
    @classmethod
    def validate_view_variable(cls, v: str) -> str:
        """Ensure the view variable can be referenced from a template."""
        v = v.strip()
        if not v.isidentifier():
            raise ValueError(f"view_variable must be a valid identifier, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"method": settings.form_method}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
