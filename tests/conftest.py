"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from jinja2 import DictLoader, Environment

from form_splices.config import Settings
from form_splices.extension import bind_form_splices
from form_splices.main import app as fastapi_app
from form_splices.view import Choice, EncType, FormView


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def test_settings():
    """Settings instance with explicit test values."""
    return Settings(
        log_level="DEBUG",
        form_method="POST",
        view_variable="df_view",
        app_host="127.0.0.1",
        app_port=8000,
    )


@pytest.fixture
def profile_view():
    """Form view with one field of every kind, a nested address and some errors."""
    return FormView(
        name="profile",
        inputs={
            "name": "Ada <Lovelace>",
            "bio": "Writes programs & notes",
            "secret": "hunter2",
            "token": "abc123",
            "colour": Choice(options=["Red", "Green", "Blue"], selected=1),
            "size": Choice(options=["S", "M"], selected=None),
            "subscribed": True,
            "archived": False,
            "address.city": "London",
            "address.street": "",
            "address.geo.lat": "51.5",
        },
        field_errors={
            "name": ["Name is too long"],
            "address.street": ["Street is required"],
            "address.geo.lat": ["Latitude out of range"],
        },
    )


@pytest.fixture
def multipart_view():
    """Form view that must be submitted as multipart."""
    return FormView(name="upload", inputs={"title": "Report"}, enc_type=EncType.MULTIPART)


@pytest.fixture
def make_env(test_settings):
    """Build a Jinja2 environment with the form tags bound and the given templates."""

    def _make_env(templates: dict[str, str], autoescape: bool = True, settings: Settings | None = None) -> Environment:
        env = Environment(loader=DictLoader(templates), autoescape=autoescape)
        return bind_form_splices(env, settings or test_settings)

    return _make_env
