"""Tests for building form views from pydantic models."""

from typing import Literal

import pytest
from pydantic import BaseModel, ValidationError

from form_splices.model_view import form_payload, view_from_model
from form_splices.models import Address, Role, SignupForm
from form_splices.view import Choice, EncType


class Preferences(BaseModel):
    theme: Literal["light", "dark"] = "dark"
    nickname: str | None = None
    age: int = 0
    tags: list[str] = []


class Measurement(BaseModel):
    n: int | float = 0


def submit(data):
    """Validate submitted signup data the way the demo route does."""
    return SignupForm.model_validate(form_payload("signup", SignupForm, data))


class TestViewFromModel:
    """Tests for view_from_model."""

    def test_empty_form(self):
        """Test inputs for a model without data use its defaults."""
        view = view_from_model("signup", SignupForm)

        assert view.name == "signup"
        assert view.inputs == {
            "username": "",
            "email": "",
            "password": "",
            "role": Choice(options=["reader", "writer", "editor"], selected=0),
            "newsletter": False,
            "bio": "",
            "address.street": "",
            "address.city": "",
            "address.postcode": "",
        }
        assert view.field_errors == {}
        assert view.enc_type == EncType.URL_ENCODED

    def test_from_instance(self):
        """Test that an instance fills the form."""
        signup = SignupForm(
            username="ada",
            email="ada@example.com",
            password="correct horse",
            role=Role.EDITOR,
            newsletter=True,
            address=Address(street="1 Main St", city="Paris"),
        )

        view = view_from_model("signup", SignupForm, instance=signup)

        assert view.field_input_text("email") == "ada@example.com"
        assert view.field_input_choice("role") == (["reader", "writer", "editor"], 2)
        assert view.field_input_bool("newsletter") is True
        assert view.sub_view("address").field_input_text("street") == "1 Main St"

    def test_from_submitted_data(self):
        """Test that submitted data keyed by input name fills the form."""
        data = {
            "signup.username": "ada",
            "signup.role": "signup.role.1",
            "signup.newsletter": "on",
            "signup.address.city": "Rome",
        }

        view = view_from_model("signup", SignupForm, data=data)

        assert view.field_input_text("username") == "ada"
        assert view.field_input_text("email") == ""
        assert view.field_input_choice("role") == (["reader", "writer", "editor"], 1)
        assert view.field_input_bool("newsletter") is True
        assert view.field_input_text("address.city") == "Rome"

    def test_submitted_data_unchecked_and_bad_choice(self):
        """Test unchecked boxes are false and foreign choice values select nothing."""
        data = {"signup.newsletter": "off", "signup.role": "admin"}

        view = view_from_model("signup", SignupForm, data=data)

        assert view.field_input_bool("newsletter") is False
        assert view.field_input_choice("role")[1] is None

    def test_literal_optional_and_other_types(self):
        """Test Literal choices, Optional text and non-string text fields."""
        view = view_from_model("prefs", Preferences)

        assert view.field_input_choice("theme") == (["light", "dark"], 1)
        assert view.field_input_text("nickname") == ""
        assert view.field_input_text("age") == "0"
        assert view.field_input_text("tags") == "[]"

    def test_validation_errors(self):
        """Test that validation errors land on the dotted field paths."""
        data = {"signup.username": "ada", "signup.address.city": "Rome"}
        with pytest.raises(ValidationError) as exc_info:
            submit(data)

        view = view_from_model("signup", SignupForm, data=data, error=exc_info.value)

        assert view.errors("email") == ["Field required"]
        assert view.errors("password") == ["Field required"]
        assert view.errors("username") == []
        assert view.sub_view("address").errors("street") == ["Field required"]
        assert view.child_errors("address") == ["Field required"]

    def test_union_field_errors_on_the_field(self):
        """Test that errors from every union member are filed under the field itself."""
        data = {"m.n": "abc"}
        with pytest.raises(ValidationError) as exc_info:
            Measurement.model_validate(form_payload("m", Measurement, data))

        view = view_from_model("m", Measurement, data=data, error=exc_info.value)

        assert len(view.errors("n")) == 2
        assert list(view.field_errors) == ["n"]
        assert view.field_input_text("n") == "abc"

    def test_model_level_errors_keep_their_location(self):
        """Test that errors whose location names no field are kept whole."""
        error = ValidationError.from_exception_data(
            "Preferences",
            [{"type": "missing", "loc": ("extra", "deep"), "input": {}}],
        )

        view = view_from_model("prefs", Preferences, error=error)

        assert view.field_errors == {"extra.deep": ["Field required"]}

    def test_enc_type(self):
        """Test the encoding is passed through."""
        view = view_from_model("prefs", Preferences, enc_type=EncType.MULTIPART)

        assert view.enc_type == EncType.MULTIPART


class TestFormPayload:
    """Tests for form_payload."""

    def test_nested_payload(self):
        """Test submitted names become a nested dict."""
        data = {
            "signup.username": "ada_l",
            "signup.email": "ada@example.com",
            "signup.password": "correct horse",
            "signup.role": "signup.role.2",
            "signup.newsletter": "on",
            "signup.address.street": "1 Main St",
            "signup.address.city": "Paris",
        }

        assert form_payload("signup", SignupForm, data) == {
            "username": "ada_l",
            "email": "ada@example.com",
            "password": "correct horse",
            "role": "editor",
            "newsletter": True,
            "address": {"street": "1 Main St", "city": "Paris"},
        }

    def test_valid_submission_validates(self):
        """Test the payload validates into the model."""
        signup = submit(
            {
                "signup.username": "ada_l",
                "signup.email": "ada@example.com",
                "signup.password": "correct horse",
                "signup.role": "signup.role.1",
                "signup.address.street": "1 Main St",
                "signup.address.city": "Paris",
                "signup.address.postcode": "75001",
            }
        )

        assert signup.role == Role.WRITER
        assert signup.newsletter is False
        assert signup.address.postcode == "75001"

    def test_unchecked_checkbox_is_false(self):
        """Test that an absent checkbox is submitted as False."""
        assert form_payload("signup", SignupForm, {})["newsletter"] is False

    def test_missing_inputs_are_omitted(self):
        """Test that absent text and choice inputs are left to the model's defaults."""
        payload = form_payload("prefs", Preferences, {})

        assert payload == {}
        assert Preferences.model_validate(payload).theme == "dark"

    def test_foreign_choice_value_is_rejected(self):
        """Test that a choice value we did not render fails validation."""
        payload = form_payload("prefs", Preferences, {"prefs.theme": "prefs.theme.9"})

        assert payload == {"theme": "prefs.theme.9"}
        with pytest.raises(ValidationError):
            Preferences.model_validate(payload)
