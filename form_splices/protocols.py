"""Protocol definitions for form views."""

from typing import Protocol

from form_splices.view import EncType


class View(Protocol):
    """Protocol for the form view a splice reads from.

    A view maps dotted field paths to the current input of a form, its
    choices and its validation errors. Refs are resolved relative to the
    view's own path, so a narrowed view can render a nested part of a form
    with the same templates as a standalone one.
    """

    @property
    def enc_type(self) -> EncType:
        """Encoding the form must be submitted with."""
        ...

    def absolute_ref(self, ref: str) -> str:
        """Full input name of a field, used for name/id attributes."""
        ...

    def field_input_text(self, ref: str) -> str:
        """Current text of a field."""
        ...

    def field_input_bool(self, ref: str) -> bool:
        """Current state of a boolean field."""
        ...

    def field_input_choice(self, ref: str) -> tuple[list[str], int | None]:
        """Choices of an enumerated field and the selected index."""
        ...

    def errors(self, ref: str) -> list[str]:
        """Errors recorded exactly at a field."""
        ...

    def child_errors(self, ref: str) -> list[str]:
        """Errors recorded at a field and everywhere below it."""
        ...

    def sub_view(self, ref: str) -> "View":
        """A view narrowed to the given field path."""
        ...
