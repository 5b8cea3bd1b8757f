"""In-memory form view.

FormView holds what a form library knows about a form at render time: the
current input of every field and the validation errors found so far. Paths
are dotted and relative to the form; the form name is only added when an
input name is produced.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from form_splices.exceptions import FieldTypeException, UnknownFieldException


class EncType(str, Enum):
    """Form encodings, valued by their MIME type."""

    URL_ENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"

    def __str__(self) -> str:
        return self.value


class Choice(BaseModel):
    """Options of an enumerated field and the index of the selected one."""

    model_config = ConfigDict(frozen=True)

    options: list[str] = Field(default_factory=list)
    selected: int | None = 0


FieldValue = bool | Choice | str


def split_ref(ref: str) -> list[str]:
    """Split a dotted ref into its non-empty components."""
    return [part for part in ref.split(".") if part]


def _kind(value: FieldValue) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Choice):
        return "choice"
    return "text"


class FormView(BaseModel):
    """A form's inputs and errors, keyed by dotted path."""

    model_config = ConfigDict(frozen=True)

    name: str
    inputs: dict[str, FieldValue] = Field(default_factory=dict)
    field_errors: dict[str, list[str]] = Field(default_factory=dict)
    enc_type: EncType = EncType.URL_ENCODED
    path: tuple[str, ...] = ()

    def _path(self, ref: str) -> str:
        return ".".join([*self.path, *split_ref(ref)])

    def _lookup(self, ref: str) -> tuple[str, FieldValue]:
        path = self._path(ref)
        try:
            return path, self.inputs[path]
        except KeyError:
            raise UnknownFieldException(path, self.name) from None

    def absolute_ref(self, ref: str) -> str:
        return ".".join(part for part in [self.name, *self.path, *split_ref(ref)] if part)

    def field_input_text(self, ref: str) -> str:
        path, value = self._lookup(ref)
        if not isinstance(value, str):
            raise FieldTypeException(path, "text", _kind(value))
        return value

    def field_input_bool(self, ref: str) -> bool:
        path, value = self._lookup(ref)
        if not isinstance(value, bool):
            raise FieldTypeException(path, "bool", _kind(value))
        return value

    def field_input_choice(self, ref: str) -> tuple[list[str], int | None]:
        path, value = self._lookup(ref)
        if not isinstance(value, Choice):
            raise FieldTypeException(path, "choice", _kind(value))
        return list(value.options), value.selected

    def errors(self, ref: str) -> list[str]:
        return list(self.field_errors.get(self._path(ref), []))

    def child_errors(self, ref: str) -> list[str]:
        path = self._path(ref)
        prefix = f"{path}." if path else ""
        found: list[str] = []
        for error_path, messages in self.field_errors.items():
            if error_path == path or error_path.startswith(prefix):
                found.extend(messages)
        return found

    def sub_view(self, ref: str) -> "FormView":
        return self.model_copy(update={"path": (*self.path, *split_ref(ref))})
