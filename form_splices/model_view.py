"""Build form views from pydantic models.

A pydantic model describes the fields of a form and does the validation.
This module translates in both directions between the model and the flat,
dotted input names the splices write:

- view_from_model() turns a model (plus submitted data, an instance to edit,
  or a ValidationError) into a FormView for rendering.
- form_payload() turns submitted data back into the nested dict the model
  validates.

Field kinds: bool fields are checkboxes, Enum and Literal fields are choices
(submitted as "<name>.<index>"), nested models become dotted sub-paths and
everything else is text.
"""

import types
from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from form_splices.logging_config import get_logger, log_with_context
from form_splices.view import Choice, EncType, FieldValue, FormView

logger = get_logger(__name__)

FALSE_VALUES = (None, "", "off")


def _field_kind(annotation: Any) -> tuple[str, Any]:
    """Classify an annotation as ("model", cls), ("bool", None), ("choice", values) or ("text", None)."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _field_kind(args[0])
        return "text", None
    if origin is Literal:
        return "choice", list(get_args(annotation))
    if annotation is bool:
        return "bool", None
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return "choice", [member.value for member in annotation]
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return "model", annotation
    return "text", None


def _absolute(name: str, path: tuple[str, ...]) -> str:
    return ".".join(part for part in (name, *path) if part)


def _default(info: FieldInfo) -> Any:
    if info.is_required():
        return None
    return info.get_default(call_default_factory=True)


def _submitted_bool(raw: Any) -> bool:
    return raw not in FALSE_VALUES


def _submitted_index(raw: Any, absolute: str, count: int) -> int | None:
    """Index encoded in a submitted choice value, or None if it is not one of ours."""
    if not isinstance(raw, str) or not raw.startswith(f"{absolute}."):
        return None
    suffix = raw[len(absolute) + 1 :]
    if not suffix.isdigit() or int(suffix) >= count:
        return None
    return int(suffix)


def _index_of(current: Any, values: list[Any]) -> int | None:
    if current is None:
        return 0 if values else None
    if isinstance(current, Enum):
        current = current.value
    try:
        return values.index(current)
    except ValueError:
        return None


def _collect(
    model_cls: type[BaseModel],
    prefix: tuple[str, ...],
    name: str,
    data: Mapping[str, Any] | None,
    instance: BaseModel | None,
    inputs: dict[str, FieldValue],
) -> None:
    for field_name, info in model_cls.model_fields.items():
        path = (*prefix, field_name)
        key = ".".join(path)
        absolute = _absolute(name, path)
        current = getattr(instance, field_name, None) if instance is not None else _default(info)
        kind, extra = _field_kind(info.annotation)

        if kind == "model":
            _collect(extra, path, name, data, current if isinstance(current, BaseModel) else None, inputs)
        elif kind == "bool":
            inputs[key] = _submitted_bool(data.get(absolute)) if data is not None else bool(current)
        elif kind == "choice":
            if data is not None:
                selected = _submitted_index(data.get(absolute), absolute, len(extra))
            else:
                selected = _index_of(current, extra)
            inputs[key] = Choice(options=[str(value) for value in extra], selected=selected)
        elif data is not None:
            raw = data.get(absolute)
            inputs[key] = "" if raw is None else str(raw)
        else:
            inputs[key] = "" if current is None else str(current)


def _error_path(loc: tuple[int | str, ...], inputs: Mapping[str, FieldValue]) -> str:
    """Dotted path of the field an error belongs to.

    Union members add their type name to the location (("n", "int")), so the
    longest prefix naming a known input wins. Locations that match no input,
    such as model-level errors, are kept whole.
    """
    parts = [str(part) for part in loc]
    for end in range(len(parts), 0, -1):
        path = ".".join(parts[:end])
        if path in inputs:
            return path
    return ".".join(parts)


def view_from_model(
    name: str,
    model_cls: type[BaseModel],
    *,
    data: Mapping[str, Any] | None = None,
    instance: BaseModel | None = None,
    error: ValidationError | None = None,
    enc_type: EncType = EncType.URL_ENCODED,
) -> FormView:
    """Build a FormView for a pydantic model.

    Args:
        name: Form name, prefixed to every input name
        model_cls: Model describing the form's fields
        data: Submitted data keyed by input name; takes precedence over instance
        instance: Model instance whose values fill the form
        error: Validation error whose messages become field errors
        enc_type: Encoding written on the form element

    Returns:
        FormView with one input per leaf field
    """
    inputs: dict[str, FieldValue] = {}
    _collect(model_cls, (), name, data, instance, inputs)

    field_errors: dict[str, list[str]] = {}
    if error is not None:
        for item in error.errors():
            path = _error_path(item["loc"], inputs)
            field_errors.setdefault(path, []).append(item["msg"])

    log_with_context(
        logger,
        "debug",
        "Built form view from model",
        form=name,
        model=model_cls.__name__,
        field_count=len(inputs),
        error_count=sum(len(messages) for messages in field_errors.values()),
        event_type="model_view_built",
    )
    return FormView(name=name, inputs=inputs, field_errors=field_errors, enc_type=enc_type)


def _payload(
    model_cls: type[BaseModel],
    prefix: tuple[str, ...],
    name: str,
    data: Mapping[str, Any],
) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for field_name, info in model_cls.model_fields.items():
        path = (*prefix, field_name)
        absolute = _absolute(name, path)
        kind, extra = _field_kind(info.annotation)
        raw = data.get(absolute)

        if kind == "model":
            payload[field_name] = _payload(extra, path, name, data)
        elif kind == "bool":
            payload[field_name] = _submitted_bool(raw)
        elif kind == "choice":
            index = _submitted_index(raw, absolute, len(extra))
            if index is not None:
                payload[field_name] = extra[index]
            elif raw is not None:
                # Not one of the rendered options; let validation reject it
                payload[field_name] = raw
        elif raw is not None:
            payload[field_name] = raw
    return payload


def form_payload(name: str, model_cls: type[BaseModel], data: Mapping[str, Any]) -> dict[str, Any]:
    """Turn submitted form data into the nested dict a model validates.

    Missing text and choice inputs are left out so the model's defaults and
    required-field errors apply. Unchecked checkboxes are False.
    """
    return _payload(model_cls, (), name, data)
