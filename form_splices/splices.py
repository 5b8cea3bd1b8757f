"""Splices: one function per form tag.

Every splice takes the form view and the tag node the author wrote and
returns the nodes that replace the tag. The ref attribute names a field
relative to the view; the remaining attributes are copied onto the
generated element, overriding generated attributes with the same name.
"""

from collections.abc import Callable
from functools import partial

from form_splices.logging_config import get_logger, log_with_context
from form_splices.nodes import Attributes, Element, Node, RawNode, TagNode, TextNode, merge_attributes
from form_splices.protocols import View

logger = get_logger(__name__)

Splice = Callable[[TagNode], list[Node]]


def _checked(flag: bool, name: str) -> Attributes:
    return [(name, name)] if flag else []


def _input(view: View, node: TagNode, input_type: str) -> list[Node]:
    ref, attrs = node.ref_attributes()
    name = view.absolute_ref(ref)
    value = view.field_input_text(ref)
    generated = [("type", input_type), ("id", name), ("name", name), ("value", value)]
    return [Element("input", merge_attributes(generated, attrs))]


def input_text(view: View, node: TagNode) -> list[Node]:
    """Text input holding the field's current text."""
    return _input(view, node, "text")


def input_password(view: View, node: TagNode) -> list[Node]:
    return _input(view, node, "password")


def input_hidden(view: View, node: TagNode) -> list[Node]:
    return _input(view, node, "hidden")


def input_text_area(view: View, node: TagNode) -> list[Node]:
    """Textarea whose content is the field's current text."""
    ref, attrs = node.ref_attributes()
    name = view.absolute_ref(ref)
    value = view.field_input_text(ref)
    return [Element("textarea", merge_attributes([("id", name), ("name", name)], attrs), [TextNode(value)])]


def _choice_value(name: str, index: int) -> str:
    return f"{name}.{index}"


def input_select(view: View, node: TagNode) -> list[Node]:
    """Select box with one option per choice.

    Option values are "<name>.<index>" so the submitted value identifies
    the choice by position.
    """
    ref, attrs = node.ref_attributes()
    name = view.absolute_ref(ref)
    choices, selected = view.field_input_choice(ref)
    options: list[Node] = [
        Element(
            "option",
            _checked(selected == index, "selected") + [("value", _choice_value(name, index))],
            [TextNode(choice)],
        )
        for index, choice in enumerate(choices)
    ]
    return [Element("select", merge_attributes([("id", name), ("name", name)], attrs), options)]


def input_radio(view: View, node: TagNode) -> list[Node]:
    """A radio button and its label per choice, without a wrapping element."""
    ref, attrs = node.ref_attributes()
    name = view.absolute_ref(ref)
    choices, selected = view.field_input_choice(ref)
    nodes: list[Node] = []
    for index, choice in enumerate(choices):
        value = _choice_value(name, index)
        generated = _checked(selected == index, "checked") + [
            ("type", "radio"),
            ("value", value),
            ("id", value),
            ("name", name),
        ]
        nodes.append(Element("input", merge_attributes(generated, attrs)))
        nodes.append(Element("label", [("for", value)], [TextNode(choice)]))
    return nodes


def input_checkbox(view: View, node: TagNode) -> list[Node]:
    ref, attrs = node.ref_attributes()
    name = view.absolute_ref(ref)
    generated = _checked(view.field_input_bool(ref), "checked") + [("type", "checkbox"), ("id", name), ("name", name)]
    return [Element("input", merge_attributes(generated, attrs))]


def input_submit(view: View, node: TagNode) -> list[Node]:
    """Submit button. Takes no ref."""
    return [Element("input", merge_attributes([("type", "submit")], node.other_attributes()))]


def label(view: View, node: TagNode) -> list[Node]:
    ref, attrs = node.ref_attributes()
    name = view.absolute_ref(ref)
    return [Element("label", merge_attributes([("for", name)], attrs), [RawNode(node.children(view))])]


def form(view: View, node: TagNode, method: str = "POST") -> list[Node]:
    """Form element with the view's encoding. Takes no ref."""
    generated = [("method", method), ("enctype", str(view.enc_type))]
    return [Element("form", merge_attributes(generated, node.other_attributes()), [RawNode(node.children(view))])]


def _error_list(errors: list[str], attrs: Attributes) -> list[Node]:
    if not errors:
        return []
    return [Element("ul", attrs, [Element("li", [], [TextNode(error)]) for error in errors])]


def error_list(view: View, node: TagNode) -> list[Node]:
    """List of the field's own errors; renders nothing when there are none."""
    ref, attrs = node.ref_attributes()
    return _error_list(view.errors(ref), attrs)


def child_error_list(view: View, node: TagNode) -> list[Node]:
    """List of the errors of the field and all fields below it."""
    ref, attrs = node.ref_attributes()
    return _error_list(view.child_errors(ref), attrs)


def sub_view(view: View, node: TagNode) -> list[Node]:
    """Expand the tag's children against the view narrowed to ref."""
    ref, _ = node.ref_attributes()
    return [RawNode(node.children(view.sub_view(ref)))]


SPLICES: dict[str, Callable[..., list[Node]]] = {
    "input_text": input_text,
    "input_text_area": input_text_area,
    "input_password": input_password,
    "input_hidden": input_hidden,
    "input_select": input_select,
    "input_radio": input_radio,
    "input_checkbox": input_checkbox,
    "input_submit": input_submit,
    "label": label,
    "form": form,
    "error_list": error_list,
    "child_error_list": child_error_list,
    "sub_view": sub_view,
}

# Splices that render their children
BLOCK_SPLICES = frozenset({"label", "form", "sub_view"})

# Splices that work without a ref attribute
REFLESS_SPLICES = frozenset({"input_submit", "form"})


def form_splices(view: View, form_method: str = "POST") -> dict[str, Splice]:
    """Bind every splice to a view.

    Args:
        view: Form view the splices read from
        form_method: Method written on the form element

    Returns:
        Mapping of splice name to a callable taking the tag node
    """
    bound: dict[str, Splice] = {name: partial(splice, view) for name, splice in SPLICES.items()}
    bound["form"] = partial(form, view, method=form_method)
    return bound


def expand(view: View, name: str, node: TagNode, form_method: str = "POST") -> list[Node]:
    """Run the named splice on a tag node.

    Raises:
        KeyError: If no splice has that name
    """
    splice = SPLICES[name]
    log_with_context(
        logger,
        "debug",
        "Expanding form tag",
        tag=node.name,
        splice=name,
        ref=node.get_attribute("ref"),
        event_type="splice_expand",
    )
    if name == "form":
        return form(view, node, method=form_method)
    return splice(view, node)
