"""HTML node tree produced by splices.

Splices build small trees of Element/TextNode/RawNode and render them to
markupsafe.Markup. TagNode is the other direction: the tag a template author
wrote, as handed to a splice.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from markupsafe import Markup, escape

from form_splices.exceptions import MissingRefException
from form_splices.logging_config import get_logger, log_with_context

if TYPE_CHECKING:
    from form_splices.protocols import View

logger = get_logger(__name__)

Attributes = list[tuple[str, str]]

VOID_ELEMENTS = frozenset({"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"})


@dataclass
class TextNode:
    """Plain text, escaped on render."""

    text: str

    def render(self) -> Markup:
        return escape(self.text)


@dataclass
class RawNode:
    """Markup that has already been rendered, e.g. a tag's expanded children."""

    markup: str

    def render(self) -> Markup:
        return Markup(self.markup)


@dataclass
class Element:
    """An HTML element with ordered attributes."""

    tag: str
    attrs: Attributes = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)

    def render(self) -> Markup:
        attrs = Markup("").join(Markup(' {}="{}"').format(name, value) for name, value in self.attrs)
        opening = Markup("<{}{}>").format(self.tag, attrs)
        if self.tag in VOID_ELEMENTS and not self.children:
            return opening
        return opening + render_nodes(self.children) + Markup("</{}>").format(self.tag)


Node = Union[Element, TextNode, RawNode]


def render_nodes(nodes: Iterable[Node]) -> Markup:
    """Render a node list to a single Markup string."""
    return Markup("").join(node.render() for node in nodes)


def merge_attributes(generated: Attributes, extra: Attributes) -> Attributes:
    """Combine splice-generated attributes with the ones the author wrote.

    Generated attributes keep their order. An author attribute with the same
    name replaces the generated value in place; the rest follow in author order.
    """
    overrides = dict(extra)
    merged = [(name, overrides.pop(name, value)) for name, value in generated]
    merged.extend((name, value) for name, value in extra if name in overrides)
    return merged


@dataclass
class TagNode:
    """A form tag as written in a template.

    Args:
        name: Tag name, e.g. "df_input_text"
        attrs: Attributes in author order
        body: Renders the tag's children under a given view, None for empty tags
    """

    name: str
    attrs: Attributes = field(default_factory=list)
    body: Callable[["View"], str] | None = None

    def get_attribute(self, name: str) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def ref_attributes(self) -> tuple[str, Attributes]:
        """Split the ref attribute from the rest.

        Raises:
            MissingRefException: If the tag has no ref attribute
        """
        ref = self.get_attribute("ref")
        if ref is None:
            log_with_context(
                logger,
                "warning",
                "Form tag without ref",
                tag=self.name,
                attributes=[key for key, _ in self.attrs],
                event_type="splice_missing_ref",
            )
            raise MissingRefException(self.name)
        return ref, [(key, value) for key, value in self.attrs if key != "ref"]

    def other_attributes(self) -> Attributes:
        """Attributes without ref, for tags where ref is optional."""
        return [(key, value) for key, value in self.attrs if key != "ref"]

    def children(self, view: "View") -> Markup:
        if self.body is None:
            return Markup("")
        return Markup(self.body(view))
