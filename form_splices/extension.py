"""Jinja2 binding for the splices.

FormExtension adds one tag per splice, named "df_" + the splice name:

    {% df_form action="/signup" %}
      {% df_label ref="email" %}Email{% enddf_label %}
      {% df_input_text ref="email" class="wide" %}
      {% df_error_list ref="email" class="errors" %}
      {% df_sub_view ref="address" %}
        {% df_input_text ref="city" %}
      {% enddf_sub_view %}
      {% df_input_submit value="Sign up" %}
    {% enddf_form %}

Attributes are name=expression pairs. Names that are not identifiers can be
quoted ("data-role"="x"). Attributes that evaluate to None or to an undefined
variable are left out; Markup values are written as they are.

The form view is read from a template variable (df_view by default). Block
tags render their children through a caller that takes the view as its
argument, which is how df_sub_view narrows the view for nested tags.

The tags render synchronously, so environments created with
enable_async=True are refused.
"""

from typing import Any

from jinja2 import Environment, Undefined, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from markupsafe import Markup

from form_splices.config import Settings, get_settings
from form_splices.exceptions import AsyncEnvironmentException, ViewNotBoundException
from form_splices.logging_config import get_logger, log_with_context
from form_splices.nodes import TagNode, render_nodes
from form_splices.protocols import View
from form_splices.splices import BLOCK_SPLICES, REFLESS_SPLICES, SPLICES, expand

logger = get_logger(__name__)

TAG_PREFIX = "df_"


class FormExtension(Extension):
    """Registers the df_* form tags on a Jinja2 environment."""

    tags = {f"{TAG_PREFIX}{name}" for name in SPLICES}

    def __init__(self, environment: Environment):
        super().__init__(environment)
        environment.extend(
            form_splices_method="POST",
            form_splices_view_variable="df_view",
        )

    def parse(self, parser: Parser) -> nodes.Node:
        token = next(parser.stream)
        tag = token.value
        lineno = token.lineno
        splice = tag[len(TAG_PREFIX) :]

        names, pairs = self._parse_attributes(parser, tag)
        if splice not in REFLESS_SPLICES and "ref" not in names:
            log_with_context(
                logger,
                "warning",
                "Form tag without ref",
                tag=tag,
                template=parser.name,
                template_lineno=lineno,
                event_type="splice_missing_ref",
            )
            parser.fail(f"{tag}: missing ref", lineno)

        variable = self.environment.form_splices_view_variable
        call = self.call_method(
            "_render_tag",
            [nodes.Const(tag), nodes.Const(splice), nodes.Dict(pairs), nodes.Name(variable, "load")],
            lineno=lineno,
        )

        if splice in BLOCK_SPLICES:
            body = parser.parse_statements((f"name:end{tag}",), drop_needle=True)
            return nodes.CallBlock(call, [nodes.Name(variable, "param")], [], body).set_lineno(lineno)
        return nodes.Output([call]).set_lineno(lineno)

    def _parse_attributes(self, parser: Parser, tag: str) -> tuple[list[str], list[nodes.Pair]]:
        names: list[str] = []
        pairs: list[nodes.Pair] = []
        while parser.stream.current.type != "block_end":
            if pairs:
                parser.stream.skip_if("comma")
            key = parser.stream.current
            if key.type not in ("name", "string"):
                parser.fail(f"{tag}: expected an attribute name, got {key.value!r}", key.lineno)
            next(parser.stream)
            parser.stream.expect("assign")
            value = parser.parse_expression()
            names.append(key.value)
            pairs.append(nodes.Pair(nodes.Const(key.value), value, lineno=key.lineno))
        return names, pairs

    def _render_tag(
        self,
        tag: str,
        splice: str,
        attrs: dict[str, Any],
        view: View | Undefined,
        caller: Any = None,
    ) -> Markup:
        if self.environment.is_async:
            raise AsyncEnvironmentException(tag)
        if isinstance(view, Undefined):
            raise ViewNotBoundException(tag, self.environment.form_splices_view_variable)
        node = TagNode(tag, _attribute_values(attrs), body=caller)
        return render_nodes(expand(view, splice, node, self.environment.form_splices_method))


def _attribute_values(attrs: dict[str, Any]) -> list[tuple[str, str]]:
    # Markup is already escaped; str() would let Element escape it again
    return [
        (name, value if isinstance(value, Markup) else str(value))
        for name, value in attrs.items()
        if value is not None and not isinstance(value, Undefined)
    ]


def bind_form_splices(env: Environment, settings: Settings | None = None) -> Environment:
    """Install the form tags on a Jinja2 environment.

    Templates compiled by the environment afterwards can use every df_* tag.

    Args:
        env: Environment to extend (e.g. Jinja2Templates(...).env)
        settings: Settings providing the form method and view variable

    Returns:
        The same environment, for chaining

    Raises:
        AsyncEnvironmentException: If the environment renders asynchronously
    """
    settings = settings or get_settings()
    if env.is_async:
        raise AsyncEnvironmentException()
    env.add_extension(FormExtension)
    env.form_splices_method = settings.form_method  # type: ignore[attr-defined]
    env.form_splices_view_variable = settings.view_variable  # type: ignore[attr-defined]
    log_with_context(
        logger,
        "info",
        "Form splices bound",
        tags=sorted(FormExtension.tags),
        form_method=settings.form_method,
        view_variable=settings.view_variable,
        event_type="splices_bound",
    )
    return env


def form_context(view: View, settings: Settings | None = None) -> dict[str, View]:
    """Template context that binds a view for the form tags."""
    settings = settings or get_settings()
    return {settings.view_variable: view}
