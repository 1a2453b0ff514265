"""Markdown template resolution and execution."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateSyntaxError,
)

from json_schema_docs.documentation_view.view_models import RenderError, RenderView

from .text_formatting import (
    ensure_trailing_newline,
    escape_inline,
    heading_anchor,
    json_inline,
    normalize_markdown_output,
)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_BUILTIN_TEMPLATE_FILES = {
    "list": "list.md.j2",
    "table": "table.md.j2",
}


class UnknownTemplateError(RenderError):
    """Raised when a built-in template name is not registered."""


class TemplateParseError(RenderError):
    """Raised when template text is not valid Jinja2."""


class TemplateExecutionError(RenderError):
    """Raised when a template fails while rendering the view."""


def _table_cell(value: object) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def _build_environment() -> Environment:
    environment = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    environment.filters["json_inline"] = lambda value: escape_inline(json_inline(value))
    environment.filters["heading_anchor"] = heading_anchor
    environment.filters["table_cell"] = _table_cell
    return environment


_TEMPLATE_ENV = _build_environment()


def builtin_template_names() -> list[str]:
    return sorted(_BUILTIN_TEMPLATE_FILES)


def normalize_template_name(name: str) -> str:
    return name.strip().lower()


def builtin_template(name: str) -> str:
    """Return the source text of one built-in template."""
    normalized = normalize_template_name(name)
    filename = _BUILTIN_TEMPLATE_FILES.get(normalized)
    if filename is None:
        raise UnknownTemplateError(f"unknown built-in template {normalized!r}")
    return (TEMPLATE_DIR / filename).read_text(encoding="utf-8")


def resolve_template(template_name: str = "", template_text: str = "") -> Template:
    """Parse custom template text, or load a built-in template by name."""
    if template_text.strip():
        try:
            return _TEMPLATE_ENV.from_string(template_text)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(f"parse custom template: {exc}") from exc

    normalized = normalize_template_name(template_name) or "list"
    filename = _BUILTIN_TEMPLATE_FILES.get(normalized)
    if filename is None:
        raise UnknownTemplateError(f"unknown built-in template {normalized!r}")
    try:
        return _TEMPLATE_ENV.get_template(filename)
    except TemplateSyntaxError as exc:
        raise TemplateParseError(f"parse built-in template {normalized!r}: {exc}") from exc


def render_view(view: RenderView, template: Template) -> str:
    """Execute *template* against *view* and normalize the markdown output."""
    context = {field.name: getattr(view, field.name) for field in fields(view)}
    try:
        rendered = template.render(view=view, **context)
    except TemplateError as exc:
        raise TemplateExecutionError(f"execute markdown template: {exc}") from exc
    return ensure_trailing_newline(normalize_markdown_output(rendered))
