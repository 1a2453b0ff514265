"""Markdown rendering exports."""

from .template_rendering import (
    TemplateExecutionError,
    TemplateParseError,
    UnknownTemplateError,
    builtin_template,
    builtin_template_names,
    render_view,
    resolve_template,
)
from .text_formatting import format_description, heading_anchor, wrap_paragraph

__all__ = [
    "TemplateExecutionError",
    "TemplateParseError",
    "UnknownTemplateError",
    "builtin_template",
    "builtin_template_names",
    "format_description",
    "heading_anchor",
    "render_view",
    "resolve_template",
    "wrap_paragraph",
]
