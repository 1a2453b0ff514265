"""Schema-to-markdown rendering use case."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from json_schema_docs.configuration.render_settings import RenderOptions
from json_schema_docs.documentation_view import RenderError, build_render_view
from json_schema_docs.markdown_rendering import render_view, resolve_template
from json_schema_docs.schema_model import SchemaDocument, parse_document

_LOGGER = logging.getLogger(__name__)


class ReadSchemaFileError(RenderError):
    """Raised when the schema file cannot be read."""


def render(schema_text: str | bytes, options: RenderOptions | None = None) -> str:
    """Convert schema text into a deterministic CommonMark document."""
    return render_document(parse_document(schema_text), options)


def render_file(path: Path | str, options: RenderOptions | None = None) -> str:
    """Read a schema file and render it; the path becomes the source marker."""
    options = options or RenderOptions()
    schema_path = Path(path)
    try:
        schema_bytes = schema_path.read_bytes()
    except OSError as exc:
        raise ReadSchemaFileError(f"read schema file {str(schema_path)!r}: {exc}") from exc
    if not options.source_path.strip():
        options = dataclasses.replace(options, source_path=str(path))
    return render(schema_bytes, options)


def render_document(document: SchemaDocument, options: RenderOptions | None = None) -> str:
    """Render an already parsed schema document."""
    options = options or RenderOptions()
    view = build_render_view(document, options)
    template = resolve_template(options.template_name, options.template_text)
    _LOGGER.debug(
        "rendering %d definitions from %s", len(view.definitions), view.source_schema
    )
    return render_view(view, template)
