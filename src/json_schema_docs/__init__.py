"""Markdown reference documentation and example payloads for JSON Schema."""

import logging

from json_schema_docs.configuration import RenderOptions
from json_schema_docs.definition_graph import (
    build_definition_paths,
    definition_order,
    property_order,
)
from json_schema_docs.documentation_view import build_render_view
from json_schema_docs.example_synthesis import (
    ExampleFormat,
    ExampleMode,
    generate_example,
    generate_example_json,
    generate_example_yaml,
)
from json_schema_docs.markdown_rendering import builtin_template, builtin_template_names
from json_schema_docs.render_execution import render, render_file
from json_schema_docs.schema_model import detect_draft, parse_document

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ExampleFormat",
    "ExampleMode",
    "RenderOptions",
    "build_definition_paths",
    "build_render_view",
    "builtin_template",
    "builtin_template_names",
    "definition_order",
    "detect_draft",
    "generate_example",
    "generate_example_json",
    "generate_example_yaml",
    "parse_document",
    "property_order",
    "render",
    "render_file",
]
