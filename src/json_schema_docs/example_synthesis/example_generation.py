"""Example payload generation use cases."""

from __future__ import annotations

from json_schema_docs.schema_model import SchemaDocument, parse_document
from json_schema_docs.schema_model.schema_values import JSONValue
from json_schema_docs.shape_resolution import ShapeResolver

from .annotation import AnnotatedNode, ExampleAnnotator
from .example_encoding import encode_example_json, encode_example_yaml
from .synthesis_modes import (
    ExampleFormat,
    ExampleMode,
    normalize_example_format,
    normalize_example_mode,
)
from .value_synthesizer import ExampleSynthesizer


def synthesize_example(document: SchemaDocument, mode: ExampleMode | str) -> JSONValue:
    """Return the example value tree for the document root."""
    synthesizer = ExampleSynthesizer(document, normalize_example_mode(mode))
    return synthesizer.synthesize(document.root)


def annotate_example(document: SchemaDocument, value: JSONValue) -> AnnotatedNode:
    """Attach title/description comments to an example value tree."""
    return ExampleAnnotator(ShapeResolver(document)).annotate(value, document.root)


def example_document(
    document: SchemaDocument, mode: ExampleMode | str, example_format: ExampleFormat | str
) -> str:
    """Encode the document example in the requested format."""
    resolved_format = normalize_example_format(example_format)
    value = synthesize_example(document, mode)
    if resolved_format is ExampleFormat.JSON:
        return encode_example_json(value)
    return encode_example_yaml(annotate_example(document, value))


def generate_example_value(schema_text: str | bytes, mode: ExampleMode | str) -> JSONValue:
    """Parse schema text and return its example value tree."""
    resolved_mode = normalize_example_mode(mode)
    return synthesize_example(parse_document(schema_text), resolved_mode)


def generate_example_json(schema_text: str | bytes, mode: ExampleMode | str) -> str:
    return encode_example_json(generate_example_value(schema_text, mode))


def generate_example_yaml(schema_text: str | bytes, mode: ExampleMode | str) -> str:
    resolved_mode = normalize_example_mode(mode)
    document = parse_document(schema_text)
    value = synthesize_example(document, resolved_mode)
    return encode_example_yaml(annotate_example(document, value))


def generate_example(
    schema_text: str | bytes, mode: ExampleMode | str, example_format: ExampleFormat | str
) -> str:
    """Parse schema text and encode its example in the requested format."""
    resolved_format = normalize_example_format(example_format)
    resolved_mode = normalize_example_mode(mode)
    return example_document(parse_document(schema_text), resolved_mode, resolved_format)
