"""Example synthesis exports."""

from .annotation import (
    AnnotatedEntry,
    AnnotatedNode,
    ExampleAnnotator,
    NodeKind,
    normalize_comment,
    schema_key_comment,
)
from .example_encoding import encode_example_json, encode_example_yaml
from .example_generation import (
    annotate_example,
    example_document,
    generate_example,
    generate_example_json,
    generate_example_value,
    generate_example_yaml,
    synthesize_example,
)
from .synthesis_modes import (
    ExampleEncodeError,
    ExampleError,
    ExampleFormat,
    ExampleMode,
    UnknownExampleFormatError,
    UnknownExampleModeError,
    normalize_example_format,
    normalize_example_mode,
)
from .value_synthesizer import STRING_PLACEHOLDER, ExampleSynthesizer

__all__ = [
    "AnnotatedEntry",
    "AnnotatedNode",
    "ExampleAnnotator",
    "ExampleEncodeError",
    "ExampleError",
    "ExampleFormat",
    "ExampleMode",
    "ExampleSynthesizer",
    "NodeKind",
    "STRING_PLACEHOLDER",
    "UnknownExampleFormatError",
    "UnknownExampleModeError",
    "annotate_example",
    "encode_example_json",
    "encode_example_yaml",
    "example_document",
    "generate_example",
    "generate_example_json",
    "generate_example_value",
    "generate_example_yaml",
    "normalize_comment",
    "normalize_example_format",
    "normalize_example_mode",
    "schema_key_comment",
    "synthesize_example",
]
