"""Example generation use case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from json_schema_docs.example_synthesis import (
    ExampleFormat,
    ExampleMode,
    UnknownExampleFormatError,
    UnknownExampleModeError,
    generate_example,
    generate_example_json,
    generate_example_value,
    generate_example_yaml,
    normalize_example_format,
    normalize_example_mode,
)
from json_schema_docs.schema_model import SchemaDecodeError


def _sample_text(name: str) -> str:
    return (Path(__file__).resolve().parents[3] / "samples" / name).read_text(encoding="utf-8")


def test_generate_json_in_required_mode_matches_expected_text() -> None:
    schema = json.dumps(
        {
            "$ref": "#/$defs/Config",
            "$defs": {
                "Config": {
                    "type": "object",
                    "required": ["name"],
                    "properties": {"name": {"type": "string"}},
                }
            },
        }
    )

    assert generate_example_json(schema, ExampleMode.REQUIRED) == '{\n  "name": "<string>"\n}\n'


def test_generate_json_in_all_mode_includes_optional_values() -> None:
    encoded = generate_example_json(_sample_text("service_config.schema.json"), "all")

    assert '"mode": "safe"' in encoded
    assert '"note": "<string>"' in encoded
    assert json.loads(encoded)["features"] == ["<string>"]


def test_generate_yaml_in_required_mode_includes_schema_comments() -> None:
    encoded = generate_example_yaml(_sample_text("service_config.schema.json"), "required")

    assert encoded == (
        "# Service Name\n"
        "# Human-readable service name.\n"
        "name: demo\n"
        "settings:\n"
        "  # Enabled\n"
        "  # Enables processing pipeline.\n"
        "  enabled: true\n"
    )
    assert "mode:" not in encoded
    assert "count:" not in encoded


def test_generate_example_dispatches_on_format() -> None:
    schema = _sample_text("tree_node.schema.json")

    assert generate_example(schema, "required", ExampleFormat.YAML) == (
        "# Label\nlabel: <string>\nchildren:\n  - null\nparent: null\n"
    )
    assert json.loads(generate_example(schema, "required", "JSON")) == {
        "label": "<string>",
        "children": [None],
        "parent": None,
    }


def test_generate_example_value_returns_plain_tree() -> None:
    value = generate_example_value('{"type": "integer", "enum": [3, 4]}', ExampleMode.ALL)

    assert value == 3


def test_mode_and_format_strings_are_trimmed_and_case_insensitive() -> None:
    assert normalize_example_mode("  Required ") is ExampleMode.REQUIRED
    assert normalize_example_mode(ExampleMode.ALL) is ExampleMode.ALL
    assert normalize_example_format(" YAML") is ExampleFormat.YAML


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(UnknownExampleModeError, match="broken"):
        generate_example_json(_sample_text("service_config.schema.json"), "broken")


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(UnknownExampleFormatError, match="toml"):
        generate_example("{}", ExampleMode.ALL, "toml")


def test_invalid_schema_text_raises_schema_error() -> None:
    with pytest.raises(SchemaDecodeError):
        generate_example_yaml("not json", ExampleMode.ALL)


def test_unresolvable_index_reference_degrades_to_sibling_keywords() -> None:
    schema = json.dumps(
        {
            "type": "object",
            "properties": {"x": {"$ref": "#/$defs/T/prefixItems/²", "type": "string"}},
            "$defs": {"T": {"prefixItems": [{"type": "integer"}]}},
        }
    )

    assert json.loads(generate_example_json(schema, ExampleMode.ALL)) == {"x": "<string>"}
