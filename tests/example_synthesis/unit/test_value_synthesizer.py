"""Example value synthesis tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from json_schema_docs.example_synthesis import ExampleMode, synthesize_example
from json_schema_docs.schema_model import document_from_raw, parse_document


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _sample(name: str):
    return parse_document((_project_root() / "samples" / name).read_text(encoding="utf-8"))


def _synthesize(raw, mode: ExampleMode = ExampleMode.ALL):
    return synthesize_example(document_from_raw(raw), mode)


def test_all_mode_emits_every_declared_property() -> None:
    value = synthesize_example(_sample("service_config.schema.json"), ExampleMode.ALL)

    assert value == {
        "name": "demo",
        "settings": {"enabled": True, "note": "<string>"},
        "count": 0,
        "features": ["<string>"],
        "mode": "safe",
    }
    assert list(value) == ["name", "settings", "count", "features", "mode"]


def test_required_mode_emits_only_required_properties() -> None:
    value = synthesize_example(_sample("service_config.schema.json"), "required")

    assert value == {"name": "demo", "settings": {"enabled": True}}


def test_required_mode_uses_all_of_merged_required_list() -> None:
    value = _synthesize(
        {
            "$defs": {"Base": {"required": ["id"], "properties": {"id": {"type": "integer"}}}},
            "type": "object",
            "allOf": [{"$ref": "#/$defs/Base"}],
            "properties": {"optional": {"type": "string"}},
        },
        ExampleMode.REQUIRED,
    )

    assert value == {"id": 0}


def test_scalar_precedence_prefers_explicit_then_const_then_enum() -> None:
    value = _synthesize(
        {
            "type": "object",
            "properties": {
                "a_default": {"type": "string", "default": "d", "const": "c"},
                "b_examples": {"type": "integer", "examples": [7, 8]},
                "c_example": {"type": "string", "example": "legacy"},
                "d_const": {"const": {"fixed": True}, "enum": ["x"]},
                "e_enum": {"enum": ["first", "second"]},
                "f_number": {"type": "number"},
                "g_null": {"type": ["null"]},
                "h_unknown": {},
                "i_boolean_schema": True,
            },
        }
    )

    assert value == {
        "a_default": "d",
        "b_examples": 7,
        "c_example": "legacy",
        "d_const": {"fixed": True},
        "e_enum": "first",
        "f_number": 0,
        "g_null": None,
        "h_unknown": None,
        "i_boolean_schema": None,
    }


def test_explicit_values_are_deep_copied() -> None:
    raw = {"type": "object", "properties": {"tags": {"default": {"list": [1, 2]}}}}
    document = document_from_raw(raw)

    value = synthesize_example(document, ExampleMode.ALL)
    value["tags"]["list"].append(3)

    assert raw["properties"]["tags"]["default"] == {"list": [1, 2]}


def test_arrays_use_explicit_list_then_prefix_items_then_items() -> None:
    value = _synthesize(
        {
            "type": "object",
            "properties": {
                "explicit": {"type": "array", "default": [1, 2], "items": {"type": "string"}},
                "tuple": {"prefixItems": [{"type": "integer"}, {"type": "boolean"}, 3]},
                "items": {"type": "array", "items": {"type": "string"}},
                "bare": {"type": "array"},
            },
        }
    )

    assert value == {
        "bare": [],
        "explicit": [1, 2],
        "items": ["<string>"],
        "tuple": [0, False, None],
    }


def test_composition_fallback_uses_first_usable_branch() -> None:
    value = _synthesize(
        {
            "type": "object",
            "properties": {
                "choice": {"oneOf": [3, {"type": "integer"}], "anyOf": [{"type": "string"}]},
                "any": {"anyOf": [{"const": "picked"}]},
            },
        }
    )

    assert value == {"any": "picked", "choice": 0}


def test_self_reference_resolves_to_null_branch() -> None:
    value = synthesize_example(_sample("tree_node.schema.json"), ExampleMode.REQUIRED)

    assert value == {"label": "<string>", "children": [None], "parent": None}


def test_local_definition_reference_in_required_mode() -> None:
    document = parse_document(
        json.dumps(
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
    )

    assert synthesize_example(document, ExampleMode.REQUIRED) == {"name": "<string>"}


def test_dangling_reference_uses_sibling_keywords() -> None:
    value = _synthesize({"$ref": "#/$defs/Missing", "type": "boolean"})

    assert value is False


@pytest.mark.parametrize("raw", [True, False])
def test_boolean_root_synthesizes_null(raw: bool) -> None:
    assert _synthesize(raw) is None
