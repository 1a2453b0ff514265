"""Reference expansion and allOf shape merging tests."""

from __future__ import annotations

from json_schema_docs.schema_model import SchemaValue, document_from_raw
from json_schema_docs.shape_resolution import (
    ShapeResolver,
    merge_keywords,
    merge_properties,
    merge_required,
)


def _resolver(raw: dict) -> ShapeResolver:
    return ShapeResolver(document_from_raw(raw))


def test_expanded_overlays_sibling_keywords_on_target() -> None:
    resolver = _resolver(
        {"$defs": {"Name": {"type": "string", "title": "Name", "description": "Base"}}}
    )
    node = SchemaValue.from_raw({"$ref": "#/$defs/Name", "description": "Override"})

    with resolver.expanded(node) as resolved:
        assert resolved.keyword("type") == "string"
        assert resolved.description == "Override"
        assert resolved.title == "Name"
        assert not resolved.has_keyword("$ref")
        assert "#/$defs/Name" in resolver.active_refs

    assert "#/$defs/Name" not in resolver.active_refs


def test_expanded_strips_dangling_reference() -> None:
    resolver = _resolver({"$defs": {}})
    node = SchemaValue.from_raw({"$ref": "#/$defs/Missing", "type": "integer"})

    with resolver.expanded(node) as resolved:
        assert resolved.keywords == {"type": "integer"}


def test_expanded_treats_non_object_target_as_dangling() -> None:
    resolver = _resolver({"$defs": {"Flag": True}})
    node = SchemaValue.from_raw({"$ref": "#/$defs/Flag"})

    with resolver.expanded(node) as resolved:
        assert resolved.keywords == {}


def test_expanded_yields_zero_node_for_active_reference() -> None:
    resolver = _resolver({"$defs": {"A": {"type": "object"}}})
    node = SchemaValue.from_raw({"$ref": "#/$defs/A"})

    with resolver.expanded(node):
        with resolver.expanded(node) as nested:
            assert nested.is_zero
        assert "#/$defs/A" in resolver.active_refs


def test_merge_shape_flattens_all_of_through_references() -> None:
    resolver = _resolver(
        {
            "$defs": {
                "Base": {
                    "required": ["id", "name"],
                    "properties": {
                        "id": {"type": "integer"},
                        "name": {"type": "integer", "title": "base name"},
                    },
                },
            }
        }
    )
    node = SchemaValue.from_raw(
        {
            "required": ["name"],
            "properties": {"name": {"type": "string"}},
            "allOf": [{"$ref": "#/$defs/Base"}, True, {"required": ["extra", " "]}],
        }
    )

    properties, required = resolver.merge_shape(node)

    assert sorted(properties) == ["id", "name"]
    assert properties["name"].type_name == "string"
    assert required == ["name", "id", "extra"]


def test_merge_shape_terminates_on_self_referencing_all_of() -> None:
    resolver = _resolver(
        {
            "$defs": {
                "A": {
                    "properties": {"own": {"type": "string"}},
                    "allOf": [{"$ref": "#/$defs/A"}],
                }
            }
        }
    )

    properties, required = resolver.merge_shape(SchemaValue.from_raw({"$ref": "#/$defs/A"}))

    assert list(properties) == ["own"]
    assert required == []
    assert len(resolver.active_refs) == 0


def test_merge_shape_of_boolean_node_is_empty() -> None:
    resolver = _resolver({})

    assert resolver.merge_shape(SchemaValue.from_raw(True)) == ({}, [])


def test_merge_helpers_keep_first_seen_entries() -> None:
    left = {"a": SchemaValue.from_raw({"type": "string"})}
    right = {"a": SchemaValue.from_raw(True), "b": SchemaValue.from_raw(False)}

    merged = merge_properties(left, right)

    assert merged["a"].type_name == "string"
    assert merged["b"].flag is False
    assert merge_required(["a", "b"], ["b", "c", ""]) == ["a", "b", "c"]
    assert merge_keywords({"$ref": "#/x", "type": "a"}, {"$ref": "#/y", "title": "t"}) == {
        "$ref": "#/x",
        "type": "a",
        "title": "t",
    }
