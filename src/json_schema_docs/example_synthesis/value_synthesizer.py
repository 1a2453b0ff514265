"""Representative value synthesis from schema nodes."""

from __future__ import annotations

from typing import Any

from json_schema_docs.definition_graph.ordering import property_order, required_property_order
from json_schema_docs.schema_model.schema_values import (
    JSONValue,
    SchemaDocument,
    SchemaValue,
    as_list,
    clone_json_value,
)
from json_schema_docs.shape_resolution import ShapeResolver

from .synthesis_modes import ExampleMode

STRING_PLACEHOLDER = "<string>"

SCALAR_PLACEHOLDERS: dict[str, JSONValue] = {
    "string": STRING_PLACEHOLDER,
    "number": 0,
    "integer": 0,
    "boolean": False,
    "null": None,
}

_MISSING: Any = object()


class ExampleSynthesizer:
    """Builds one example value tree for a schema document."""

    def __init__(
        self,
        document: SchemaDocument,
        mode: ExampleMode,
        resolver: ShapeResolver | None = None,
    ) -> None:
        self._mode = mode
        self._resolver = resolver if resolver is not None else ShapeResolver(document)

    def synthesize(self, node: SchemaValue) -> JSONValue:
        if not node.is_object:
            return None
        if node.ref:
            with self._resolver.expanded(node) as resolved:
                return self.synthesize(resolved)
        return self._from_object(node)

    def _from_object(self, node: SchemaValue) -> JSONValue:
        schema_type = node.type_name
        properties, required = self._resolver.merge_shape(node)

        if schema_type == "object" or properties or required:
            return self._object_from_shape(properties, required)
        if schema_type == "array" or _has_array_shape(node):
            return self._array_from_object(node)

        for candidate in (explicit_value(node), const_value(node), enum_value(node)):
            if candidate is not _MISSING:
                return clone_json_value(candidate)

        composed = self._composition_fallback(node)
        if composed is not _MISSING:
            return composed
        return SCALAR_PLACEHOLDERS.get(schema_type)

    def _object_from_shape(
        self, properties: dict[str, SchemaValue], required: list[str]
    ) -> dict[str, JSONValue]:
        if self._mode is ExampleMode.REQUIRED:
            order = required_property_order(required, properties)
        else:
            order = property_order(required, properties)
        return {name: self.synthesize(properties[name]) for name in order}

    def _array_from_object(self, node: SchemaValue) -> list[JSONValue]:
        for candidate in (explicit_value(node), const_value(node), enum_value(node)):
            if isinstance(candidate, list):
                return clone_json_value(candidate)

        prefix_items = as_list(node.keyword("prefixItems"))
        if prefix_items:
            return [self.synthesize(SchemaValue.from_raw(raw)) for raw in prefix_items]

        items = SchemaValue.from_raw(node.keyword("items"))
        if not items.is_zero:
            return [self.synthesize(items)]
        return []

    def _composition_fallback(self, node: SchemaValue) -> JSONValue:
        for keyword in ("oneOf", "anyOf", "allOf"):
            for raw in as_list(node.keyword(keyword)):
                branch = SchemaValue.from_raw(raw)
                if branch.is_zero:
                    continue
                return self.synthesize(branch)
        return _MISSING


def explicit_value(node: SchemaValue) -> JSONValue:
    """Return ``default``, else the first of ``examples``, else ``example``."""
    if node.has_keyword("default"):
        return node.keyword("default")
    examples = as_list(node.keyword("examples"))
    if examples:
        return examples[0]
    if node.has_keyword("example"):
        return node.keyword("example")
    return _MISSING


def const_value(node: SchemaValue) -> JSONValue:
    return node.keyword("const") if node.has_keyword("const") else _MISSING


def enum_value(node: SchemaValue) -> JSONValue:
    values = as_list(node.keyword("enum"))
    return values[0] if values else _MISSING


def _has_array_shape(node: SchemaValue) -> bool:
    if not SchemaValue.from_raw(node.keyword("items")).is_zero:
        return True
    return bool(as_list(node.keyword("prefixItems")))
