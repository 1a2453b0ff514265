"""Edge extraction from one definition's keyword surface."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from json_schema_docs.schema_model.schema_values import JSONValue, SchemaValue

from .graph_models import DefinitionEdge
from .ordering import definition_name_from_ref

ARRAY_SEGMENT = "[]"

_COMPOSITION_KEYWORDS = ("allOf", "anyOf", "oneOf")
_PASSTHROUGH_KEYWORDS = ("if", "then", "else", "not", "contentSchema")
_ITEM_KEYWORDS = ("items", "prefixItems", "contains", "additionalItems", "unevaluatedItems")
_MAP_VALUE_KEYWORDS = ("additionalProperties", "unevaluatedProperties")
_NAMED_CHILD_KEYWORDS = ("properties", "patternProperties")


def join_path(base: str, segment: str) -> str:
    """Join access path segments with a dot, keeping an empty root prefix."""
    base = base.strip()
    segment = segment.strip()
    if not base:
        return segment
    if not segment:
        return base
    return f"{base}.{segment}"


def definition_edges(node: SchemaValue) -> list[DefinitionEdge]:
    """Return unique edges of *node*, sorted by ``(target, path)``."""
    edges: set[DefinitionEdge] = set()
    properties = node.properties
    for name in sorted(properties):
        _collect(properties[name], name, edges)
    return sorted(edges)


def _collect(schema: SchemaValue, path: str, edges: set[DefinitionEdge]) -> None:
    if schema.keywords is None:
        return

    target = definition_name_from_ref(schema.ref)
    if target and path.strip():
        edges.add(DefinitionEdge(target=target.strip(), path=path.strip()))

    for keyword in _COMPOSITION_KEYWORDS:
        _collect_any(schema.keyword(keyword), path, edges)
    for keyword in _PASSTHROUGH_KEYWORDS:
        _collect_any(schema.keyword(keyword), path, edges)
    for keyword in (*_ITEM_KEYWORDS, *_MAP_VALUE_KEYWORDS):
        _collect_any(schema.keyword(keyword), join_path(path, ARRAY_SEGMENT), edges)
    for keyword in _NAMED_CHILD_KEYWORDS:
        nested = schema.keyword(keyword)
        if not isinstance(nested, Mapping):
            continue
        for key in sorted(nested):
            _collect(SchemaValue.from_raw(nested[key]), join_path(path, key), edges)


def _collect_any(raw: JSONValue, path: str, edges: set[DefinitionEdge]) -> None:
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        for item in raw:
            _collect_any(item, path, edges)
        return
    _collect(SchemaValue.from_raw(raw), path, edges)
