"""Title/description comments attached to a synthesized example."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from json_schema_docs.schema_model.schema_values import JSONValue, SchemaValue, as_list
from json_schema_docs.shape_resolution import ShapeResolver


class NodeKind(str, Enum):
    """Structural kind of an annotated example node."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


@dataclass(frozen=True)
class AnnotatedEntry:
    """One mapping key with its comment and value node."""

    key: str
    comment: str
    node: AnnotatedNode


@dataclass(frozen=True)
class AnnotatedNode:
    """Example value tree carrying per-key comments."""

    kind: NodeKind
    value: JSONValue = None
    entries: tuple[AnnotatedEntry, ...] = field(default_factory=tuple)
    items: tuple[AnnotatedNode, ...] = field(default_factory=tuple)

    @property
    def is_empty_collection(self) -> bool:
        if self.kind is NodeKind.MAPPING:
            return not self.entries
        if self.kind is NodeKind.SEQUENCE:
            return not self.items
        return False


class ExampleAnnotator:
    """Walks an example value and its schema in lock-step."""

    def __init__(self, resolver: ShapeResolver) -> None:
        self._resolver = resolver

    def annotate(self, value: JSONValue, schema: SchemaValue) -> AnnotatedNode:
        with self._resolver.expanded(schema) as resolved:
            if isinstance(value, Mapping):
                properties, _ = self._resolver.merge_shape(resolved)
                entries = []
                for key, item in value.items():
                    prop = properties.get(key, SchemaValue())
                    entries.append(
                        AnnotatedEntry(
                            key=str(key),
                            comment=schema_key_comment(prop),
                            node=self.annotate(item, prop),
                        )
                    )
                return AnnotatedNode(kind=NodeKind.MAPPING, entries=tuple(entries))

            if isinstance(value, list):
                item_schema = sequence_item_schema(resolved)
                return AnnotatedNode(
                    kind=NodeKind.SEQUENCE,
                    items=tuple(self.annotate(item, item_schema) for item in value),
                )

            return AnnotatedNode(kind=NodeKind.SCALAR, value=value)


def sequence_item_schema(schema: SchemaValue) -> SchemaValue:
    """Return ``items``, else the first schema entry of ``prefixItems``."""
    if not schema.is_object:
        return SchemaValue()
    items = SchemaValue.from_raw(schema.keyword("items"))
    if not items.is_zero:
        return items
    for raw in as_list(schema.keyword("prefixItems")):
        candidate = SchemaValue.from_raw(raw)
        if not candidate.is_zero:
            return candidate
    return SchemaValue()


def schema_key_comment(schema: SchemaValue) -> str:
    """Build a key comment from ``title`` and ``description``."""
    title = schema.title.strip()
    description = schema.description.strip()
    if not title and not description:
        return ""
    if not title or title == description:
        return normalize_comment(description or title)
    if not description:
        return normalize_comment(title)
    return normalize_comment(f"{title}\n\n{description}")


def normalize_comment(comment: str) -> str:
    """Drop blank lines, including leading and trailing ones."""
    lines = comment.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return "\n".join(line for line in lines if line.strip())
