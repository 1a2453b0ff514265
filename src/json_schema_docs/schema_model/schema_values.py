"""Schema value model entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

JSONValue = Any


@dataclass(frozen=True)
class SchemaValue:
    """One JSON Schema node: a boolean schema or an object schema.

    A value with neither ``flag`` nor ``keywords`` set is the invalid/missing
    node. It is skipped everywhere instead of raising.
    """

    flag: bool | None = None
    keywords: Mapping[str, JSONValue] | None = None

    @staticmethod
    def from_raw(raw: JSONValue) -> SchemaValue:
        """Classify a decoded JSON value as boolean, object or invalid schema."""
        if isinstance(raw, bool):
            return SchemaValue(flag=raw)
        if isinstance(raw, Mapping):
            return SchemaValue(keywords=raw)
        return SchemaValue()

    @property
    def is_boolean(self) -> bool:
        return self.flag is not None

    @property
    def is_object(self) -> bool:
        return self.keywords is not None

    @property
    def is_zero(self) -> bool:
        """Return True for the invalid/missing node."""
        return self.flag is None and self.keywords is None

    def keyword(self, name: str, default: JSONValue = None) -> JSONValue:
        if self.keywords is None:
            return default
        return self.keywords.get(name, default)

    def has_keyword(self, name: str) -> bool:
        return self.keywords is not None and name in self.keywords

    @property
    def properties(self) -> dict[str, SchemaValue]:
        return schema_map(self.keyword("properties"))

    @property
    def required(self) -> list[str]:
        return string_list(self.keyword("required"))

    @property
    def description(self) -> str:
        return as_string(self.keyword("description"))

    @property
    def title(self) -> str:
        return as_string(self.keyword("title"))

    @property
    def ref(self) -> str:
        return as_string(self.keyword("$ref")).strip()

    @property
    def type_name(self) -> str:
        """Return the first non-null ``type`` entry, lower-cased."""
        if self.keywords is None or "type" not in self.keywords:
            return ""
        value = self.keywords["type"]
        if isinstance(value, str):
            return value.lower()
        entries = [item.lower() for item in as_list(value) if isinstance(item, str)]
        for entry in entries:
            if entry and entry != "null":
                return entry
        return "null" if "null" in entries else ""


@dataclass(frozen=True)
class DraftInfo:
    """Detected JSON Schema draft for a ``$schema`` value."""

    raw: str
    canonical: str
    supported: bool


@dataclass(frozen=True)
class SchemaDocument:
    """Decoded schema document with its raw tree kept for pointer resolution."""

    schema_uri: str
    schema_id: str
    root_ref: str
    definitions: Mapping[str, SchemaValue]
    root: SchemaValue
    raw: JSONValue
    draft: DraftInfo = field(default_factory=lambda: DraftInfo("", "", False))


def as_string(value: JSONValue) -> str:
    return value if isinstance(value, str) else ""


def as_list(value: JSONValue) -> list[JSONValue]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return []


def as_bool(value: JSONValue) -> bool | None:
    return value if isinstance(value, bool) else None


def string_list(value: JSONValue) -> list[str]:
    """Return string entries of a JSON array, keeping order and duplicates."""
    return [item for item in as_list(value) if isinstance(item, str)]


def schema_map(value: JSONValue) -> dict[str, SchemaValue]:
    """Return schema-valued entries of a JSON object keyword."""
    if not isinstance(value, Mapping):
        return {}
    out: dict[str, SchemaValue] = {}
    for key, raw in value.items():
        schema = SchemaValue.from_raw(raw)
        if not schema.is_zero:
            out[str(key)] = schema
    return out


def clone_json_value(value: JSONValue) -> JSONValue:
    """Deep-copy mappings and sequences taken from schema data."""
    if isinstance(value, Mapping):
        return {key: clone_json_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [clone_json_value(item) for item in value]
    return value
