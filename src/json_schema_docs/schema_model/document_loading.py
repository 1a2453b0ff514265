"""Schema document parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping

from .draft_detection import detect_draft
from .schema_values import SchemaDocument, SchemaValue, as_string, schema_map


class SchemaError(Exception):
    """Base class for structural schema document failures."""


class SchemaDecodeError(SchemaError):
    """Raised when schema text is not valid JSON."""


class SchemaRootTypeError(SchemaError):
    """Raised when the schema root is neither an object nor a boolean."""


def parse_document(schema_text: str | bytes) -> SchemaDocument:
    """Decode schema text into a :class:`SchemaDocument`."""
    try:
        raw = json.loads(schema_text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaDecodeError(f"decode schema: {exc}") from exc
    return document_from_raw(raw)


def document_from_raw(raw: object) -> SchemaDocument:
    """Build a :class:`SchemaDocument` from an already decoded JSON tree."""
    root = SchemaValue.from_raw(raw)
    if root.is_zero:
        raise SchemaRootTypeError(
            f"schema root must be object or boolean, got {type(raw).__name__}"
        )

    if not isinstance(raw, Mapping):
        return SchemaDocument(
            schema_uri="",
            schema_id="",
            root_ref="",
            definitions={},
            root=root,
            raw=raw,
        )

    schema_uri = as_string(raw.get("$schema")).strip()
    schema_id = as_string(raw.get("$id")).strip() or as_string(raw.get("id")).strip()
    definitions = schema_map(raw.get("definitions"))
    definitions.update(schema_map(raw.get("$defs")))

    return SchemaDocument(
        schema_uri=schema_uri,
        schema_id=schema_id,
        root_ref=as_string(raw.get("$ref")).strip(),
        definitions=definitions,
        root=root,
        raw=raw,
        draft=detect_draft(schema_uri),
    )
