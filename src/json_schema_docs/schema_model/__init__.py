"""Schema model exports."""

from .document_loading import (
    SchemaDecodeError,
    SchemaError,
    SchemaRootTypeError,
    document_from_raw,
    parse_document,
)
from .draft_detection import SUPPORTED_DRAFTS, detect_draft
from .pointer_resolution import resolve_pointer
from .schema_values import DraftInfo, SchemaDocument, SchemaValue, clone_json_value

__all__ = [
    "DraftInfo",
    "SchemaDocument",
    "SchemaValue",
    "SchemaError",
    "SchemaDecodeError",
    "SchemaRootTypeError",
    "SUPPORTED_DRAFTS",
    "clone_json_value",
    "detect_draft",
    "document_from_raw",
    "parse_document",
    "resolve_pointer",
]
