"""Reference resolution and ``allOf`` shape merging.

Both operations recurse into each other (``allOf`` branches are usually
``$ref`` values and a resolved target may declare its own ``allOf``), so they
live on one :class:`ShapeResolver` that owns the active-reference set for a
single top-level call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from json_schema_docs.schema_model.pointer_resolution import resolve_pointer
from json_schema_docs.schema_model.schema_values import (
    JSONValue,
    SchemaDocument,
    SchemaValue,
    as_list,
)

from .reference_activation import ReferenceActivationSet

_LOGGER = logging.getLogger(__name__)

ObjectShape = tuple[dict[str, SchemaValue], list[str]]


class ShapeResolver:
    """Resolves local references and merges object shapes for one document."""

    def __init__(
        self, document: SchemaDocument, active_refs: ReferenceActivationSet | None = None
    ) -> None:
        self._document = document
        self.active_refs = active_refs if active_refs is not None else ReferenceActivationSet()

    def lookup(self, ref: str) -> SchemaValue:
        """Return the schema a local reference points at, or the zero node."""
        ref = ref.strip()
        if not ref.startswith("#"):
            return SchemaValue()
        raw, found = resolve_pointer(ref, self._document.raw)
        if not found:
            return SchemaValue()
        return SchemaValue.from_raw(raw)

    @contextmanager
    def expanded(self, node: SchemaValue) -> Iterator[SchemaValue]:
        """Yield *node* with its ``$ref`` expanded and sibling keywords overlaid.

        The reference stays active until the block exits. A dangling reference
        yields the node's own keywords without ``$ref``; a reference already
        active on the call path yields the zero node.
        """
        ref = node.ref if node.is_object else ""
        if not ref:
            yield node
            return

        keywords = node.keywords or {}
        target = self.lookup(ref)
        if target.keywords is None:
            _LOGGER.debug("unresolved reference %s", ref)
            yield SchemaValue(keywords=_without_ref(keywords))
            return

        if not self.active_refs.enter(ref):
            _LOGGER.debug("reference cycle at %s", ref)
            yield SchemaValue()
            return

        try:
            yield SchemaValue(keywords=merge_keywords(target.keywords, keywords))
        finally:
            self.active_refs.release(ref)

    def merge_shape(self, node: SchemaValue) -> ObjectShape:
        """Return merged ``(properties, required)`` for *node* and its ``allOf``."""
        if not node.is_object:
            return {}, []
        if node.ref:
            with self.expanded(node) as resolved:
                return self.merge_shape(resolved)

        properties = node.properties
        required = merge_required(node.required, [])
        for raw in as_list(node.keyword("allOf")):
            branch = SchemaValue.from_raw(raw)
            if not branch.is_object:
                continue
            nested_properties, nested_required = self.merge_shape(branch)
            properties = merge_properties(properties, nested_properties)
            required = merge_required(required, nested_required)
        return properties, required


def merge_keywords(
    base: Mapping[str, JSONValue], overlay: Mapping[str, JSONValue]
) -> dict[str, JSONValue]:
    """Overlay sibling keywords (except ``$ref``) onto a resolved target."""
    out = dict(base)
    for key, value in overlay.items():
        if key == "$ref":
            continue
        out[key] = value
    return out


def merge_properties(
    left: Mapping[str, SchemaValue], right: Mapping[str, SchemaValue]
) -> dict[str, SchemaValue]:
    """Merge property maps; names already present in *left* win."""
    out = dict(left)
    for key, value in right.items():
        out.setdefault(key, value)
    return out


def merge_required(left: list[str], right: list[str]) -> list[str]:
    """Concatenate required lists, de-duplicated in first-seen order."""
    out: list[str] = []
    seen: set[str] = set()
    for key in [*left, *right]:
        key = key.strip()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(key)
    return out


def _without_ref(keywords: Mapping[str, JSONValue]) -> dict[str, JSONValue]:
    return {key: value for key, value in keywords.items() if key != "$ref"}
