"""Breadth-first access path enumeration over the definition graph."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping

from json_schema_docs.schema_model.schema_values import SchemaValue

from .edge_extraction import definition_edges, join_path
from .graph_models import MAX_PATH_DEPTH, DefinitionPathState

_LOGGER = logging.getLogger(__name__)


def build_definition_paths(
    definitions: Mapping[str, SchemaValue],
    root_definition: str,
    *,
    max_depth: int = MAX_PATH_DEPTH,
) -> dict[str, list[str]]:
    """Return every distinct root-relative access path for each definition.

    The root definition maps to ``[""]``. Edges back to the root are never
    followed, each ``(definition, path)`` pair is visited once, and branches
    deeper than *max_depth* are not expanded.
    """
    root = root_definition.strip()
    if not root or root not in definitions:
        return {}

    paths: dict[str, list[str]] = {root: [""]}
    seen: set[tuple[str, str]] = {(root, "")}
    queue = deque([DefinitionPathState(definition=root, prefix="", depth=0)])

    while queue:
        current = queue.popleft()
        if current.depth >= max_depth:
            _LOGGER.debug(
                "depth cap reached at %s (%s)", current.definition, current.prefix or "<root>"
            )
            continue

        node = definitions.get(current.definition, SchemaValue())
        for edge in definition_edges(node):
            if edge.target == root:
                continue
            next_prefix = join_path(current.prefix, edge.path)
            if not next_prefix:
                continue
            key = (edge.target, next_prefix)
            if key in seen:
                continue
            seen.add(key)
            paths.setdefault(edge.target, []).append(next_prefix)
            queue.append(
                DefinitionPathState(
                    definition=edge.target, prefix=next_prefix, depth=current.depth + 1
                )
            )

    return {name: sorted(values) for name, values in paths.items()}


def build_property_paths(
    base_paths: Iterable[str], property_name: str, *, hide_root_path: bool = False
) -> list[str]:
    """Return sorted access paths of one property under its definition paths.

    With *hide_root_path* the bare property name (the root definition's own
    access point) is left out.
    """
    property_name = property_name.strip()
    if not property_name:
        return []
    out: set[str] = set()
    for base in base_paths:
        path = join_path(base, property_name)
        if not path:
            continue
        if hide_root_path and path == property_name:
            continue
        out.add(path)
    return sorted(out)
