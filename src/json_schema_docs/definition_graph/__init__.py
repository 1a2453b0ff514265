"""Definition graph exports."""

from .edge_extraction import ARRAY_SEGMENT, definition_edges, join_path
from .graph_models import MAX_PATH_DEPTH, DefinitionEdge, DefinitionPathState
from .ordering import (
    definition_name_from_ref,
    definition_order,
    property_order,
    required_property_order,
)
from .path_building import build_definition_paths, build_property_paths

__all__ = [
    "ARRAY_SEGMENT",
    "MAX_PATH_DEPTH",
    "DefinitionEdge",
    "DefinitionPathState",
    "build_definition_paths",
    "build_property_paths",
    "definition_edges",
    "definition_name_from_ref",
    "definition_order",
    "join_path",
    "property_order",
    "required_property_order",
]
