"""Documentation view exports."""

from .attributes import KNOWN_SCHEMA_KEYWORDS, schema_attributes, summarize_schema_like
from .view_builder import (
    build_render_view,
    draft_support_text,
    property_heading_name,
    render_definitions,
)
from .view_models import (
    AttributeView,
    DefinitionView,
    ExampleView,
    NoDefinitionsError,
    NoRenderableDefinitionsError,
    PropertyView,
    RenderError,
    RenderView,
)

__all__ = [
    "AttributeView",
    "DefinitionView",
    "ExampleView",
    "KNOWN_SCHEMA_KEYWORDS",
    "NoDefinitionsError",
    "NoRenderableDefinitionsError",
    "PropertyView",
    "RenderError",
    "RenderView",
    "build_render_view",
    "draft_support_text",
    "property_heading_name",
    "render_definitions",
    "schema_attributes",
    "summarize_schema_like",
]
