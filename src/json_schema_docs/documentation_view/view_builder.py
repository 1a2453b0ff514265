"""Documentation view assembly."""

from __future__ import annotations

from collections.abc import Mapping

from json_schema_docs.configuration.render_settings import DEFAULT_TITLE, RenderOptions
from json_schema_docs.definition_graph import (
    build_definition_paths,
    build_property_paths,
    definition_name_from_ref,
    definition_order,
    property_order,
)
from json_schema_docs.example_synthesis import (
    ExampleFormat,
    ExampleMode,
    example_document,
    normalize_example_format,
    normalize_example_mode,
)
from json_schema_docs.markdown_rendering.text_formatting import (
    escape_inline,
    format_description,
    heading_anchor,
    normalize_list_marker,
    normalize_wrap_width,
    or_none,
    sanitize_text,
)
from json_schema_docs.schema_model.schema_values import DraftInfo, SchemaDocument, SchemaValue

from .attributes import schema_attributes
from .view_models import (
    DefinitionView,
    ExampleView,
    NoDefinitionsError,
    NoRenderableDefinitionsError,
    PropertyView,
    RenderView,
)

SOURCE_IN_MEMORY = "(memory)"
SYNTHETIC_ROOT_DEFINITION = "Root"


def build_render_view(document: SchemaDocument, options: RenderOptions) -> RenderView:
    """Resolve, order and project *document* into a :class:`RenderView`."""
    title = sanitize_text(options.title) or DEFAULT_TITLE
    wrap_width = normalize_wrap_width(options.wrap_width)
    list_marker = normalize_list_marker(options.list_marker)

    root_name = definition_name_from_ref(document.root_ref)
    definitions = render_definitions(document, root_name)
    order = definition_order(definitions, root_name)
    if not order:
        raise NoDefinitionsError("schema has no definitions to render")

    root_definition = order[0]
    definition_paths = build_definition_paths(definitions, root_definition)

    views: list[DefinitionView] = []
    for name in order:
        node = definitions[name]
        if node.is_zero:
            continue
        views.append(
            _definition_view(
                name,
                node,
                base_paths=definition_paths.get(name, []),
                is_root=name == root_definition,
                wrap_width=wrap_width,
                list_marker=list_marker,
            )
        )

    if not views:
        raise NoRenderableDefinitionsError("schema has no renderable definitions")

    return RenderView(
        title=title,
        source_schema=escape_inline(options.source_path.strip() or SOURCE_IN_MEMORY),
        schema_id=escape_inline(or_none(document.schema_id)),
        schema_draft=escape_inline(or_none(document.schema_uri)),
        schema_draft_support=draft_support_text(document.draft),
        root_ref=escape_inline(or_none(document.root_ref)),
        list_marker=list_marker,
        definitions=tuple(views),
        example=_example_view(document, options),
    )


def render_definitions(document: SchemaDocument, root_name: str) -> Mapping[str, SchemaValue]:
    """Return the definitions, or the root schema as a single synthetic one."""
    if document.definitions:
        return document.definitions
    return {root_name.strip() or SYNTHETIC_ROOT_DEFINITION: document.root}


def draft_support_text(info: DraftInfo) -> str:
    if info.supported:
        return f"supported ({escape_inline(info.canonical)})"
    if info.canonical.strip():
        return f"unknown ({escape_inline(info.canonical)})"
    return "unknown"


def property_heading_name(key: str, prop: SchemaValue) -> str:
    """Use the referenced definition name as heading suffix when present."""
    return definition_name_from_ref(prop.ref) or key


def _definition_view(
    name: str,
    node: SchemaValue,
    *,
    base_paths: list[str],
    is_root: bool,
    wrap_width: int,
    list_marker: str,
) -> DefinitionView:
    properties = node.properties
    required = node.required
    property_views = []
    for prop_name in property_order(required, properties):
        prop = properties[prop_name]
        heading = f"{name}.{property_heading_name(prop_name, prop)}"
        paths = build_property_paths(base_paths, prop_name, hide_root_path=is_root)
        property_views.append(
            PropertyView(
                heading=escape_inline(heading),
                anchor=heading_anchor(heading),
                name=escape_inline(prop_name),
                paths=tuple(escape_inline(path) for path in paths),
                description=format_description(prop.description, wrap_width, list_marker),
                attributes=tuple(schema_attributes(prop, required=prop_name in required)),
            )
        )

    return DefinitionView(
        name=escape_inline(name),
        anchor=heading_anchor(name),
        description=format_description(node.description, wrap_width, list_marker),
        attributes=tuple(schema_attributes(node)),
        properties=tuple(property_views),
    )


def _example_view(document: SchemaDocument, options: RenderOptions) -> ExampleView | None:
    if not options.embeds_example:
        return None
    mode = normalize_example_mode(options.example_mode or ExampleMode.REQUIRED)
    example_format = normalize_example_format(options.example_format or ExampleFormat.YAML)
    return ExampleView(
        format=example_format.value,
        mode=mode.value,
        text=example_document(document, mode, example_format).rstrip("\n"),
    )
