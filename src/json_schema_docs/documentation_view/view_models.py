"""Documentation view entities passed to markdown templates."""

from __future__ import annotations

from dataclasses import dataclass


class RenderError(Exception):
    """Base class for documentation rendering failures."""


class NoDefinitionsError(RenderError):
    """Raised when the schema yields no definitions to render."""


class NoRenderableDefinitionsError(RenderError):
    """Raised when every definition is an invalid schema node."""


@dataclass(frozen=True)
class AttributeView:
    """Single rendered name/value metadata item."""

    name: str
    value: str


@dataclass(frozen=True)
class PropertyView:
    """One property section inside a definition."""

    heading: str
    anchor: str
    name: str
    paths: tuple[str, ...]
    description: str
    attributes: tuple[AttributeView, ...]


@dataclass(frozen=True)
class DefinitionView:
    """One top-level definition section."""

    name: str
    anchor: str
    description: str
    attributes: tuple[AttributeView, ...]
    properties: tuple[PropertyView, ...]

    @property
    def has_properties(self) -> bool:
        return bool(self.properties)


@dataclass(frozen=True)
class ExampleView:
    """Encoded example payload embedded in the document."""

    format: str
    mode: str
    text: str


@dataclass(frozen=True)
class RenderView:  # pylint: disable=too-many-instance-attributes
    """Root view model: already resolved and ordered, rendered as-is."""

    title: str
    source_schema: str
    schema_id: str
    schema_draft: str
    schema_draft_support: str
    root_ref: str
    list_marker: str
    definitions: tuple[DefinitionView, ...]
    example: ExampleView | None = None
