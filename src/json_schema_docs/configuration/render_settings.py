"""Render configuration entities."""

from __future__ import annotations

from dataclasses import dataclass

from json_schema_docs.example_synthesis.synthesis_modes import ExampleFormat, ExampleMode

DEFAULT_TITLE = "schema reference"
DEFAULT_TEMPLATE_NAME = "list"
DEFAULT_WRAP_WIDTH = 80
DEFAULT_LIST_MARKER = "*"
LIST_MARKERS = ("*", "-")
BUILTIN_TEMPLATE_NAMES = ("list", "table")


@dataclass(frozen=True)
class RenderOptions:  # pylint: disable=too-many-instance-attributes
    """Markdown rendering settings."""

    title: str = DEFAULT_TITLE
    source_path: str = ""
    template_name: str = DEFAULT_TEMPLATE_NAME
    template_text: str = ""
    wrap_width: int = DEFAULT_WRAP_WIDTH
    list_marker: str = DEFAULT_LIST_MARKER
    example_mode: ExampleMode | None = None
    example_format: ExampleFormat | None = None

    @property
    def embeds_example(self) -> bool:
        """Return True when an example block should be rendered."""
        return self.example_mode is not None or self.example_format is not None
