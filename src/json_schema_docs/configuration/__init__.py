"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_render_options, parse_render_options
from .render_settings import (
    BUILTIN_TEMPLATE_NAMES,
    DEFAULT_LIST_MARKER,
    DEFAULT_TEMPLATE_NAME,
    DEFAULT_TITLE,
    DEFAULT_WRAP_WIDTH,
    LIST_MARKERS,
    RenderOptions,
)

__all__ = [
    "BUILTIN_TEMPLATE_NAMES",
    "ConfigurationError",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_LIST_MARKER",
    "DEFAULT_TEMPLATE_NAME",
    "DEFAULT_TITLE",
    "DEFAULT_WRAP_WIDTH",
    "LIST_MARKERS",
    "RenderOptions",
    "build_placeholder_configuration",
    "load_render_options",
    "parse_render_options",
    "write_placeholder_configuration",
]
