"""Render settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from json_schema_docs.example_synthesis.synthesis_modes import (
    ExampleError,
    ExampleFormat,
    ExampleMode,
    normalize_example_format,
    normalize_example_mode,
)

from .render_settings import (
    BUILTIN_TEMPLATE_NAMES,
    DEFAULT_LIST_MARKER,
    DEFAULT_TEMPLATE_NAME,
    DEFAULT_TITLE,
    DEFAULT_WRAP_WIDTH,
    LIST_MARKERS,
    RenderOptions,
)


class ConfigurationError(Exception):
    """Raised when the render settings file is invalid."""


def load_render_options(config_path: Path | str) -> RenderOptions:
    """Load and validate a YAML or JSON render settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_render_options(parsed, base_path=path.parent)


def parse_render_options(section: Mapping[str, Any], *, base_path: Path) -> RenderOptions:
    """Validate an already decoded settings mapping."""
    title = _optional_string(section.get("title"), "title") or DEFAULT_TITLE
    template_name = (
        _optional_string(section.get("template"), "template") or DEFAULT_TEMPLATE_NAME
    ).lower()
    if template_name not in BUILTIN_TEMPLATE_NAMES:
        raise ConfigurationError(
            f"template must be one of {', '.join(BUILTIN_TEMPLATE_NAMES)}, got '{template_name}'."
        )

    template_text = ""
    template_file = _optional_string(section.get("template_file"), "template_file")
    if template_file:
        template_path = _resolve_path(base_path, template_file)
        if not template_path.exists():
            raise ConfigurationError(f"Template file not found: {template_path}")
        template_text = template_path.read_text(encoding="utf-8")

    wrap_width = _require_positive_int(section.get("wrap_width", DEFAULT_WRAP_WIDTH), "wrap_width")
    list_marker = _optional_string(section.get("list_marker"), "list_marker") or DEFAULT_LIST_MARKER
    if list_marker not in LIST_MARKERS:
        raise ConfigurationError(f"list_marker must be one of {' '.join(LIST_MARKERS)}.")

    example_mode, example_format = _parse_example_section(section.get("example"))

    return RenderOptions(
        title=title,
        template_name=template_name,
        template_text=template_text,
        wrap_width=wrap_width,
        list_marker=list_marker,
        example_mode=example_mode,
        example_format=example_format,
    )


def _parse_example_section(value: Any) -> tuple[ExampleMode | None, ExampleFormat | None]:
    if value is None:
        return None, None
    if not isinstance(value, Mapping):
        raise ConfigurationError("example must be a mapping.")
    mode = _optional_string(value.get("mode"), "example.mode")
    example_format = _optional_string(value.get("format"), "example.format")
    if mode is None and example_format is None:
        return None, None
    try:
        return (
            normalize_example_mode(mode or ExampleMode.REQUIRED),
            normalize_example_format(example_format or ExampleFormat.YAML),
        )
    except ExampleError as exc:
        raise ConfigurationError(str(exc)) from exc


def _resolve_path(base_path: Path, candidate: str) -> Path:
    path = Path(candidate)
    return path if path.is_absolute() else (base_path / path).resolve()


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
