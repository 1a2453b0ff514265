"""Render settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schemadoc.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Render settings for json-schema-docs.
# Pass this file with --config; command line options override it.
# Remove any key you do not need; every key is optional.

# Document title used for the top-level heading.
title: "schema reference"

# Built-in template style (list or table).
template: "list"

# Custom Jinja2 template path, relative to this file. Overrides template.
# template_file: "docs/reference.md.j2"

# Wrap width for plain description paragraphs.
wrap_width: 80

# Unordered list marker used in normalized descriptions (* or -).
list_marker: "*"

# Embed a generated example payload at the end of the document.
# example:
#   mode: "required"   # all or required
#   format: "yaml"     # json or yaml
"""


def build_placeholder_configuration() -> str:
    """Build a YAML render settings template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the render settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
