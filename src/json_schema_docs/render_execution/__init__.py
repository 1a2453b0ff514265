"""Render execution exports."""

from .render_use_case import ReadSchemaFileError, render, render_document, render_file

__all__ = ["ReadSchemaFileError", "render", "render_document", "render_file"]
