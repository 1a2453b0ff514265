"""Example generation modes and output formats."""

from __future__ import annotations

from enum import Enum


class ExampleError(Exception):
    """Base class for example generation failures."""


class UnknownExampleModeError(ExampleError):
    """Raised when the example mode is neither ``all`` nor ``required``."""


class UnknownExampleFormatError(ExampleError):
    """Raised when the example format is neither ``json`` nor ``yaml``."""


class ExampleEncodeError(ExampleError):
    """Raised when a generated example cannot be encoded."""


class ExampleMode(str, Enum):
    """Property coverage of a generated example."""

    ALL = "all"
    REQUIRED = "required"


class ExampleFormat(str, Enum):
    """Encoding of a generated example."""

    JSON = "json"
    YAML = "yaml"


def normalize_example_mode(mode: ExampleMode | str) -> ExampleMode:
    """Return the mode for a case-insensitive, whitespace-trimmed value."""
    normalized = str(mode.value if isinstance(mode, ExampleMode) else mode).strip().lower()
    try:
        return ExampleMode(normalized)
    except ValueError as exc:
        raise UnknownExampleModeError(f"unknown example mode {mode!r}") from exc


def normalize_example_format(example_format: ExampleFormat | str) -> ExampleFormat:
    """Return the format for a case-insensitive, whitespace-trimmed value."""
    raw = example_format.value if isinstance(example_format, ExampleFormat) else example_format
    try:
        return ExampleFormat(str(raw).strip().lower())
    except ValueError as exc:
        raise UnknownExampleFormatError(f"unknown example format {example_format!r}") from exc
