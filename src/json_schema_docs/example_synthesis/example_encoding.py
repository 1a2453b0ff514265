"""JSON and comment-annotated YAML encoders for example payloads."""

from __future__ import annotations

import json

import yaml

from json_schema_docs.schema_model.schema_values import JSONValue

from .annotation import AnnotatedNode, NodeKind
from .synthesis_modes import ExampleEncodeError

YAML_INDENT = 2


def encode_example_json(value: JSONValue) -> str:
    """Encode *value* as two-space indented JSON with a trailing newline."""
    try:
        return json.dumps(value, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise ExampleEncodeError(f"encode example json: {exc}") from exc


def encode_example_yaml(node: AnnotatedNode) -> str:
    """Encode an annotated example as block YAML with ``#`` key comments."""
    try:
        lines = _emit(node, 0)
    except yaml.YAMLError as exc:
        raise ExampleEncodeError(f"encode example yaml: {exc}") from exc
    return "\n".join(lines) + "\n"


def yaml_scalar(value: JSONValue) -> str:
    """Render one scalar with PyYAML's quoting rules, on a single line."""
    style = '"' if isinstance(value, str) and ("\n" in value or "\r" in value) else None
    text = yaml.safe_dump(
        value,
        default_style=style,
        allow_unicode=True,
        width=float("inf"),
    )
    if text.endswith("\n...\n"):
        text = text[: -len("\n...\n")]
    return text.rstrip("\n")


def _inline(node: AnnotatedNode) -> str:
    if node.kind is NodeKind.MAPPING:
        return "{}"
    if node.kind is NodeKind.SEQUENCE:
        return "[]"
    return yaml_scalar(node.value)


def _emit(node: AnnotatedNode, indent: int) -> list[str]:
    pad = " " * indent
    if node.is_empty_collection or node.kind is NodeKind.SCALAR:
        return [pad + _inline(node)]

    lines: list[str] = []
    if node.kind is NodeKind.MAPPING:
        for entry in node.entries:
            lines.extend(f"{pad}# {line}" for line in entry.comment.split("\n") if line)
            key = yaml_scalar(entry.key)
            child = entry.node
            if child.kind is NodeKind.SCALAR or child.is_empty_collection:
                lines.append(f"{pad}{key}: {_inline(child)}")
                continue
            lines.append(f"{pad}{key}:")
            lines.extend(_emit(child, indent + YAML_INDENT))
        return lines

    for item in node.items:
        if item.kind is NodeKind.SCALAR or item.is_empty_collection:
            lines.append(f"{pad}- {_inline(item)}")
            continue
        nested = _emit(item, indent + YAML_INDENT)
        first = nested[0]
        if item.kind is NodeKind.MAPPING and not first.lstrip().startswith("#"):
            lines.append(f"{pad}- {first[indent + YAML_INDENT :]}")
            lines.extend(nested[1:])
        else:
            lines.append(f"{pad}-")
            lines.extend(nested)
    return lines
