"""Plain-text and markdown normalization helpers."""

from __future__ import annotations

import json
import re
import unicodedata

from json_schema_docs.configuration.render_settings import (
    DEFAULT_LIST_MARKER,
    DEFAULT_WRAP_WIDTH,
    LIST_MARKERS,
)
from json_schema_docs.schema_model.schema_values import JSONValue

NONE_MARKER = "(none)"

_STRUCTURED_PREFIXES = ("#", ">", "- ", "* ", "+ ", "|", "```", "---", "***", "___")
_ORDERED_LIST = re.compile(r"^(\d+[.)])[ \t]")
_UNORDERED_LIST = re.compile(r"^[-*+][ \t]")


def or_none(value: str) -> str:
    """Render an empty metadata value as ``(none)``."""
    return value.strip() or NONE_MARKER


def json_inline(value: JSONValue) -> str:
    """Single-line JSON text for markdown snippets."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)


def escape_inline(value: str) -> str:
    """Escape backticks inside inline code spans."""
    return value.replace("`", "\\`")


def sanitize_text(text: str) -> str:
    """Trim and squash repeated whitespace."""
    return " ".join(text.split())


def normalize_wrap_width(value: int) -> int:
    return value if value > 0 else DEFAULT_WRAP_WIDTH


def normalize_list_marker(value: str) -> str:
    value = value.strip()
    return value if value in LIST_MARKERS else DEFAULT_LIST_MARKER


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def format_description(text: str, wrap_width: int, list_marker: str) -> str:
    """Wrap plain paragraphs while preserving markdown structures.

    Fenced and indented code, headings, quotes, tables and rules pass through
    untouched. List markers are normalized to *list_marker* with two-space
    nesting, and a blank line is inserted before a list that directly follows
    a paragraph.
    """
    text = normalize_line_endings(text).strip()
    if not text:
        return ""

    list_marker = normalize_list_marker(list_marker)
    out: list[str] = []
    paragraph: list[str] = []
    in_fence = False

    def flush_paragraph() -> None:
        if paragraph:
            out.extend(wrap_paragraph(" ".join(paragraph), wrap_width))
            paragraph.clear()

    def append_blank() -> None:
        if out and out[-1] != "":
            out.append("")

    for raw_line in text.split("\n"):
        line = raw_line.rstrip(" \t")
        trimmed = line.strip()

        if trimmed.startswith("```"):
            flush_paragraph()
            out.append(line)
            in_fence = not in_fence
            continue
        if in_fence:
            out.append(line)
            continue
        if not trimmed:
            flush_paragraph()
            append_blank()
            continue
        if is_structured_line(line):
            flush_paragraph()
            normalized = normalize_structured_line(line, list_marker)
            if _needs_blank_before_list(normalized, out):
                append_blank()
            out.append(normalized)
            continue
        paragraph.append(trimmed)

    flush_paragraph()
    return "\n".join(out)


def wrap_paragraph(text: str, width: int) -> list[str]:
    """Greedy word wrap to *width* characters; long words stay whole."""
    words = text.split()
    if not words:
        return []
    if width <= 0:
        return [" ".join(words)]

    out: list[str] = []
    current = words[0]
    for word in words[1:]:
        if len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
            continue
        out.append(current)
        current = word
    out.append(current)
    return out


def is_list_line(line: str) -> bool:
    trimmed = line.strip()
    return bool(_UNORDERED_LIST.match(trimmed) or _ORDERED_LIST.match(trimmed))


def is_structured_line(line: str) -> bool:
    """Return True when *line* must bypass paragraph wrapping."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if _is_indented_code(line):
        return True
    if trimmed.startswith(_STRUCTURED_PREFIXES):
        return True
    return bool(_ORDERED_LIST.match(trimmed))


def normalize_structured_line(line: str, list_marker: str) -> str:
    if _is_indented_code(line):
        return line
    trimmed = line.strip()
    level = _list_indent_level(_leading_indent_columns(line))
    if _UNORDERED_LIST.match(trimmed):
        content = trimmed[1:].strip()
        return "  " * level + (f"{list_marker} {content}" if content else list_marker)
    ordered = _ORDERED_LIST.match(trimmed)
    if ordered:
        marker = ordered.group(1)
        content = trimmed[len(marker) :].strip()
        return "  " * level + (f"{marker} {content}" if content else marker)
    return line


def normalize_markdown_output(text: str) -> str:
    """Collapse repeated blank lines outside fences and strip trailing space."""
    out: list[str] = []
    in_fence = False
    blank_run = 0
    for raw_line in normalize_line_endings(text).split("\n"):
        line = raw_line.rstrip(" \t")
        trimmed = line.strip()
        if trimmed.startswith("```"):
            in_fence = not in_fence
            out.append(line)
            blank_run = 0
            continue
        if not in_fence and not trimmed:
            if blank_run == 0:
                out.append("")
            blank_run += 1
            continue
        blank_run = 0
        out.append(line)
    return "\n".join(out).rstrip("\n")


def ensure_trailing_newline(value: str) -> str:
    return value.rstrip("\n") + "\n"


def heading_anchor(value: str) -> str:
    """Convert heading text into a markdown anchor slug."""
    out: list[str] = []
    last_dash = False
    for char in value.strip().lower():
        category = unicodedata.category(char)
        if category.startswith("L") or category.startswith("N"):
            out.append(char)
            last_dash = False
        elif char.isspace() or char in "-_":
            if last_dash or not out:
                continue
            out.append("-")
            last_dash = True
    return "".join(out).strip("-")


def _needs_blank_before_list(line: str, out: list[str]) -> bool:
    if not is_list_line(line) or not out:
        return False
    previous = out[-1]
    if not previous.strip() or is_list_line(previous):
        return False
    return not is_structured_line(previous)


def _is_indented_code(line: str) -> bool:
    return line.startswith("    ") or line.startswith("\t")


def _leading_indent_columns(line: str) -> int:
    columns = 0
    for char in line:
        if char == " ":
            columns += 1
        elif char == "\t":
            columns += 4
        else:
            break
    return columns


def _list_indent_level(columns: int) -> int:
    return 0 if columns <= 1 else columns // 2
