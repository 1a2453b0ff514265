"""Template resolution and rendering tests."""

from __future__ import annotations

import re

import pytest
from json_schema_docs.configuration import RenderOptions
from json_schema_docs.documentation_view import RenderError, build_render_view
from json_schema_docs.markdown_rendering import (
    TemplateExecutionError,
    TemplateParseError,
    UnknownTemplateError,
    builtin_template,
    builtin_template_names,
    render_view,
    resolve_template,
)
from json_schema_docs.schema_model import document_from_raw

_DOCUMENT = document_from_raw(
    {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "$ref": "#/$defs/Config",
        "$defs": {
            "Config": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string", "description": "Service name."},
                    "settings": {"$ref": "#/$defs/Settings"},
                },
            },
            "Settings": {"type": "object", "properties": {"debug": {"type": "boolean"}}},
        },
    }
)


def _render(template_name: str = "list", template_text: str = "", **options) -> str:
    view = build_render_view(_DOCUMENT, RenderOptions(**options))
    return render_view(view, resolve_template(template_name, template_text))


def test_builtin_template_names_are_sorted() -> None:
    assert builtin_template_names() == ["list", "table"]


def test_builtin_template_returns_source_text() -> None:
    assert "{{ title }}" in builtin_template(" LIST ")
    assert "| Attribute | Value |" in builtin_template("table")


def test_unknown_template_name_is_rejected() -> None:
    with pytest.raises(UnknownTemplateError, match="missing"):
        builtin_template("missing")
    with pytest.raises(UnknownTemplateError):
        resolve_template("missing")


def test_list_template_renders_sections() -> None:
    rendered = _render()

    assert rendered.startswith("# schema reference\n\n* Source schema: `(memory)`\n")
    assert "* Draft support: supported (2020-12)" in rendered
    assert "## Contents\n\n* [Config](#config)\n* [Settings](#settings)\n" in rendered
    assert "### Config.name\n\n* Key: `name`\n\nService name.\n\n* Type: `string`\n" in rendered
    assert "* Required: yes" in rendered
    assert "### Settings.debug\n\n* Key: `debug`\n* Path: `settings.debug`\n" in rendered
    assert rendered.endswith("\n")
    assert not rendered.endswith("\n\n")


def test_list_marker_applies_to_template_lists() -> None:
    rendered = _render(list_marker="-")

    assert "- Schema ID: `(none)`" in rendered
    assert "* Schema ID:" not in rendered


def test_table_template_renders_attribute_tables() -> None:
    rendered = _render("table")

    assert "| Attribute | Value |" in rendered
    assert "| Key | `debug` |" in rendered
    assert "| Path | `settings.debug` |" in rendered
    assert "| Draft support | supported (2020-12) |" in rendered


def test_rendered_output_has_no_html_and_no_blank_runs() -> None:
    for name in builtin_template_names():
        rendered = _render(name)

        assert re.search(r"<[A-Za-z/][^>]*>", rendered) is None
        assert "\n\n\n" not in rendered


def test_embedded_example_block() -> None:
    rendered = _render(example_mode="required", example_format="yaml")

    assert "* [Example yaml document](#example-yaml-document)" in rendered
    assert "## Example yaml document" in rendered
    assert "```yaml\n# Service name.\nname: <string>\n```" in rendered


def test_custom_template_text_overrides_name() -> None:
    rendered = _render(
        "table",
        "# {{ title }}\n{% for definition in definitions %}- {{ definition.name }}\n{% endfor %}",
    )

    assert rendered == "# schema reference\n- Config\n- Settings\n"


def test_custom_template_can_use_filters_and_view() -> None:
    rendered = _render(
        template_text="{{ view.root_ref | json_inline }} {{ 'A b' | heading_anchor }}"
    )

    assert rendered == '"#/$defs/Config" a-b\n'


def test_custom_template_syntax_error_is_reported() -> None:
    with pytest.raises(TemplateParseError, match="parse custom template"):
        resolve_template("list", "{% for x in %}")


def test_custom_template_execution_error_is_reported() -> None:
    with pytest.raises(TemplateExecutionError, match="execute markdown template") as exc_info:
        _render(template_text="{{ missing_field }}")

    assert isinstance(exc_info.value, RenderError)
