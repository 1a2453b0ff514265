"""Rendering of the bundled sample schemas."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from json_schema_docs import ExampleFormat, ExampleMode, RenderOptions, render_file


def _samples() -> list[Path]:
    return sorted((Path(__file__).resolve().parents[3] / "samples").glob("*.schema.json"))


@pytest.mark.parametrize("sample", _samples(), ids=lambda path: path.name)
@pytest.mark.parametrize("template_name", ["list", "table"])
def test_every_sample_renders_with_every_template(sample: Path, template_name: str) -> None:
    rendered = render_file(sample, RenderOptions(template_name=template_name))

    assert rendered.startswith("# schema reference\n")
    assert "## Contents" in rendered
    assert re.search(r"^### .*\n\n\n", rendered, flags=re.MULTILINE) is None
    assert re.search(r"<[A-Za-z/][^>]*>", rendered) is None


def test_reused_definition_paths_render_as_nested_list() -> None:
    sample = Path(__file__).resolve().parents[3] / "samples" / "build_settings.schema.json"

    rendered = render_file(sample)

    assert "### SignOptions.enabled" in rendered
    assert (
        "* Paths:\n"
        "  * `spec.projects.[].settings.sign.enabled`\n"
        "  * `spec.settings.sign.enabled`\n"
    ) in rendered


def test_cyclic_sample_embeds_example_without_recursing() -> None:
    sample = Path(__file__).resolve().parents[3] / "samples" / "tree_node.schema.json"

    rendered = render_file(
        sample,
        RenderOptions(example_mode=ExampleMode.ALL, example_format=ExampleFormat.JSON),
    )

    assert "## Example json document" in rendered
    assert '"parent": null' in rendered
    assert "* Draft support: supported (2019-09)" in rendered
