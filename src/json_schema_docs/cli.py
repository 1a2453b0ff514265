"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from json_schema_docs.configuration import (
    BUILTIN_TEMPLATE_NAMES,
    DEFAULT_CONFIG_FILENAME,
    LIST_MARKERS,
    ConfigurationError,
    RenderOptions,
    load_render_options,
    write_placeholder_configuration,
)
from json_schema_docs.documentation_view import RenderError
from json_schema_docs.example_synthesis import (
    ExampleError,
    ExampleFormat,
    ExampleMode,
    example_document,
    normalize_example_format,
    normalize_example_mode,
)
from json_schema_docs.markdown_rendering import builtin_template
from json_schema_docs.render_execution import render_document
from json_schema_docs.schema_model import SchemaDocument, SchemaError, detect_draft, parse_document

STDIN_SOURCE = "(stdin)"

_MODE_CHOICE = click.Choice([mode.value for mode in ExampleMode], case_sensitive=False)
_FORMAT_CHOICE = click.Choice([fmt.value for fmt in ExampleFormat], case_sensitive=False)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-schema-docs")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details.")
def cli(verbose: bool) -> None:
    """Render documentation and example payloads from JSON Schema."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="render")
@click.argument("input_path", required=False, type=click.Path(path_type=str))
@click.argument("output_path", required=False, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON render settings file",
)
@click.option("--title", "-T", default=None, help="Markdown document title")
@click.option(
    "--template",
    "-t",
    "template_name",
    default=None,
    type=click.Choice(BUILTIN_TEMPLATE_NAMES, case_sensitive=False),
    help="Built-in template style  [default: list]",
)
@click.option(
    "--template-file",
    "-f",
    "template_file",
    default=None,
    type=click.Path(path_type=str),
    help="Path to a custom Jinja2 markdown template",
)
@click.option(
    "--wrap", "-w", "wrap_width", default=None, type=int, help="Wrap width for descriptions"
)
@click.option(
    "--list-marker",
    "-l",
    default=None,
    type=click.Choice(LIST_MARKERS),
    help="Unordered list marker for normalized descriptions  [default: *]",
)
@click.option("--example-mode", default=None, type=_MODE_CHOICE, help="Embed example payload")
@click.option("--example-format", default=None, type=_FORMAT_CHOICE, help="Embedded example format")
def render(  # pylint: disable=too-many-arguments
    input_path: str | None,
    output_path: str | None,
    config_path: str | None,
    title: str | None,
    template_name: str | None,
    template_file: str | None,
    wrap_width: int | None,
    list_marker: str | None,
    example_mode: str | None,
    example_format: str | None,
) -> None:
    """Convert JSON Schema to markdown.

    Reads INPUT_PATH (stdin when omitted) and writes OUTPUT_PATH (stdout when
    omitted).
    """
    try:
        options = load_render_options(config_path) if config_path else RenderOptions()
        overrides: dict[str, object] = {}
        if title is not None:
            overrides["title"] = title
        if template_name is not None:
            overrides["template_name"] = template_name.lower()
        if template_file is not None:
            overrides["template_text"] = Path(template_file).read_text(encoding="utf-8")
        if wrap_width is not None:
            overrides["wrap_width"] = wrap_width
        if list_marker is not None:
            overrides["list_marker"] = list_marker
        if example_mode is not None:
            overrides["example_mode"] = normalize_example_mode(example_mode)
        if example_format is not None:
            overrides["example_format"] = normalize_example_format(example_format)

        document, source = _read_schema(input_path)
        _warn_on_draft(document)
        options = dataclasses.replace(options, source_path=source, **overrides)
        rendered = render_document(document, options)
    except (ConfigurationError, SchemaError, RenderError, ExampleError, OSError) as exc:
        raise CliError(str(exc)) from exc
    _write_output(rendered, output_path)


@cli.command(name="example")
@click.argument("input_path", required=False, type=click.Path(path_type=str))
@click.argument("output_path", required=False, type=click.Path(path_type=str))
@click.option(
    "--mode",
    default=ExampleMode.ALL.value,
    show_default=True,
    type=_MODE_CHOICE,
    help="Emit all declared properties or required ones only",
)
@click.option(
    "--format",
    "example_format",
    default=ExampleFormat.JSON.value,
    show_default=True,
    type=_FORMAT_CHOICE,
    help="Example payload encoding",
)
def example(
    input_path: str | None, output_path: str | None, mode: str, example_format: str
) -> None:
    """Generate an example payload from JSON Schema."""
    try:
        document, _ = _read_schema(input_path)
        payload = example_document(document, mode, example_format)
    except (SchemaError, ExampleError, OSError) as exc:
        raise CliError(str(exc)) from exc
    _write_output(payload, output_path)


@cli.command(name="template")
@click.argument("output_path", required=False, type=click.Path(path_type=str))
@click.option(
    "--template",
    "-t",
    "template_name",
    default="list",
    show_default=True,
    type=click.Choice(BUILTIN_TEMPLATE_NAMES, case_sensitive=False),
    help="Built-in template style",
)
def template(output_path: str | None, template_name: str) -> None:
    """Print a built-in markdown template as a starting point for a custom one."""
    try:
        text = builtin_template(template_name)
    except RenderError as exc:
        raise CliError(str(exc)) from exc
    _write_output(text, output_path)


@cli.command(name="draft")
@click.argument("uri")
def draft(uri: str) -> None:
    """Report the canonical draft label and support for a $schema URI."""
    info = detect_draft(uri)
    canonical = info.canonical or "unknown"
    click.echo(f"draft={canonical} supported={'yes' if info.supported else 'no'}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML render settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a render settings file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _read_schema(input_path: str | None) -> tuple[SchemaDocument, str]:
    if input_path and input_path.strip():
        try:
            data = Path(input_path).read_bytes()
        except OSError as exc:
            raise CliError(f"read schema file {input_path!r}: {exc}") from exc
        return parse_document(data), input_path

    data = click.get_binary_stream("stdin").read()
    if not data.strip():
        raise CliError("read schema from stdin: empty input")
    return parse_document(data), STDIN_SOURCE


def _warn_on_draft(document: SchemaDocument) -> None:
    if not document.schema_uri:
        click.echo("warning: schema has no $schema value; draft support is unknown", err=True)
    elif not document.draft.supported:
        click.echo(f"warning: unsupported $schema value {document.schema_uri!r}", err=True)


def _write_output(text: str, output_path: str | None) -> None:
    if not output_path or not output_path.strip():
        click.echo(text, nl=False)
        return
    destination = Path(output_path)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CliError(f"write output file {output_path!r}: {exc}") from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
