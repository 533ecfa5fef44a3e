"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from yaml_to_jsonschema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DRAFT_URLS,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from yaml_to_jsonschema.input_loading import InputError
from yaml_to_jsonschema.schema_generation import (
    SchemaGenerationError,
    generate_schema,
    write_schema,
)
from yaml_to_jsonschema.schema_inference import SchemaMaterializationError


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="yaml-to-jsonschema")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Infer a JSON Schema from example YAML files."""
    _configure_logging(verbose)


@cli.command(name="generate")
@click.option(
    "--input",
    "-i",
    "inputs",
    multiple=True,
    help="YAML file or http(s) URL to infer from; repeat to merge several in order",
)
@click.option("--output", "-o", "output_path", help="Path of the JSON Schema file to write")
@click.option(
    "--draft",
    "-d",
    type=int,
    help=f"JSON Schema draft version ({', '.join(str(draft) for draft in DRAFT_URLS)})",
)
@click.option("--indent", type=int, help="Spaces per indentation level (even, at least 2)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=str),
    help=f"Configuration file to read (defaults to {DEFAULT_CONFIG_FILENAME} when present)",
)
@click.option("--schema-root-id", help="$id of the root schema")
@click.option("--schema-root-title", help="Title of the root schema")
@click.option("--schema-root-description", help="Description of the root schema")
@click.option(
    "--schema-root-additional-properties",
    type=click.BOOL,
    help="additionalProperties for the root object only",
)
@click.option(
    "--additional-properties",
    type=click.BOOL,
    help="additionalProperties for every object, overriding the root-only setting",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the schema instead of writing the output file.",
)
def generate(  # pylint: disable=too-many-arguments
    inputs: tuple[str, ...],
    output_path: str | None,
    draft: int | None,
    indent: int | None,
    config_path: str | None,
    schema_root_id: str | None,
    schema_root_title: str | None,
    schema_root_description: str | None,
    schema_root_additional_properties: bool | None,
    additional_properties: bool | None,
    to_stdout: bool,
) -> None:
    """Generate a JSON Schema from one or more YAML files."""
    overrides = {
        "input": list(inputs) or None,
        "output": output_path,
        "draft": draft,
        "indent": indent,
        "additionalProperties": additional_properties,
        "schemaRoot": {
            "id": schema_root_id,
            "title": schema_root_title,
            "description": schema_root_description,
            "additionalProperties": schema_root_additional_properties,
        },
    }
    try:
        configuration = load_configuration(config_path, overrides=overrides)
        payload = generate_schema(configuration)
        if to_stdout:
            click.echo(payload.decode("utf-8"), nl=False)
            return
        destination = write_schema(configuration, payload)
    except (
        ConfigurationError,
        InputError,
        SchemaMaterializationError,
        SchemaGenerationError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"JSON schema successfully generated: {destination}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a commented configuration file template."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


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
