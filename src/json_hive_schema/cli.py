"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from json_hive_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GenerationSettings,
    load_configuration,
    write_placeholder_configuration,
)
from json_hive_schema.document_model import InputFormat
from json_hive_schema.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_generation_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-hive-schema")
@click.option("--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Infer Hive table and flattening view DDL from an example document."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Example JSON or XML document to build the schema from",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="File to write the table and view DDL to",
)
@click.option(
    "--input-type",
    "input_type",
    type=click.Choice([item.value for item in InputFormat], case_sensitive=False),
    default=None,
    help="Format of the input document. Defaults to JSON.",
)
@click.option(
    "--table-name",
    "table_name",
    default=None,
    help="Name of the generated table. Defaults to hive_table.",
)
@click.option(
    "--skip-keyed-response",
    "skip_keyed_response",
    is_flag=True,
    default=False,
    help="The document has no KeyedResponse envelope; type the bare Response.",
)
@click.option(
    "--type-paths",
    "type_paths",
    default=None,
    help=(
        "Comma-separated paths surfaced as independent columns, e.g. "
        "'Response' or 'tag/object,tag/list@id:2'. Defaults to Response."
    ),
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML run configuration; command line options take precedence",
)
def generate(
    input_path: str,
    output_path: str,
    input_type: str | None,
    table_name: str | None,
    skip_keyed_response: bool,
    type_paths: str | None,
    config_path: str | None,
) -> None:
    """Write Hive DDL inferred from one example document."""
    try:
        settings = load_configuration(config_path) if config_path else GenerationSettings()
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    settings = settings.with_overrides(
        input_format=InputFormat.from_name(input_type) if input_type else None,
        table_name=table_name,
        skip_keyed_response=True if skip_keyed_response else None,
        type_paths=tuple(type_paths.split(",")) if type_paths else None,
    )
    try:
        outcome = execute_schema_generation_run(
            RunRequest(input_path=input_path, output_path=output_path, settings=settings)
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(outcome.ddl.text)


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
