"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from property_sunset_checker.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Severity,
    write_placeholder_configuration,
)
from property_sunset_checker.results_writing import format_report_line
from property_sunset_checker.run_execution import (
    CheckExecutionError,
    CheckRequest,
    execute_sunset_check,
)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="property-sunset-checker")
def cli() -> None:
    """Property deprecation and sunset policy checker for API diffs."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML policy configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML policy configuration with default values and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--diff",
    "diff_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON diff document",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to the YAML/JSON policy configuration",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of an xlsx findings workbook to write",
)
@click.option(
    "--fail-on",
    "fail_on",
    required=False,
    type=click.Choice([level.value for level in Severity], case_sensitive=False),
    help="Exit with an error when a finding reaches this severity",
)
@click.option(
    "--workers",
    "max_workers",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of scopes walked in parallel",
)
@click.option("--verbose", is_flag=True, default=False, help="Log traversal details to stderr.")
def check(
    diff_path: str,
    config_path: str | None,
    output_path: str | None,
    fail_on: str | None,
    max_workers: int,
    verbose: bool,
) -> None:
    """Report newly deprecated properties and validate their sunset notice."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, stream=sys.stderr)
    try:
        outcome = execute_sunset_check(
            CheckRequest(
                diff_path=diff_path,
                config_path=config_path,
                output_path=output_path,
                fail_on=Severity(fail_on.lower()) if fail_on else None,
                max_workers=max_workers,
            )
        )
    except CheckExecutionError as exc:
        raise CliError(str(exc)) from exc

    for reported in outcome.reported_findings:
        click.echo(format_report_line(reported))
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    if outcome.failed:
        raise CliError(f"Findings at or above severity '{fail_on.lower()}' were reported.")


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
