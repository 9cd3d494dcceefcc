import logging

import click

from lcsrpy.errors import LCSRError
from lcsrpy.lcsr import LCSR
from lcsrpy.log import NUMERICS, setup_logging

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "NUMERICS": NUMERICS,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
}


def _handler(config: str, log_level: str) -> LCSR:
    setup_logging(LOG_LEVELS[log_level])
    try:
        return LCSR(config)
    except LCSRError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
def cli() -> None:
    pass


@cli.command()
@click.option(
    "--config",
    required=True,
    type=str,
    help="Specify the path to the config file to be used.",
)
@click.option(
    "--output",
    type=str,
    default="",
    help="File path (csv, json or yaml) for the results. Overrides the output in the config.",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default="WARNING",
    help="Verbosity of the log.",
)
def evaluate(config: str, output: str, log_level: str) -> None:
    handler = _handler(config, log_level.upper())
    try:
        export = handler.run()
        if output:
            export.save(output)
    except LCSRError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(export.to_frame().to_string(index=False))


@cli.command()
@click.option(
    "--config",
    required=True,
    type=str,
    help="Specify the path to the config file to be used.",
)
@click.option(
    "--output",
    type=str,
    default="",
    help="File path (json or yaml) to store the diagnostics in.",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default="WARNING",
    help="Verbosity of the log.",
)
def diagnostics(config: str, output: str, log_level: str) -> None:
    handler = _handler(config, log_level.upper())
    try:
        export = handler.export_diagnostics()
        if output:
            export.save(output)
    except LCSRError as exc:
        raise click.ClickException(str(exc)) from exc
    for entry in export.diagnostics:
        click.echo(f"{entry.description}: {entry.value:.6g}")
