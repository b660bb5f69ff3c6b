"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (defaults to SELECTORKIT_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selectors and round-trip simple objects."""
    try:
        config = SelectorkitConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build, combine  # noqa: E402
from selectorkit.cli.rectangle import rectangle, rectangle_from_json  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(rectangle)
cli.add_command(rectangle_from_json)
