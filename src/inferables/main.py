"""Inferables CLI entry point."""

import logging

import click

from . import __version__
from .commands import resolve, walk
from .commands.common import log_level_option


@click.group()
@click.version_option(version=__version__, prog_name="infer")
@log_level_option
def cli(log_level: str) -> None:
    """Inferables - confirm or decline candidate values."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(resolve)
cli.add_command(walk)


if __name__ == "__main__":
    cli()
