"""Prism CLI entry point: Click group with subcommands."""

import logging

import click

from prism import __version__


@click.group()
@click.version_option(version=__version__, prog_name="prism")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Prism - cascade style resolution for UI components."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from prism.cli.inspect import inspect  # noqa: E402
from prism.cli.resolve import resolve  # noqa: E402

cli.add_command(inspect)
cli.add_command(resolve)
