"""selector-builder CLI entry point: Click group with subcommands."""

import logging

import click

from selector_builder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """selector-builder - compose CSS selectors from ordered fragments."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
