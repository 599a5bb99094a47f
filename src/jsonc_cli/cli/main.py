"""jsonc CLI main entry point."""

import click

from .. import __version__


@click.group()
@click.version_option(__version__, prog_name="jsonc")
def cli():
    """Read, modify and format JSONC documents piped in on stdin."""


# Register commands at module level so tests can import cli with commands attached
from .commands.format import format_
from .commands.modify import modify
from .commands.read import read

cli.add_command(modify)
cli.add_command(format_)
cli.add_command(read)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
