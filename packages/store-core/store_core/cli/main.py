"""
Versioned Store CLI Main Entry Point

Usage:
    vstore store show <name> [--dir D]
    vstore store save <name> --json value.json
    vstore store delete <name> [--yes]
    vstore platform-dir
    vstore --version
"""

import asyncio
import logging
import sys

import click

from .. import __version__
from ..errors import StoreError
from ..platform.selection import build_resolver


@click.group()
@click.version_option(version=__version__, prog_name="vstore")
@click.option("--verbose", "-v", is_flag=True, help="Show store log messages")
def cli(verbose: bool):
    """Versioned Store CLI - inspect and edit game data stores."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register store commands
from .store_cmds import store
cli.add_command(store)


@cli.command("platform-dir")
@click.option("--wait", is_flag=True, help="Wait for the platform directory (identity policy)")
def platform_dir(wait: bool):
    """Print the platform directory for the configured policy."""
    try:
        resolver = build_resolver()
        directory = asyncio.run(resolver.resolve_async()) if wait else resolver.resolve()
    except StoreError as e:
        click.echo(f"Platform directory unavailable: {e}", err=True)
        sys.exit(1)
    click.echo(directory if directory else "(root)")


# Entry point
def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
