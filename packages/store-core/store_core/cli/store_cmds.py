"""
Store CLI — inspect and edit stores from the command line.

Commands:
    vstore store path   <name> [--dir D]
    vstore store show   <name> [--dir D] [--root R]
    vstore store save   <name> --json value.json [--dir D] [--root R]
    vstore store delete <name> [--dir D] [--root R] [--yes]

<name> is a store from the ``stores`` config section; unknown names use
the name as file name with the default format. Values are untyped JSON.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click

from ..persistence import LocalFileAccess
from ..platform.resolver import EDITOR_PLATFORM_DIRECTORY
from ..services.config_service import get_platform_settings
from ..store import VersionedStore


def _default_dir() -> str:
    return get_platform_settings().get("editor_directory", EDITOR_PLATFORM_DIRECTORY)


def _open_store(name: str, root: Optional[str]) -> VersionedStore[Any]:
    access = LocalFileAccess(Path(root)) if root else LocalFileAccess()
    return VersionedStore.from_config(name, Any, file_access=access)


@click.group("store")
def store():
    """Store inspection — load, save and delete store files."""
    pass


# ── path ──────────────────────────────────────────────────────────────────

@store.command("path")
@click.argument("name")
@click.option("--dir", "directory", default=None, help="Relative directory (default: editor directory)")
def store_path(name: str, directory: Optional[str]):
    """Print the relative path of a store file."""
    s = VersionedStore.from_config(name, Any)
    click.echo(s.store_path(_default_dir() if directory is None else directory))


# ── show ──────────────────────────────────────────────────────────────────

@store.command("show")
@click.argument("name")
@click.option("--dir", "directory", default=None, help="Relative directory (default: editor directory)")
@click.option("--root", default=None, help="Storage root (default: STORE_HOME)")
def store_show(name: str, directory: Optional[str], root: Optional[str]):
    """Load a store and print its value."""
    s = _open_store(name, root)
    result = s.load(_default_dir() if directory is None else directory)
    if not result.found:
        click.echo(f"Store '{name}' not loaded ({result.error.value}): {result.path}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result.value, indent=2, default=str))


# ── save ──────────────────────────────────────────────────────────────────

@store.command("save")
@click.argument("name")
@click.option("--json", "json_file", required=True, type=click.Path(exists=True),
              help="JSON file with the value to store")
@click.option("--dir", "directory", default=None, help="Relative directory (default: editor directory)")
@click.option("--root", default=None, help="Storage root (default: STORE_HOME)")
def store_save(name: str, json_file: str, directory: Optional[str], root: Optional[str]):
    """Save a JSON value into a store."""
    try:
        value = json.loads(Path(json_file).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        click.echo(f"Invalid JSON in {json_file}: {e}", err=True)
        sys.exit(1)

    s = _open_store(name, root)
    d = _default_dir() if directory is None else directory
    if not s.save(value, d):
        click.echo(f"Failed to save store '{name}'", err=True)
        sys.exit(1)
    click.echo(f"Saved store '{name}' to {s.store_path(d)}")


# ── delete ────────────────────────────────────────────────────────────────

@store.command("delete")
@click.argument("name")
@click.option("--dir", "directory", default=None, help="Relative directory (default: editor directory)")
@click.option("--root", default=None, help="Storage root (default: STORE_HOME)")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
def store_delete(name: str, directory: Optional[str], root: Optional[str], yes: bool):
    """Delete a store file after confirmation."""
    s = _open_store(name, root)
    d = _default_dir() if directory is None else directory
    path = s.store_path(d)

    if not yes and not click.confirm(f"Are you sure you want to delete the store at {path}?"):
        click.echo("Cancelled.")
        return

    if s.delete_store(d):
        click.echo(f"Deleted store at {path}")
    else:
        click.echo(f"No store at {path}")
