"""Command-line interface for appxdg."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from .appdirs import AppDirs
from .errors import AppDirsError
from .xdg import XDGBaseDirSpec

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Resolve XDG directories for an application")


class DirKind(str, Enum):
    CONFIG_HOME = "config-home"
    DATA_HOME = "data-home"
    CACHE_HOME = "cache-home"
    RUNTIME_DIR = "runtime-dir"
    CONFIG_DIRS = "config-dirs"
    DATA_DIRS = "data-dirs"


class FileKind(str, Enum):
    CONFIG = "config"
    DATA = "data"


def _app_dirs(app_name: str, user: str | None) -> AppDirs:
    try:
        root = XDGBaseDirSpec.from_username(user) if user else XDGBaseDirSpec.current()
        return AppDirs(app_name, root)
    except AppDirsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def collect_dirs(dirs: AppDirs) -> dict[str, list[Path]]:
    return {
        DirKind.CONFIG_HOME.value: [dirs.config_home()],
        DirKind.DATA_HOME.value: [dirs.data_home()],
        DirKind.CACHE_HOME.value: [dirs.cache_home()],
        DirKind.RUNTIME_DIR.value: [dirs.runtime_dir()],
        DirKind.CONFIG_DIRS.value: dirs.config_dirs(),
        DirKind.DATA_DIRS.value: dirs.data_dirs(),
    }


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Log how each directory is resolved")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def show(
    app_name: Annotated[str, typer.Argument(metavar="APP", help="Application name")],
    user: Annotated[str | None, typer.Option("--user", help="Resolve for this user instead of the current one")] = None,
    kind: Annotated[DirKind | None, typer.Option("--kind", help="Only print this directory")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON object")] = False,
) -> None:
    """Print the directories of APP."""
    collected = collect_dirs(_app_dirs(app_name, user))
    if kind is not None:
        collected = {kind.value: collected[kind.value]}
    if as_json:
        payload: dict[str, str | list[str]] = {}
        for key, paths in collected.items():
            values = [str(path) for path in paths]
            payload[key] = values if key.endswith("-dirs") else values[0]
        typer.echo(json.dumps(payload, indent=2))
        return
    for key, paths in collected.items():
        for path in paths:
            typer.echo(str(path) if kind is not None else f"{key}: {path}")


@app.command()
def files(
    app_name: Annotated[str, typer.Argument(metavar="APP", help="Application name")],
    filename: Annotated[str, typer.Argument(help="File name to locate")],
    kind: Annotated[FileKind, typer.Option("--kind", help="Which directories to search")] = FileKind.CONFIG,
    user: Annotated[str | None, typer.Option("--user", help="Resolve for this user instead of the current one")] = None,
) -> None:
    """Print candidate paths for FILENAME, highest priority first."""
    dirs = _app_dirs(app_name, user)
    candidates = dirs.config_files(filename) if kind is FileKind.CONFIG else dirs.data_files(filename)
    for candidate in candidates:
        typer.echo(str(candidate))


@app.command()
def init(
    app_name: Annotated[str, typer.Argument(metavar="APP", help="Application name")],
    user: Annotated[str | None, typer.Option("--user", help="Resolve for this user instead of the current one")] = None,
) -> None:
    """Create the config, data and cache directories of APP."""
    dirs = _app_dirs(app_name, user)
    try:
        created = dirs.create_directories()
    except OSError as exc:
        typer.echo(f"Error: could not create directories: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    for directory in created:
        typer.echo(str(directory))


def run() -> None:
    app(prog_name="appxdg")
