"""Environment variables and fallback values for XDG base directories."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

ENV_XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
ENV_XDG_DATA_HOME = "XDG_DATA_HOME"
ENV_XDG_CACHE_HOME = "XDG_CACHE_HOME"
ENV_XDG_RUNTIME_DIR = "XDG_RUNTIME_DIR"
ENV_XDG_CONFIG_DIRS = "XDG_CONFIG_DIRS"
ENV_XDG_DATA_DIRS = "XDG_DATA_DIRS"

DEFAULT_CONFIG_DIRS: tuple[str, ...] = ("/etc/xdg",)
DEFAULT_DATA_DIRS: tuple[str, ...] = ("/usr/local/share", "/usr/share")
RUNTIME_ROOT = "/run/user"
HOME_ROOT = "/home"

PATH_LIST_SEPARATOR = ":"


def _environ(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def env_dir(name: str, fallback: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the value of ``name`` if it is set and non-empty, else ``fallback``."""
    value = _environ(environ).get(name, "")
    return value or fallback


def split_dirs(value: str) -> list[str]:
    """Split a colon-separated directory list, dropping empty segments."""
    return [segment for segment in value.split(PATH_LIST_SEPARATOR) if segment]


def env_dirs(name: str, fallback: Iterable[str], environ: Mapping[str, str] | None = None) -> list[str]:
    """
    Return the directory list held in ``name``.

    An unset or empty variable yields a fresh copy of ``fallback``. A variable
    made only of separators yields an empty list, not the fallback.
    """
    value = _environ(environ).get(name, "")
    if not value:
        return list(fallback)
    return split_dirs(value)
