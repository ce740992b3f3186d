"""Application-scoped directories built on top of a DirSpec."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidAppName
from .paths import join, join_each
from .spec import DirSpec
from .xdg import XDGBaseDirSpec

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755


def validate_app(app: str) -> str:
    if not app:
        raise InvalidAppName(app)
    return app


@dataclass(frozen=True)
class AppDirs:
    """
    Directories for one application.

    ``app`` is appended as the last path segment of every directory supplied by
    ``root``: with a config home of ``~/.config`` and an app named ``myapp`` the
    app config directory is ``~/.config/myapp``.

    Lists of files are ordered by priority. The user-specific path comes first,
    followed by one path per system directory, so callers should prefer the
    earliest entry that exists.
    """

    app: str
    root: DirSpec

    def __post_init__(self) -> None:
        _ = validate_app(self.app)

    @classmethod
    def for_current_user(cls, app: str) -> AppDirs:
        """Return the XDG directories of ``app`` for the invoking user."""
        return cls(app, XDGBaseDirSpec.current())

    @classmethod
    def for_user(cls, app: str, username: str) -> AppDirs:
        return cls(app, XDGBaseDirSpec.from_username(username))

    def config_home(self) -> Path:
        return join(self.root.config_home(), self.app)

    def data_home(self) -> Path:
        return join(self.root.data_home(), self.app)

    def cache_home(self) -> Path:
        return join(self.root.cache_home(), self.app)

    def runtime_dir(self) -> Path:
        return join(self.root.runtime_dir(), self.app)

    def config_dirs(self) -> list[Path]:
        return join_each(self.root.config_dirs(), self.app)

    def data_dirs(self) -> list[Path]:
        return join_each(self.root.data_dirs(), self.app)

    def config_file(self, filename: str) -> Path:
        """Path of a user-specific config file, e.g. ``~/.config/APP/app.conf``."""
        return join(self.config_home(), filename)

    def system_config_files(self, filename: str) -> list[Path]:
        return join_each(self.config_dirs(), filename)

    def config_files(self, filename: str) -> list[Path]:
        """User config file followed by the system-wide candidates."""
        return [self.config_file(filename), *self.system_config_files(filename)]

    def data_file(self, filename: str) -> Path:
        return join(self.data_home(), filename)

    def system_data_files(self, filename: str) -> list[Path]:
        return join_each(self.data_dirs(), filename)

    def data_files(self, filename: str) -> list[Path]:
        return [self.data_file(filename), *self.system_data_files(filename)]

    def cache_file(self, filename: str) -> Path:
        return join(self.cache_home(), filename)

    def runtime_file(self, filename: str) -> Path:
        return join(self.runtime_dir(), filename)

    def find_config_file(self, filename: str) -> Path | None:
        """Return the highest-priority config file that exists, if any."""
        return _first_existing(self.config_files(filename))

    def find_data_file(self, filename: str) -> Path | None:
        return _first_existing(self.data_files(filename))

    def create_directories(self) -> list[Path]:
        """
        Create the user config, data and cache directories.

        The runtime directory is left alone because the session manager usually
        owns it, and system-wide directories are skipped since the user rarely
        has write access there. Creation stops at the first failure and the
        OSError propagates; directories created before it are kept.

        Returns:
            The directories, in creation order.
        """
        dirs = [self.config_home(), self.data_home(), self.cache_home()]
        for directory in dirs:
            logger.debug("Ensuring directory %s", directory)
            make_dirs(directory)
        return dirs

    def __repr__(self) -> str:
        return f"AppDirs(app={self.app!r}, root={self.root!r})"


def make_dirs(directory: Path, mode: int = DIRECTORY_MODE) -> None:
    """Create ``directory`` and any missing parents, each with ``mode``."""
    for segment in reversed([directory, *directory.parents]):
        if segment.is_dir():
            continue
        segment.mkdir(mode=mode, exist_ok=True)


def _first_existing(candidates: list[Path]) -> Path | None:
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None
