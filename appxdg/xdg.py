"""XDG Base Directory resolution for a single user."""

from __future__ import annotations

import logging
import os
import pwd
from collections.abc import Mapping
from dataclasses import dataclass

from .config import (
    DEFAULT_CONFIG_DIRS,
    DEFAULT_DATA_DIRS,
    ENV_XDG_CACHE_HOME,
    ENV_XDG_CONFIG_DIRS,
    ENV_XDG_CONFIG_HOME,
    ENV_XDG_DATA_DIRS,
    ENV_XDG_DATA_HOME,
    ENV_XDG_RUNTIME_DIR,
    HOME_ROOT,
    RUNTIME_ROOT,
    env_dir,
    env_dirs,
)
from .errors import InvalidIdentity, UserLookupError, UserNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    home_directory: str
    user_id: str
    username: str

    def __post_init__(self) -> None:
        if not self.username:
            raise InvalidIdentity("username is empty")

    @classmethod
    def from_passwd(cls, entry: pwd.struct_passwd) -> Identity:
        return cls(home_directory=entry.pw_dir, user_id=str(entry.pw_uid), username=entry.pw_name)


def lookup_identity(username: str) -> Identity:
    """Return the identity of ``username`` from the host user database."""
    try:
        entry = pwd.getpwnam(username)
    except KeyError:
        raise UserNotFound(username=username) from None
    except (ValueError, OSError) as exc:
        raise UserLookupError(f"Cannot look up user {username!r}: {exc}") from exc
    return Identity.from_passwd(entry)


def current_identity() -> Identity:
    """Return the identity of the user running this process."""
    uid = os.getuid()
    try:
        entry = pwd.getpwuid(uid)
    except KeyError:
        raise UserNotFound(uid=uid) from None
    except (ValueError, OSError) as exc:
        raise UserLookupError(f"Cannot look up uid {uid}: {exc}") from exc
    return Identity.from_passwd(entry)


def validate_identity(identity: Identity | None) -> Identity:
    if identity is None:
        raise InvalidIdentity("identity is missing")
    if not identity.username:
        raise InvalidIdentity("username is empty")
    return identity


class XDGBaseDirSpec:
    """
    Resolves the XDG base directories for one user.

    Every accessor reads the environment when called, so changes made to the
    environment after construction are picked up by the next call.
    """

    __slots__ = ("_identity", "_environ")

    def __init__(self, identity: Identity | None, environ: Mapping[str, str] | None = None) -> None:
        self._identity: Identity = validate_identity(identity)
        self._environ: Mapping[str, str] | None = environ

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def environ(self) -> Mapping[str, str] | None:
        """The mapping read by the accessors; None means the live process environment."""
        return self._environ

    @classmethod
    def from_identity(cls, identity: Identity | None, environ: Mapping[str, str] | None = None) -> XDGBaseDirSpec:
        return cls(identity, environ=environ)

    @classmethod
    def from_username(cls, username: str, environ: Mapping[str, str] | None = None) -> XDGBaseDirSpec:
        """Build a resolver for ``username``; raises UserNotFound for unknown users."""
        return cls(lookup_identity(username), environ=environ)

    @classmethod
    def current(cls, environ: Mapping[str, str] | None = None) -> XDGBaseDirSpec:
        """Build a resolver for the invoking user."""
        return cls(current_identity(), environ=environ)

    def user_home_dir(self) -> str:
        if self.identity.home_directory:
            return self.identity.home_directory
        return f"{HOME_ROOT}/{self.identity.username}"

    def default_config_home(self) -> str:
        return self.user_home_dir() + "/.config"

    def default_data_home(self) -> str:
        return self.user_home_dir() + "/.local/share"

    def default_cache_home(self) -> str:
        return self.user_home_dir() + "/.cache"

    def default_runtime_dir(self) -> str:
        """
        Return the default runtime directory, ``/run/user/<uid>``.

        This is where sockets, named pipes and other non-essential runtime
        files belong. On systemd hosts the directory is managed by logind.
        """
        return f"{RUNTIME_ROOT}/{self.identity.user_id}"

    def default_config_dirs(self) -> list[str]:
        return list(DEFAULT_CONFIG_DIRS)

    def default_data_dirs(self) -> list[str]:
        return list(DEFAULT_DATA_DIRS)

    def config_home(self) -> str:
        return self._resolve(ENV_XDG_CONFIG_HOME, self.default_config_home())

    def data_home(self) -> str:
        return self._resolve(ENV_XDG_DATA_HOME, self.default_data_home())

    def cache_home(self) -> str:
        return self._resolve(ENV_XDG_CACHE_HOME, self.default_cache_home())

    def runtime_dir(self) -> str:
        return self._resolve(ENV_XDG_RUNTIME_DIR, self.default_runtime_dir())

    def config_dirs(self) -> list[str]:
        return env_dirs(ENV_XDG_CONFIG_DIRS, DEFAULT_CONFIG_DIRS, self._environ)

    def data_dirs(self) -> list[str]:
        return env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, self._environ)

    def _resolve(self, name: str, fallback: str) -> str:
        value = env_dir(name, fallback, self._environ)
        logger.debug("Resolved %s to %s", name, value)
        return value

    def __repr__(self) -> str:
        return f"XDGBaseDirSpec(username={self.identity.username!r})"
