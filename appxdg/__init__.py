"""XDG base directories scoped to an application."""

from .appdirs import AppDirs
from .custom import CustomBaseDirSpec
from .errors import AppDirsError, InvalidAppName, InvalidIdentity, UserLookupError, UserNotFound
from .spec import DirSpec
from .xdg import Identity, XDGBaseDirSpec

__all__ = [
    "AppDirs",
    "AppDirsError",
    "CustomBaseDirSpec",
    "DirSpec",
    "Identity",
    "InvalidAppName",
    "InvalidIdentity",
    "UserLookupError",
    "UserNotFound",
    "XDGBaseDirSpec",
    "new",
]


def new(app: str) -> AppDirs:
    """Return the XDG directories of ``app`` for the invoking user."""
    return AppDirs.for_current_user(app)
