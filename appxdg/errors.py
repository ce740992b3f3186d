"""Exceptions raised while resolving application directories."""


class AppDirsError(Exception):
    """Base exception for appxdg errors."""

    pass


class InvalidIdentity(AppDirsError, ValueError):
    """Raised when a resolver is given no identity or one without a username."""

    pass


class UserLookupError(AppDirsError, LookupError):
    """Raised when the host user database cannot answer a query."""

    pass


class UserNotFound(UserLookupError):
    """Raised when no user matches the requested name or uid."""

    def __init__(self, username: str | None = None, uid: int | None = None):
        if username is not None:
            message = f"User not found: {username}"
        else:
            message = f"User not found for uid: {uid}"
        super().__init__(message)
        self.username = username
        self.uid = uid


class InvalidAppName(AppDirsError, ValueError):
    """Raised when an application name is empty."""

    def __init__(self, app: str = ""):
        super().__init__("app name cannot be empty")
        self.app = app
