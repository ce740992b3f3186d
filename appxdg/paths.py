"""Path joining used to scope base directories to an application."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


def join(base: str | Path, *parts: str) -> Path:
    """
    Append ``parts`` to ``base`` as path segments.

    Empty segments are skipped and leading separators on a part are dropped,
    so an absolute part is nested under ``base`` instead of replacing it.
    The result is normalised lexically: duplicate separators collapse and
    ``..`` removes the preceding segment. Symlinks are not consulted.
    """
    segments = [str(part).lstrip("/") for part in parts if part]
    joined = os.path.join(str(base), *[segment for segment in segments if segment])
    return Path(os.path.normpath(joined))


def join_each(bases: Iterable[str | Path], *parts: str) -> list[Path]:
    return [join(base, *parts) for base in bases]
