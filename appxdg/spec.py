"""The capability every base-directory source provides."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DirSpec(Protocol):
    """Supplies the six base directories that application paths are built on."""

    def config_home(self) -> str: ...

    def data_home(self) -> str: ...

    def cache_home(self) -> str: ...

    def runtime_dir(self) -> str: ...

    def config_dirs(self) -> list[str]: ...

    def data_dirs(self) -> list[str]: ...
