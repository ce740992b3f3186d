"""Base directories fixed at construction time."""

from __future__ import annotations

from dataclasses import dataclass, field

from .spec import DirSpec


@dataclass(frozen=True)
class CustomBaseDirSpec:
    """A DirSpec that returns the values it was built with, ignoring the environment."""

    config_home_value: str = ""
    data_home_value: str = ""
    cache_home_value: str = ""
    runtime_dir_value: str = ""
    config_dirs_value: tuple[str, ...] = field(default_factory=tuple)
    data_dirs_value: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "config_dirs_value", tuple(self.config_dirs_value))
        object.__setattr__(self, "data_dirs_value", tuple(self.data_dirs_value))

    @classmethod
    def from_spec(cls, spec: DirSpec) -> CustomBaseDirSpec:
        """Snapshot the current values of another DirSpec."""
        return cls(
            config_home_value=spec.config_home(),
            data_home_value=spec.data_home(),
            cache_home_value=spec.cache_home(),
            runtime_dir_value=spec.runtime_dir(),
            config_dirs_value=tuple(spec.config_dirs()),
            data_dirs_value=tuple(spec.data_dirs()),
        )

    def config_home(self) -> str:
        return self.config_home_value

    def data_home(self) -> str:
        return self.data_home_value

    def cache_home(self) -> str:
        return self.cache_home_value

    def runtime_dir(self) -> str:
        return self.runtime_dir_value

    def config_dirs(self) -> list[str]:
        return list(self.config_dirs_value)

    def data_dirs(self) -> list[str]:
        return list(self.data_dirs_value)
