"""Generators for filesystem paths built from roots, segments and extensions."""

from __future__ import annotations

import pathlib
import random
from dataclasses import dataclass
from typing import Any, Sequence

from .core import FAKER, Faker, fake, register

DEFAULT_ROOT_DIRS = ("/", "/home", "/usr", "/var", "/tmp", "/opt", "/etc")
DEFAULT_SEGMENTS = ("bin", "lib", "share", "data", "docs", "src", "cache", "config")
DEFAULT_EXTENSIONS = ("txt", "log", "json", "csv", "md", "conf", "bin")


@dataclass(frozen=True)
class PathFaker:
    """Config for a path: a root, up to ``max_level`` segments, then an extension.

    Each level adds a segment with even odds.  The extension is applied
    only when the path has a file name.
    """

    root_dirs: Sequence[str]
    segments: Sequence[str]
    extensions: Sequence[str]
    max_level: int = 3

    def __post_init__(self) -> None:
        for name in ("root_dirs", "segments", "extensions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.max_level < 0:
            raise ValueError("max_level must not be negative")


DEFAULT_PATH_FAKER = PathFaker(DEFAULT_ROOT_DIRS, DEFAULT_SEGMENTS, DEFAULT_EXTENSIONS, 3)

_PATH_TYPES = (
    pathlib.Path,
    pathlib.PurePath,
    pathlib.PurePosixPath,
    pathlib.PureWindowsPath,
)


def _build(path_type: type, config: PathFaker, rng: random.Random) -> pathlib.PurePath:
    if not config.root_dirs:
        raise ValueError("no root directories to choose from")
    path = path_type(rng.choice(config.root_dirs))
    for _ in range(config.max_level):
        if fake(bool, FAKER, rng):
            if not config.segments:
                raise ValueError("no path segments to choose from")
            path = path / rng.choice(config.segments)
    if config.extensions:
        extension = rng.choice(config.extensions)
        if path.name:
            path = path.with_suffix(f".{extension}" if extension else "")
    return path


def _path_default(target: type, config: Faker, rng: random.Random) -> pathlib.PurePath:
    return _build(target, DEFAULT_PATH_FAKER, rng)


def _path_configured(target: type, config: PathFaker, rng: random.Random) -> Any:
    return _build(target, config, rng)


for _path_type in _PATH_TYPES:
    register(_path_type, Faker)(_path_default)
    register(_path_type, PathFaker)(_path_configured)