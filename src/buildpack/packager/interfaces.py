"""Behavioral contracts the packager depends on.

The packaging steps only need these method sets, so tests and alternative
buildpack sources can plug in without touching the concrete loader or cache.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from .models import BuildpackInfo, Dependency


class Buildpack(Protocol):
    @property
    def root(self) -> Path: ...

    @property
    def info(self) -> BuildpackInfo: ...

    @property
    def include_files(self) -> Sequence[str]: ...

    @property
    def dependencies(self) -> Sequence[Dependency]: ...

    @property
    def pre_package(self) -> str | None: ...


class CacheLayer(Protocol):
    @property
    def root(self) -> Path: ...

    def artifact(self) -> Path:
        """Returns the absolute path of the artifact, downloading it if needed."""
        ...

    def metadata(self, root: Path) -> Path: ...


class Cache(Protocol):
    def download_layer(self, dependency: Dependency) -> CacheLayer: ...


class Logger(Protocol):
    def first_line(self, message: str) -> None: ...

    def subsequent_line(self, message: str) -> None: ...

    def pretty_version(self, item: Any) -> str: ...

    def debug(self, message: str, **kwargs: Any) -> None: ...
