"""Drives a packaging run from pre-package hook to finished archive."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..buildpack import find_buildpack_root, load_buildpack
from ..cache import DependencyCache
from ..config import PackagerConfig
from ..console import PackagerLogger
from ..interfaces import Buildpack, Cache, Logger
from .archive import write_archive
from .dependencies import resolve_dependencies
from .hooks import run_pre_package
from .paths import archive_path


class Packager:
    """Packages a buildpack and its cached dependencies into a single .tgz.

    The run is strictly sequential; the first failing step aborts it and its
    error propagates unchanged.
    """

    def __init__(
        self,
        buildpack: Buildpack,
        cache: Cache,
        logger: Logger,
        output_dir: str | Path | None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.buildpack = buildpack
        self.cache = cache
        self.logger = logger
        self.output_dir = output_dir
        self.clock = clock

    @classmethod
    def default(
        cls,
        output_dir: str | Path | None,
        config: PackagerConfig | None = None,
        start_dir: Path | None = None,
    ) -> "Packager":
        """Loads the buildpack enclosing `start_dir` and wires the default collaborators."""
        logger = PackagerLogger(config)
        buildpack = load_buildpack(find_buildpack_root(start_dir))
        cache = DependencyCache(buildpack.cache_root, logger)
        return cls(buildpack=buildpack, cache=cache, logger=logger, output_dir=output_dir)

    def archive_path(self) -> Path:
        info = self.buildpack.info
        return archive_path(self.output_dir, info.id, info.version, now=self.clock())

    def create(self) -> Path:
        self.logger.first_line(f"Packaging {self.logger.pretty_version(self.buildpack.info)}")
        self.logger.debug("Packaging run started", root=str(self.buildpack.root))

        run_pre_package(self.buildpack, self.logger)

        included_files = list(self.buildpack.include_files)
        dependency_files = resolve_dependencies(self.buildpack, self.cache, self.logger)

        return write_archive(
            self.archive_path(),
            self.buildpack.root,
            included_files + dependency_files,
            self.logger,
        )
