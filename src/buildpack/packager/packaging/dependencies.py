"""Resolves declared dependencies into cached files inside the buildpack."""

from pathlib import Path

from ..exceptions import DependencyError
from ..interfaces import Buildpack, Cache, Logger


def _relative_to_root(root: Path, path: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError as e:
        raise DependencyError(
            f"Cached file {path} is not inside the buildpack root {root}."
        ) from e


def resolve_dependencies(buildpack: Buildpack, cache: Cache, logger: Logger) -> list[str]:
    """
    Materializes every declared dependency through `cache`, in declaration
    order, and returns `[artifact, metadata, ...]` relative to the buildpack root.
    """
    files: list[str] = []
    for dependency in buildpack.dependencies:
        logger.first_line(f"Caching {logger.pretty_version(dependency)}")

        layer = cache.download_layer(dependency)
        artifact = _relative_to_root(buildpack.root, layer.artifact())
        metadata = _relative_to_root(buildpack.root, layer.metadata(layer.root))

        logger.debug("Cached dependency", id=dependency.id, artifact=artifact)
        files.extend([artifact, metadata])

    return files
