"""Locating and loading buildpacks described by `buildpack.toml`."""

from pathlib import Path
import tomllib

from pyvider.telemetry import logger

from .exceptions import BuildpackError
from .models import BUILDPACK_TOML, BuildpackMetadata


def find_buildpack_root(start_path: Path | None = None) -> Path:
    """Walks up from `start_path` to the first directory holding buildpack.toml."""
    current = (start_path or Path.cwd()).resolve()
    while True:
        if (current / BUILDPACK_TOML).is_file():
            return current
        if current.parent == current:
            raise BuildpackError(
                f"Could not find {BUILDPACK_TOML} in {start_path or Path.cwd()} "
                "or any parent directory."
            )
        current = current.parent


def load_buildpack(root: Path) -> BuildpackMetadata:
    root = root.resolve()
    manifest_path = root / BUILDPACK_TOML
    if not manifest_path.is_file():
        raise BuildpackError(f"{BUILDPACK_TOML} not found at {root}")

    try:
        with manifest_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise BuildpackError(f"Unable to parse {manifest_path}: {e}") from e

    try:
        buildpack = BuildpackMetadata.from_dict(root, data)
    except ValueError as e:
        raise BuildpackError(f"Invalid {manifest_path}: {e}") from e

    logger.debug(
        "Loaded buildpack",
        id=buildpack.info.id,
        version=buildpack.info.version,
        dependencies=len(buildpack.dependencies),
    )
    return buildpack
