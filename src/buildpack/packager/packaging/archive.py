"""Gzip-compressed tar writer for packaged buildpacks."""

from collections.abc import Iterable
import gzip
import os
from pathlib import Path, PurePosixPath
import stat
import tarfile

from ..exceptions import UnsafePathError
from ..interfaces import Logger


def check_relative(path: str) -> str:
    """Rejects archive entries that are absolute or climb out of the root."""
    posix = PurePosixPath(path.replace("\\", "/"))
    if not path or posix.is_absolute() or ".." in posix.parts:
        raise UnsafePathError(
            f"Refusing to archive '{path}': not a path inside the buildpack."
        )
    return str(posix)


def _add_file(out: tarfile.TarFile, root: Path, path: str, logger: Logger) -> None:
    logger.subsequent_line(f"Adding {path}")

    with (root / path).open("rb") as f:
        st = os.fstat(f.fileno())
        info = tarfile.TarInfo(name=path)
        info.size = st.st_size
        info.mode = stat.S_IMODE(st.st_mode)
        info.mtime = int(st.st_mtime)
        out.addfile(info, f)


def write_archive(
    destination: Path, root: Path, files: Iterable[str], logger: Logger
) -> Path:
    """
    Streams `files` (relative to `root`) into a .tgz at `destination`, in order.

    The gzip header carries no name or timestamp, so identical inputs produce
    identical bytes. A failed write removes the partial archive before the
    error propagates.
    """
    entries = [check_relative(path) for path in files]

    logger.first_line(f"Creating archive {destination}")
    destination.parent.mkdir(mode=0o755, parents=True, exist_ok=True)

    try:
        with (
            destination.open("wb") as raw,
            gzip.GzipFile(filename="", mode="wb", fileobj=raw, mtime=0) as gz,
            tarfile.open(fileobj=gz, mode="w") as out,
        ):
            for path in entries:
                _add_file(out, root, path, logger)
    except Exception:
        destination.unlink(missing_ok=True)
        raise

    return destination
