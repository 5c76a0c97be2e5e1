"""Destination path derivation for packaged buildpacks."""

from datetime import datetime
from pathlib import Path

from ..exceptions import MissingArgumentError

SNAPSHOT_TOKEN = "SNAPSHOT"
SNAPSHOT_TIMESTAMP_FORMAT = "%Y%m%d.%H%M%S"


def archive_path(
    output_dir: str | Path | None,
    buildpack_id: str,
    version: str,
    now: datetime | None = None,
) -> Path:
    """
    Returns `<output_dir>/<id segments>/<id>/<version>/<id>-<version>.tgz`.

    The first `SNAPSHOT` in the version is replaced with a `YYYYMMDD.HHMMSS-1`
    timestamp in the file name only; the version directory is kept verbatim.
    """
    if not output_dir:
        raise MissingArgumentError("An output directory must be supplied.")

    file_version = version
    if SNAPSHOT_TOKEN in version:
        timestamp = (now or datetime.now()).strftime(SNAPSHOT_TIMESTAMP_FORMAT)
        file_version = version.replace(SNAPSHOT_TOKEN, f"{timestamp}-1", 1)

    return Path(
        output_dir,
        *buildpack_id.split("."),
        buildpack_id,
        version,
        f"{buildpack_id}-{file_version}.tgz",
    )
