"""Download cache for buildpack dependencies.

Each dependency lives in a layer directory named after its SHA-256 under the
cache root, with a JSON sidecar describing the dependency that was stored:

    dependency-cache/
        <sha256>/<artifact file name>
        <sha256>.json
"""

import json
from pathlib import Path
import posixpath
from typing import ContextManager
from urllib.parse import urlparse

import httpx

from .crypto import verify_sha256
from .exceptions import DependencyError
from .interfaces import Logger
from .models import Dependency

DOWNLOAD_TIMEOUT_SECONDS = 300.0


def _artifact_name(uri: str) -> str:
    name = posixpath.basename(urlparse(uri).path)
    if not name:
        raise DependencyError(f"Cannot determine an artifact file name from '{uri}'.")
    return name


class CacheLayer:
    """A single dependency's slot in the download cache."""

    def __init__(
        self,
        root: Path,
        dependency: Dependency,
        client: httpx.Client | None,
        logger: Logger,
    ) -> None:
        self.root = root
        self.dependency = dependency
        self.client = client
        self.logger = logger

    def metadata(self, root: Path) -> Path:
        return root.with_name(f"{root.name}.json")

    def artifact(self) -> Path:
        """Returns the cached artifact, downloading and verifying it if stale."""
        artifact_path = self.root / _artifact_name(self.dependency.uri)
        metadata_path = self.metadata(self.root)

        if artifact_path.is_file() and self._matches_cached(metadata_path):
            self.logger.subsequent_line("Reusing cached download from buildpack")
            self.logger.debug("Cache hit", path=str(artifact_path))
            return artifact_path

        self.logger.subsequent_line(f"Downloading from {self.dependency.uri}")
        self.root.mkdir(parents=True, exist_ok=True)
        partial_path = artifact_path.with_name(f"{artifact_path.name}.partial")
        try:
            self._download(partial_path)

            self.logger.subsequent_line("Verifying checksum")
            verify_sha256(partial_path, self.dependency.sha256)
            partial_path.replace(artifact_path)
        finally:
            partial_path.unlink(missing_ok=True)

        metadata_path.write_text(json.dumps(self.dependency.to_dict(), indent=2))
        return artifact_path

    def _matches_cached(self, metadata_path: Path) -> bool:
        if not metadata_path.is_file():
            return False
        try:
            cached = json.loads(metadata_path.read_text())
        except json.JSONDecodeError:
            self.logger.debug("Ignoring unreadable cache metadata", path=str(metadata_path))
            return False
        return cached == self.dependency.to_dict()

    def _open_stream(self) -> ContextManager[httpx.Response]:
        if self.client is not None:
            return self.client.stream("GET", self.dependency.uri)
        return httpx.stream(
            "GET",
            self.dependency.uri,
            follow_redirects=True,
            timeout=DOWNLOAD_TIMEOUT_SECONDS,
        )

    def _download(self, destination: Path) -> None:
        try:
            with self._open_stream() as response:
                response.raise_for_status()
                with destination.open("wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)
        except httpx.HTTPError as e:
            raise DependencyError(
                f"Failed to download {self.dependency.id} from {self.dependency.uri}: {e}"
            ) from e


class DependencyCache:
    def __init__(
        self,
        root: Path,
        logger: Logger,
        client: httpx.Client | None = None,
    ) -> None:
        self.root = root
        self.logger = logger
        self.client = client

    def download_layer(self, dependency: Dependency) -> CacheLayer:
        return CacheLayer(
            self.root / dependency.sha256, dependency, self.client, self.logger
        )
