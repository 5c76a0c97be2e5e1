"""Pytest fixtures for the entire buildpack-packager test suite."""

import hashlib
from pathlib import Path
from typing import Any, Callable

import pytest

from buildpack.packager.buildpack import load_buildpack
from buildpack.packager.models import BuildpackMetadata

ARTIFACT_BYTES = b"pretend this is a JDK tarball\n"


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


class RecordingLogger:
    """A Logger that keeps every line instead of printing it."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.debug_messages: list[tuple[str, dict[str, Any]]] = []

    def first_line(self, message: str) -> None:
        self.lines.append(f"-----> {message}")

    def subsequent_line(self, message: str) -> None:
        self.lines.append(f"       {message}")

    def pretty_version(self, item: Any) -> str:
        return f"{getattr(item, 'name', '') or item.id} {item.version}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self.debug_messages.append((message, kwargs))


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def artifact_bytes() -> bytes:
    return ARTIFACT_BYTES


@pytest.fixture
def make_buildpack(tmp_path: Path) -> Callable[..., Path]:
    """A factory fixture that lays out a buildpack directory with a buildpack.toml."""

    def _make(
        version: str = "1.2.3",
        pre_package: str | None = None,
        dependencies: str = "",
        include_files: tuple[str, ...] = ("bin/build", "bin/detect", "buildpack.toml"),
        root: Path | None = None,
    ) -> Path:
        bp_root = root or tmp_path / "buildpack"
        (bp_root / "bin").mkdir(parents=True, exist_ok=True)

        build = bp_root / "bin" / "build"
        build.write_text("#!/bin/sh\necho build\n")
        build.chmod(0o755)
        detect = bp_root / "bin" / "detect"
        detect.write_text("#!/bin/sh\nexit 0\n")
        detect.chmod(0o755)

        metadata_lines = [
            "[metadata]",
            "include_files = [" + ", ".join(f'"{f}"' for f in include_files) + "]",
        ]
        if pre_package is not None:
            metadata_lines.append(f'pre_package = "{pre_package}"')

        (bp_root / "buildpack.toml").write_text(
            "[buildpack]\n"
            'id = "com.example.buildpack"\n'
            'name = "Example Buildpack"\n'
            f'version = "{version}"\n\n'
            "[[stacks]]\n"
            'id = "io.buildpacks.stacks.bionic"\n\n'
            + "\n".join(metadata_lines)
            + "\n\n"
            + dependencies
        )
        return bp_root

    return _make


@pytest.fixture
def dependency_toml() -> Callable[..., str]:
    """Renders a [[metadata.dependencies]] entry whose digest matches `content`."""

    def _render(
        dep_id: str = "openjdk-jdk",
        version: str = "11.0.1",
        content: bytes = ARTIFACT_BYTES,
    ) -> str:
        return (
            "[[metadata.dependencies]]\n"
            f'id = "{dep_id}"\n'
            'name = "OpenJDK JDK"\n'
            f'version = "{version}"\n'
            f'uri = "https://downloads.example.com/{dep_id}/{dep_id}-{version}.tgz"\n'
            f'sha256 = "{sha256_hex(content)}"\n'
            'stacks = ["io.buildpacks.stacks.bionic"]\n\n'
            "[[metadata.dependencies.licenses]]\n"
            'type = "GPL-2.0 WITH Classpath-exception-2.0"\n\n'
        )

    return _render


@pytest.fixture
def buildpack(make_buildpack: Callable[..., Path]) -> BuildpackMetadata:
    return load_buildpack(make_buildpack())
