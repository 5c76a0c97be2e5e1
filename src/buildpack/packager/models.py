from pathlib import Path
from typing import Any, Self

from attrs import define, field

BUILDPACK_TOML = "buildpack.toml"
DEPENDENCY_CACHE_DIR = "dependency-cache"


def _require_str(data: dict[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{context} is missing required string '{key}'.")
    return value


def _str_tuple(value: Any, context: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{context} must be a list of strings.")
    return tuple(value)


@define(frozen=True, slots=True)
class BuildpackInfo:
    id: str
    version: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            id=_require_str(data, "id", "[buildpack]"),
            version=_require_str(data, "version", "[buildpack]"),
            name=data.get("name") or "",
        )


@define(frozen=True, slots=True)
class License:
    type: str = ""
    uri: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "uri": self.uri}


@define(frozen=True, slots=True)
class Dependency:
    id: str
    version: str
    uri: str
    sha256: str
    name: str = ""
    stacks: tuple[str, ...] = field(default=(), converter=tuple)
    licenses: tuple[License, ...] = field(default=(), converter=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        context = f"Dependency '{data.get('id', '?')}'"
        licenses = data.get("licenses") or []
        if not isinstance(licenses, list) or not all(
            isinstance(entry, dict) for entry in licenses
        ):
            raise ValueError(f"{context} licenses must be a list of tables.")
        return cls(
            id=_require_str(data, "id", context),
            version=_require_str(data, "version", context),
            uri=_require_str(data, "uri", context),
            sha256=_require_str(data, "sha256", context).lower(),
            name=data.get("name") or "",
            stacks=_str_tuple(data.get("stacks"), f"{context} stacks"),
            licenses=tuple(
                License(type=entry.get("type", ""), uri=entry.get("uri", ""))
                for entry in licenses
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form, written next to a cached artifact."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "uri": self.uri,
            "sha256": self.sha256,
            "stacks": list(self.stacks),
            "licenses": [entry.to_dict() for entry in self.licenses],
        }


@define(frozen=True, slots=True)
class BuildpackMetadata:
    """A loaded buildpack: its identity, root directory and packaging metadata."""

    root: Path
    info: BuildpackInfo
    include_files: tuple[str, ...] = field(default=(), converter=tuple)
    dependencies: tuple[Dependency, ...] = field(default=(), converter=tuple)
    pre_package: str | None = None
    stacks: tuple[str, ...] = field(default=(), converter=tuple)

    @property
    def cache_root(self) -> Path:
        return self.root / DEPENDENCY_CACHE_DIR

    @classmethod
    def from_dict(cls, root: Path, data: dict[str, Any]) -> Self:
        buildpack_table = data.get("buildpack")
        if not isinstance(buildpack_table, dict):
            raise ValueError("A [buildpack] table is required.")

        metadata = data.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValueError("[metadata] must be a table.")

        pre_package = metadata.get("pre_package")
        if pre_package is not None and not isinstance(pre_package, str):
            raise ValueError("metadata.pre_package must be a string.")

        raw_dependencies = metadata.get("dependencies") or []
        if not isinstance(raw_dependencies, list) or not all(
            isinstance(entry, dict) for entry in raw_dependencies
        ):
            raise ValueError("metadata.dependencies must be an array of tables.")

        stacks = data.get("stacks") or []
        if not isinstance(stacks, list):
            raise ValueError("[[stacks]] must be an array of tables.")

        return cls(
            root=root,
            info=BuildpackInfo.from_dict(buildpack_table),
            include_files=_str_tuple(
                metadata.get("include_files"), "metadata.include_files"
            ),
            dependencies=tuple(Dependency.from_dict(d) for d in raw_dependencies),
            pre_package=pre_package or None,
            stacks=tuple(
                s["id"] for s in stacks if isinstance(s, dict) and "id" in s
            ),
        )
