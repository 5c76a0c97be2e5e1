# buildpack/packager/__init__.py
"""
This package packages buildpacks, together with their cached dependencies,
into versioned .tgz archives ready for distribution.
"""

from .models import BuildpackInfo, BuildpackMetadata, Dependency
from .packaging.orchestrator import Packager

__all__ = [
    "BuildpackInfo",
    "BuildpackMetadata",
    "Dependency",
    "Packager",
]
