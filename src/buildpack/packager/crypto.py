"""
Digest helpers used to verify downloaded dependency artifacts.
"""

from pathlib import Path

from cryptography.hazmat.primitives import hashes

from .exceptions import ChecksumError

_CHUNK_SIZE = 64 * 1024


def sha256_digest(path: Path) -> str:
    """Returns the hex SHA-256 digest of a file, read in chunks."""
    digest = hashes.Hash(hashes.SHA256())
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.finalize().hex()


def verify_sha256(path: Path, expected: str) -> None:
    actual = sha256_digest(path)
    if actual != expected.lower():
        raise ChecksumError(
            f"SHA-256 mismatch for {path.name}: expected {expected}, got {actual}."
        )
