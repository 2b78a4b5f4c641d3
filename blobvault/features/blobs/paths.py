"""Digest -> on-disk location and public URI.

Layout: ``<root>/<hex[0:2]>/<hex[2:4]>/<hex>.<ext>``. The stem is always the full
digest; the two shard prefixes are repeated in it, not stripped from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from blobvault.domain.errors import InvalidExtension, MissingExtension
from blobvault.features.blobs.digest import ContentDigest

SHARD_WIDTH = 2
SHARD_DEPTH = 2

# Keeps <hex>.<ext> well under NAME_MAX even for 4-byte UTF-8 characters.
MAX_EXTENSION_LENGTH = 32


@dataclass(frozen=True)
class DerivedPath:
    storage_path: Path
    relative: PurePosixPath
    access_uri: str


def extension_of(filename: str) -> str:
    # Some clients send the full local path; only the last component counts.
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        raise MissingExtension(filename)
    return ext


def _unsafe(ch: str) -> bool:
    return ch in "/\\" or ord(ch) < 0x20 or ord(ch) == 0x7F


def shard_parts(hex_digest: str) -> list[str]:
    return [hex_digest[i * SHARD_WIDTH : (i + 1) * SHARD_WIDTH] for i in range(SHARD_DEPTH)]


class PathDeriver:
    def __init__(self, storage_root: Path, access_domain: str) -> None:
        self._root = Path(storage_root)
        self._domain = access_domain

    def derive(self, digest: ContentDigest, extension: str) -> DerivedPath:
        ext = extension.lower()
        if not ext:
            raise MissingExtension(extension)
        if len(ext) > MAX_EXTENSION_LENGTH or any(_unsafe(ch) for ch in ext):
            raise InvalidExtension(ext)
        text = digest.hex
        relative = PurePosixPath(*shard_parts(text), f"{text}.{ext}")
        return DerivedPath(
            storage_path=self._root.joinpath(*relative.parts),
            relative=relative,
            access_uri=f"{self._domain}/{relative.as_posix()}",
        )
