import hashlib
from dataclasses import dataclass

DIGEST_SIZE = 32


@dataclass(frozen=True)
class ContentDigest:
    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != DIGEST_SIZE:
            raise ValueError(f"Expected a {DIGEST_SIZE}-byte digest, got {len(self.raw)}")

    @property
    def hex(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return self.hex


def digest(data: bytes) -> ContentDigest:
    return ContentDigest(hashlib.sha256(data).digest())


class StreamingDigest:
    """Incremental variant of `digest` for data that arrives in chunks.

    Feeding the same bytes in any chunking yields the same ContentDigest as
    hashing the concatenated buffer at once.
    """

    def __init__(self) -> None:
        self._h = hashlib.sha256()

    def update(self, chunk: bytes) -> None:
        self._h.update(chunk)

    def finish(self) -> ContentDigest:
        return ContentDigest(self._h.digest())
