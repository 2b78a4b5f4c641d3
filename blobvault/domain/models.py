from __future__ import annotations

from dataclasses import dataclass, field

from blobvault.features.blobs.digest import ContentDigest


@dataclass(frozen=True)
class UploadField:
    field_name: str
    original_filename: str
    content: bytes
    # Hashed while the part streamed in; None when built from a plain buffer.
    digest: ContentDigest | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UploadResult:
    filename: str
    field_name: str
    uri: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, field: UploadField, uri: str) -> UploadResult:
        return cls(filename=field.original_filename, field_name=field.field_name, uri=uri)

    @classmethod
    def failure(cls, field: UploadField, error: str) -> UploadResult:
        return cls(filename=field.original_filename, field_name=field.field_name, error=error)
