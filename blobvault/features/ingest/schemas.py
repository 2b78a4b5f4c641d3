from __future__ import annotations

from pydantic import BaseModel

from blobvault.domain.models import UploadResult


class FileObject(BaseModel):
    filename: str
    name: str
    # Carries the error text instead of a URI when the field failed.
    uri: str

    @classmethod
    def from_result(cls, r: UploadResult) -> FileObject:
        return cls(filename=r.filename, name=r.field_name, uri=r.uri if r.ok else r.error or "")


class UploadResponse(BaseModel):
    msg: str = "ok"
    result: list[FileObject]
