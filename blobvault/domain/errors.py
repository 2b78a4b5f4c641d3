from __future__ import annotations


class BlobVaultError(Exception):
    pass


class UnsupportedContentType(BlobVaultError):
    """Request is not multipart/form-data or carries no usable boundary."""

    def __init__(self, content_type: str | None):
        super().__init__(f"unsupported_content_type:{content_type!r}")
        self.content_type = content_type


class MalformedMultipart(BlobVaultError):
    """Body could not be decoded, or a part lacks its name/filename."""


class FieldError(BlobVaultError):
    """Failure scoped to a single uploaded field; siblings keep going."""


class MissingExtension(FieldError):
    def __init__(self, filename: str):
        super().__init__(f"missing file extension: {filename!r}")
        self.filename = filename


class InvalidExtension(FieldError):
    def __init__(self, extension: str):
        super().__init__(f"invalid file extension: {extension!r}")
        self.extension = extension


class IOFailure(FieldError):
    def __init__(self, cause: OSError):
        if cause.strerror and cause.errno is not None:
            message = f"{cause.strerror} (os error {cause.errno})"
        else:
            message = str(cause)
        super().__init__(message)
        self.cause = cause
