"""Incremental multipart/form-data decoding.

`MultipartDecoder` wraps python-multipart's push parser: raw body chunks go in,
complete `UploadField`s come out as soon as each part's closing boundary has
been seen. `iter_fields` drives it from an async byte stream such as
``request.stream()``.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import AsyncIterable, AsyncIterator

from python_multipart.exceptions import MultipartParseError
from python_multipart.multipart import MultipartParser, parse_options_header

from blobvault.domain.errors import MalformedMultipart, UnsupportedContentType
from blobvault.domain.models import UploadField
from blobvault.features.blobs.digest import StreamingDigest

logger = logging.getLogger(__name__)

FORM_DATA = b"multipart/form-data"


def parse_boundary(content_type: str | None) -> bytes:
    if not content_type:
        raise UnsupportedContentType(content_type)
    ctype, params = parse_options_header(content_type)
    if ctype.lower() != FORM_DATA:
        raise UnsupportedContentType(content_type)
    boundary = params.get(b"boundary")
    if not boundary:
        raise UnsupportedContentType(content_type)
    return boundary


def _decode(value: bytes) -> str:
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        return value.decode("latin-1")


class MultipartDecoder:
    def __init__(self, boundary: bytes) -> None:
        self._ready: deque[UploadField] = deque()
        self._in_part = False
        self._header_field = b""
        self._header_value = b""
        self._headers: dict[bytes, bytes] = {}
        self._name = ""
        self._filename = ""
        self._buffer = bytearray()
        self._hasher = StreamingDigest()
        self._parser = MultipartParser(
            boundary,
            {
                "on_part_begin": self._on_part_begin,
                "on_part_data": self._on_part_data,
                "on_part_end": self._on_part_end,
                "on_header_field": self._on_header_field,
                "on_header_value": self._on_header_value,
                "on_header_end": self._on_header_end,
                "on_headers_finished": self._on_headers_finished,
            },
        )

    def _on_part_begin(self) -> None:
        self._in_part = True
        self._headers = {}
        self._buffer = bytearray()
        self._hasher = StreamingDigest()

    def _on_header_field(self, data: bytes, start: int, end: int) -> None:
        self._header_field += data[start:end]

    def _on_header_value(self, data: bytes, start: int, end: int) -> None:
        self._header_value += data[start:end]

    def _on_header_end(self) -> None:
        self._headers[self._header_field.lower()] = self._header_value
        self._header_field = b""
        self._header_value = b""

    def _on_headers_finished(self) -> None:
        disposition = self._headers.get(b"content-disposition")
        if disposition is None:
            raise MalformedMultipart("part without Content-Disposition header")
        _, options = parse_options_header(disposition)
        if b"name" not in options:
            raise MalformedMultipart("part without a field name")
        if b"filename" not in options:
            raise MalformedMultipart(f"field {_decode(options[b'name'])!r} has no filename")
        self._name = _decode(options[b"name"])
        self._filename = _decode(options[b"filename"])
        logger.debug("field %r filename %r", self._name, self._filename)

    def _on_part_data(self, data: bytes, start: int, end: int) -> None:
        chunk = data[start:end]
        self._buffer += chunk
        self._hasher.update(chunk)

    def _on_part_end(self) -> None:
        self._in_part = False
        logger.debug("file size = %d", len(self._buffer))
        self._ready.append(
            UploadField(
                field_name=self._name,
                original_filename=self._filename,
                content=bytes(self._buffer),
                digest=self._hasher.finish(),
            )
        )
        self._buffer = bytearray()

    def feed(self, chunk: bytes) -> list[UploadField]:
        """Push one chunk of body bytes; return every field it completed."""
        try:
            self._parser.write(chunk)
        except MultipartParseError as e:
            raise MalformedMultipart(str(e)) from e
        done = list(self._ready)
        self._ready.clear()
        return done

    def close(self) -> None:
        self._parser.finalize()
        if self._in_part:
            raise MalformedMultipart("body ended inside a part")


async def iter_fields(chunks: AsyncIterable[bytes], boundary: bytes) -> AsyncIterator[UploadField]:
    decoder = MultipartDecoder(boundary)
    async for chunk in chunks:
        if not chunk:
            continue
        for field in decoder.feed(chunk):
            yield field
    decoder.close()
