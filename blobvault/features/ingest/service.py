import logging
from collections.abc import AsyncIterable

from fastapi.concurrency import run_in_threadpool

from blobvault.config import AppConfig
from blobvault.domain.errors import FieldError
from blobvault.domain.models import UploadField, UploadResult
from blobvault.features.blobs.digest import digest
from blobvault.features.blobs.paths import PathDeriver, extension_of
from blobvault.infra.storage import BlobStore

logger = logging.getLogger(__name__)


class IngestService:
    def __init__(self, *, deriver: PathDeriver, store: BlobStore) -> None:
        self._deriver = deriver
        self._store = store

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "IngestService":
        return cls(
            deriver=PathDeriver(cfg.storage_root, cfg.access_domain),
            store=BlobStore(cfg.storage_root),
        )

    def store_field(self, field: UploadField) -> UploadResult:
        try:
            ext = extension_of(field.original_filename)
            content_digest = field.digest or digest(field.content)
            derived = self._deriver.derive(content_digest, ext)
            written = self._store.persist(derived.storage_path, field.content)
        except FieldError as e:
            logger.debug("something went wrong: %s", e)
            return UploadResult.failure(field, str(e))
        logger.debug("%s save done (written=%s)", derived.access_uri, written)
        return UploadResult.success(field, derived.access_uri)

    async def ingest(self, fields: AsyncIterable[UploadField]) -> list[UploadResult]:
        results: list[UploadResult] = []
        async for field in fields:
            results.append(await run_in_threadpool(self.store_field, field))
        return results
