from fastapi import FastAPI

from blobvault.config import AppConfig, load_config
from blobvault.features.ingest.api import router as ingest_router
from blobvault.infra.storage import BlobStore
from blobvault.web import errors


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    cfg = cfg or load_config()
    BlobStore(cfg.storage_root).ensure_root()

    app = FastAPI(
        title="blobvault",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.cfg = cfg
    app.include_router(ingest_router)
    errors.install(app)
    return app
