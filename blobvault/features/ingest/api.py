import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from blobvault.domain.errors import MalformedMultipart, UnsupportedContentType
from blobvault.features.ingest.schemas import FileObject, UploadResponse
from blobvault.features.ingest.service import IngestService
from blobvault.infra.multipart import iter_fields, parse_boundary

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

UNSUPPORTED_CONTENT_TYPE = "Unsupported content type, multipart/form-data supports only!"


@router.post("/")
async def upload(request: Request) -> Response:
    try:
        boundary = parse_boundary(request.headers.get("content-type"))
    except UnsupportedContentType as e:
        logger.debug("rejected: %s", e)
        return PlainTextResponse(UNSUPPORTED_CONTENT_TYPE, status_code=400)
    logger.debug("boundary %r", boundary)

    service = IngestService.from_config(request.app.state.cfg)
    try:
        results = await service.ingest(iter_fields(request.stream(), boundary))
    except MalformedMultipart as e:
        logger.debug("malformed body: %s", e)
        return PlainTextResponse(f"Malformed multipart body: {e}", status_code=400)

    body = UploadResponse(result=[FileObject.from_result(r) for r in results])
    return JSONResponse(body.model_dump())
