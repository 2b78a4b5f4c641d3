from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

# Anything outside the upload endpoint, wrong method included, is a bare 404.
_NOT_FOUND = (404, 405)


async def _not_found(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in _NOT_FOUND:
        return Response(status_code=404)
    return await http_exception_handler(request, exc)


def install(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _not_found)
