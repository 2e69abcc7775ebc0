from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def error_payload(code: str, message: str, details: Any = None) -> dict[str, Any]:
    return {"code": code, "message": message, "details": details}


def upload_error(code: str, message: str, details: Any = None) -> HTTPException:
    return HTTPException(status_code=400, detail=error_payload(code, message, details))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc: HTTPException):  # noqa: ANN001
        if isinstance(exc.detail, dict) and {"code", "message"} <= exc.detail.keys():
            payload = error_payload(exc.detail["code"], exc.detail["message"], exc.detail.get("details"))
        else:
            payload = error_payload(f"HTTP_{exc.status_code}", str(exc.detail) if exc.detail else "HTTP error")
        logger.warning("%s %s -> %s", request.method, request.url.path, payload)
        return JSONResponse(status_code=exc.status_code, content=payload, headers=exc.headers)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request, exc: Exception):  # noqa: ANN001
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_payload("internal_error", "Internal server error", str(exc)),
        )
