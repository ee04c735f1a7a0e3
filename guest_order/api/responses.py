from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

from guest_order.core.config import settings


def cors_headers() -> dict:
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Headers": settings.CORS_ALLOW_HEADERS,
    }

def preflight_response() -> Response:
    return Response(status_code=200, headers=cors_headers())

def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=cors_headers())

def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response({"error": message}, status_code=status_code)
