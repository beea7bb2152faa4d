from datetime import datetime, timezone

from fastapi import Response
from fastapi.responses import JSONResponse

from media_translator.api.schemas import ErrorResponse
from media_translator.errors import ErrorKind, PipelineError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
SESSION_HEADER = "X-Session-Id"

# Status codes for /api/process; the single-purpose endpoints narrow these.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.AUTH_ERROR: 401,
    ErrorKind.QUOTA_EXCEEDED: 402,
    ErrorKind.RATE_LIMITED: 429,
}


def status_for(error: PipelineError, allowed: frozenset[int] | None = None) -> int:
    status = STATUS_BY_KIND.get(error.kind, 500)
    if allowed is not None and status not in allowed:
        return 500
    return status


def error_response(message: str, code: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(
        error=message,
        code=code,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def pipeline_error_response(
    error: PipelineError, allowed: frozenset[int] | None = None
) -> JSONResponse:
    return error_response(error.message, error.code, status_for(error, allowed))


def bad_input_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def preflight_response(
    methods: str | None = None, headers: str | None = None
) -> Response:
    cors = dict(CORS_HEADERS)
    if methods is not None:
        cors["Access-Control-Allow-Methods"] = methods
    if headers is not None:
        cors["Access-Control-Allow-Headers"] = headers
    return Response(status_code=200, headers=cors)
