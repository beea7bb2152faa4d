from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from media_translator.api.dependencies import ServiceContainer, build_services
from media_translator.api.endpoints import catalog, process, transcription, translation
from media_translator.api.responses import error_response
from media_translator.config.settings import Settings
from media_translator.errors import ErrorKind
from media_translator.logging.logger import Log


def create_app(settings: Settings, services: ServiceContainer | None = None) -> FastAPI:
    """Build the HTTP application.

    ``services`` overrides the collaborators built from ``settings``; tests pass
    fakes through it.
    """
    app = FastAPI(
        title="Media Translator API",
        version="1.0",
        description="Transcription and translation of text, documents, audio and video.",
    )
    app.state.settings = settings
    app.state.services = services if services is not None else build_services(settings)

    app.include_router(transcription.router, prefix="/api", tags=["Transcription"])
    app.include_router(translation.router, prefix="/api", tags=["Translation"])
    app.include_router(process.router, prefix="/api", tags=["Pipeline"])
    app.include_router(catalog.router, prefix="/api", tags=["Catalog"])

    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith("/api/"):
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        if not request.url.path.startswith("/api/"):
            return await request_validation_exception_handler(request, exc)
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"] if part != "body")
            for error in exc.errors()
        )
        Log.warning(f"Rejected malformed request to {request.url.path}", fields=fields)
        return error_response(
            f"Invalid request: check the {fields or 'request'} field.",
            ErrorKind.VALIDATION_ERROR.value,
            400,
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(
            "An unexpected error occurred. Please try again.", "internal_error", 500
        )

    @app.get("/healthz", tags=["Service"])
    def healthcheck():
        return {"status": "ok"}

    return app
