import sys

import uvicorn
from fastapi import FastAPI

from media_translator.api.app import create_app
from media_translator.config.settings import Settings
from media_translator.errors import ConfigurationError
from media_translator.logging.logger import Log


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    Log.configure(settings.log_level)
    settings.ensure_configured()
    Log.info(
        "Media translator configured",
        env=settings.app_env,
        transcription=settings.transcription_provider,
        translation=settings.translation_provider,
        pdf_engine=settings.pdf_engine,
    )
    return create_app(settings)


def main() -> None:
    settings = Settings()
    try:
        app = build_app(settings)
    except ConfigurationError as exc:
        Log.error(exc.message)
        sys.exit(1)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
