from dataclasses import dataclass

from fastapi import Request

from media_translator.config.settings import Settings
from media_translator.extraction.factory import DocumentExtractorFactory
from media_translator.media.validator import FileValidator
from media_translator.pipeline.orchestrator import Orchestrator
from media_translator.pipeline.progress import log_progress
from media_translator.pipeline.session import SessionStore
from media_translator.transcription.factory import TranscriberFactory
from media_translator.transcription.transcriber import Transcriber
from media_translator.translation.factory import TranslatorFactory
from media_translator.translation.translator import Translator


@dataclass(frozen=True)
class ServiceContainer:
    transcriber: Transcriber
    translator: Translator
    orchestrator: Orchestrator
    sessions: SessionStore

    @classmethod
    def assemble(
        cls, transcriber: Transcriber, translator: Translator, orchestrator: Orchestrator
    ) -> "ServiceContainer":
        return cls(
            transcriber=transcriber,
            translator=translator,
            orchestrator=orchestrator,
            sessions=SessionStore(orchestrator, listener=log_progress),
        )


def build_services(settings: Settings) -> ServiceContainer:
    transcriber = TranscriberFactory.create(settings)
    translator = TranslatorFactory.create(settings)
    orchestrator = Orchestrator(
        validator=FileValidator(),
        extractor=DocumentExtractorFactory.create(settings),
        transcriber=transcriber,
        translator=translator,
    )
    return ServiceContainer.assemble(transcriber, translator, orchestrator)


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_transcriber(request: Request) -> Transcriber:
    return get_services(request).transcriber


def get_translator(request: Request) -> Translator:
    return get_services(request).translator


def get_sessions(request: Request) -> SessionStore:
    return get_services(request).sessions
