from media_translator.pipeline.orchestrator import Orchestrator
from media_translator.pipeline.progress import ProgressTracker
from media_translator.pipeline.session import SessionStore, TranslationSession

__all__ = ["Orchestrator", "ProgressTracker", "SessionStore", "TranslationSession"]
