import threading
import uuid
from collections import OrderedDict

from media_translator.media.models import UploadedFile
from media_translator.pipeline.models import ProcessingStep, ProgressEvent, RunResult
from media_translator.pipeline.orchestrator import Orchestrator
from media_translator.pipeline.progress import ProgressListener


class TranslationSession:
    """One user's view of the pipeline: only the most recent run is kept.

    Starting a run clears the previous output and assigns a fresh run id.
    Events and results belonging to a superseded run are dropped.
    """

    def __init__(
        self, orchestrator: Orchestrator, listener: ProgressListener | None = None
    ) -> None:
        self._orchestrator = orchestrator
        self._listener = listener
        self._lock = threading.Lock()
        self._current_run_id: str | None = None
        self._steps: tuple[ProcessingStep, ...] = ()
        self._events: list[ProgressEvent] = []
        self._result: RunResult | None = None

    @property
    def current_run_id(self) -> str | None:
        with self._lock:
            return self._current_run_id

    @property
    def steps(self) -> tuple[ProcessingStep, ...]:
        with self._lock:
            return self._steps

    @property
    def events(self) -> tuple[ProgressEvent, ...]:
        with self._lock:
            return tuple(self._events)

    @property
    def last_result(self) -> RunResult | None:
        with self._lock:
            return self._result

    @property
    def output_text(self) -> str:
        with self._lock:
            if self._result is None or self._result.translation is None:
                return ""
            return self._result.translation.translated_text

    def translate_text(self, text: str, target_language: str) -> RunResult:
        run_id = self._begin()
        result = self._orchestrator.translate_text(
            text, target_language, listener=self._relay, run_id=run_id
        )
        self._finish(result)
        return result

    def translate_file(
        self,
        file: UploadedFile,
        target_language: str,
        source_language: str | None = None,
    ) -> RunResult:
        run_id = self._begin()
        result = self._orchestrator.translate_file(
            file,
            target_language,
            listener=self._relay,
            run_id=run_id,
            source_language=source_language,
        )
        self._finish(result)
        return result

    def reset(self) -> None:
        with self._lock:
            self._current_run_id = None
            self._clear()

    def _begin(self) -> str:
        run_id = uuid.uuid4().hex
        with self._lock:
            self._current_run_id = run_id
            self._clear()
        return run_id

    def _clear(self) -> None:
        self._steps = ()
        self._events = []
        self._result = None

    def _relay(self, event: ProgressEvent) -> None:
        with self._lock:
            if event.run_id != self._current_run_id:
                return
            self._events.append(event)
            self._steps = event.steps
        if self._listener is not None:
            self._listener(event)

    def _finish(self, result: RunResult) -> None:
        with self._lock:
            if result.run_id != self._current_run_id:
                return
            self._result = result
            self._steps = result.steps


class SessionStore:
    """Per-client sessions keyed by an opaque id, oldest evicted first."""

    def __init__(
        self,
        orchestrator: Orchestrator,
        listener: ProgressListener | None = None,
        max_sessions: int = 1000,
    ) -> None:
        self._orchestrator = orchestrator
        self._listener = listener
        self._max_sessions = max_sessions
        self._lock = threading.Lock()
        self._sessions: OrderedDict[str, TranslationSession] = OrderedDict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def get(self, session_id: str) -> TranslationSession:
        """Return the session for ``session_id``, creating it on first use."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = TranslationSession(self._orchestrator, listener=self._listener)
                self._sessions[session_id] = session
                while len(self._sessions) > self._max_sessions:
                    self._sessions.popitem(last=False)
            else:
                self._sessions.move_to_end(session_id)
            return session

    def find(self, session_id: str) -> TranslationSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def discard(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.reset()
        return True
