"""Per-run step state machine.

Steps move left to right only: ``pending -> active -> completed``, with
``error`` reachable from ``active`` and terminal for the whole run. All
transitions go through one lock so listeners see a consistent, ordered
sequence of snapshots.
"""

import threading
import time
from collections.abc import Callable, Sequence

from media_translator.errors import ProgressError
from media_translator.logging.logger import Log
from media_translator.pipeline.models import ProcessingStep, ProgressEvent, StepStatus

ProgressListener = Callable[[ProgressEvent], None]


def log_progress(event: ProgressEvent) -> None:
    Log.debug(
        f"Step '{event.step_id}' is {event.status.value}",
        run_id=event.run_id,
        elapsed=f"{event.elapsed_seconds:.2f}s",
    )


class ProgressTracker:
    def __init__(
        self,
        steps: Sequence[ProcessingStep],
        run_id: str,
        listener: ProgressListener | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not steps:
            raise ProgressError("A run needs at least one step")
        self._steps = [step.with_status(StepStatus.PENDING) for step in steps]
        self._run_id = run_id
        self._listener = listener
        self._clock = clock
        self._lock = threading.Lock()
        self._started_at: float | None = None
        self._finished_at: float | None = None
        self._failed = False

    @property
    def run_id(self) -> str:
        return self._run_id

    def snapshot(self) -> tuple[ProcessingStep, ...]:
        with self._lock:
            return tuple(self._steps)

    def elapsed_seconds(self) -> float:
        with self._lock:
            return self._elapsed()

    def start(self) -> None:
        """Activate the first step and start the clock."""
        with self._lock:
            if self._started_at is not None:
                raise ProgressError(f"Run {self._run_id} already started")
            self._started_at = self._clock()
            self._set(0, StepStatus.ACTIVE)

    def complete(self, step_id: str) -> None:
        """Complete the active step and promote the next pending one."""
        with self._lock:
            index = self._require_active(step_id)
            self._set(index, StepStatus.COMPLETED)
            if index + 1 < len(self._steps):
                self._set(index + 1, StepStatus.ACTIVE)
            else:
                self._finished_at = self._clock()

    def fail(self, step_id: str | None = None) -> str:
        """Mark the active step (or ``step_id``, which must be active) as error.

        Returns:
            The id of the step marked as error.
        """
        with self._lock:
            if step_id is None:
                index = self._active_index()
                if index is None:
                    raise ProgressError(f"Run {self._run_id} has no active step to fail")
            else:
                index = self._require_active(step_id)
            self._failed = True
            self._finished_at = self._clock()
            self._set(index, StepStatus.ERROR)
            return self._steps[index].id

    def _require_active(self, step_id: str) -> int:
        if self._failed:
            raise ProgressError(f"Run {self._run_id} already failed")
        index = self._active_index()
        if index is None or self._steps[index].id != step_id:
            current = self._steps[index].id if index is not None else None
            raise ProgressError(
                f"Step '{step_id}' is not active in run {self._run_id} (active: {current})"
            )
        return index

    def _active_index(self) -> int | None:
        for index, step in enumerate(self._steps):
            if step.status is StepStatus.ACTIVE:
                return index
        return None

    def _elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._finished_at if self._finished_at is not None else self._clock()
        return end - self._started_at

    def _set(self, index: int, status: StepStatus) -> None:
        step = self._steps[index].with_status(status)
        self._steps[index] = step
        if self._listener is not None:
            self._listener(
                ProgressEvent(
                    run_id=self._run_id,
                    step_id=step.id,
                    status=status,
                    elapsed_seconds=self._elapsed(),
                    steps=tuple(self._steps),
                )
            )
