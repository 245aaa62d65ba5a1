"""WorkerMixin - one refresh cycle at a time for screens that load in the background.

Starting a cycle cancels whatever cycle is still running, so a slow stale
cycle can never overwrite the result of a newer one. The mixin also times
each cycle and reports the outcome through ``cycle_finished``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)

_FINISHED_STATES = (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR)


class WorkerMixin:
    """Mixin for screens whose data arrives from a single background cycle."""

    is_loading = reactive(False)
    last_cycle_ms = reactive(0.0, init=False)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._cycle_started: float | None = None
        self._cycle_worker: Worker[Any] | None = None

    def start_worker(
        self,
        worker_func: Callable[[], Awaitable[Any]],
        *,
        name: str,
        exclusive: bool = True,
    ) -> Worker[Any]:
        """Run ``worker_func`` as the screen's current cycle.

        With ``exclusive`` the previous cycle is cancelled first.
        """
        if exclusive:
            self.cancel_workers()

        self._cycle_started = time.monotonic()
        self.is_loading = True
        self._cycle_worker = self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=name,
            group=name,
            exclusive=exclusive,
            exit_on_error=False,
        )
        return self._cycle_worker

    def cancel_workers(self) -> None:
        """Cancel the running cycle, if any."""
        worker = self._cycle_worker
        if worker is None or worker.is_finished:
            return
        with suppress(NoActiveAppError):
            worker.cancel()

    def on_unmount(self) -> None:
        self.cancel_workers()

    def cycle_finished(self, state: WorkerState, duration_ms: float) -> None:
        """Hook called once per finished cycle. Override in screens."""

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker is not self._cycle_worker or event.state not in _FINISHED_STATES:
            return

        duration_ms = 0.0
        if self._cycle_started is not None:
            duration_ms = (time.monotonic() - self._cycle_started) * 1000
            self._cycle_started = None
        self.last_cycle_ms = duration_ms
        self.is_loading = False

        if event.state == WorkerState.ERROR:
            logger.error(
                "Worker %r failed after %.2fms: %s",
                event.worker.name,
                duration_ms,
                event.worker.error,
            )
        else:
            logger.debug(
                "Worker %r %s after %.2fms",
                event.worker.name,
                event.state.name.lower(),
                duration_ms,
            )
        self.cycle_finished(event.state, duration_ms)


__all__ = ["WorkerMixin"]
