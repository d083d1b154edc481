from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """The slice of `tk.Misc` the timers need."""

    def after(self, ms: int, func: Callable[[], Any]) -> str:
        ...

    def after_cancel(self, id: str) -> None:
        ...


class RepeatingTimer:
    """
    Calls `callback` every `interval_ms` on a cooperative scheduler until
    stopped. Each timer can be cancelled on its own.
    """

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        interval_ms: int,
        callback: Callable[[], None],
        name: str = "timer",
    ) -> None:
        self._scheduler = scheduler
        self._interval_ms = max(1, int(interval_ms))
        self._callback = callback
        self.name = name

        self._running = False
        self._after_id: str | None = None

    @property
    def active(self) -> bool:
        return self._running

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        logger.debug("Starting %s timer every %d ms", self.name, self._interval_ms)
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._scheduler.after_cancel(self._after_id)
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._scheduler.after(self._interval_ms, self._fire)

    def _fire(self) -> None:
        self._after_id = None
        if not self._running:
            return

        try:
            self._callback()
        except Exception:
            # Fail fast rather than keep ticking on corrupt state.
            logger.exception("%s timer callback failed; stopping", self.name)
            self.stop()
            raise

        # The callback may have stopped or restarted us.
        if self._running and self._after_id is None:
            self._schedule_next()
