# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Coalesce rapid edits into a single deferred spell check"""
from __future__ import annotations

from typing import Any, Callable, Protocol, TYPE_CHECKING

import logging
import threading

if TYPE_CHECKING:
    from .engine import SpellChecker


class Timer(Protocol):
    def start(self) -> None:
        ...

    def cancel(self) -> None:
        ...


TimerFactory = Callable[[float, Callable[..., Any], list], Timer]


class Debouncer:
    """Run `action(text)` once `interval` seconds have passed without a newer trigger.

    A trigger replaces any call still waiting; an empty text cancels it.
    With the default timer the action runs on a timer thread, so callers
    that need the work on their own thread should pass a timer factory
    bound to their event loop.
    """

    def __init__(
        self,
        interval: float,
        action: Callable[[str], Any],
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.log = logging.getLogger("Debouncer")
        self.interval = interval
        self.action = action
        self.timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Timer | None = None
        self._pending_text: str | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self, text: str) -> None:
        with self._lock:
            self._cancel_locked()
            if not text:
                return
            self._generation += 1
            self._pending_text = text
            timer = self.timer_factory(self.interval, self._fire, [self._generation])
            self._timer = timer
        timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def flush(self) -> None:
        """Run the waiting action immediately, if there is one"""
        with self._lock:
            text = self._pending_text
            self._cancel_locked()
        if text is not None:
            self.action(text)

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._pending_text = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending_text is None:
                self.log.debug("dropping superseded trigger %d", generation)
                return
            text = self._pending_text
            self._timer = None
            self._pending_text = None
        self.action(text)


def check_debouncer(
    engine: SpellChecker,
    interval: float | None = None,
    timer_factory: TimerFactory = threading.Timer,
) -> Debouncer:
    if interval is None:
        interval = engine.settings.debounce_interval
    return Debouncer(interval, engine.check, timer_factory=timer_factory)
