"""Mini README: Debounced save scheduling.

Structure:
    * SaveDebouncer - re-armable countdown that runs a save after a quiet period.

Each ``schedule`` call restarts the countdown, so a burst of balance changes
produces a single save ``delay_seconds`` after the last one. Timers are
created through ``timer_factory`` (``threading.Timer`` by default) which
lets tests fire them by hand. A generation counter makes a timer that was
already running when it got superseded a no-op.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class SaveDebouncer:
    """Coalesce save requests into one call after ``delay_seconds`` of quiet."""

    def __init__(
        self,
        action: Callable[[], None],
        *,
        delay_seconds: float = 1.0,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._action = action
        self.delay_seconds = delay_seconds
        self._timer_factory = timer_factory
        self._clock = clock
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._pending = False
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def deadline(self) -> Optional[float]:
        """Clock reading at which the armed countdown fires, if any."""

        return self._deadline

    def schedule(self) -> None:
        """Mark a save as pending and restart the countdown."""

        with self._lock:
            self._pending = True
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._deadline = self._clock() + self.delay_seconds
            timer = self._timer_factory(self.delay_seconds, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()
        LOGGER.debug("Save scheduled in %.2fs", self.delay_seconds)

    def cancel(self) -> bool:
        """Stop the countdown; return whether a save was pending."""

        with self._lock:
            was_pending = self._pending
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = None
            self._pending = False
            self._deadline = None
        return was_pending

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._pending:
                return
            self._pending = False
            self._timer = None
            self._deadline = None
        LOGGER.debug("Save countdown elapsed")
        self._action()
