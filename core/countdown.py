"""
BreakCountdown: the fixed-length countdown behind the break overlay.

Starts at ``duration`` seconds with progress 1.0 and loses one second per
tick. Reaching zero, or skip(), calls on_finished exactly once. cancel()
stops ticking without calling on_finished; the overlay window uses it when
it is torn down.
"""

import logging
from typing import Any, Callable, Optional

import config
from core.timers import TimerFactory

logger = logging.getLogger(__name__)


class BreakCountdown:
    """One break's countdown, owned by a single overlay."""

    def __init__(
        self,
        on_finished: Callable[[], None],
        timer_factory: TimerFactory,
        duration: int = config.BREAK_DURATION_SECONDS,
        tick_seconds: float = config.COUNTDOWN_TICK_SECONDS,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"Countdown duration must be positive, got {duration}")

        self.duration = duration
        self.remaining = duration
        self.tick_seconds = tick_seconds
        self._on_finished = on_finished
        self._timer_factory = timer_factory
        self._timer: Optional[Any] = None
        self._finished = False

        # Set by the view to redraw the ring and number
        self.on_tick: Optional[Callable[[int, float], None]] = None

    @property
    def progress(self) -> float:
        return self.remaining / self.duration

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        """Begin ticking once per tick_seconds."""
        if self._finished or self._timer is not None:
            return
        self._timer = self._timer_factory(self.tick_seconds, self._on_timer, True)
        self._timer.start()
        logger.debug(f"Break countdown started at {self.remaining}s")

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if self._finished:
            return

        if self.remaining > 0:
            self.remaining -= 1
            if self.on_tick:
                self.on_tick(self.remaining, self.progress)

        if self.remaining == 0:
            logger.debug("Break countdown reached zero")
            self._finish()

    def skip(self) -> None:
        """End the break now through the same path as expiry."""
        if self._finished:
            return
        logger.info(f"Break skipped with {self.remaining}s left")
        self._finish()

    def cancel(self) -> None:
        """Stop ticking without calling on_finished."""
        self._stop_timer()
        self._finished = True

    def _finish(self) -> None:
        self._stop_timer()
        self._finished = True
        self._on_finished()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            timer = self._timer
            self._timer = None
            timer.cancel()

    def _on_timer(self, timer: Any) -> None:
        if timer is not self._timer:
            return
        self.tick()
