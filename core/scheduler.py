"""
ReminderScheduler: one repeating timer that asks for a break overlay
every N minutes.

Arming fires once immediately and then once per interval. Re-arming always
cancels the previous timer first, and fires delivered by a timer that is no
longer current are dropped, so at most one timer is ever live.
"""

import logging
from typing import Any, Callable, Optional

import config
from core.timers import TimerFactory

logger = logging.getLogger(__name__)


class ReminderScheduler:
    """Periodic break reminder with cancel semantics."""

    def __init__(
        self,
        on_fire: Callable[[], None],
        timer_factory: TimerFactory,
        seconds_per_minute: int = config.SECONDS_PER_MINUTE,
    ) -> None:
        self._on_fire = on_fire
        self._timer_factory = timer_factory
        self.seconds_per_minute = seconds_per_minute

        self._timer: Optional[Any] = None
        self.interval_minutes: Optional[int] = None
        self.fire_count: int = 0

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    @property
    def period_seconds(self) -> Optional[float]:
        if self.interval_minutes is None:
            return None
        return float(self.interval_minutes * self.seconds_per_minute)

    def start(self, minutes: int) -> None:
        """
        Arm the reminder for every ``minutes`` minutes and fire once now.

        Args:
            minutes: Interval in minutes, must be positive.

        Raises:
            ValueError: If minutes is not positive.
        """
        if minutes <= 0:
            raise ValueError(f"Reminder interval must be positive, got {minutes}")

        self.stop()

        self.interval_minutes = minutes
        self._timer = self._timer_factory(self.period_seconds, self._on_timer, True)
        self._timer.start()
        logger.info(f"Reminder armed: every {minutes} min ({self.period_seconds:.0f}s)")

        self._fire()

    def stop(self) -> None:
        """Cancel the reminder timer. Does nothing when not running."""
        if self._timer is None:
            return

        timer = self._timer
        self._timer = None
        self.interval_minutes = None
        timer.cancel()
        logger.info("Reminder stopped")

    def _on_timer(self, timer: Any) -> None:
        if timer is not self._timer:
            logger.debug("Dropping fire from a cancelled reminder timer")
            return
        self._fire()

    def _fire(self) -> None:
        self.fire_count += 1
        logger.debug(f"Reminder fire #{self.fire_count}")
        self._on_fire()
