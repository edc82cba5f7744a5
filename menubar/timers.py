"""
rumps-backed timers for the reminder scheduler and the break countdown.

rumps.Timer wraps an NSTimer on the main run loop, so callbacks already run
on the thread that owns the menu and the overlay window.
"""

import logging
from typing import Callable

import rumps

logger = logging.getLogger(__name__)


class RumpsTimer:
    """Repeating or one-shot main run loop timer with synchronous cancel."""

    def __init__(
        self,
        interval: float,
        callback: Callable[["RumpsTimer"], None],
        repeats: bool = True,
    ) -> None:
        """
        Args:
            interval: Seconds between fires. Must be positive.
            callback: Called as callback(timer) on the main run loop.
            repeats: Keep firing until cancelled (True) or fire once (False).
        """
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")

        self.interval = float(interval)
        self.repeats = repeats
        self.fire_count = 0
        self._callback = callback
        self._cancelled = False
        self._skip_next = False
        self._timer = rumps.Timer(self._on_fire, self.interval)

    @property
    def is_active(self) -> bool:
        return not self._cancelled and self._timer.is_alive()

    def start(self) -> None:
        """Start the timer. Starting twice, or after cancel(), does nothing."""
        if self._cancelled or self._timer.is_alive():
            return

        # rumps.Timer fires once as soon as it is started
        self._skip_next = True
        self._timer.start()
        logger.debug(f"Timer started (interval={self.interval}s, repeats={self.repeats})")

    def cancel(self) -> None:
        """Stop the timer. No callback runs after this returns."""
        if self._cancelled:
            return
        self._cancelled = True
        self._timer.stop()
        logger.debug(f"Timer cancelled after {self.fire_count} fire(s)")

    def _on_fire(self, _sender) -> None:
        if self._cancelled:
            return
        if self._skip_next:
            self._skip_next = False
            return

        self.fire_count += 1
        if not self.repeats:
            self.cancel()
        try:
            self._callback(self)
        except Exception as e:
            logger.error(f"Timer callback failed: {e}", exc_info=True)


def create_rumps_timer(
    interval: float, callback: Callable[[RumpsTimer], None], repeats: bool = True
) -> RumpsTimer:
    """Timer factory handed to the scheduler and the overlay windows."""
    return RumpsTimer(interval, callback, repeats=repeats)
