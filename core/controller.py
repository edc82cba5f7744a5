"""
ReminderController: status-bar logic for ProtectSight.

Owns the explicit application state (ReminderState), the ReminderScheduler
and the OverlayPresenter. It has ZERO UI dependencies: the menu bar app
calls controller methods from menu callbacks and receives updates via the
on_state_change callback.

Callbacks:
    on_state_change(state: ReminderState)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

import config
from core.overlay import OverlayPresenter
from core.scheduler import ReminderScheduler
from core.timers import TimerFactory

logger = logging.getLogger(__name__)


@dataclass
class ReminderState:
    """Everything the menu needs to render itself. Never persisted."""

    interval_minutes: Optional[int] = None
    is_running: bool = False
    time_selection_enabled: bool = False


class ReminderController:
    """
    Start/stop toggling and interval selection.

    Handles:
    - "Start Timer" while stopped: enables the "Select Time" submenu
    - "Stop Timer" while running: cancels the reminder
    - Interval selection: (re)arms the reminder, which fires immediately
    - Quit: stops the reminder and removes any overlay
    """

    def __init__(
        self,
        presenter: OverlayPresenter,
        timer_factory: TimerFactory,
        seconds_per_minute: int = config.SECONDS_PER_MINUTE,
    ) -> None:
        self.state = ReminderState()
        self.presenter = presenter
        self.scheduler = ReminderScheduler(
            on_fire=self._on_reminder,
            timer_factory=timer_factory,
            seconds_per_minute=seconds_per_minute,
        )

        # ---- Callbacks (set by the menu bar app) ----
        self.on_state_change: Optional[Callable[[ReminderState], None]] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def toggle_title(self) -> str:
        return config.MENU_STOP_TIMER if self.state.is_running else config.MENU_START_TIMER

    def toggle_timer(self) -> None:
        """Stop when running, otherwise unlock interval selection."""
        if self.state.is_running:
            self.stop()
            return

        if not self.state.time_selection_enabled:
            self.state.time_selection_enabled = True
            logger.debug("Interval selection enabled")
            self._notify()

    def select_interval(self, choice: Union[str, int]) -> bool:
        """
        Arm the reminder for a menu choice ("10 Min" or 10).

        Returns:
            True if the reminder was armed, False for an unmapped choice.
        """
        minutes = config.parse_interval(choice)
        if minutes is None:
            logger.debug(f"Ignoring unmapped interval selection: {choice!r}")
            return False

        self.start(minutes)
        return True

    def start(self, minutes: int) -> None:
        """Arm the reminder every ``minutes`` minutes, replacing any prior one."""
        self.scheduler.start(minutes)
        self.state.is_running = True
        self.state.interval_minutes = minutes
        self.state.time_selection_enabled = True
        self._notify()

    def stop(self) -> None:
        """Cancel the reminder. A shown overlay finishes its own countdown."""
        if not self.state.is_running:
            return

        self.scheduler.stop()
        self.state.is_running = False
        self.state.interval_minutes = None
        self._notify()

    def shutdown(self) -> None:
        """Stop everything before the process quits."""
        self.stop()
        self.presenter.dismiss()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_reminder(self) -> None:
        self.presenter.present()

    def _notify(self) -> None:
        if self.on_state_change:
            self.on_state_change(self.state)
