"""
Menu bar package for ProtectSight.

Composition root: builds the timer factory, overlay presenter and
controller once, then hands them to the rumps menu bar app. macOS only.
"""

import sys
import logging

import config
from core.controller import ReminderController
from core.overlay import OverlayPresenter, WindowFactory
from core.timers import TimerFactory

logger = logging.getLogger(__name__)


def build_controller(
    window_factory: WindowFactory,
    timer_factory: TimerFactory,
    test_mode: bool = False,
) -> ReminderController:
    """
    Wire the presenter and controller that own all application state.

    Args:
        window_factory: Creates one overlay window per break.
        timer_factory: Timer constructor for the reminder scheduler.
        test_mode: Count interval "minutes" as seconds.
    """
    seconds_per_minute = (
        config.TEST_SECONDS_PER_MINUTE if test_mode else config.SECONDS_PER_MINUTE
    )
    presenter = OverlayPresenter(window_factory)
    return ReminderController(
        presenter,
        timer_factory=timer_factory,
        seconds_per_minute=seconds_per_minute,
    )


def run_menubar_app(test_mode: bool = False) -> None:
    """Launch the menu bar app (macOS only)."""
    if sys.platform != "darwin":
        logger.error("ProtectSight menu bar is only supported on macOS.")
        sys.exit(1)

    from gui.icon import ensure_menu_icon
    from gui.overlay_window import OverlayWindowFactory
    from menubar.macos_app import ProtectSightMenuBar
    from menubar.timers import create_rumps_timer

    controller = build_controller(
        OverlayWindowFactory(create_rumps_timer),
        create_rumps_timer,
        test_mode=test_mode,
    )
    if test_mode:
        logger.info("Test mode: interval minutes are counted as seconds")

    app = ProtectSightMenuBar(controller, icon_path=ensure_menu_icon())
    app.run()
