"""
Full-screen break overlay window (AppKit via PyObjC).

The window is borderless, covers the main screen, sits at the screen-saver
level above normal windows, joins every Space including full-screen ones,
and takes mouse events so nothing behind it can be clicked.

OverlayWindowFactory is the window factory handed to
core.overlay.OverlayPresenter.
"""

import logging
from typing import Callable

from AppKit import (  # type: ignore[import-not-found]
    NSApplication,
    NSBackingStoreBuffered,
    NSColor,
    NSScreen,
    NSScreenSaverWindowLevel,
    NSWindow,
    NSWindowStyleMaskBorderless,
)
from Foundation import NSZeroRect  # type: ignore[import-not-found]

import config
from core.countdown import BreakCountdown
from core.timers import TimerFactory
from gui.break_view import BreakView

logger = logging.getLogger(__name__)

# NSWindowCollectionBehavior flags
CAN_JOIN_ALL_SPACES = 1 << 0
FULL_SCREEN_AUXILIARY = 1 << 4


class KeyableWindow(NSWindow):
    """Borderless windows refuse key status by default; the Skip button needs it."""

    def canBecomeKeyWindow(self):
        return True

    def canBecomeMainWindow(self):
        return True


class OverlayWindow:
    """One break: the NSWindow, its BreakView and the view's countdown."""

    def __init__(
        self,
        on_dismiss: Callable[[], object],
        timer_factory: TimerFactory,
        duration: int = config.BREAK_DURATION_SECONDS,
    ) -> None:
        screen = NSScreen.mainScreen()
        frame = screen.frame() if screen is not None else NSZeroRect
        if screen is None:
            logger.warning("No main screen found, overlay will not be visible")

        self.window = KeyableWindow.alloc().initWithContentRect_styleMask_backing_defer_(
            frame, NSWindowStyleMaskBorderless, NSBackingStoreBuffered, False
        )
        self.window.setLevel_(NSScreenSaverWindowLevel)
        self.window.setOpaque_(False)
        self.window.setBackgroundColor_(
            NSColor.blackColor().colorWithAlphaComponent_(config.OVERLAY_BACKGROUND_ALPHA)
        )
        self.window.setCollectionBehavior_(CAN_JOIN_ALL_SPACES | FULL_SCREEN_AUXILIARY)
        self.window.setIgnoresMouseEvents_(False)
        self.window.setReleasedWhenClosed_(False)

        self.countdown = BreakCountdown(
            on_finished=on_dismiss,
            timer_factory=timer_factory,
            duration=duration,
        )
        self.break_view = BreakView(self.window.contentView().frame(), self.countdown)
        self.window.setContentView_(self.break_view.view)

    def show(self) -> None:
        """Bring the overlay in front of everything and start the countdown."""
        NSApplication.sharedApplication().activateIgnoringOtherApps_(True)
        self.window.makeKeyAndOrderFront_(None)
        self.countdown.start()

    def close(self) -> None:
        """Stop the countdown and take the window off screen."""
        self.countdown.cancel()
        self.break_view.teardown()
        self.window.orderOut_(None)
        self.window.close()


class OverlayWindowFactory:
    """Creates an OverlayWindow per break for OverlayPresenter."""

    def __init__(
        self,
        timer_factory: TimerFactory,
        duration: int = config.BREAK_DURATION_SECONDS,
    ) -> None:
        self.timer_factory = timer_factory
        self.duration = duration

    def __call__(self, on_dismiss: Callable[[], object]) -> OverlayWindow:
        return OverlayWindow(
            on_dismiss,
            timer_factory=self.timer_factory,
            duration=self.duration,
        )
