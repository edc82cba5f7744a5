"""
OverlayPresenter: Hidden/Shown state machine for the break overlay.

The presenter does not know how windows are drawn. It is given a factory
``factory(on_dismiss) -> window`` whose windows expose show() and close();
on macOS that is gui.overlay_window.OverlayWindowFactory. The window calls
on_dismiss (bound to OverlayPresenter.dismiss) when the break ends or is
skipped.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

WindowFactory = Callable[[Callable[[], Any]], Any]


class OverlayState(Enum):
    HIDDEN = "hidden"
    SHOWN = "shown"


class OverlayPresenter:
    """Guarantees at most one overlay window at a time."""

    def __init__(self, window_factory: WindowFactory) -> None:
        self._window_factory = window_factory
        self._window: Optional[Any] = None
        self.show_count: int = 0

    @property
    def state(self) -> OverlayState:
        return OverlayState.SHOWN if self._window is not None else OverlayState.HIDDEN

    @property
    def is_shown(self) -> bool:
        return self._window is not None

    def present(self) -> bool:
        """
        Show the overlay unless one is already up.

        Returns:
            True if a window was created, False if the call was a no-op.
        """
        if self._window is not None:
            logger.debug("Overlay already shown, ignoring present()")
            return False

        self._window = self._window_factory(self.dismiss)
        try:
            self._window.show()
        except Exception:
            self._window = None
            raise
        self.show_count += 1
        logger.info("Break overlay shown")
        return True

    def dismiss(self) -> bool:
        """
        Tear down the overlay if one is shown.

        Returns:
            True if a window was closed, False if already hidden.
        """
        if self._window is None:
            return False

        # Clear first: close() may re-enter dismiss() through the view
        window = self._window
        self._window = None
        window.close()
        logger.info("Break overlay dismissed")
        return True
