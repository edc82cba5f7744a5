"""
ProtectSight macOS menu bar application using rumps.

Menu:
    Start Timer / Stop Timer   (⌘T, label follows the running state)
    Select Time ▸ 10/20/30/40/60 Min   (greyed out until Start Timer is clicked)
    ─────
    Quit                        (⌘Q)

All reminder logic lives in core.controller.ReminderController; this
class only forwards menu clicks and mirrors the controller's state.
"""

import logging
from typing import Dict, Optional

import rumps

import config
from core.controller import ReminderController, ReminderState

logger = logging.getLogger(__name__)


class ProtectSightMenuBar(rumps.App):
    """macOS menu bar application for ProtectSight."""

    def __init__(self, controller: ReminderController, icon_path: Optional[str] = None) -> None:
        """Initialise the menu bar app around an already wired controller."""
        super().__init__(
            name=config.APP_NAME,
            title=None if icon_path else config.APP_NAME,
            icon=icon_path,
            template=True,
            quit_button=None,
        )

        self.controller = controller
        self.controller.on_state_change = self._on_state_change

        # --- Menu items ---

        self.toggle_item = rumps.MenuItem(
            config.MENU_START_TIMER, callback=self._toggle_timer, key="t"
        )

        self.interval_items: Dict[int, rumps.MenuItem] = {
            minutes: rumps.MenuItem(config.interval_title(minutes))
            for minutes in config.INTERVAL_CHOICES_MINUTES
        }
        self.time_menu = rumps.MenuItem(config.MENU_SELECT_TIME)
        self.time_menu.update(list(self.interval_items.values()))

        self.quit_item = rumps.MenuItem(config.MENU_QUIT, callback=self._quit_app, key="q")

        self.menu.add(self.toggle_item)
        self.menu.add(self.time_menu)
        self.menu.add(rumps.separator)
        self.menu.add(self.quit_item)

        # Submenu parents are always enabled while the menu autoenables items
        self.menu._menu.setAutoenablesItems_(False)

        self._refresh(self.controller.state)

    # ------------------------------------------------------------------
    # Menu callbacks
    # ------------------------------------------------------------------

    def _toggle_timer(self, sender) -> None:
        """Stop the reminder, or unlock the interval submenu."""
        self.controller.toggle_timer()

    def _select_interval(self, sender) -> None:
        """Arm the reminder for the clicked interval."""
        self.controller.select_interval(sender.title)

    def _quit_app(self, sender) -> None:
        """Clean up and quit."""
        self.controller.shutdown()
        logger.info("Quitting ProtectSight")
        rumps.quit_application()

    # ------------------------------------------------------------------
    # Controller callbacks
    # ------------------------------------------------------------------

    def _on_state_change(self, state: ReminderState) -> None:
        self._refresh(state)

    def _refresh(self, state: ReminderState) -> None:
        """Sync toggle title, check marks and interval enablement."""
        self.toggle_item.title = self.controller.toggle_title

        self.time_menu._menuitem.setEnabled_(state.time_selection_enabled)

        # Items without a callback are greyed out by rumps
        callback = self._select_interval if state.time_selection_enabled else None
        for minutes, item in self.interval_items.items():
            item.set_callback(callback)
            item.state = 1 if state.is_running and state.interval_minutes == minutes else 0
