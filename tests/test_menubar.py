"""
Tests for menubar/macos_app.py: the rumps menu mirrors controller state.

rumps is replaced by a fake module so the menu can be built off macOS.
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import config
from fakes import FakeTimerFactory, FakeWindowFactory, import_with_fake_rumps, make_fake_rumps
from menubar import build_controller

fake_rumps = make_fake_rumps()
macos_app = import_with_fake_rumps("menubar.macos_app", fake_rumps)


class MenuBarTestCase(unittest.TestCase):
    def setUp(self):
        fake_rumps.quit_application.reset_mock()
        self.timers = FakeTimerFactory()
        self.windows = FakeWindowFactory()
        self.controller = build_controller(self.windows, self.timers)
        self.app = macos_app.ProtectSightMenuBar(self.controller)

    def assert_selection_enabled(self, enabled):
        self.app.time_menu._menuitem.setEnabled_.assert_called_with(enabled)
        expected = self.app._select_interval if enabled else None
        for minutes, item in self.app.interval_items.items():
            with self.subTest(minutes=minutes):
                self.assertEqual(item.callback, expected)

    def checked(self):
        return [m for m, item in self.app.interval_items.items() if item.state == 1]


class TestMenuLayout(MenuBarTestCase):
    def test_items_in_order(self):
        items = self.app.menu.items
        self.assertEqual(
            items,
            [self.app.toggle_item, self.app.time_menu, fake_rumps.separator, self.app.quit_item],
        )
        self.assertEqual(self.app.toggle_item.key, "t")
        self.assertEqual(self.app.quit_item.key, "q")
        self.assertEqual(self.app.quit_item.title, config.MENU_QUIT)

    def test_interval_submenu(self):
        self.assertEqual(self.app.time_menu.title, config.MENU_SELECT_TIME)
        self.assertEqual(
            [item.title for item in self.app.time_menu.items],
            ["10 Min", "20 Min", "30 Min", "40 Min", "60 Min"],
        )

    def test_title_falls_back_to_app_name_without_icon(self):
        self.assertEqual(self.app.title, config.APP_NAME)
        app = macos_app.ProtectSightMenuBar(self.controller, icon_path="/tmp/eye.png")
        self.assertIsNone(app.title)
        self.assertEqual(app.icon, "/tmp/eye.png")


class TestMenuState(MenuBarTestCase):
    def test_initial_state(self):
        """Start Timer shown, Select Time and its items greyed out, nothing checked."""
        self.assertEqual(self.app.toggle_item.title, config.MENU_START_TIMER)
        self.app.menu._menu.setAutoenablesItems_.assert_called_once_with(False)
        self.assert_selection_enabled(False)
        self.assertEqual(self.checked(), [])

    def test_start_timer_enables_selection(self):
        self.app._toggle_timer(self.app.toggle_item)

        self.assertEqual(self.app.toggle_item.title, config.MENU_START_TIMER)
        self.assert_selection_enabled(True)
        self.assertEqual(self.timers.timers, [])

    def test_select_interval_checks_item_and_shows_stop(self):
        self.app._toggle_timer(self.app.toggle_item)
        self.app._select_interval(self.app.interval_items[20])

        self.assertEqual(self.app.toggle_item.title, config.MENU_STOP_TIMER)
        self.assertEqual(self.checked(), [20])
        self.assertEqual(self.timers.last.interval, 20 * 60)
        self.assertEqual(len(self.windows.open_windows), 1)

    def test_reselect_moves_check_mark(self):
        self.app._toggle_timer(self.app.toggle_item)
        self.app._select_interval(self.app.interval_items[10])
        self.app._select_interval(self.app.interval_items[60])

        self.assertEqual(self.checked(), [60])

    def test_stop_clears_check_and_keeps_selection_enabled(self):
        self.app._toggle_timer(self.app.toggle_item)
        self.app._select_interval(self.app.interval_items[30])
        self.app._toggle_timer(self.app.toggle_item)

        self.assertEqual(self.app.toggle_item.title, config.MENU_START_TIMER)
        self.assertEqual(self.checked(), [])
        self.assert_selection_enabled(True)
        self.assertTrue(self.timers.last.cancelled)


class TestMenuQuit(MenuBarTestCase):
    def test_quit_shuts_down_and_exits(self):
        self.app._toggle_timer(self.app.toggle_item)
        self.app._select_interval(self.app.interval_items[10])
        window = self.windows.windows[0]

        self.app._quit_app(self.app.quit_item)

        self.assertTrue(self.timers.last.cancelled)
        self.assertTrue(window.closed)
        fake_rumps.quit_application.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
