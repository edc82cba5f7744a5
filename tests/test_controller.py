"""
Tests for core/controller.py: verifies the ReminderController works
independently of any UI framework, including the full
select → overlay → countdown → dismiss cycle.
"""

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import config
from core.controller import ReminderController, ReminderState
from core.countdown import BreakCountdown
from core.overlay import OverlayPresenter
from fakes import FakeTimerFactory, FakeWindowFactory
from menubar import build_controller


class ControllerTestCase(unittest.TestCase):
    def setUp(self):
        self.timers = FakeTimerFactory()
        self.windows = FakeWindowFactory()
        self.presenter = OverlayPresenter(self.windows)
        self.controller = ReminderController(
            self.presenter, timer_factory=self.timers
        )
        self.states = []
        self.controller.on_state_change = lambda s: self.states.append(
            ReminderState(s.interval_minutes, s.is_running, s.time_selection_enabled)
        )


class TestControllerInit(ControllerTestCase):
    def test_defaults(self):
        state = self.controller.state
        self.assertIsNone(state.interval_minutes)
        self.assertFalse(state.is_running)
        self.assertFalse(state.time_selection_enabled)
        self.assertEqual(self.controller.toggle_title, config.MENU_START_TIMER)
        self.assertFalse(self.controller.scheduler.is_running)


class TestControllerToggle(ControllerTestCase):
    def test_toggle_while_stopped_enables_selection(self):
        self.controller.toggle_timer()

        self.assertTrue(self.controller.state.time_selection_enabled)
        self.assertFalse(self.controller.is_running)
        self.assertEqual(self.timers.timers, [])
        self.assertEqual(len(self.states), 1)

    def test_toggle_again_while_stopped_does_not_renotify(self):
        self.controller.toggle_timer()
        self.controller.toggle_timer()
        self.assertEqual(len(self.states), 1)

    def test_toggle_while_running_stops(self):
        self.controller.select_interval("20 Min")
        timer = self.timers.last

        self.controller.toggle_timer()

        self.assertFalse(self.controller.is_running)
        self.assertIsNone(self.controller.state.interval_minutes)
        self.assertTrue(timer.cancelled)
        self.assertEqual(self.controller.toggle_title, config.MENU_START_TIMER)
        # Selection stays available after stopping
        self.assertTrue(self.controller.state.time_selection_enabled)

    def test_stop_when_stopped_is_noop(self):
        self.controller.stop()
        self.assertEqual(self.states, [])


class TestControllerSelectInterval(ControllerTestCase):
    def test_select_each_title(self):
        for minutes in config.INTERVAL_CHOICES_MINUTES:
            with self.subTest(minutes=minutes):
                self.assertTrue(self.controller.select_interval(config.interval_title(minutes)))
                self.assertEqual(self.controller.state.interval_minutes, minutes)
                self.assertEqual(self.timers.last.interval, minutes * 60)
                self.assertEqual(len(self.timers.active), 1)

    def test_select_int(self):
        self.assertTrue(self.controller.select_interval(40))
        self.assertEqual(self.controller.state.interval_minutes, 40)

    def test_select_starts_and_updates_title(self):
        self.controller.select_interval("10 Min")

        self.assertTrue(self.controller.is_running)
        self.assertEqual(self.controller.toggle_title, config.MENU_STOP_TIMER)
        self.assertEqual(self.states[-1], ReminderState(10, True, True))

    def test_unmapped_selection_ignored(self):
        for choice in ("15 Min", "Custom Time", "", 15, 0, None):
            with self.subTest(choice=choice):
                self.assertFalse(self.controller.select_interval(choice))
        self.assertFalse(self.controller.is_running)
        self.assertEqual(self.timers.timers, [])
        self.assertEqual(self.states, [])

    def test_reselect_while_running_rearms(self):
        self.controller.select_interval("10 Min")
        first = self.timers.last
        self.controller.select_interval("60 Min")

        self.assertTrue(first.cancelled)
        self.assertEqual(self.timers.active, [self.timers.last])
        self.assertEqual(self.timers.last.interval, 3600)
        self.assertEqual(self.controller.state.interval_minutes, 60)


class TestControllerOverlay(ControllerTestCase):
    def test_select_shows_overlay_immediately(self):
        self.controller.select_interval("10 Min")
        self.assertTrue(self.presenter.is_shown)
        self.assertEqual(len(self.windows.open_windows), 1)

    def test_overlapping_fire_does_not_duplicate_overlay(self):
        self.controller.select_interval("10 Min")
        self.timers.last.fire()

        self.assertEqual(len(self.windows.windows), 1)
        self.assertEqual(self.controller.scheduler.fire_count, 2)

    def test_stop_leaves_current_overlay(self):
        self.controller.select_interval("10 Min")
        self.controller.stop()
        self.assertTrue(self.presenter.is_shown)

    def test_shutdown_stops_and_dismisses(self):
        self.controller.select_interval("10 Min")
        timer = self.timers.last
        window = self.windows.windows[0]

        self.controller.shutdown()

        self.assertTrue(timer.cancelled)
        self.assertTrue(window.closed)
        self.assertFalse(self.controller.is_running)
        self.assertFalse(self.presenter.is_shown)


class TestEndToEnd(unittest.TestCase):
    """Select "10 Min" → overlay → 10 ticks → auto-dismiss → next fire."""

    def test_full_cycle(self):
        timers = FakeTimerFactory()
        countdowns = []

        class CountdownWindow:
            """Fake window owning a real BreakCountdown, like the AppKit one."""

            def __init__(self, on_dismiss):
                self.countdown = BreakCountdown(on_dismiss, timer_factory=timers)
                self.tick_timer = None
                self.closed = False
                countdowns.append(self)

            def show(self):
                self.countdown.start()
                self.tick_timer = timers.last

            def close(self):
                self.countdown.cancel()
                self.closed = True

        controller = build_controller(CountdownWindow, timers)
        presenter = controller.presenter

        self.assertTrue(controller.select_interval("10 Min"))
        reminder_timer = timers.timers[0]
        self.assertEqual(reminder_timer.interval, 600)

        # Fired immediately: overlay is up
        self.assertTrue(presenter.is_shown)
        window = countdowns[0]

        # Ten seconds without skipping
        for _ in range(10):
            window.tick_timer.fire()

        self.assertTrue(window.closed)
        self.assertFalse(presenter.is_shown)
        self.assertTrue(window.tick_timer.cancelled)

        # Scheduler still armed and fires again after the interval
        self.assertTrue(controller.is_running)
        self.assertTrue(reminder_timer.is_active)
        reminder_timer.fire()

        self.assertTrue(presenter.is_shown)
        self.assertEqual(len(countdowns), 2)
        self.assertEqual(countdowns[1].countdown.remaining, 10)

    def test_skip_dismisses_early(self):
        windows = []

        def factory(on_dismiss):
            window = MagicMock()
            window.countdown = BreakCountdown(on_dismiss, timer_factory=FakeTimerFactory())
            windows.append(window)
            return window

        controller = build_controller(factory, FakeTimerFactory())
        controller.select_interval("30 Min")

        windows[0].countdown.skip()
        self.assertFalse(controller.presenter.is_shown)
        windows[0].close.assert_called_once_with()

    def test_build_controller_test_mode(self):
        timers = FakeTimerFactory()
        controller = build_controller(
            FakeWindowFactory(), timers, test_mode=True
        )
        controller.select_interval("20 Min")
        self.assertEqual(timers.last.interval, 20)


if __name__ == "__main__":
    unittest.main()
