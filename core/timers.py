"""
Timer contract shared by the reminder scheduler and the break countdown.

Core code never creates timers itself. It is handed a factory
``factory(interval, callback, repeats) -> timer`` whose timers expose
start(), cancel() and is_active, and call ``callback(timer)`` on the main
run loop, one full interval after start() and then every interval until
cancelled (or once, for a one-shot). On macOS the factory is
menubar.timers.create_rumps_timer; tests use tests/fakes.FakeTimerFactory.
"""

from typing import Any, Callable

TimerCallback = Callable[[Any], None]

TimerFactory = Callable[[float, TimerCallback, bool], Any]
