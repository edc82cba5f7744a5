"""
Core reminder logic package for ProtectSight.

Contains the headless ReminderController, the reminder scheduler, the
overlay presenter, the break countdown and the timer contract
they share. Zero UI dependencies.
"""

from core.controller import ReminderController, ReminderState

__all__ = ["ReminderController", "ReminderState"]
