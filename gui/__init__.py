"""
AppKit user interface for ProtectSight: the break overlay window, its
content view and the menu bar icon.

Only gui.icon is importable off macOS; the other modules need PyObjC.
"""
