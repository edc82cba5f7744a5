"""Configuration settings for ProtectSight."""

import os
import sys
from pathlib import Path
from typing import Optional, Union
from dotenv import load_dotenv


APP_NAME = "ProtectSight"


def is_bundled() -> bool:
    """
    Check if the application is running from a PyInstaller/py2app bundle.

    Returns:
        True if running from a bundled executable, False otherwise.
    """
    return getattr(sys, 'frozen', False)


def get_base_dir() -> Path:
    """
    Get the base directory for bundled resources (assets).

    For development: Returns the directory containing this file.
    For bundled apps: Returns _MEIPASS when PyInstaller provides it.

    Returns:
        Path to the base directory.
    """
    meipass = getattr(sys, '_MEIPASS', None)
    if is_bundled() and meipass:
        return Path(meipass)
    return Path(__file__).parent


def get_user_data_dir() -> Path:
    """
    Get the directory for user-writable data (lock file, rendered icon).

    For development: BASE_DIR/data
    For bundled apps: ~/Library/Application Support/ProtectSight on macOS,
                      ~/.local/share/ProtectSight elsewhere.

    Returns:
        Path to the user data directory.
    """
    if not is_bundled():
        return Path(__file__).parent / "data"

    if sys.platform == 'darwin':
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def _env_flag(name: str) -> bool:
    """Read a boolean environment flag ("true", "1", "yes")."""
    return os.getenv(name, "").lower() in ("true", "1", "yes")


# Load environment variables from .env file (only in development)
if not is_bundled():
    # Explicitly load from the project root so cwd does not matter
    load_dotenv(Path(__file__).parent / ".env")

# Base directory (for bundled resources like assets)
BASE_DIR = get_base_dir()

# User data directory (lock file, generated icon)
USER_DATA_DIR = get_user_data_dir()

ASSETS_DIR = BASE_DIR / "assets"
MENU_ICON_ASSET = ASSETS_DIR / "menu_icon.png"
GENERATED_MENU_ICON = USER_DATA_DIR / "menu_icon.png"
LOCK_FILE = USER_DATA_DIR / ".protectsight_instance.lock"

# Reminder intervals offered in the "Select Time" submenu (minutes)
INTERVAL_CHOICES_MINUTES = (10, 20, 30, 40, 60)
SECONDS_PER_MINUTE = 60

# --test / PROTECTSIGHT_TEST_MODE: one interval "minute" lasts one second
TEST_MODE = _env_flag("PROTECTSIGHT_TEST_MODE")
TEST_SECONDS_PER_MINUTE = 1

# Break countdown
BREAK_DURATION_SECONDS = 10
COUNTDOWN_TICK_SECONDS = 1

# Menu titles
MENU_START_TIMER = "Start Timer"
MENU_STOP_TIMER = "Stop Timer"
MENU_SELECT_TIME = "Select Time"
MENU_QUIT = "Quit"
INTERVAL_TITLE_SUFFIX = " Min"

# Overlay texts
OVERLAY_TITLE = "Please look somewhere else!"
OVERLAY_SUBTITLE = f"Take a {BREAK_DURATION_SECONDS}-second break to protect your eyes."
OVERLAY_SKIP = "Skip"

# Overlay appearance
OVERLAY_BACKGROUND_ALPHA = 0.8
OVERLAY_STACK_SPACING = 20
RING_DIAMETER = 120
RING_LINE_WIDTH = 8
RING_TRACK_ALPHA = 0.2
TITLE_FONT_SIZE = 34
COUNTDOWN_FONT_SIZE = 34
SUBTITLE_FONT_SIZE = 15

# Menu bar icon (template image, @2x of an 18pt glyph)
MENU_ICON_SIZE = 36

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # Can override in .env: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def interval_title(minutes: int) -> str:
    """Menu title for an interval choice, e.g. "10 Min"."""
    return f"{minutes}{INTERVAL_TITLE_SUFFIX}"


def parse_interval(choice: Union[str, int, None]) -> Optional[int]:
    """
    Map a menu selection to an interval in minutes.

    Accepts the menu title ("20 Min") or the minute value itself.

    Returns:
        The interval in minutes, or None when the choice is not one of
        INTERVAL_CHOICES_MINUTES.
    """
    if isinstance(choice, bool):
        return None
    if isinstance(choice, int):
        return choice if choice in INTERVAL_CHOICES_MINUTES else None
    if not isinstance(choice, str):
        return None

    for minutes in INTERVAL_CHOICES_MINUTES:
        if choice.strip() == interval_title(minutes):
            return minutes
    return None
