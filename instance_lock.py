"""
Instance Lock: prevents two ProtectSight menu bar icons from running.

Uses fcntl.flock() on a lock file in the user data directory. The OS drops
the lock when the process exits, even on a crash, so a leftover file never
blocks a new launch.
"""

import os
import atexit
import logging
from pathlib import Path
from typing import IO, Optional

import fcntl

import config

logger = logging.getLogger(__name__)


class InstanceLock:
    """
    Single-instance lock backed by an exclusive, non-blocking flock.

    Usage:
        lock = InstanceLock()
        if not lock.acquire():
            print("Another instance is already running")
            sys.exit(1)
    """

    def __init__(self, lock_file: Optional[Path] = None):
        """
        Args:
            lock_file: Path to lock file (default: config.LOCK_FILE)
        """
        self.lock_file = lock_file or config.LOCK_FILE
        self._lock_handle: Optional[IO[str]] = None

    def acquire(self) -> bool:
        """
        Try to take the lock and record our PID in the file.

        Returns:
            True if acquired (no other instance running), False otherwise.
        """
        if self._lock_handle is not None:
            return True

        try:
            self.lock_file.parent.mkdir(parents=True, exist_ok=True)
            # 'a+' so a failed attempt does not wipe the holder's PID
            handle = open(self.lock_file, 'a+')
        except OSError as e:
            logger.error(f"Could not open instance lock {self.lock_file}: {e}")
            return False

        try:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError:
            handle.close()
            return False

        handle.seek(0)
        handle.truncate()
        handle.write(str(os.getpid()))
        handle.flush()
        self._lock_handle = handle
        logger.debug(f"Instance lock acquired (PID: {os.getpid()})")
        return True

    def release(self) -> None:
        """Release the lock and remove the lock file."""
        if self._lock_handle is None:
            return

        # Closing the file releases the flock
        self._lock_handle.close()
        self._lock_handle = None
        try:
            self.lock_file.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.debug(f"Could not delete lock file: {e}")
        logger.debug("Instance lock released")

    def is_acquired(self) -> bool:
        """Check if lock is currently held by this instance."""
        return self._lock_handle is not None

    def read_pid(self) -> Optional[int]:
        """PID written by the current holder, or None if unreadable."""
        try:
            content = self.lock_file.read_text().strip()
        except OSError:
            return None
        return int(content) if content.isdigit() else None

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False


# Process-wide lock taken by check_single_instance()
_instance_lock: Optional[InstanceLock] = None


def check_single_instance() -> bool:
    """
    Check if this is the only running instance of ProtectSight.

    The lock is released automatically at exit.

    Returns:
        True if this is the only instance (safe to proceed)
        False if another instance is running (should exit)
    """
    global _instance_lock

    if _instance_lock is not None:
        return _instance_lock.is_acquired()

    _instance_lock = InstanceLock()
    acquired = _instance_lock.acquire()
    if acquired:
        atexit.register(release_instance_lock)
    return acquired


def release_instance_lock() -> None:
    """Release the process-wide lock, if held."""
    global _instance_lock
    if _instance_lock is not None:
        _instance_lock.release()
        _instance_lock = None


def get_existing_pid() -> Optional[int]:
    """PID of the instance currently holding the lock, if readable."""
    return InstanceLock().read_pid()
