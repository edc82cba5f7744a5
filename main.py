#!/usr/bin/env python3
"""
ProtectSight - Main Entry Point

A macOS menu bar utility that covers the screen with a short break
reminder every 10-60 minutes so you rest your eyes.

Usage:
    python main.py           # Launch menu bar app
    python main.py --test    # Interval "minutes" last one second
    python main.py --debug   # Verbose logging
"""

import sys
import logging
import argparse
from typing import List, Optional

import config
from instance_lock import check_single_instance, get_existing_pid

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging from config (or DEBUG when asked)."""
    level = logging.DEBUG if debug else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="ProtectSight - periodic eye break reminders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py          Launch menu bar app
  python main.py --test   Short intervals for trying it out
        """
    )
    parser.add_argument(
        "--test",
        action="store_true",
        default=config.TEST_MODE,
        help="Count interval minutes as seconds (also PROTECTSIGHT_TEST_MODE=1)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable DEBUG logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point: parse arguments and launch the menu bar app."""
    args = parse_args(argv)
    configure_logging(args.debug)

    # Single instance enforcement
    if not check_single_instance():
        existing_pid = get_existing_pid()
        pid_info = f" (PID: {existing_pid})" if existing_pid else ""
        print(f"\nProtectSight is already running{pid_info}.")
        print("Only one instance can run at a time.\n")
        sys.exit(1)

    try:
        from menubar import run_menubar_app
        run_menubar_app(test_mode=args.test)
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"\nFatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
