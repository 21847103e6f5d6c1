"""
Support adventure entry point.

Usage:
    Interactive:  python main.py
    Scenario:     python main.py --scenario all-customers
"""

import logging

from support_adventure.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode() -> None:
    """Start the interactive console front end."""
    from console_demo import main as console_main

    logger.info("Starting %s console", settings.app_name)
    console_main()


if __name__ == "__main__":
    _run_console_mode()
