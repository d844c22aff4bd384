"""Reusable browser-test harness shared by the back-office UI suites."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging once for harness modules and suites."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
