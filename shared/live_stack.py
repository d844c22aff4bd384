"""Live shop readiness helpers for the E2E suites."""

from __future__ import annotations

import logging
import os
import time

import pytest
import requests

logger = logging.getLogger(__name__)


def is_shop_ready(url: str, timeout: int = 2) -> bool:
    """Return True when ``url`` answers with a non-error status."""
    try:
        response = requests.get(url, timeout=timeout, verify=False)
    except requests.RequestException:
        return False
    return response.status_code < 400


def wait_for_shop(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll ``url`` until it answers or ``timeout`` seconds elapse."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_shop_ready(url):
            logger.info("Shop ready at %s", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"Shop at {url} not reachable after {timeout}s")


def live_back_office_url(
    *,
    base_url_env: str,
    base_url_default: str,
    suite_name: str,
    timeout: int = 60,
) -> str:
    """
    Return a reachable back office URL for a suite.

    Priority:
    1. Use the explicit URL from ``base_url_env`` and wait until it answers.
    2. Reuse a shop already answering at ``base_url_default``.
    3. Otherwise skip the suite: there is nothing to drive.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_shop(provided_base_url, timeout=timeout)
        return provided_base_url

    if is_shop_ready(base_url_default):
        return base_url_default

    pytest.skip(
        f"No shop answering at {base_url_default}; set {base_url_env} to run {suite_name} tests"
    )
