"""Fixtures for harness unit tests: Playwright objects replaced by mocks."""

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import BrowserContext, Page

from shared import test_context


@pytest.fixture
def mock_page() -> MagicMock:
    """
    A Playwright page double.

    ``page.locator(...)`` always returns the same child mock, so tests set
    behaviour once on ``mock_page.locator.return_value`` and inspect
    ``mock_page.locator.call_args_list`` for the selectors used.
    """
    page = MagicMock(spec=Page)
    page.title.return_value = ""
    page.url = "http://localhost/admin-dev/"
    return page


@pytest.fixture
def mock_context() -> MagicMock:
    """A Playwright browser context double with no open tab."""
    context = MagicMock(spec=BrowserContext)
    context.pages = []
    return context


@pytest.fixture(autouse=True)
def clean_context_registry():
    """Forget step identifiers recorded by earlier tests."""
    test_context.reset_registry()
    yield
    test_context.reset_registry()
