"""
Browser lifecycle helpers.

One isolated browser context is opened per suite and closed exactly once,
whatever happened in between. Playwright failures raised while allocating
contexts or tabs are surfaced as ``BrowserEnvironmentError`` so suites can
tell a broken environment apart from a failed assertion.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Generator
from contextlib import contextmanager

from playwright.sync_api import Browser, BrowserContext, Locator, Page
from playwright.sync_api import Error as PlaywrightError

from shared.errors import BrowserEnvironmentError

logger = logging.getLogger(__name__)

# Contexts already released by close_browser_context
_closed_contexts: weakref.WeakSet = weakref.WeakSet()


def create_browser_context(browser: Browser, **context_args) -> BrowserContext:
    """
    Allocate a new isolated browser context.

    Args:
        browser: Running Playwright browser.
        **context_args: Options forwarded to ``Browser.new_context``.

    Returns:
        The new browser context.

    Raises:
        BrowserEnvironmentError: If the browser cannot allocate a context.
    """
    try:
        context = browser.new_context(**context_args)
    except PlaywrightError as exc:
        raise BrowserEnvironmentError(f"Could not create browser context: {exc}") from exc
    logger.info("Browser context created")
    return context


def new_tab(context: BrowserContext) -> Page:
    """
    Open a new tab in the given context.

    Raises:
        BrowserEnvironmentError: If the tab cannot be opened.
    """
    try:
        page = context.new_page()
    except PlaywrightError as exc:
        raise BrowserEnvironmentError(f"Could not open a new tab: {exc}") from exc
    logger.debug("New tab opened (%d tab(s) in context)", len(context.pages))
    return page


def close_page(context: BrowserContext, index: int) -> Page:
    """
    Close every tab after ``index`` and return the tab at ``index``.

    Used to discard a front office tab opened from the back office and
    hand control back to the original tab.

    Args:
        context: Browser context owning the tabs.
        index: Zero-based position of the tab to keep as current.

    Returns:
        The tab at ``index``, brought to front.

    Raises:
        BrowserEnvironmentError: If there is no tab at ``index``.
    """
    tabs = list(context.pages)
    if index < 0 or index >= len(tabs):
        raise BrowserEnvironmentError(
            f"No tab at index {index}: context holds {len(tabs)} tab(s)"
        )

    for tab in tabs[index + 1:]:
        tab.close()

    current = tabs[index]
    current.bring_to_front()
    logger.debug("Closed %d tab(s), tab %d is current", len(tabs) - index - 1, index)
    return current


def close_browser_context(context: BrowserContext) -> None:
    """Release a browser context. Closing the same context twice is a no-op."""
    if context in _closed_contexts:
        logger.debug("Browser context already closed")
        return
    _closed_contexts.add(context)
    context.close()
    logger.info("Browser context closed")


def open_link_in_new_tab(page: Page, link: Locator) -> Page:
    """
    Click a ``target=_blank`` link and return the tab it opens.

    The call returns once the new document has finished loading.

    Raises:
        BrowserEnvironmentError: If the new tab never opens or never loads.
    """
    try:
        with page.context.expect_page() as new_page_info:
            link.click()
        new_page = new_page_info.value
        new_page.wait_for_load_state("networkidle")
    except PlaywrightError as exc:
        raise BrowserEnvironmentError(f"Link did not open a new tab: {exc}") from exc
    return new_page


@contextmanager
def browser_session(browser: Browser, **context_args) -> Generator[tuple[BrowserContext, Page], None, None]:
    """
    Yield a fresh ``(context, page)`` pair and always release the context.

    Example:
        with browser_session(browser, viewport={"width": 1280, "height": 720}) as (context, page):
            page.goto(url)
    """
    context = create_browser_context(browser, **context_args)
    try:
        page = new_tab(context)
        yield context, page
    finally:
        close_browser_context(context)
