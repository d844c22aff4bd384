"""Error taxonomy for the UI test harness."""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for every error raised by the harness."""


class BrowserEnvironmentError(HarnessError, EnvironmentError):
    """The browser could not allocate a context/tab or could not navigate."""


class ElementNotFoundError(HarnessError, AssertionError):
    """A selector did not resolve within its timeout."""

    def __init__(self, selector: str, screen: str, elapsed_ms: float):
        self.selector = selector
        self.screen = screen
        self.elapsed_ms = elapsed_ms
        super().__init__(
            f"Element '{selector}' not found on {screen} after {elapsed_ms:.0f} ms"
        )


class UnexpectedRowCountError(HarnessError, AssertionError):
    """A grid did not hold the number of rows a step relies on."""

    def __init__(self, expected: int, actual: int, screen: str):
        self.expected = expected
        self.actual = actual
        self.screen = screen
        super().__init__(f"Expected {expected} row(s) in {screen} grid, but found {actual}")


class DuplicateContextItemError(HarnessError, ValueError):
    """A step identifier was recorded twice within the same base context."""
