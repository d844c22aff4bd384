"""
Test suites for the shop back office.

This package contains:
- e2e/: Browser suites driving a live back office and storefront with Playwright
- unit/: Harness tests against mocked Playwright objects
"""
