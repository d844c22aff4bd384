"""
E2E test package for the shop back office.

This package contains Playwright-based browser suites and demonstrates:
- Page Object Model (POM) pattern
- One browser context per suite, closed on teardown
- Scenario steps that stop at the first failure
"""
