"""Reusable scenario fragments shared by several suites."""
