"""
Test suite for the Practice Form harness.

This package contains:
- unit/: browser-free tests with Playwright mocked out
- e2e/: browser tests that walk the practice form step by step
- fixtures/: an offline copy of the form used by the testing config
"""
