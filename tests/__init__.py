"""
Test suite for the MyRent UI test framework.

This package contains:
- unit/: Framework tests against fake drivers (no browser needed)
- e2e/: Browser tests driving the login flow through Selenium
- mocks/: Fake Selenium elements and drivers used by the unit tests
"""
