"""
Test doubles for the MyRent UI test suite.

This package provides fake Selenium elements and drivers so that the
framework helpers can be exercised:
- Without starting a real browser
- With controls that populate on a timer, like AJAX-loaded dropdowns
- Deterministically, for timing-sensitive wait behaviour
"""
