"""Exceptions raised by the MyRent UI test framework."""

from __future__ import annotations


class MyRentUIError(Exception):
    """Base exception for framework failures."""

    pass


class DropdownNotPopulatedError(MyRentUIError, TimeoutError):
    """
    A dropdown never loaded more than its placeholder option.

    Attributes:
        locator: Locator tuple of the control that was polled.
        timeout: Seconds waited before giving up.
    """

    def __init__(self, locator: tuple[str, str], timeout: float):
        self.locator = locator
        self.timeout = timeout
        super().__init__(
            f"Dropdown {locator[0]}={locator[1]!r} was not populated within {timeout}s"
        )


class SessionError(MyRentUIError, RuntimeError):
    """Browser session lifecycle was used out of order."""

    pass
