"""
MyRent UI test framework.

Selenium-based helpers shared by the MyRent browser test suite:
configuration, per-thread browser sessions and dropdown utilities.
Page objects and the tests themselves live under ``tests/``.
"""

import logging

from myrent_ui.config import UIConfig, load_config
from myrent_ui.dropdown import DropdownHelper
from myrent_ui.exceptions import DropdownNotPopulatedError, MyRentUIError, SessionError
from myrent_ui.session import SessionRegistry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

__all__ = [
    "DropdownHelper",
    "DropdownNotPopulatedError",
    "MyRentUIError",
    "SessionError",
    "SessionRegistry",
    "UIConfig",
    "load_config",
]
