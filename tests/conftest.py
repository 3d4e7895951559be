"""
Shared pytest fixtures for the MyRent UI test suite.

Fixtures here build fake select controls and drivers so that unit tests
can exercise dropdown and session logic without a browser.

Key Concepts Demonstrated:
- Test doubles for third-party interfaces (Selenium WebElement/WebDriver)
- Fixture dependencies
- Test data factories
"""

from collections.abc import Callable

import pytest
from faker import Faker

from tests.mocks.fake_webdriver import COMPANY_LOCATOR, FakeDriver, FakeSelect

# Initialize Faker for generating test data
fake = Faker()

# -----------------------------------------------------------------------------
# Fake Control Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def select_factory() -> Callable[..., tuple[FakeDriver, FakeSelect]]:
    """
    Factory building a fake driver that exposes one select control.

    The control is registered under ``COMPANY_LOCATOR``.

    Returns:
        Callable taking ``(text, value)`` option pairs and returning
        the driver together with its control.
    """
    def _create(*options: tuple[str, str]) -> tuple[FakeDriver, FakeSelect]:
        control = FakeSelect(list(options))
        return FakeDriver({COMPANY_LOCATOR: control}), control

    return _create

@pytest.fixture
def populated_select(select_factory):
    """A control with a placeholder followed by two real options."""
    return select_factory(("--select--", ""), ("Alpha", "A1"), ("Beta", "B1"))

@pytest.fixture
def placeholder_only_select(select_factory):
    """A control that never gets past its placeholder."""
    return select_factory(("--select--", ""))

# -----------------------------------------------------------------------------
# Test Data Factories
# -----------------------------------------------------------------------------

@pytest.fixture
def random_credentials() -> dict[str, str]:
    """Throwaway credentials that no account will match."""
    return {
        "username": fake.user_name(),
        "password": fake.password(length=12),
    }
