"""
Dropdown helpers for asynchronously populated ``<select>`` controls.

Many MyRent dropdowns start with a single placeholder option
("-- select --") and are filled by an AJAX call, often triggered by a
selection made in another control. Reading or selecting before that call
completes gives flaky results, so every operation here first waits until
the control holds more than one option.

Selection is deliberately forgiving: when the requested value is not
offered, the first option with a real value is chosen instead and a
warning is logged, so a test keeps going with valid form data.
"""

from __future__ import annotations

import logging

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import Select, WebDriverWait

from myrent_ui.exceptions import DropdownNotPopulatedError

logger = logging.getLogger(__name__)

Locator = tuple[str, str]

DEFAULT_TIMEOUT = 15
POLL_FREQUENCY = 0.5


class DropdownHelper:
    """
    Wait-aware operations on select controls.

    The control is located fresh for every call, so a locator stays
    valid across page reloads and DOM re-renders.

    Attributes:
        driver: WebDriver owning the page.
        timeout: Default seconds to wait for a control to populate.
        poll_frequency: Seconds between population checks.
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: float = DEFAULT_TIMEOUT,
        poll_frequency: float = POLL_FREQUENCY,
    ):
        self.driver = driver
        self.timeout = timeout
        self.poll_frequency = poll_frequency

    # -------------------------------------------------------------------------
    # Waiting
    # -------------------------------------------------------------------------

    def wait_until_populated(self, locator: Locator, timeout: float | None = None) -> Select:
        """
        Block until the control has more than its placeholder option.

        Args:
            locator: ``(By.<strategy>, value)`` tuple for the select element.
            timeout: Seconds to wait. Defaults to the helper's timeout.

        Returns:
            Select wrapper around the populated control.

        Raises:
            DropdownNotPopulatedError: If the control still holds at most one
                option when the timeout elapses.
        """
        if timeout is None:
            timeout = self.timeout

        def populated(driver):
            return len(Select(driver.find_element(*locator)).options) > 1

        wait = WebDriverWait(self.driver, timeout, poll_frequency=self.poll_frequency)
        try:
            wait.until(populated)
        except TimeoutException as exc:
            raise DropdownNotPopulatedError(locator, timeout) from exc

        return Select(self.driver.find_element(*locator))

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def list_option_texts(self, locator: Locator) -> list[str]:
        """Return the non-blank option texts in document order."""
        options = self.wait_until_populated(locator).options
        return [option.text for option in options if option.text.strip()]

    def list_option_values(self, locator: Locator) -> list[str]:
        """Return the non-blank option values in document order."""
        options = self.wait_until_populated(locator).options
        values = [option.get_attribute("value") for option in options]
        return [value for value in values if value and value.strip()]

    def selected_value(self, locator: Locator) -> str:
        """Return the value of the currently selected option."""
        select = Select(self.driver.find_element(*locator))
        return select.first_selected_option.get_attribute("value")

    # -------------------------------------------------------------------------
    # Selecting
    # -------------------------------------------------------------------------

    def select_by_value_or_fallback(self, locator: Locator, target_value: str) -> str | None:
        """
        Select ``target_value``, or the first real option if it is missing.

        Args:
            locator: ``(By.<strategy>, value)`` tuple for the select element.
            target_value: Option value to select. Matched exactly.

        Returns:
            The value that ended up selected, or None when no option has a
            non-blank value.
        """
        select = self.wait_until_populated(locator)
        values = [option.get_attribute("value") for option in select.options]

        if target_value in values:
            select.select_by_value(target_value)
            return target_value

        fallback = next((value for value in values if value and value.strip()), None)
        if fallback is not None:
            select.select_by_value(fallback)
        logger.warning(
            "Target value [%s] not found in %s=%s. Selected first available: %s",
            target_value, locator[0], locator[1], fallback,
        )
        return fallback

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def log_all_options(self, locator: Locator, dropdown_name: str) -> None:
        """Log every option text of a control, one line each."""
        logger.info("Options in [%s]", dropdown_name)
        for text in self.list_option_texts(locator):
            logger.info("  -> %s", text)
