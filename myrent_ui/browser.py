"""Browser factory building configured WebDriver instances."""

from __future__ import annotations

import logging

from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver

from myrent_ui.config import UIConfig

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chrome", "firefox")


def create_driver(config: UIConfig) -> WebDriver:
    """
    Start a browser for the configured kind.

    Unknown browser kinds fall back to Chrome. The driver binary is
    resolved by Selenium Manager.

    Args:
        config: Suite configuration (browser kind, headless flag, implicit wait).

    Returns:
        A maximised WebDriver with the implicit wait applied.
    """
    browser = config.browser.lower()

    if browser == "firefox":
        options = webdriver.FirefoxOptions()
        if config.headless:
            options.add_argument("-headless")
        driver = webdriver.Firefox(options=options)
    else:
        if browser not in SUPPORTED_BROWSERS:
            logger.warning("Unsupported browser '%s', using chrome", config.browser)
        options = webdriver.ChromeOptions()
        if config.headless:
            options.add_argument("--headless=new")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--window-size=1920,1080")
        driver = webdriver.Chrome(options=options)

    driver.maximize_window()
    driver.implicitly_wait(config.implicit_wait)
    return driver
