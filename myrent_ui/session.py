"""
Per-thread browser session registry.

Each worker thread owns at most one WebDriver at a time. The registry
maps thread identity to driver explicitly, so a session is released on
teardown even when a test fails, and a recycled thread never picks up a
driver that an earlier test already closed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Generator
from contextlib import contextmanager

from selenium.webdriver.remote.webdriver import WebDriver

from myrent_ui.browser import create_driver
from myrent_ui.config import UIConfig
from myrent_ui.exceptions import SessionError

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Thread-to-driver map with scoped acquisition.

    Attributes:
        driver_factory: Callable building a driver from a UIConfig.
    """

    def __init__(self, driver_factory: Callable[[UIConfig], WebDriver] = create_driver):
        self.driver_factory = driver_factory
        self._drivers: dict[int, WebDriver] = {}
        self._lock = threading.Lock()

    def acquire(self, config: UIConfig) -> WebDriver:
        """
        Start a browser for the calling thread.

        Args:
            config: Suite configuration passed to the driver factory.

        Returns:
            The new driver, also registered for the calling thread.

        Raises:
            SessionError: If the calling thread already owns a session.
        """
        worker = threading.get_ident()
        with self._lock:
            if worker in self._drivers:
                raise SessionError(f"Thread {worker} already owns a browser session")

        driver = self.driver_factory(config)

        with self._lock:
            self._drivers[worker] = driver
        logger.info("Browser started: %s", config.browser)
        return driver

    def current(self) -> WebDriver:
        """
        Return the calling thread's driver.

        Raises:
            SessionError: If the calling thread has no active session.
        """
        worker = threading.get_ident()
        with self._lock:
            driver = self._drivers.get(worker)
        if driver is None:
            raise SessionError(f"No browser session for thread {worker}")
        return driver

    def release(self) -> None:
        """Quit the calling thread's driver and free its slot."""
        worker = threading.get_ident()
        with self._lock:
            driver = self._drivers.pop(worker, None)
        if driver is None:
            return
        driver.quit()
        logger.info("Browser closed")

    def active_count(self) -> int:
        """Number of threads currently holding a session."""
        with self._lock:
            return len(self._drivers)

    @contextmanager
    def session(self, config: UIConfig) -> Generator[WebDriver, None, None]:
        """Acquire a driver for the duration of a ``with`` block."""
        driver = self.acquire(config)
        try:
            yield driver
        finally:
            self.release()


# Registry shared by the pytest fixtures
registry = SessionRegistry()
