"""
Test suite configuration module.

Settings for the browser suite are read from ``MYRENT_*`` environment
variables on top of per-profile defaults (local, ci, testing). The
profile itself is chosen with ``MYRENT_ENV``.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class UIConfig:
    """Browser test settings."""

    browser: str = "chrome"
    headless: bool = False
    base_url: str = "http://localhost:8080"
    login_path: str = "/login"
    home_path: str = "/home"
    username: str = ""
    password: str = ""
    company: str = ""
    implicit_wait: int = 10
    explicit_wait: int = 20
    dropdown_timeout: int = 15
    artifacts_dir: str = str(BASE_DIR / "test-results")

    @property
    def login_url(self) -> str:
        """Absolute URL of the login page."""
        return f"{self.base_url}{self.login_path}"

    @property
    def home_url(self) -> str:
        """Absolute URL users land on after a successful login."""
        return f"{self.base_url}{self.home_path}"

    def get(self, key: str) -> str:
        """
        Look up a setting by name as a string.

        Args:
            key: Field name, or one of the derived ``login_url``/``home_url``.

        Returns:
            The setting rendered as a string.

        Raises:
            KeyError: If no setting has that name.
        """
        values = asdict(self)
        values["login_url"] = self.login_url
        values["home_url"] = self.home_url
        if key not in values:
            raise KeyError(f"Unknown setting '{key}'. Known settings: {', '.join(sorted(values))}")
        value = values[key]
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)


# Profile defaults applied before environment overrides
PROFILES: dict[str, dict] = {
    "local": {},
    "ci": {"headless": True},
    "testing": {
        "headless": True,
        "base_url": "http://127.0.0.1:5002",
        "username": "tester",
        "password": "s3cret",
        "company": "101",
        "implicit_wait": 2,
        "explicit_wait": 10,
        "dropdown_timeout": 10,
    },
}

# Environment variable for each overridable field
ENV_VARS: dict[str, str] = {
    "browser": "MYRENT_BROWSER",
    "headless": "MYRENT_HEADLESS",
    "base_url": "MYRENT_BASE_URL",
    "login_path": "MYRENT_LOGIN_PATH",
    "home_path": "MYRENT_HOME_PATH",
    "username": "MYRENT_USERNAME",
    "password": "MYRENT_PASSWORD",
    "company": "MYRENT_COMPANY",
    "implicit_wait": "MYRENT_IMPLICIT_WAIT",
    "explicit_wait": "MYRENT_EXPLICIT_WAIT",
    "dropdown_timeout": "MYRENT_DROPDOWN_TIMEOUT",
    "artifacts_dir": "MYRENT_ARTIFACTS_DIR",
}


def _coerce(field: str, raw: str):
    default = getattr(UIConfig, field)
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    return raw


def load_config(env: str | None = None, environ: dict[str, str] | None = None) -> UIConfig:
    """
    Build the configuration for a profile.

    Args:
        env: Profile name (local, ci, testing).
             If None, uses the MYRENT_ENV environment variable.
        environ: Mapping to read overrides from. Defaults to os.environ.

    Returns:
        Configuration with profile defaults and environment overrides applied.

    Raises:
        ValueError: If the profile is unknown or a numeric override is malformed.
    """
    if environ is None:
        environ = os.environ
    if env is None:
        env = environ.get("MYRENT_ENV", "local")
    if env not in PROFILES:
        raise ValueError(f"Unknown profile '{env}'. Expected one of: {', '.join(PROFILES)}")

    config = replace(UIConfig(), **PROFILES[env])

    overrides = {
        field: _coerce(field, environ[var])
        for field, var in ENV_VARS.items()
        if var in environ
    }
    if overrides:
        config = replace(config, **overrides)
    return config
