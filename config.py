"""
Harness configuration module.

This module defines configuration classes for the environments the UI
suites run in (local workstation, CI). Values are loaded from environment
variables with defaults that match a local shop install.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable ("1", "true", "yes" are truthy)."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class HarnessConfig:
    """Base configuration with default settings."""

    # Site under test
    URL_BO: str = os.environ.get("URL_BO", "http://localhost/admin-dev/")
    URL_FO: str = os.environ.get("URL_FO", "http://localhost/")

    # Back office credentials
    LOGIN: str = os.environ.get("LOGIN", "demo@prestashop.com")
    PASSWD: str = os.environ.get("PASSWD", "prestashop_demo")

    # Browser
    HEADLESS: bool = _env_flag("HEADLESS", True)
    SLOWMO: int = int(os.environ.get("SLOWMO", "0"))
    BROWSER_LOCALE: str = os.environ.get("BROWSER_LOCALE", "en-GB")
    VIEWPORT: dict = {"width": 1680, "height": 900}

    # Timeouts (milliseconds)
    DEFAULT_TIMEOUT: int = int(os.environ.get("DEFAULT_TIMEOUT", "30000"))
    ELEMENT_VISIBLE_TIMEOUT: int = 2000

    # Artifacts
    UPLOAD_DIR: Path = Path(os.environ.get("UPLOAD_DIR", BASE_DIR / "test-results" / "uploads"))
    SCREENSHOT_DIR: Path = Path(
        os.environ.get("SCREENSHOT_DIR", BASE_DIR / "test-results" / "screenshots")
    )

    @classmethod
    def context_args(cls) -> dict:
        """Keyword arguments for ``Browser.new_context``."""
        return {
            "viewport": dict(cls.VIEWPORT),
            "locale": cls.BROWSER_LOCALE,
            "ignore_https_errors": True,
        }

    @classmethod
    def launch_args(cls, headed: bool = False, slowmo: int = 0) -> dict:
        """
        Keyword arguments for ``BrowserType.launch``.

        The runner's ``--headed`` and ``--slowmo`` flags win over
        ``HEADLESS`` and ``SLOWMO``.
        """
        return {
            "headless": False if headed else cls.HEADLESS,
            "slow_mo": slowmo or cls.SLOWMO,
        }


class LocalConfig(HarnessConfig):
    """Local workstation configuration."""

    HEADLESS: bool = _env_flag("HEADLESS", False)


class CIConfig(HarnessConfig):
    """Continuous integration configuration."""

    HEADLESS: bool = True

    # Shops under CI load are slower to settle
    DEFAULT_TIMEOUT: int = int(os.environ.get("DEFAULT_TIMEOUT", "60000"))
    ELEMENT_VISIBLE_TIMEOUT: int = 5000


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": HarnessConfig,
}


def get_config(env: str | None = None) -> type[HarnessConfig]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses HARNESS_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("HARNESS_ENV", "default")
    return config.get(env, config["default"])
