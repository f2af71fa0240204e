"""
Driver Factory - Chrome WebDriver creation for the CLI and examples.

The locator core never starts a browser on its own; this is the
convenience used when a Browser is given a driver_factory.
"""

import logging

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions

from selenite.core.config import SeleniteConfig

logger = logging.getLogger(__name__)

# Type alias for driver - can be extended to support other browsers
WebDriverType = webdriver.Chrome


def create_driver(
    headless: bool = False,
    window_size: str = "1920,1080",
) -> WebDriverType:
    """
    Create a Chrome WebDriver with the usual stability options.

    Args:
        headless: Run browser in headless mode
        window_size: Initial window size as "width,height"

    Returns:
        A running Chrome WebDriver

    Example:
        >>> driver = create_driver(headless=True)
        >>> driver.get("https://example.com")
    """
    options = ChromeOptions()

    if headless:
        options.add_argument("--headless=new")

    options.add_argument(f"--window-size={window_size}")
    options.add_argument("--disable-extensions")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    logger.info(f"Starting Chrome (headless={headless}, window={window_size})")
    return webdriver.Chrome(options=options)


def driver_factory_for(config: SeleniteConfig):
    """Return a zero-argument factory building a driver from ``config``."""
    return lambda: create_driver(headless=config.headless, window_size=config.window_size)
