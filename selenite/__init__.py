"""
Selenite - lazy locators for self-waiting Selenium tests.

Locator chains are built up front and resolved against the live page
only when asked, so assertions can keep retrying until the page settles.
"""

__version__ = "0.1.0"

from selenite.core import by, conditions
from selenite.core.browser import Browser
from selenite.core.config import SeleniteConfig
from selenite.core.entities import SCollection, SElement
from selenite.core.errors import ErrorKind, LocatorError, error_kind

__all__ = [
    "Browser",
    "SeleniteConfig",
    "SElement",
    "SCollection",
    "ErrorKind",
    "LocatorError",
    "error_kind",
    "by",
    "conditions",
    "__version__",
]
