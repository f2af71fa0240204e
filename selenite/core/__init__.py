"""Core module - locators, search contexts and the browser handle."""

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
]
