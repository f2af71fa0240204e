"""
Locator Errors - the failure kinds surfaced while resolving locators.

Single-element lookups that match nothing fail with Selenium's own
NoSuchElementException, which the locators pass through untouched.
Waits that expire and by-condition scans that find nothing raise
LocatorError, tagged with the matching ErrorKind.
"""

from enum import Enum
from typing import Optional, Sequence

from selenium.common.exceptions import NoSuchElementException


class ErrorKind(Enum):
    """Why a locator could not be resolved."""
    ELEMENT_NOT_FOUND = "element_not_found"
    WAIT_TIMEOUT = "wait_timeout"
    NOT_FOUND_IN_COLLECTION = "not_found_in_collection"


class LocatorError(Exception):
    """
    Raised when a locator (or the wait behind it) cannot produce a result.

    Attributes:
        kind: The ErrorKind of this failure
        message: Human-readable explanation
        texts: Visible texts of the scanned candidates, if any
        markups: Outer HTML of the scanned candidates, if any
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        texts: Optional[Sequence[str]] = None,
        markups: Optional[Sequence[str]] = None,
    ):
        super().__init__(kind, message)
        self.kind = kind
        self.message = message
        self.texts = tuple(texts) if texts is not None else None
        self.markups = tuple(markups) if markups is not None else None

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (self.__class__, (self.kind, self.message, self.texts, self.markups))


def error_kind(error: BaseException) -> Optional[ErrorKind]:
    """Classify an exception raised during resolution, or None if foreign."""
    if isinstance(error, LocatorError):
        return error.kind
    if isinstance(error, NoSuchElementException):
        return ErrorKind.ELEMENT_NOT_FOUND
    return None
