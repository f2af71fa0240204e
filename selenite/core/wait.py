"""
Wait Engine - poll a condition until it holds or time runs out.

Built on Selenium's WebDriverWait, which only needs something to hand
back to the predicate; here that is the SElement or SCollection under
test rather than a driver.
"""

from typing import Any
import logging

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.support.ui import WebDriverWait

from selenite.core.conditions import Condition
from selenite.core.errors import ErrorKind, LocatorError

logger = logging.getLogger(__name__)

# Lookup failures while polling mean "not yet", not "failed"
IGNORED_EXCEPTIONS = (
    NoSuchElementException,
    StaleElementReferenceException,
    LocatorError,
)


def wait_until(
    entity: Any,
    condition: Condition,
    timeout: float,
    poll_interval: float,
) -> None:
    """
    Block until ``condition`` holds for ``entity``.

    Args:
        entity: SElement or SCollection the condition is evaluated against
        condition: Condition to poll
        timeout: Seconds before giving up
        poll_interval: Seconds between evaluations

    Raises:
        LocatorError: with ErrorKind.WAIT_TIMEOUT if the condition never held
    """
    wait = WebDriverWait(
        entity,
        timeout,
        poll_frequency=poll_interval,
        ignored_exceptions=IGNORED_EXCEPTIONS,
    )
    try:
        wait.until(condition.evaluate)
    except TimeoutException as e:
        message = f"Timed out after {timeout}s while waiting for {entity} to {condition.explain()}"
        logger.debug(message)
        raise LocatorError(ErrorKind.WAIT_TIMEOUT, message) from e
