"""
Browser - the driver handle every locator chain starts from.

Wraps a Selenium WebDriver (or a factory for one) together with the
session's SeleniteConfig. The driver is only obtained when a locator is
first resolved, so whole page models can be built up front.
"""

from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Union

from selenite.core.by import Criterion, as_criterion
from selenite.core.config import SeleniteConfig
from selenite.core.entities import SCollection, SElement
from selenite.core.locators import (
    DriverCollectionLocator,
    DriverElementLocator,
    WrappedCollectionLocator,
    WrappedElementLocator,
)

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement


class Browser:
    """
    One browser session and its configuration.

    Example:
        >>> browser = Browser(driver_factory=lambda: create_driver(headless=True))
        >>> browser.all(".todo-list li")[2].find("label").should(have.text("milk"))
    """

    def __init__(
        self,
        driver: Optional["WebDriver"] = None,
        config: Optional[SeleniteConfig] = None,
        driver_factory: Optional[Callable[[], "WebDriver"]] = None,
    ):
        """
        Initialize the browser.

        Args:
            driver: An already running WebDriver
            config: Wait settings; defaults to SeleniteConfig()
            driver_factory: Called once, on first use, when no driver is given
        """
        if driver is None and driver_factory is None:
            raise ValueError("Browser needs either a driver or a driver_factory")
        self._driver = driver
        self._driver_factory = driver_factory
        self.config = config or SeleniteConfig()

    @property
    def driver(self) -> "WebDriver":
        """The underlying WebDriver, created on first access if needed."""
        if self._driver is None:
            self._driver = self._driver_factory()
        return self._driver

    def find_one(self, criterion: Criterion) -> "WebElement":
        return self.driver.find_element(*criterion)

    def find_all(self, criterion: Criterion) -> List["WebElement"]:
        return self.driver.find_elements(*criterion)

    def element(self, criterion: Union[Criterion, str]) -> SElement:
        return SElement(DriverElementLocator(as_criterion(criterion), self), self)

    def all(self, criterion: Union[Criterion, str]) -> SCollection:
        return SCollection(DriverCollectionLocator(as_criterion(criterion), self), self)

    def wrap(self, element: "WebElement") -> SElement:
        return SElement(WrappedElementLocator(element), self)

    def wrap_all(self, elements: Sequence["WebElement"]) -> SCollection:
        return SCollection(WrappedCollectionLocator(elements), self)
