"""
Search Contexts - SElement and SCollection.

Thin wrappers that pair a locator with the Browser it runs against and
add the wait-then-access step chained locators rely on. Building an
entity, or chaining further from it, never touches the browser.
"""

from typing import TYPE_CHECKING, Tuple, Union

from selenite.core.by import Criterion, as_criterion
from selenite.core.conditions import Condition
from selenite.core.locators import (
    CollectionLocator,
    ConditionalElementLocator,
    ElementLocator,
    FilteredCollectionLocator,
    IndexedElementLocator,
    InnerCollectionLocator,
    InnerElementLocator,
)
from selenite.core.wait import wait_until

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement
    from selenite.core.browser import Browser


class SElement:
    """
    A lazily located single element.

    Example:
        >>> form = browser.element("#login")
        >>> form.find("[name=user]").should(be.visible)
    """

    def __init__(self, locator: ElementLocator, browser: "Browser"):
        self.locator = locator
        self.browser = browser

    def __str__(self) -> str:
        return self.locator.description

    def __repr__(self) -> str:
        return f"SElement({self.locator.description!r})"

    def current_snapshot(self) -> "WebElement":
        """Resolve the element now, without waiting."""
        return self.locator.resolve()

    def resolve_after(self, condition: Condition) -> "WebElement":
        """Wait for ``condition`` to hold, then resolve the element."""
        self.should(condition)
        return self.current_snapshot()

    def should(self, condition: Condition) -> "SElement":
        """Wait for ``condition`` to hold; raises LocatorError on timeout."""
        config = self.browser.config
        wait_until(self, condition, config.timeout, config.poll_interval)
        return self

    def find(self, criterion: Union[Criterion, str]) -> "SElement":
        return SElement(InnerElementLocator(as_criterion(criterion), self), self.browser)

    def find_all(self, criterion: Union[Criterion, str]) -> "SCollection":
        return SCollection(InnerCollectionLocator(as_criterion(criterion), self), self.browser)


class SCollection:
    """
    A lazily located, ordered collection of elements.

    Example:
        >>> items = browser.all(".todo-list li")
        >>> items.find_by(have.exact_text("Buy milk")).should(be.visible)
        >>> items[0].find("label")
    """

    def __init__(self, locator: CollectionLocator, browser: "Browser"):
        self.locator = locator
        self.browser = browser

    def __str__(self) -> str:
        return self.locator.description

    def __repr__(self) -> str:
        return f"SCollection({self.locator.description!r})"

    def current_snapshot(self) -> Tuple["WebElement", ...]:
        """Resolve the collection now, without waiting."""
        return self.locator.resolve()

    def resolve_after(self, condition: Condition) -> Tuple["WebElement", ...]:
        """Wait for ``condition`` to hold, then resolve the collection."""
        self.should(condition)
        return self.current_snapshot()

    def should(self, condition: Condition) -> "SCollection":
        config = self.browser.config
        wait_until(self, condition, config.timeout, config.poll_interval)
        return self

    def __getitem__(self, index: int) -> SElement:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"SCollection indices must be integers, not {type(index).__name__}")
        if index < 0:
            raise ValueError(f"SCollection indices are 0-based, got {index}")
        return SElement(IndexedElementLocator(index, self), self.browser)

    def find_by(self, condition: Condition) -> SElement:
        """First element satisfying ``condition``."""
        return SElement(ConditionalElementLocator(condition, self, self.browser), self.browser)

    def filter_by(self, condition: Condition) -> "SCollection":
        """Elements satisfying ``condition``, in their original order."""
        return SCollection(FilteredCollectionLocator(condition, self, self.browser), self.browser)
