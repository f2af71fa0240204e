"""
Locators - deferred element and collection lookups.

A locator describes how to find something without finding it. Nothing
touches the browser until ``resolve()`` is called, and every call
re-queries the live page, so the same locator can be resolved again and
again inside a wait loop until the page catches up.

Locators come in two closed families:

- Element locators resolve to exactly one WebElement.
- Collection locators resolve to an ordered tuple of WebElements.

Chained variants point at a parent SElement/SCollection (the "context")
and let the context's own locator reach further up the chain.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Optional, Sequence, Tuple, TypeVar
import logging

from selenite.core.by import Criterion
from selenite.core.conditions import Condition, count_at_least, visible
from selenite.core.errors import ErrorKind, LocatorError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement
    from selenite.core.browser import Browser
    from selenite.core.entities import SCollection, SElement

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "Locator",
    "ElementLocator",
    "CollectionLocator",
    "DriverElementLocator",
    "WrappedElementLocator",
    "InnerElementLocator",
    "IndexedElementLocator",
    "ConditionalElementLocator",
    "DriverCollectionLocator",
    "WrappedCollectionLocator",
    "InnerCollectionLocator",
    "FilteredCollectionLocator",
    "CandidateScan",
]


class Locator(ABC, Generic[T]):
    """Abstract base class for all locators."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable form of the lookup. Never touches the browser."""
        pass

    @abstractmethod
    def resolve(self) -> T:
        """Run the lookup against the current page state."""
        pass

    def __str__(self) -> str:
        return self.description


class ElementLocator(Locator["WebElement"]):
    """Locator that resolves to a single WebElement."""


class CollectionLocator(Locator[Tuple["WebElement", ...]]):
    """Locator that resolves to an ordered tuple of WebElements."""


# -- Element locators ---------------------------------------------------------


@dataclass(frozen=True)
class DriverElementLocator(ElementLocator):
    """First element on the page matching a criterion."""
    criterion: Criterion
    browser: "Browser"

    @property
    def description(self) -> str:
        return str(self.criterion)

    def resolve(self) -> "WebElement":
        logger.debug(f"Resolving {self.description}")
        return self.browser.find_one(self.criterion)


@dataclass(frozen=True)
class WrappedElementLocator(ElementLocator):
    """
    Lifts an already-found WebElement into a locator.

    Resolution returns the very same element object every time.
    """
    element: "WebElement"
    label: str = "wrapped webelement"

    @property
    def description(self) -> str:
        return f"{self.label}: {self.element}"

    def resolve(self) -> "WebElement":
        return self.element


@dataclass(frozen=True)
class InnerElementLocator(ElementLocator):
    """
    First descendant of a parent element matching a criterion.

    The parent is waited on until visible before searching inside it.
    """
    criterion: Criterion
    context: "SElement"

    @property
    def description(self) -> str:
        return f"({self.context}).findInner({self.criterion})"

    def resolve(self) -> "WebElement":
        logger.debug(f"Resolving {self.description}")
        parent = self.context.resolve_after(visible)
        return parent.find_element(*self.criterion)


@dataclass(frozen=True)
class IndexedElementLocator(ElementLocator):
    """
    Element at a 0-based position in a parent collection.

    Negative indexes are refused up front; the upper bound is only
    checked by waiting for the collection to grow to at least
    ``index + 1`` elements.
    """
    index: int
    context: "SCollection"

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise ValueError(f"index must be a non-negative integer, got {self.index!r}")

    @property
    def description(self) -> str:
        return f"({self.context})[{self.index}]"

    def resolve(self) -> "WebElement":
        logger.debug(f"Resolving {self.description}")
        elements = self.context.resolve_after(count_at_least(self.index + 1))
        return elements[self.index]


@dataclass(frozen=True)
class CandidateScan:
    """
    Evaluates a condition against raw WebElements of a collection.

    Each candidate is wrapped into an SElement so element conditions
    can be applied to it; the wrapper's description records the
    collection it came from and the candidate's position.
    """
    condition: Condition
    context_description: str
    browser: "Browser"

    def wrap(self, index: int, element: "WebElement") -> "SElement":
        from selenite.core.entities import SElement

        return SElement(
            WrappedElementLocator(element, f"{self.context_description}[{index}]"),
            self.browser,
        )

    def matches(self, index: int, element: "WebElement") -> bool:
        return bool(self.condition.evaluate(self.wrap(index, element)))

    def first(self, elements: Sequence["WebElement"]) -> Optional["WebElement"]:
        for index, element in enumerate(elements):
            if self.matches(index, element):
                return element
        return None

    def all(self, elements: Sequence["WebElement"]) -> Tuple["WebElement", ...]:
        return tuple(
            element for index, element in enumerate(elements)
            if self.matches(index, element)
        )


@dataclass(frozen=True)
class ConditionalElementLocator(ElementLocator):
    """
    First element of a parent collection satisfying a condition.

    Reads the collection as it is right now, without waiting. When no
    element matches, the error lists every candidate's text and markup.
    """
    condition: Condition
    context: "SCollection"
    browser: "Browser"

    @property
    def description(self) -> str:
        return f"({self.context}).findBy({self.condition.explain()})"

    def resolve(self) -> "WebElement":
        logger.debug(f"Resolving {self.description}")
        elements = self.context.current_snapshot()
        scan = CandidateScan(self.condition, self.description, self.browser)

        found = scan.first(elements)
        if found is None:
            raise self._not_found(elements)
        return found

    def _not_found(self, elements: Sequence["WebElement"]) -> LocatorError:
        texts = [element.text for element in elements]
        markups = [element.get_attribute("outerHTML") for element in elements]
        message = (
            f"element was not found in collection by condition {self.condition.explain()}"
            f"\n  Actual visible texts : [{','.join(texts)}]"
            f"\n  Actual html elements : [{','.join(str(markup) for markup in markups)}]"
        )
        logger.debug(message)
        return LocatorError(
            ErrorKind.NOT_FOUND_IN_COLLECTION,
            message,
            texts=texts,
            markups=markups,
        )


# -- Collection locators ------------------------------------------------------


@dataclass(frozen=True)
class DriverCollectionLocator(CollectionLocator):
    """All elements on the page matching a criterion, in document order."""
    criterion: Criterion
    browser: "Browser"

    @property
    def description(self) -> str:
        return str(self.criterion)

    def resolve(self) -> Tuple["WebElement", ...]:
        logger.debug(f"Resolving {self.description}")
        return tuple(self.browser.find_all(self.criterion))


@dataclass(frozen=True, init=False)
class WrappedCollectionLocator(CollectionLocator):
    """Lifts an already-found list of WebElements into a locator."""
    elements: Tuple["WebElement", ...]
    label: str = "wrapped collection"

    def __init__(self, elements: Sequence["WebElement"], label: str = "wrapped collection"):
        # Snapshot so later changes to the caller's list are not visible
        object.__setattr__(self, "elements", tuple(elements))
        object.__setattr__(self, "label", label)

    @property
    def description(self) -> str:
        return f"{self.label}: {list(self.elements)}"

    def resolve(self) -> Tuple["WebElement", ...]:
        return self.elements


@dataclass(frozen=True)
class InnerCollectionLocator(CollectionLocator):
    """All descendants of a parent element matching a criterion."""
    criterion: Criterion
    context: "SElement"

    @property
    def description(self) -> str:
        return f"({self.context}).findAllInner({self.criterion})"

    def resolve(self) -> Tuple["WebElement", ...]:
        logger.debug(f"Resolving {self.description}")
        parent = self.context.resolve_after(visible)
        return tuple(parent.find_elements(*self.criterion))


@dataclass(frozen=True)
class FilteredCollectionLocator(CollectionLocator):
    """Elements of a parent collection satisfying a condition, order kept."""
    condition: Condition
    context: "SCollection"
    browser: "Browser"

    @property
    def description(self) -> str:
        return f"({self.context}).filterBy({self.condition.explain()})"

    def resolve(self) -> Tuple["WebElement", ...]:
        logger.debug(f"Resolving {self.description}")
        scan = CandidateScan(self.condition, self.description, self.browser)
        return scan.all(self.context.current_snapshot())
