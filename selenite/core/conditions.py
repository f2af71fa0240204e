"""
Conditions - predicates over elements and collections.

A condition only needs to answer two questions: does it hold for this
entity right now, and how should it be described in a failure message.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Condition(ABC, Generic[T]):
    """Abstract base class for element and collection conditions."""

    @abstractmethod
    def evaluate(self, entity: T) -> bool:
        """
        Check the condition against the entity's current state.

        Args:
            entity: An SElement or SCollection to inspect.

        Returns:
            True if the condition holds.
        """
        pass

    @abstractmethod
    def explain(self) -> str:
        """Describe the condition for descriptions and error messages."""
        pass

    def __str__(self) -> str:
        return self.explain()


class Visible(Condition[Any]):
    def evaluate(self, entity: Any) -> bool:
        return entity.current_snapshot().is_displayed()

    def explain(self) -> str:
        return "be visible"


class CountAtLeast(Condition[Any]):
    def __init__(self, minimum: int):
        self.minimum = minimum

    def evaluate(self, entity: Any) -> bool:
        return len(entity.current_snapshot()) >= self.minimum

    def explain(self) -> str:
        return f"have count at least {self.minimum}"


class ExactText(Condition[Any]):
    def __init__(self, expected: str):
        self.expected = expected

    def evaluate(self, entity: Any) -> bool:
        return entity.current_snapshot().text == self.expected

    def explain(self) -> str:
        return f"have exact text '{self.expected}'"


class Text(Condition[Any]):
    """Holds when the element's visible text contains the expected part."""

    def __init__(self, expected: str):
        self.expected = expected

    def evaluate(self, entity: Any) -> bool:
        return self.expected in entity.current_snapshot().text

    def explain(self) -> str:
        return f"have text '{self.expected}'"


visible = Visible()


def count_at_least(minimum: int) -> CountAtLeast:
    return CountAtLeast(minimum)


def exact_text(expected: str) -> ExactText:
    return ExactText(expected)


def text(expected: str) -> Text:
    return Text(expected)
