"""Fakes standing in for Selenium's WebDriver and WebElement."""

import pytest
from selenium.common.exceptions import NoSuchElementException

from selenite.core.browser import Browser
from selenite.core.conditions import Condition
from selenite.core.config import SeleniteConfig


class FakeElement:
    """A WebElement double with canned text and nested children."""

    def __init__(self, text="", tag="li", displayed=True, children=None):
        self.text = text
        self.tag = tag
        self.displayed = displayed
        self.children = children or {}
        self.calls = 0

    def is_displayed(self):
        self.calls += 1
        return self.displayed

    def get_attribute(self, name):
        self.calls += 1
        if name == "outerHTML":
            return f"<{self.tag}>{self.text}</{self.tag}>"
        return None

    def find_element(self, by, value):
        self.calls += 1
        matches = self.children.get(value, [])
        if not matches:
            raise NoSuchElementException(f"no {value} inside {self}")
        return matches[0]

    def find_elements(self, by, value):
        self.calls += 1
        return list(self.children.get(value, []))

    def __str__(self):
        return f"<FakeElement {self.text!r}>"

    __repr__ = __str__


class FakeDriver:
    """A WebDriver double keyed by selector value, counting every lookup."""

    def __init__(self, elements=None):
        self.elements = elements or {}
        self.calls = 0
        self.visited = []
        self.quit_called = False

    def find_element(self, by, value):
        self.calls += 1
        matches = self.elements.get(value, [])
        if not matches:
            raise NoSuchElementException(f"no {value} on page")
        return matches[0]

    def find_elements(self, by, value):
        self.calls += 1
        return list(self.elements.get(value, []))

    def get(self, url):
        self.visited.append(url)

    def quit(self):
        self.quit_called = True


class ExplainedCondition(Condition):
    """Condition built from a predicate, for tests only."""

    def __init__(self, explanation, predicate):
        self.explanation = explanation
        self.predicate = predicate

    def evaluate(self, entity):
        return self.predicate(entity)

    def explain(self):
        return self.explanation


@pytest.fixture
def make_element():
    return FakeElement


@pytest.fixture
def make_condition():
    return ExplainedCondition


@pytest.fixture
def fruits():
    return [FakeElement("Apple"), FakeElement("Banana"), FakeElement("Cherry")]


@pytest.fixture
def driver(fruits):
    return FakeDriver({"li": fruits})


@pytest.fixture
def fast_config():
    return SeleniteConfig(timeout=0.05, poll_interval=0.01)


@pytest.fixture
def browser(driver, fast_config):
    return Browser(driver, fast_config)
