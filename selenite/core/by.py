"""
Search Criteria - Selenium locator strategies as stable values.

A Criterion is a plain (by, value) pair, so it can be unpacked straight
into ``find_element(*criterion)`` while still printing a readable form
for locator descriptions and failure messages.
"""

from typing import NamedTuple, Union

from selenium.webdriver.common.by import By


class Criterion(NamedTuple):
    """A search criterion: a Selenium strategy and its expression."""
    by: str
    value: str

    def __str__(self) -> str:
        return f"By.{self.by.replace(' ', '_')}: {self.value}"


def css(selector: str) -> Criterion:
    return Criterion(By.CSS_SELECTOR, selector)


def xpath(expression: str) -> Criterion:
    return Criterion(By.XPATH, expression)


def id(element_id: str) -> Criterion:  # noqa: A001
    return Criterion(By.ID, element_id)


def name(element_name: str) -> Criterion:
    return Criterion(By.NAME, element_name)


def tag(tag_name: str) -> Criterion:
    return Criterion(By.TAG_NAME, tag_name)


def class_name(value: str) -> Criterion:
    return Criterion(By.CLASS_NAME, value)


def link_text(text: str) -> Criterion:
    return Criterion(By.LINK_TEXT, text)


def partial_link_text(text: str) -> Criterion:
    return Criterion(By.PARTIAL_LINK_TEXT, text)


def _xpath_literal(text: str) -> str:
    """Quote text for XPath 1.0, which has no escape sequences."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def text(exact: str) -> Criterion:
    """Match elements whose normalized text equals ``exact``."""
    return xpath(f".//*[text()[normalize-space(.) = {_xpath_literal(exact)}]]")


def partial_text(part: str) -> Criterion:
    """Match elements whose text contains ``part``."""
    return xpath(f".//*[text()[contains(normalize-space(.), {_xpath_literal(part)})]]")


def as_criterion(value: Union[Criterion, tuple, str]) -> Criterion:
    """
    Coerce a user-supplied locator into a Criterion.

    Plain strings are treated as CSS selectors; 2-tuples as (by, value).
    """
    if isinstance(value, Criterion):
        return value
    if isinstance(value, str):
        return css(value)
    if isinstance(value, tuple) and len(value) == 2:
        return Criterion(*value)
    raise TypeError(f"Cannot use {value!r} as a search criterion")
