import pickle

import pytest
from selenium.common.exceptions import NoSuchElementException, TimeoutException

from selenite.core import by
from selenite.core.config import SeleniteConfig
from selenite.core.errors import ErrorKind, LocatorError, error_kind


def test_error_kind_classification():
    """Test that each failure kind is classified correctly."""
    assert error_kind(NoSuchElementException("nope")) is ErrorKind.ELEMENT_NOT_FOUND
    assert error_kind(LocatorError(ErrorKind.WAIT_TIMEOUT, "slow")) is ErrorKind.WAIT_TIMEOUT
    assert error_kind(
        LocatorError(ErrorKind.NOT_FOUND_IN_COLLECTION, "none")
    ) is ErrorKind.NOT_FOUND_IN_COLLECTION
    assert error_kind(TimeoutException("raw")) is None
    assert error_kind(ValueError("other")) is None


def test_locator_error_is_not_a_selenium_exception():
    """Test that LocatorError stands apart from Selenium's hierarchy."""
    error = LocatorError(ErrorKind.WAIT_TIMEOUT, "slow")
    assert not isinstance(error, NoSuchElementException)
    assert str(error) == "slow"
    assert error.texts is None and error.markups is None


def test_locator_error_payload_is_immutable():
    """Test that the texts and markups payload is copied into tuples."""
    texts = ["a", "b"]
    error = LocatorError(ErrorKind.NOT_FOUND_IN_COLLECTION, "none", texts=texts, markups=["<a>", "<b>"])
    texts.append("c")
    assert error.texts == ("a", "b")
    assert error.markups == ("<a>", "<b>")


def test_locator_error_survives_pickling():
    """Test that a pickled LocatorError keeps its kind, message and payload."""
    error = LocatorError(ErrorKind.NOT_FOUND_IN_COLLECTION, "m", texts=["a"], markups=["<a>"])

    restored = pickle.loads(pickle.dumps(error))

    assert restored.kind is ErrorKind.NOT_FOUND_IN_COLLECTION
    assert restored.message == "m"
    assert restored.texts == ("a",)
    assert restored.markups == ("<a>",)
    assert str(restored) == "m"


class TestCriterion:

    def test_string_form(self):
        """Test that criteria render as By.<strategy>: <value>."""
        assert str(by.css("#main .item")) == "By.css_selector: #main .item"
        assert str(by.id("login")) == "By.id: login"
        assert str(by.link_text("Home")) == "By.link_text: Home"

    def test_remaining_strategies(self):
        """Test that the name, tag, class and partial link helpers use Selenium's strategies."""
        assert str(by.name("q")) == "By.name: q"
        assert str(by.tag("li")) == "By.tag_name: li"
        assert str(by.class_name("btn")) == "By.class_name: btn"
        assert str(by.partial_link_text("Ho")) == "By.partial_link_text: Ho"
        assert tuple(by.tag("li")) == ("tag name", "li")

    def test_unpacks_into_find_arguments(self):
        """Test that a criterion unpacks into find_element arguments."""
        strategy, value = by.xpath("//li")
        assert (strategy, value) == ("xpath", "//li")

    def test_text_quotes_apostrophes(self):
        """Test that text helpers build valid XPath literals for any quoting."""
        assert by.text("Buy milk").value == ".//*[text()[normalize-space(.) = 'Buy milk']]"
        assert by.partial_text("it's").value == ".//*[text()[contains(normalize-space(.), \"it's\")]]"
        assert "concat('it', \"'\", 's \"x\"')" in by.text("it's \"x\"").value

    def test_as_criterion(self):
        """Test that strings, tuples and criteria are coerced and others refused."""
        assert by.as_criterion("li") == by.css("li")
        assert by.as_criterion(("xpath", "//li")) == by.xpath("//li")
        with pytest.raises(TypeError):
            by.as_criterion(42)


class TestSeleniteConfig:

    def test_defaults(self):
        """Test that the default timeouts and flags are set."""
        config = SeleniteConfig()
        assert config.timeout == 4.0
        assert config.poll_interval == 0.1
        assert config.headless is False

    def test_from_env(self, monkeypatch):
        """Test that environment variables override the defaults."""
        monkeypatch.setenv("SELENITE_TIMEOUT", "10")
        monkeypatch.setenv("SELENITE_POLL_INTERVAL", "0.5")
        monkeypatch.setenv("SELENITE_HEADLESS", "true")

        config = SeleniteConfig.from_env()

        assert config.timeout == 10.0
        assert config.poll_interval == 0.5
        assert config.headless is True

    def test_from_env_keeps_defaults_when_unset(self, monkeypatch):
        """Test that an empty environment yields the default config."""
        for key in ("SELENITE_TIMEOUT", "SELENITE_POLL_INTERVAL", "SELENITE_HEADLESS"):
            monkeypatch.delenv(key, raising=False)
        assert SeleniteConfig.from_env() == SeleniteConfig()
