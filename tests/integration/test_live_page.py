"""
Integration tests against a real Chrome session.

Pages are served as data: URLs so no network access is needed.
Run with SELENITE_BROWSER_TESTS=1 and a local Chrome installation.
"""

import os
from urllib.parse import quote

import pytest

# Skip if dependencies not available
pytest.importorskip("selenium")

pytestmark = pytest.mark.skipif(
    os.environ.get("SELENITE_BROWSER_TESTS") != "1",
    reason="set SELENITE_BROWSER_TESTS=1 to run browser tests",
)

TODO_PAGE = """
<ul class="todo-list">
  <li><label>Apple</label></li>
  <li><label>Banana</label></li>
  <li><label>Cherry</label></li>
</ul>
<div id="late" style="display:none"><span>ready</span></div>
<script>
  setTimeout(function () {
    document.getElementById('late').style.display = 'block';
    var li = document.createElement('li');
    li.innerHTML = '<label>Durian</label>';
    document.querySelector('.todo-list').appendChild(li);
  }, 500);
</script>
"""


@pytest.fixture
def browser():
    from selenite import Browser, SeleniteConfig
    from selenite.core.driver_factory import create_driver

    driver = create_driver(headless=True)
    driver.get("data:text/html;charset=utf-8," + quote(TODO_PAGE))
    yield Browser(driver, SeleniteConfig(timeout=4.0))
    driver.quit()


def test_find_by_exact_text(browser):
    from selenite.core.conditions import exact_text

    item = browser.all(".todo-list li").find_by(exact_text("Banana"))
    assert item.find("label").current_snapshot().text == "Banana"


def test_index_waits_for_late_item(browser):
    label = browser.all(".todo-list li")[3].find("label")
    assert label.current_snapshot().text == "Durian"


def test_inner_waits_for_visibility(browser):
    assert browser.element("#late").find("span").current_snapshot().text == "ready"


def test_filter_by_text(browser):
    from selenite.core.conditions import text

    matches = browser.all(".todo-list li").filter_by(text("nan")).current_snapshot()
    assert [m.text for m in matches] == ["Banana"]
