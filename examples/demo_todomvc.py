"""
End-to-End Demo: Selenite on TodoMVC

Builds locator chains up front, then lets each one wait for the page
while items are added to the Playwright TodoMVC demo.
"""

import time

from selenium.webdriver.common.keys import Keys

from selenite import Browser, SeleniteConfig, LocatorError
from selenite.core.conditions import count_at_least, exact_text, text, visible
from selenite.core.driver_factory import driver_factory_for


def main():
    print("=" * 60)
    print("Selenite - TodoMVC Demo")
    print("=" * 60)

    config = SeleniteConfig.from_env()
    browser = Browser(config=config, driver_factory=driver_factory_for(config))

    # Nothing below touches the browser until it is resolved
    new_todo = browser.element(".new-todo")
    items = browser.all(".todo-list li")
    milk = items.find_by(exact_text("Buy milk"))
    with_b = items.filter_by(text("B"))

    print(f"Locator: {milk}")
    print(f"Locator: {items[1].find('label')}")
    print("-" * 60)

    start_time = time.time()
    browser.driver.get("https://demo.playwright.dev/todomvc/")
    try:
        for todo in ("Buy milk", "Walk the dog", "Bake bread"):
            new_todo.resolve_after(visible).send_keys(todo, Keys.RETURN)

        items.should(count_at_least(3))
        print(f"Found: {milk.current_snapshot().text}")
        print(f"Second label: {items[1].find('label').current_snapshot().text}")
        print(f"Items with 'B': {[e.text for e in with_b.current_snapshot()]}")
    except LocatorError as e:
        print(f"Failed ({e.kind.value}): {e}")
    finally:
        browser.driver.quit()

    print(f"Time elapsed: {time.time() - start_time:.2f}s")


if __name__ == "__main__":
    main()
