"""
Selenite CLI - try locator chains against a live page.
"""

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from selenium.common.exceptions import WebDriverException

from selenite import __version__
from selenite.core import by, conditions
from selenite.core.browser import Browser
from selenite.core.config import SeleniteConfig
from selenite.core.driver_factory import create_driver
from selenite.core.errors import LocatorError

console = Console()

MARKUP_PREVIEW = 60


@click.group()
@click.version_option(version=__version__, prog_name="selenite")
def cli():
    """Selenite - lazy locators for self-waiting Selenium tests."""
    pass


@cli.command()
@click.argument('url')
@click.argument('selector')
@click.option('--xpath', 'use_xpath', is_flag=True, help='Treat SELECTOR (and --inner) as XPath instead of CSS')
@click.option('--inner', default=None, help='Find all matches of this selector inside the first SELECTOR match')
@click.option('--filter-text', default=None, help='Keep only elements whose text contains this value')
@click.option('--find-text', default=None, help='Pick the first element whose text is exactly this value')
@click.option('--index', default=None, type=click.IntRange(min=0), help='Pick the element at this 0-based position')
@click.option('--timeout', default=None, type=float, help='Seconds to wait for visibility and counts')
@click.option('--headless', is_flag=True, help='Run browser in headless mode')
@click.option('--verbose', '-v', is_flag=True, help='Log every resolution step')
@click.pass_context
def probe(ctx, url, selector, use_xpath, inner, filter_text, find_text, index, timeout, headless, verbose):
    """
    Build a locator chain, resolve it on URL and show what it finds.

    \b
    Examples:

        selenite probe "https://demo.playwright.dev/todomvc/" ".todo-list li"

        selenite probe "https://example.com" "body" --inner "p" --index 1

        selenite probe "https://example.com" "//a" --xpath --find-text "More information..."
    """
    if find_text is not None and index is not None:
        raise click.UsageError("--find-text and --index cannot be combined")

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = SeleniteConfig.from_env()
    if timeout is not None:
        config.timeout = timeout
    if headless:
        config.headless = True

    make = by.xpath if use_xpath else by.css

    console.print(Panel.fit(
        f"[bold blue]Selenite Probe[/bold blue]\n"
        f"[dim]{escape(url)}[/dim]",
        border_style="blue"
    ))

    try:
        driver = create_driver(headless=config.headless, window_size=config.window_size)
    except WebDriverException as e:
        console.print(f"[red]❌ Could not start browser: {escape(str(e))}[/red]")
        ctx.exit(1)

    try:
        browser = Browser(driver, config)

        if inner:
            collection = browser.element(make(selector)).find_all(make(inner))
        else:
            collection = browser.all(make(selector))
        if filter_text is not None:
            collection = collection.filter_by(conditions.text(filter_text))

        if find_text is not None:
            target = collection.find_by(conditions.exact_text(find_text))
        elif index is not None:
            target = collection[index]
        else:
            target = collection

        console.print(f"\n[bold]Locator:[/bold] {escape(str(target))}\n")

        driver.get(url)
        if target is collection:
            elements = collection.current_snapshot()
        else:
            elements = (target.current_snapshot(),)

        _print_elements(elements)
    except LocatorError as e:
        console.print(f"[red]❌ {e.kind.value}: {escape(e.message)}[/red]")
        ctx.exit(1)
    except WebDriverException as e:
        console.print(f"[red]❌ Error: {escape(e.msg or str(e))}[/red]")
        ctx.exit(1)
    finally:
        driver.quit()


def _print_elements(elements):
    if not elements:
        console.print("[yellow]No elements found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Text", style="green")
    table.add_column("Markup", style="yellow")

    for i, element in enumerate(elements):
        markup = element.get_attribute("outerHTML") or ""
        if len(markup) > MARKUP_PREVIEW:
            markup = markup[:MARKUP_PREVIEW] + "..."
        table.add_row(str(i), escape(element.text), escape(markup))

    console.print(table)
    console.print(f"\n[bold green]✅ {len(elements)} element(s) found[/bold green]")


@cli.command()
def version():
    """Show version information."""
    console.print(f"Selenite v{__version__}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
