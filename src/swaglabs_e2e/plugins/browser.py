"""Pytest plugin providing the browser fixtures and per-scenario hooks."""

import logging
from pathlib import Path
from typing import Iterator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, sync_playwright

from ..actions import clear_local_storage, open_login_page
from ..config import Config, load_config
from ..models import Suite
from ..profiles import build_suite

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("swaglabs")
    group.addoption(
        "--swaglabs-config",
        action="store",
        default=None,
        help="YAML config file for the Swag Labs suite",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "e2e: drives a real browser against the live shop")


def resolve_config(config_path: str | None, headed: bool = False) -> Config:
    """Build the session config from the command-line options."""
    path = Path(config_path) if config_path else None
    if path is not None and not path.exists():
        raise pytest.UsageError(f"--swaglabs-config: file not found: {path}")

    config = load_config(path)
    if headed:
        config = config.model_copy(update={"browser": config.browser.model_copy(update={"headless": False})})
    return config


def scenario_page(context: BrowserContext, config: Config) -> Iterator[Page]:
    """Open a page on the login screen; clear local storage when done."""
    pg = context.new_page()
    pg.set_default_timeout(config.browser.timeout_ms)
    open_login_page(pg, config)
    yield pg
    clear_local_storage(pg)
    pg.close()


@pytest.fixture(scope="session")
def suite_config(request: pytest.FixtureRequest) -> Config:
    return resolve_config(
        request.config.getoption("--swaglabs-config"),
        headed=request.config.getoption("--headed"),
    )


@pytest.fixture(scope="session")
def suite(suite_config: Config) -> Suite:
    """Suite data built once and shared read-only by every scenario."""
    return build_suite(suite_config)


@pytest.fixture(scope="session")
def browser(suite_config: Config) -> Iterator[Browser]:
    """Launch a shared browser for the entire test session."""
    options = suite_config.browser
    with sync_playwright() as p:
        launcher = getattr(p, options.name)
        browser = launcher.launch(headless=options.headless, slow_mo=options.slow_mo)
        logger.info("Launched %s %s", options.name, browser.version)
        yield browser
        browser.close()


@pytest.fixture()
def context(browser: Browser, suite_config: Config) -> Iterator[BrowserContext]:
    """Create a fresh browser context per test (isolated cookies/storage)."""
    options = suite_config.browser
    ctx = browser.new_context(viewport={"width": options.viewport_width, "height": options.viewport_height})
    yield ctx
    ctx.close()


@pytest.fixture()
def page(context: BrowserContext, suite_config: Config) -> Iterator[Page]:
    yield from scenario_page(context, suite_config)
