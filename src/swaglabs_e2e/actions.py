"""Reusable browser interactions for the Swag Labs shop.

Helpers never catch Playwright errors: a control that cannot be located
raises ``playwright.sync_api.TimeoutError`` straight into the scenario.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from playwright.sync_api import Locator, Page

from . import locators
from .config import Config, Credentials
from .models import CheckoutProfile

logger = logging.getLogger(__name__)


class ItemSelector(ABC):
    """Strategy for picking a product's add-to-cart control."""

    @abstractmethod
    def add_button(self, page: Page) -> Locator:
        """Return the add-to-cart control this strategy points at."""
        pass


@dataclass(frozen=True)
class ByName(ItemSelector):
    """Select the product whose container text contains ``name``."""

    name: str

    def add_button(self, page: Page) -> Locator:
        # first match wins if the catalog ever lists a name twice
        container = page.locator(locators.INVENTORY_ITEM, has_text=self.name).first
        return container.locator(locators.ADD_TO_CART_BUTTON)


@dataclass(frozen=True)
class ByPosition(ItemSelector):
    """Select the add-to-cart control of the n-th (1-based) product listed."""

    position: int

    def __post_init__(self):
        if self.position < 1:
            raise ValueError(f"position must be >= 1, got {self.position}")

    def add_button(self, page: Page) -> Locator:
        # anchored to the product: added items swap their button for REMOVE
        product = page.locator(locators.INVENTORY_ITEM).nth(self.position - 1)
        return product.locator(locators.ADD_TO_CART_BUTTON)


def open_login_page(page: Page, config: Config) -> None:
    logger.info("Opening %s", config.login_url)
    page.goto(config.login_url)


def submit_login_form(page: Page, credentials: Credentials) -> None:
    """Fill the login form and press the login button."""
    logger.info("Logging in as %s", credentials.username)
    page.fill(locators.USERNAME_INPUT, credentials.username)
    page.fill(locators.PASSWORD_INPUT, credentials.password)
    page.click(locators.LOGIN_BUTTON)


def login(page: Page, credentials: Credentials) -> None:
    """Submit the login form and wait for the page to stabilize.

    The outcome (inventory page or error banner) is left to the caller to
    assert.
    """
    submit_login_form(page, credentials)
    page.wait_for_load_state("networkidle")


def add_to_cart(page: Page, selector: ItemSelector) -> None:
    logger.info("Adding to cart: %s", selector)
    selector.add_button(page).click()


def add_item_to_cart(page: Page, item_name: str) -> None:
    """Add a single item to the cart based on its display name."""
    add_to_cart(page, ByName(item_name))


def add_multiple_items_to_cart(page: Page, item_names: Iterable[str]) -> None:
    """Add items one after another, in the given order.

    Stops at the first name that cannot be added.
    """
    for item_name in item_names:
        add_item_to_cart(page, item_name)


def add_items_by_position(page: Page, count: int) -> None:
    """Add the first ``count`` products by their position on the page."""
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    for position in range(1, count + 1):
        add_to_cart(page, ByPosition(position))


def open_cart(page: Page) -> None:
    page.click(locators.CART_LINK)


def start_checkout(page: Page) -> None:
    page.click(locators.CHECKOUT_BUTTON)


def fill_checkout_profile(page: Page, profile: CheckoutProfile) -> None:
    """Fill the checkout information form and continue to the overview."""
    logger.info("Checking out as %s %s", profile.first_name, profile.last_name)
    page.fill(locators.FIRST_NAME_INPUT, profile.first_name)
    page.fill(locators.LAST_NAME_INPUT, profile.last_name)
    page.fill(locators.POSTAL_CODE_INPUT, profile.postal_code)
    page.click(locators.CONTINUE_BUTTON)


def finish_checkout(page: Page) -> None:
    page.click(locators.FINISH_BUTTON)


def clear_local_storage(page: Page) -> None:
    """Reset client-side state so the next scenario starts clean."""
    page.evaluate("() => window.localStorage.clear()")
