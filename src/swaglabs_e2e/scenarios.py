"""The Swag Labs scenarios.

Each scenario expects a page already sitting on the login page (the
``page`` fixture does that) and the session's :class:`~swaglabs_e2e.models.Suite`.
"""

from typing import Callable

from playwright.sync_api import Page, expect

from . import locators
from .actions import (
    add_items_by_position,
    add_multiple_items_to_cart,
    fill_checkout_profile,
    finish_checkout,
    login,
    open_cart,
    start_checkout,
    submit_login_form,
)
from .expectations import CHECKOUT_SUCCESS, INVALID_LOGIN, INVENTORY_HEADER
from .inventory import SortOption, read_product_names, read_product_prices, sort_products
from .models import Suite


def reject_invalid_login(page: Page, suite: Suite) -> None:
    """A locked out user sees the error banner and stays off the inventory."""
    config = suite.config
    login(page, config.users.locked_out)

    error = suite.expectation(INVALID_LOGIN)
    error_banner = page.locator(error.selector)
    expect(error_banner).to_be_visible()
    expect(error_banner).to_have_text(error.expected)

    expect(page).not_to_have_url(config.inventory_url)


def accept_valid_login(page: Page, suite: Suite) -> None:
    """A standard user lands on the inventory page."""
    config = suite.config
    # raw form on purpose: login() adds a network-idle wait on top
    submit_login_form(page, config.users.standard)

    expect(page).to_have_url(config.inventory_url)

    header = suite.expectation(INVENTORY_HEADER)
    expect(page.locator(header.selector)).to_have_text(header.expected)


def sort_products_by_name_and_price(page: Page, suite: Suite) -> None:
    """Name Z to A and price low to high really reorder the product list."""
    login(page, suite.config.users.standard)

    sort_products(page, SortOption.NAME_DESC)
    names = read_product_names(page)
    expected_names = sorted(names, reverse=True)
    assert names == expected_names, f"Names not in descending order: {names} != {expected_names}"

    sort_products(page, SortOption.PRICE_ASC)
    prices = read_product_prices(page)
    expected_prices = sorted(prices)
    assert prices == expected_prices, f"Prices not in ascending order: {prices} != {expected_prices}"


def cart_badge_count(page: Page, suite: Suite, count: int = 3) -> None:
    """Adding ``count`` products by position shows ``count`` on the cart icon."""
    login(page, suite.config.users.standard)

    add_items_by_position(page, count)

    expect(page.locator(locators.CART_BADGE)).to_have_text(str(count))


def complete_checkout(page: Page, suite: Suite) -> None:
    """A standard user buys the configured products end to end."""
    config = suite.config
    login(page, config.users.standard)

    add_multiple_items_to_cart(page, config.checkout.products)

    open_cart(page)
    start_checkout(page)
    fill_checkout_profile(page, suite.profile)
    finish_checkout(page)

    success = suite.expectation(CHECKOUT_SUCCESS)
    expect(page.locator(success.selector)).to_have_text(success.expected)


SCENARIOS: dict[str, Callable[[Page, Suite], None]] = {
    "reject-invalid-login": reject_invalid_login,
    "accept-valid-login": accept_valid_login,
    "sort-products": sort_products_by_name_and_price,
    "cart-badge-count": cart_badge_count,
    "complete-checkout": complete_checkout,
}


def describe(scenario: Callable) -> str:
    """First line of a scenario's docstring."""
    lines = (scenario.__doc__ or "").strip().splitlines()
    return lines[0] if lines else ""
