"""Product list sorting and readers for the inventory page."""

import logging
from decimal import Decimal, InvalidOperation
from enum import Enum

from playwright.sync_api import Page

from . import locators

logger = logging.getLogger(__name__)


class SortOption(Enum):
    """Values of the inventory sort control."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


def sort_products(page: Page, option: SortOption) -> None:
    logger.info("Sorting products by %s", option.name)
    page.select_option(locators.SORT_CONTAINER, option.value)


def read_product_names(page: Page) -> list[str]:
    """Return the visible product names in page order."""
    return page.locator(locators.INVENTORY_ITEM_NAME).all_text_contents()


def read_product_prices(page: Page) -> list[Decimal]:
    """Return the visible product prices in page order."""
    return [parse_price(text) for text in page.locator(locators.INVENTORY_ITEM_PRICE).all_text_contents()]


def parse_price(text: str) -> Decimal:
    """Parse a price label such as ``$29.99``.

    Empty text counts as zero.
    """
    cleaned = text.strip().removeprefix("$").strip()
    if not cleaned:
        return Decimal("0")
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Not a price: {text!r}") from e
