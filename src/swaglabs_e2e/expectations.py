"""Declarative table of every literal the scenarios assert on.

Keeping selector and expected copy side by side means a content change on
the shop shows up as one row to update.
"""

from . import locators
from .config import Config
from .models import Expectation

INVALID_LOGIN = "invalid_login"
INVENTORY_HEADER = "inventory_header"
CHECKOUT_SUCCESS = "checkout_success"


def expectation_table(config: Config) -> dict[str, Expectation]:
    """Build the expectation table from the configured messages."""
    rows = [
        Expectation(INVALID_LOGIN, locators.ERROR_BANNER, config.messages.invalid_login),
        Expectation(INVENTORY_HEADER, locators.PRODUCT_LABEL, config.messages.inventory_header),
        Expectation(CHECKOUT_SUCCESS, locators.COMPLETE_HEADER, config.messages.checkout_success),
    ]
    return {row.name: row for row in rows}
