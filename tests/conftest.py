import pytest

from swaglabs_e2e.config import Config
from swaglabs_e2e.expectations import expectation_table
from swaglabs_e2e.models import CheckoutProfile, Suite

pytest_plugins = [
    "swaglabs_e2e.plugins.browser",
    "swaglabs_e2e.plugins.capture",
]


@pytest.fixture
def checkout_profile():
    return CheckoutProfile(first_name="Ada", last_name="Lovelace", postal_code="90210")


@pytest.fixture
def offline_suite(checkout_profile):
    """Suite data with default config, for tests that never open a browser."""
    config = Config()
    return Suite(config=config, profile=checkout_profile, expectations=expectation_table(config))
