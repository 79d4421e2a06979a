"""Fixture data for the checkout scenario."""

import logging

from faker import Faker

from .config import Config
from .expectations import expectation_table
from .models import CheckoutProfile, Suite

logger = logging.getLogger(__name__)


def generate_checkout_profile(locale: str = "en_US", seed: int | None = None) -> CheckoutProfile:
    """Generate a random checkout profile.

    Args:
        locale: Faker locale used for names and postal codes.
        seed: Fixes the generated values when given.
    """
    fake = Faker(locale)
    if seed is not None:
        fake.seed_instance(seed)

    return CheckoutProfile(
        first_name=fake.first_name(),
        last_name=fake.last_name(),
        postal_code=fake.postcode(),
    )


def build_suite(config: Config) -> Suite:
    """Assemble the immutable suite data shared by every scenario."""
    profile = generate_checkout_profile(config.checkout.faker_locale, config.checkout.seed)
    logger.info("Checkout profile: %s %s, %s", profile.first_name, profile.last_name, profile.postal_code)
    return Suite(config=config, profile=profile, expectations=expectation_table(config))
