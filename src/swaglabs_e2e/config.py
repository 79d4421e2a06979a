"""Configuration management for the Swag Labs suite."""

from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file at import time
load_dotenv()

CONFIG_FILE_NAMES = ["swaglabs.yaml", "swaglabs.yml", ".swaglabs.yaml"]


class Credentials(BaseModel):
    """A username/password pair accepted (or rejected) by the shop."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str


class UsersConfig(BaseModel):
    """Known accounts of the demo shop."""

    model_config = ConfigDict(frozen=True)

    locked_out: Credentials = Credentials(username="locked_out_user", password="secret_sauce")
    standard: Credentials = Credentials(username="standard_user", password="secret_sauce")


class MessagesConfig(BaseModel):
    """Exact copy the shop shows for each outcome."""

    model_config = ConfigDict(frozen=True)

    invalid_login: str = "Epic sadface: Sorry, this user has been locked out."
    checkout_success: str = "THANK YOU FOR YOUR ORDER"
    inventory_header: str = "Products"


class BrowserConfig(BaseModel):
    """Browser launch configuration."""

    model_config = ConfigDict(frozen=True)

    name: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    timeout_ms: int = 30_000
    slow_mo: float = 0
    viewport_width: int = 1280
    viewport_height: int = 800


class CheckoutConfig(BaseModel):
    """Checkout scenario inputs."""

    model_config = ConfigDict(frozen=True)

    products: tuple[str, ...] = (
        "Sauce Labs Backpack",
        "Sauce Labs Bike Light",
        "Sauce Labs Onesie",
    )
    faker_locale: str = "en_US"
    seed: int | None = None


class Config(BaseSettings):
    """Main configuration for the suite."""

    model_config = SettingsConfigDict(
        env_prefix="SWAGLABS_",
        env_nested_delimiter="__",
        frozen=True,
    )

    # Core settings
    base_url: str = "https://www.saucedemo.com/v1"
    artifacts_dir: Path = Path("failures")

    # Sub-configurations
    users: UsersConfig = Field(default_factory=UsersConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    checkout: CheckoutConfig = Field(default_factory=CheckoutConfig)

    @property
    def login_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/index.html"

    @property
    def inventory_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/inventory.html"


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    config_data: dict = {}

    # Try to find config file
    if config_path is None:
        for name in CONFIG_FILE_NAMES:
            if Path(name).exists():
                config_path = Path(name)
                break

    # Load from YAML if exists
    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if raw and "swaglabs" in raw:
                config_data = raw["swaglabs"]
            elif raw:
                config_data = raw

    # Values from YAML win over environment variables
    return Config(**config_data)
