"""Core data models for the Swag Labs suite."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .config import Config


class FailureType(Enum):
    """Types of scenario failures."""

    SELECTOR_NOT_FOUND = "selector_not_found"
    ELEMENT_NOT_VISIBLE = "element_not_visible"
    TIMEOUT = "timeout"
    ASSERTION_FAILED = "assertion_failed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CheckoutProfile:
    """Person and address fields typed into the checkout form."""

    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class Expectation:
    """One expected literal of the application under test."""

    name: str
    selector: str
    expected: str


@dataclass(frozen=True)
class Suite:
    """Everything a scenario needs, built once per test session."""

    config: Config
    profile: CheckoutProfile
    expectations: Mapping[str, Expectation] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "expectations", MappingProxyType(dict(self.expectations)))

    def expectation(self, name: str) -> Expectation:
        return self.expectations[name]


@dataclass
class ScenarioFailure:
    """Artifacts captured for a failed scenario."""

    test_id: str
    failure_type: FailureType
    error_message: str
    html_snapshot: Path | None = None
    screenshot_path: Path | None = None
    timestamp: datetime = field(default_factory=datetime.now)
