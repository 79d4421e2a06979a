"""Failure classification for captured scenario artifacts."""

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .models import FailureType


def classify_failure(exc: BaseException) -> FailureType:
    """Classify the type of failure from the raised exception."""
    message = str(exc).lower()

    if isinstance(exc, PlaywrightTimeoutError):
        # the call log names what Playwright was waiting for
        if any(x in message for x in ["waiting for locator", "waiting for selector", "waiting for get_by"]):
            return FailureType.SELECTOR_NOT_FOUND
        return FailureType.TIMEOUT
    elif isinstance(exc, AssertionError):
        if "to be visible" in message or "not visible" in message:
            return FailureType.ELEMENT_NOT_VISIBLE
        return FailureType.ASSERTION_FAILED
    elif isinstance(exc, PlaywrightError):
        if "timeout" in message or "timed out" in message:
            return FailureType.TIMEOUT
        if "not found" in message or "no element" in message:
            return FailureType.SELECTOR_NOT_FOUND

    return FailureType.UNKNOWN
