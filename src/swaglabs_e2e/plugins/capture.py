"""Pytest plugin to capture page snapshots on scenario failure."""

import logging
from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError

from ..failures import classify_failure
from ..models import ScenarioFailure

logger = logging.getLogger(__name__)

PAGE_FIXTURE_NAMES = ["page"]


def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    if call.when == "call" and call.excinfo is not None:
        if isinstance(call.excinfo.value, pytest.skip.Exception):
            return
        failure = _capture_snapshot(item, call.excinfo.value)
        if failure:
            item.user_properties.append(("failure_type", failure.failure_type.value))
            if failure.html_snapshot:
                item.user_properties.append(("snapshot_path", str(failure.html_snapshot)))
            if failure.screenshot_path:
                item.user_properties.append(("screenshot_path", str(failure.screenshot_path)))


def _artifacts_dir(item) -> Path:
    suite_config = item.funcargs.get("suite_config")
    if suite_config is None and "suite" in item.funcargs:
        suite_config = item.funcargs["suite"].config
    if suite_config is not None:
        return Path(suite_config.artifacts_dir)
    return Path(item.fspath).parent / "failures"


def _capture_snapshot(item, exc: BaseException) -> ScenarioFailure | None:
    """Capture HTML and a screenshot from the test's page fixture."""
    page = None
    for name in PAGE_FIXTURE_NAMES:
        if name in item.funcargs:
            page = item.funcargs[name]
            break

    if page is None:
        return None

    failure = ScenarioFailure(
        test_id=item.nodeid,
        failure_type=classify_failure(exc),
        error_message=str(exc)[:500],
    )

    failure_dir = _artifacts_dir(item)
    failure_dir.mkdir(parents=True, exist_ok=True)

    # Generate filename
    timestamp = failure.timestamp.strftime("%Y%m%d_%H%M%S")
    clean_name = item.name.replace("::", "_").replace("/", "_").replace("[", "_").replace("]", "")
    stem = f"{clean_name}_{timestamp}"

    try:
        html_path = failure_dir / f"{stem}.html"
        html_path.write_text(page.content(), encoding="utf-8")
        failure.html_snapshot = html_path

        screenshot_path = failure_dir / f"{stem}.png"
        page.screenshot(path=str(screenshot_path), full_page=True)
        failure.screenshot_path = screenshot_path
    except (PlaywrightError, OSError) as e:
        logger.warning("Could not capture snapshot for %s: %s", item.nodeid, e)

    logger.info("Captured %s failure for %s", failure.failure_type.value, item.nodeid)
    return failure
