"""Tests for the failure capture plugin."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from playwright.sync_api import Error as PlaywrightError

from swaglabs_e2e.config import Config
from swaglabs_e2e.plugins.capture import pytest_runtest_makereport


def _item(tmp_path, funcargs):
    return SimpleNamespace(
        name="test_should_not_login_with_an_invalid_user",
        nodeid="tests/e2e/test_swag_labs.py::TestSwagLabs::test_should_not_login_with_an_invalid_user",
        fspath=tmp_path / "test_swag_labs.py",
        funcargs=funcargs,
        user_properties=[],
    )


def _failed_call(exc):
    return SimpleNamespace(when="call", excinfo=SimpleNamespace(value=exc))


def test_failure_saves_snapshot_and_type(tmp_path):
    page = MagicMock()
    page.content.return_value = "<html><body>Epic sadface</body></html>"
    item = _item(tmp_path, {"page": page, "suite_config": Config(artifacts_dir=tmp_path / "artifacts")})

    pytest_runtest_makereport(item, _failed_call(AssertionError("Locator expected to have text")))

    properties = dict(item.user_properties)
    assert properties["failure_type"] == "assertion_failed"
    snapshot = tmp_path / "artifacts" / properties["snapshot_path"].split("/")[-1]
    assert snapshot.read_text() == "<html><body>Epic sadface</body></html>"
    page.screenshot.assert_called_once()
    assert properties["screenshot_path"].endswith(".png")


def test_falls_back_to_directory_next_to_test(tmp_path):
    page = MagicMock()
    page.content.return_value = "<html></html>"
    item = _item(tmp_path, {"page": page})

    pytest_runtest_makereport(item, _failed_call(AssertionError("boom")))

    assert list((tmp_path / "failures").glob("*.html"))


def test_page_errors_still_record_type(tmp_path):
    page = MagicMock()
    page.content.side_effect = PlaywrightError("Target page, context or browser has been closed")
    item = _item(tmp_path, {"page": page})

    pytest_runtest_makereport(item, _failed_call(AssertionError("boom")))

    assert dict(item.user_properties) == {"failure_type": "assertion_failed"}


def test_passing_or_pageless_tests_are_ignored(tmp_path):
    page = MagicMock()
    passed = _item(tmp_path, {"page": page})
    pageless = _item(tmp_path, {})

    pytest_runtest_makereport(passed, SimpleNamespace(when="call", excinfo=None))
    pytest_runtest_makereport(pageless, _failed_call(AssertionError("boom")))

    assert passed.user_properties == []
    assert pageless.user_properties == []
    page.content.assert_not_called()
