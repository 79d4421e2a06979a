"""Tests for the browser plugin's config resolution and page hooks."""

from unittest.mock import MagicMock, call

import pytest

from swaglabs_e2e.config import Config
from swaglabs_e2e.plugins.browser import resolve_config, scenario_page


@pytest.fixture(autouse=True)
def isolated_cwd(monkeypatch, tmp_path):
    monkeypatch.delenv("SWAGLABS_BROWSER__HEADLESS", raising=False)
    monkeypatch.chdir(tmp_path)


class TestResolveConfig:
    """Tests for building the session config from pytest options."""

    def test_missing_config_file_is_a_usage_error(self, tmp_path):
        with pytest.raises(pytest.UsageError, match="not found"):
            resolve_config(str(tmp_path / "missing.yaml"))

    def test_reads_given_config_file(self, tmp_path):
        path = tmp_path / "ci.yaml"
        path.write_text("swaglabs:\n  browser:\n    timeout_ms: 5000\n")

        config = resolve_config(str(path))

        assert config.browser.timeout_ms == 5000
        assert config.browser.headless is True

    def test_headed_turns_off_headless(self):
        config = resolve_config(None, headed=True)

        assert config.browser.headless is False
        assert config.browser.name == "chromium"

    def test_defaults_without_options(self):
        assert resolve_config(None) == Config()


class TestScenarioPage:
    """Tests for the navigate-before and clear-after hooks."""

    def test_hooks_run_around_the_scenario(self):
        context = MagicMock()
        config = Config(browser={"timeout_ms": 1234})
        pg = context.new_page.return_value

        hooks = scenario_page(context, config)
        assert next(hooks) is pg

        assert pg.method_calls == [
            call.set_default_timeout(1234),
            call.goto("https://www.saucedemo.com/v1/index.html"),
        ]

        with pytest.raises(StopIteration):
            next(hooks)

        assert pg.method_calls[2:] == [
            call.evaluate("() => window.localStorage.clear()"),
            call.close(),
        ]

    def test_storage_is_not_touched_before_the_scenario_ends(self):
        context = MagicMock()

        hooks = scenario_page(context, Config())
        pg = next(hooks)

        pg.evaluate.assert_not_called()
        pg.close.assert_not_called()
