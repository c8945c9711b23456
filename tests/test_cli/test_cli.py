"""Tests for the outlook-talk CLI commands."""

import json
import logging
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from outlook_talk.cli import EXIT_CONFIG_ERROR, EXIT_FAILED, main


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """No locale hints leak in from the host, and logging is reset afterwards."""
    for var in (
        "LC_ALL",
        "LC_MESSAGES",
        "LANG",
        "OUTLOOK_TALK_DISPLAY_LANGUAGE",
        "OUTLOOK_TALK_DEFAULT_LOCALE",
        "OUTLOOK_TALK_NEXTCLOUD_URL",
        "OUTLOOK_TALK_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
    logging.root.handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def en_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text("locale:\n  default_locale: en-US\n", encoding="utf-8")
    return path


class TestTranslate:
    def test_default_locale(self, runner):
        result = runner.invoke(main, ["translate", "auth.login"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Logga in"

    def test_display_language_hint(self, runner):
        result = runner.invoke(
            main,
            ["translate", "auth.login", "--display-language", "en-US", "--ua-language", "sv-SE"],
        )
        assert result.stdout.strip() == "Log in"

    def test_user_agent_from_lang(self, runner, monkeypatch):
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        result = runner.invoke(main, ["translate", "button.cancel"])
        assert result.stdout.strip() == "Cancel"

    def test_explicit_locale(self, runner):
        result = runner.invoke(main, ["translate", "button.save", "--locale", "en-US"])
        assert result.stdout.strip() == "Save"

    def test_unsupported_locale(self, runner):
        result = runner.invoke(main, ["translate", "button.save", "--locale", "xx-XX"])
        assert result.exit_code == EXIT_FAILED
        assert "Unsupported locale: xx-XX" in result.output

    def test_unknown_key(self, runner):
        result = runner.invoke(main, ["translate", "totally.unknown.key"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "totally.unknown.key"

    def test_params(self, runner):
        result = runner.invoke(main, ["translate", "Hello {name} {missing}", "-p", "name=Ada"])
        assert result.stdout.strip() == "Hello Ada {missing}"

    def test_bad_param(self, runner):
        result = runner.invoke(main, ["translate", "auth.login", "-p", "novalue"])
        assert result.exit_code == 2
        assert "name=value" in result.output

    def test_config_default_locale(self, runner, en_config):
        result = runner.invoke(main, ["translate", "auth.logout", "-c", str(en_config)])
        assert result.stdout.strip() == "Log out"


class TestRuntimeOptions:
    def test_default_locale_option(self, runner):
        result = runner.invoke(main, ["translate", "auth.login", "--default-locale", "en-US"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Log in"

    def test_default_locale_option_beats_config(self, runner, en_config):
        result = runner.invoke(
            main,
            ["translate", "auth.login", "-c", str(en_config), "--default-locale", "sv-SE"],
        )
        assert result.stdout.strip() == "Logga in"

    def test_default_locale_option_unsupported(self, runner):
        result = runner.invoke(main, ["translate", "auth.login", "--default-locale", "de-DE"])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Invalid configuration" in result.output

    def test_log_file_option(self, runner, tmp_path):
        log_file = tmp_path / "logs" / "cli.jsonl"
        result = runner.invoke(
            main,
            ["locales", "--ua-language", "en-US", "--log-file", str(log_file), "--quiet"],
        )
        assert result.exit_code == 0
        assert "i18n.locale_detected" in log_file.read_text(encoding="utf-8")

    def test_quiet_removes_console_handler(self, runner):
        runner.invoke(main, ["locales"])
        assert any(type(h) is logging.StreamHandler for h in logging.root.handlers)

        result = runner.invoke(main, ["locales", "--quiet"])
        assert result.exit_code == 0
        assert not any(type(h) is logging.StreamHandler for h in logging.root.handlers)


class TestDump:
    def test_json(self, runner):
        from outlook_talk.i18n import sv_se

        result = runner.invoke(main, ["dump", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == sv_se.STRINGS

    def test_text(self, runner):
        result = runner.invoke(main, ["dump", "--locale", "en-US"])
        assert result.exit_code == 0
        assert "Locale: en-US" in result.stdout
        assert "button.save" in result.stdout
        assert "Save" in result.stdout


class TestLocales:
    def test_lists_locales(self, runner):
        result = runner.invoke(main, ["locales", "--display-language", "en-US"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        sv_line = next(line for line in lines if "sv-SE" in line)
        en_line = next(line for line in lines if "en-US" in line)
        assert "default" in sv_line
        assert "active" in en_line


class TestValidateConfig:
    def test_valid(self, runner, en_config):
        result = runner.invoke(main, ["validate-config", "-c", str(en_config)])
        assert result.exit_code == 0
        assert "Valid configuration" in result.stdout
        assert "Default locale: en-US" in result.stdout
        assert "https://demo.hubs.se/apps/outlook_integrator/api/v1/meeting" in result.stdout

    def test_invalid(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("locale:\n  default_locale: de-DE\n", encoding="utf-8")
        result = runner.invoke(main, ["validate-config", "-c", str(path)])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Invalid configuration" in result.output

    def test_unknown_section(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("agents: {}\n", encoding="utf-8")
        result = runner.invoke(main, ["validate-config", "-c", str(path)])
        assert result.exit_code == EXIT_CONFIG_ERROR


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output
