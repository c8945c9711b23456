"""
Tests for configuration loading.

Covers:
- AppConfig defaults and validation
- LocaleConfig (default must be supported)
- ApiConfig.url_for
- deep_merge, YAML loading, env and CLI overrides
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from outlook_talk.config.loader import (
    apply_cli_overrides,
    deep_merge,
    load_config,
    load_env_overrides,
    load_yaml_config,
)
from outlook_talk.config.schema import ApiConfig, AppConfig, LocaleConfig, UIConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "OUTLOOK_TALK_DEFAULT_LOCALE",
        "OUTLOOK_TALK_NEXTCLOUD_URL",
        "OUTLOOK_TALK_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


# -- Schema -------------------------------------------------------------------


class TestSchema:
    def test_defaults(self):
        cfg = AppConfig()
        assert cfg.nextcloud.url == "https://demo.hubs.se"
        assert cfg.oauth.client_id == "outlook-integrator"
        assert cfg.oauth.scopes == []
        assert cfg.locale.default_locale == "sv-SE"
        assert cfg.locale.supported_locales == ["sv-SE", "en-US"]
        assert cfg.token.refresh_threshold == 300
        assert cfg.ui.taskpane_height == 450
        assert cfg.logging.level == "warn"

    def test_extra_keys_forbidden(self):
        with pytest.raises(ValidationError):
            AppConfig(unknown_section={})

    def test_default_locale_must_be_supported(self):
        with pytest.raises(ValidationError, match="not in supported_locales"):
            LocaleConfig(default_locale="de-DE")

    def test_supported_locales_not_empty(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            LocaleConfig(default_locale="sv-SE", supported_locales=[])

    def test_custom_locale_config(self):
        cfg = LocaleConfig(default_locale="en-US", supported_locales=["en-US"])
        assert cfg.default_locale == "en-US"

    def test_ui_bounds(self):
        with pytest.raises(ValidationError):
            UIConfig(dialog_width=0)
        with pytest.raises(ValidationError):
            UIConfig(dialog_height=101)

    def test_api_url_for(self):
        api = ApiConfig()
        assert api.url_for("create_meeting", "https://cloud.example.com/") == (
            "https://cloud.example.com/apps/outlook_integrator/api/v1/meeting"
        )
        assert api.url_for("verify_auth", "https://x").endswith("/api/v1/auth/verify")

    def test_api_url_for_unknown(self):
        with pytest.raises(KeyError):
            ApiConfig().url_for("delete_everything", "https://x")


# -- Loader -------------------------------------------------------------------


class TestDeepMerge:
    def test_nested(self):
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        override = {"a": {"b": 99}, "e": 4}
        assert deep_merge(base, override) == {"a": {"b": 99, "c": 2}, "d": 3, "e": 4}

    def test_does_not_mutate_base(self):
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


class TestLoader:
    def test_no_file(self):
        assert load_yaml_config(None) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_yaml_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_config(path) == {}

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "nextcloud:\n"
            "  url: https://cloud.example.com\n"
            "locale:\n"
            "  default_locale: en-US\n",
            encoding="utf-8",
        )
        cfg = load_config(config_path=path)
        assert cfg.nextcloud.url == "https://cloud.example.com"
        assert cfg.locale.default_locale == "en-US"
        assert cfg.locale.supported_locales == ["sv-SE", "en-US"]

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("OUTLOOK_TALK_DEFAULT_LOCALE", "en-US")
        monkeypatch.setenv("OUTLOOK_TALK_NEXTCLOUD_URL", "https://env.example.com")
        monkeypatch.setenv("OUTLOOK_TALK_LOG_LEVEL", "DEBUG")
        overrides = load_env_overrides()
        assert overrides == {
            "locale": {"default_locale": "en-US"},
            "nextcloud": {"url": "https://env.example.com"},
            "logging": {"level": "debug"},
        }

    def test_env_beats_yaml(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("nextcloud:\n  url: https://yaml.example.com\n", encoding="utf-8")
        monkeypatch.setenv("OUTLOOK_TALK_NEXTCLOUD_URL", "https://env.example.com")
        assert load_config(config_path=path).nextcloud.url == "https://env.example.com"

    def test_cli_beats_env(self, monkeypatch):
        monkeypatch.setenv("OUTLOOK_TALK_DEFAULT_LOCALE", "en-US")
        cfg = load_config(cli_args={"default_locale": "sv-SE", "verbose": 2})
        assert cfg.locale.default_locale == "sv-SE"
        assert cfg.logging.verbose == 2

    def test_apply_cli_overrides_ignores_unset(self):
        base = {"logging": {"level": "info"}}
        assert apply_cli_overrides(base, {"default_locale": None}) == base

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("OUTLOOK_TALK_DEFAULT_LOCALE", "de-DE")
        with pytest.raises(ValidationError):
            load_config()
