"""Tests for YAML configuration loading."""

import os

import pytest
from pydantic import ValidationError

from shippo_client.config import (
    DEFAULT_API_BASE,
    ApiConfig,
    ShippoConfig,
    load_config,
    resolve_env_vars,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and config files."""
    for key in list(os.environ):
        if key.startswith("SHIPPO_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


class TestResolveEnvVars:

    def test_replaces_reference(self, monkeypatch):
        monkeypatch.setenv("MY_TOKEN", "shippo_test_abc")
        assert resolve_env_vars("${MY_TOKEN}") == "shippo_test_abc"

    def test_missing_resolves_empty(self):
        assert resolve_env_vars("a${NOT_SET_ANYWHERE}b") == "ab"

    def test_plain_string_untouched(self):
        assert resolve_env_vars("plain") == "plain"


class TestModels:

    def test_defaults(self):
        config = ShippoConfig()
        assert config.api.access_token == ""
        assert config.api.api_base == DEFAULT_API_BASE
        assert config.api.timeout == 30.0
        assert config.logging.level == "warning"

    def test_trailing_slash_added(self):
        assert ApiConfig(api_base="http://localhost/v1").api_base == "http://localhost/v1/"

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            ApiConfig(timeout=0)

    def test_level_case_insensitive(self):
        assert ShippoConfig(logging={"level": "DEBUG"}).logging.level == "debug"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            ShippoConfig(logging={"level": "verbose"})


class TestLoadConfig:

    def test_no_file_gives_defaults(self):
        config = load_config()
        assert config == ShippoConfig()

    def test_cwd_file(self, tmp_path):
        (tmp_path / "shippo.yaml").write_text(
            "api:\n  access_token: shippo_test_abc\n  timeout: 5\n"
        )
        config = load_config()
        assert config.api.access_token == "shippo_test_abc"
        assert config.api.timeout == 5.0

    def test_home_file(self, tmp_path):
        home = tmp_path / "home" / ".shippo"
        home.mkdir(parents=True)
        (home / "config.yaml").write_text("logging:\n  level: info\n")
        assert load_config().logging.level == "info"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yml"
        path.write_text("api:\n  api_base: http://localhost:9000/v1\n")
        assert load_config(str(path)).api.api_base == "http://localhost:9000/v1/"

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_non_mapping_rejected(self, tmp_path):
        (tmp_path / "shippo.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_config()

    def test_empty_file(self, tmp_path):
        (tmp_path / "shippo.yaml").write_text("")
        assert load_config() == ShippoConfig()

    def test_env_reference_in_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TOKEN_FROM_VAULT", "shippo_live_abc")
        (tmp_path / "shippo.yaml").write_text(
            "api:\n  access_token: ${TOKEN_FROM_VAULT}\n"
        )
        assert load_config().api.access_token == "shippo_live_abc"


class TestEnvOverrides:

    def test_section_override(self, tmp_path, monkeypatch):
        (tmp_path / "shippo.yaml").write_text("api:\n  timeout: 5\n")
        monkeypatch.setenv("SHIPPO_API_TIMEOUT", "12.5")
        assert load_config().api.timeout == 12.5

    def test_multi_word_field(self, monkeypatch):
        monkeypatch.setenv("SHIPPO_API_API_BASE", "http://localhost:9000/v1/")
        assert load_config().api.api_base == "http://localhost:9000/v1/"

    def test_unknown_section_ignored(self, monkeypatch):
        monkeypatch.setenv("SHIPPO_CACHE_SIZE", "10")
        assert load_config() == ShippoConfig()

    def test_token_fallback(self, monkeypatch):
        monkeypatch.setenv("SHIPPO_PRIVATE_ACCESS_TOKEN", "shippo_test_env")
        assert load_config().api.access_token == "shippo_test_env"

    def test_file_token_wins_over_fallback(self, tmp_path, monkeypatch):
        (tmp_path / "shippo.yaml").write_text("api:\n  access_token: from_file\n")
        monkeypatch.setenv("SHIPPO_PRIVATE_ACCESS_TOKEN", "shippo_test_env")
        assert load_config().api.access_token == "from_file"

    def test_explicit_override_wins(self, monkeypatch):
        monkeypatch.setenv("SHIPPO_API_ACCESS_TOKEN", "explicit")
        monkeypatch.setenv("SHIPPO_PRIVATE_ACCESS_TOKEN", "fallback")
        assert load_config().api.access_token == "explicit"
