"""Tests for configuration loading."""

import pytest

from minds_mcp.core.config import DEFAULT_BASE_URL, MindsConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("MINDS_BASE_URL", "MINDS_API_KEY", "MINDS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestFromEnv:
    def test_defaults(self, clean_env):
        config = MindsConfig.from_env()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_key == ""
        assert config.log_level == "WARNING"
        assert not config.has_api_key

    def test_environment(self, clean_env):
        clean_env.setenv("MINDS_BASE_URL", "http://localhost:47334/")
        clean_env.setenv("MINDS_API_KEY", "secret")
        clean_env.setenv("MINDS_LOG_LEVEL", "debug")

        config = MindsConfig.from_env()

        assert config.base_url == "http://localhost:47334"
        assert config.api_key == "secret"
        assert config.log_level == "DEBUG"
        assert config.has_api_key

    def test_overrides_beat_environment(self, clean_env):
        clean_env.setenv("MINDS_BASE_URL", "http://from-env")
        clean_env.setenv("MINDS_API_KEY", "env-key")

        config = MindsConfig.from_env(base_url="http://from-flag", api_key="flag-key")

        assert config.base_url == "http://from-flag"
        assert config.api_key == "flag-key"

    def test_unknown_log_level(self, clean_env):
        with pytest.raises(ValueError, match="Unknown log level"):
            MindsConfig.from_env(log_level="chatty")


def test_config_is_immutable():
    config = MindsConfig(api_key="abc")
    with pytest.raises(AttributeError):
        config.api_key = "other"


@pytest.mark.parametrize(
    "key, masked",
    [
        ("", ""),
        ("abc", "***"),
        ("mdb_1234567890", "**********7890"),
    ],
)
def test_masked_api_key(key, masked):
    assert MindsConfig(api_key=key).masked_api_key == masked
