import pytest

from satstream_mcp.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ApiCredential,
    SatstreamConfig,
    _load_timeout,
    load_api_key,
    require_credential,
)
from satstream_mcp.errors import StartupConfigError


def test_load_timeout_unset_means_no_timeout(monkeypatch):
    monkeypatch.delenv("SATSTREAM_HTTP_TIMEOUT", raising=False)
    assert _load_timeout() is None


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("SATSTREAM_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() is None  # falls back to no timeout on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("SATSTREAM_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_api_key_env_over_cli(monkeypatch):
    monkeypatch.setenv("SATSTREAM_API_KEY", "env-key")
    assert load_api_key("cli-key") == "env-key"


def test_load_api_key_falls_back_to_cli(monkeypatch):
    monkeypatch.delenv("SATSTREAM_API_KEY", raising=False)
    assert load_api_key(" cli-key ") == "cli-key"


def test_load_api_key_blank_env_is_ignored(monkeypatch):
    monkeypatch.setenv("SATSTREAM_API_KEY", "   ")
    assert load_api_key("cli-key") == "cli-key"


def test_load_api_key_missing_everywhere(monkeypatch):
    monkeypatch.delenv("SATSTREAM_API_KEY", raising=False)
    assert load_api_key() is None
    assert load_api_key("") is None


def test_require_credential_missing_is_fatal_error():
    with pytest.raises(StartupConfigError) as excinfo:
        require_credential(SatstreamConfig(api_key=None))
    assert "SATSTREAM_API_KEY" in str(excinfo.value)


def test_require_credential_returns_immutable_credential():
    credential = require_credential(SatstreamConfig(api_key="secret-key"))
    assert credential == ApiCredential("secret-key")
    assert "secret-key" not in repr(credential)
    with pytest.raises(AttributeError):
        credential.value = "other"  # type: ignore[misc]


def test_config_defaults_follow_module_constants():
    cfg = SatstreamConfig(api_key="k")
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout == DEFAULT_TIMEOUT
