import pytest

from core.config import (
    DEFAULT_LOG_LEVEL,
    RPC_URL_PLACEHOLDER,
    Settings,
    load_settings,
    require_rpc_url,
)
from core.errors import ConfigurationError


def test_defaults(monkeypatch):
    for name in ("RPC_URL", "ID_MCP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.rpc_url == RPC_URL_PLACEHOLDER
    assert settings.log_level == DEFAULT_LOG_LEVEL == "INFO"
    assert settings.rpc_configured is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RPC_URL", "https://rpc.example")
    monkeypatch.setenv("ID_MCP_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.rpc_url == "https://rpc.example"
    assert settings.log_level == "DEBUG"
    assert settings.rpc_configured is True


@pytest.mark.parametrize("value", ["verbose", "", "  ", "trace"])
def test_unknown_log_level_falls_back_to_info(monkeypatch, value):
    monkeypatch.setenv("ID_MCP_LOG_LEVEL", value)
    assert load_settings().log_level == "INFO"


def test_log_level_is_trimmed(monkeypatch):
    monkeypatch.setenv("ID_MCP_LOG_LEVEL", " warning ")
    assert load_settings().log_level == "WARNING"


def test_empty_rpc_url_falls_back_to_placeholder(monkeypatch):
    monkeypatch.setenv("RPC_URL", "")
    assert load_settings().rpc_url == RPC_URL_PLACEHOLDER


def test_require_rpc_url():
    assert require_rpc_url(Settings(rpc_url="https://rpc.example")) == "https://rpc.example"
    with pytest.raises(ConfigurationError) as excinfo:
        require_rpc_url(Settings())
    assert "Please set your own RPC_URL" in str(excinfo.value)
    assert excinfo.value.kind == "configuration"
