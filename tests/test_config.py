import pytest
from pydantic import ValidationError

from chain_client.config import ChainClientConfig, load_config


def test_defaults(monkeypatch):
    for name in ("CHAIN_API_URL", "CHAIN_API_KEY", "CHAIN_API_TIMEOUT", "CHAIN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = ChainClientConfig()
    assert config.chain_api_url == "http://127.0.0.1:8332"
    assert config.chain_api_key == ""
    assert config.chain_api_timeout == 10
    assert config.chain_log_level == "INFO"


def test_env_overrides_and_url_normalisation(monkeypatch):
    monkeypatch.setenv("CHAIN_API_URL", " http://node.example:18332/ ")
    monkeypatch.setenv("chain_api_timeout", "3")
    config = load_config()
    assert config.chain_api_url == "http://node.example:18332"
    assert config.chain_api_timeout == 3


def test_blank_url_rejected(monkeypatch):
    monkeypatch.setenv("CHAIN_API_URL", "   ")
    with pytest.raises(ValidationError) as excinfo:
        ChainClientConfig()
    assert "CHAIN_API_URL" in str(excinfo.value)


def test_non_positive_timeout_rejected():
    with pytest.raises(ValueError):
        ChainClientConfig(chain_api_timeout=0)
