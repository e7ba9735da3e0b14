"""Unit tests for environment configuration."""

import pytest

from tensor_actions.config import (
    ServerConfig,
    base_path_validator,
    bool_validator,
    get_actions_config,
    get_env_var,
    get_tensor_config,
    url_validator,
)


@pytest.fixture(autouse=True)
def clear_config_cache():
    get_tensor_config.cache_clear()
    get_actions_config.cache_clear()
    yield
    get_tensor_config.cache_clear()
    get_actions_config.cache_clear()


def test_get_env_var_default(monkeypatch):
    monkeypatch.delenv("TENSOR_ACTIONS_TEST_VAR", raising=False)
    assert get_env_var("TENSOR_ACTIONS_TEST_VAR", "fallback") == "fallback"


def test_get_env_var_required(monkeypatch):
    monkeypatch.delenv("TENSOR_ACTIONS_TEST_VAR", raising=False)
    with pytest.raises(ValueError, match="not found"):
        get_env_var("TENSOR_ACTIONS_TEST_VAR", required=True)


def test_get_env_var_invalid_value(monkeypatch):
    monkeypatch.setenv("TENSOR_ACTIONS_TEST_VAR", "not-a-url")
    with pytest.raises(ValueError, match="TENSOR_ACTIONS_TEST_VAR"):
        get_env_var("TENSOR_ACTIONS_TEST_VAR", validator=url_validator)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("/api/tensor/bid-nft", "/api/tensor/bid-nft"),
        ("api/tensor/bid-nft/", "/api/tensor/bid-nft"),
        ("  /bid/ ", "/bid"),
    ],
)
def test_base_path_validator(value, expected):
    assert base_path_validator(value) == expected


@pytest.mark.parametrize("value", ["", "/", "/has space"])
def test_base_path_validator_rejects(value):
    with pytest.raises(ValueError):
        base_path_validator(value)


def test_bool_validator():
    assert bool_validator("true")
    assert bool_validator("1")
    assert not bool_validator("no")


def test_tensor_config_from_env(monkeypatch):
    monkeypatch.setenv("TENSOR_API_URL", "https://tensor.example.com")
    monkeypatch.setenv("TENSOR_API_KEY", "abc")
    monkeypatch.setenv("TENSOR_TIMEOUT", "5")

    config = get_tensor_config()

    assert config.api_url == "https://tensor.example.com"
    assert config.has_api_key
    assert config.timeout == 5


def test_actions_config_from_env(monkeypatch):
    monkeypatch.setenv("ACTIONS_BASE_PATH", "actions/tensor/")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.test,https://b.test")

    config = get_actions_config()

    assert config.base_path == "/actions/tensor"
    assert config.cors_origins == ["https://a.test", "https://b.test"]


def test_server_config_rejects_unknown_environment():
    with pytest.raises(ValueError, match="Invalid environment"):
        ServerConfig(environment="moon")
