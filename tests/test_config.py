"""Tests for configuration loading"""
import pytest

from support_relay.config import DEFAULT_TELEGRAM_API_TIMEOUT, SupportRelayConfig

ENV = {
    "TELEGRAM_TOKEN": "mini_app_token",
    "ADMIN_BOT_TOKEN": "admin_token",
    "TELEGRAM_ADMIN_CHAT_ID": "-100123",
    "SUPABASE_URL": "https://test.supabase.co",
    "SUPABASE_SERVICE_ROLE_KEY": "service_key",
}


def test_from_env():
    config = SupportRelayConfig.from_env(ENV)

    assert config.telegram_token == "mini_app_token"
    assert config.admin_bot_token == "admin_token"
    assert config.admin_chat_id == -100123
    assert config.telegram_api_url == "https://api.telegram.org"
    assert config.telegram_api_timeout == DEFAULT_TELEGRAM_API_TIMEOUT


def test_from_env_overrides():
    config = SupportRelayConfig.from_env({
        **ENV, "TELEGRAM_API_URL": "http://localhost:8081/", "TELEGRAM_API_TIMEOUT": "2.5",
    })

    assert config.telegram_api_url == "http://localhost:8081"
    assert config.telegram_api_timeout == 2.5


def test_from_env_missing_variables():
    env = {k: v for k, v in ENV.items() if k not in ("ADMIN_BOT_TOKEN", "SUPABASE_URL")}

    with pytest.raises(ValueError, match="ADMIN_BOT_TOKEN, SUPABASE_URL"):
        SupportRelayConfig.from_env(env)


def test_from_env_bad_chat_id():
    with pytest.raises(ValueError, match="TELEGRAM_ADMIN_CHAT_ID"):
        SupportRelayConfig.from_env({**ENV, "TELEGRAM_ADMIN_CHAT_ID": "@operators"})


def test_repr_hides_tokens():
    text = repr(SupportRelayConfig.from_env(ENV))

    assert "mini_app_token" not in text
    assert "admin_token" not in text
    assert "service_key" not in text
