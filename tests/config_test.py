"""Тесты загрузки конфигурации"""

import pytest

from users.state import IdPolicy
from web.config import WebConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WEB_SECRET_KEY",
        "WEB_HOST",
        "WEB_PORT",
        "USERS_API_URL",
        "USERS_API_KEY",
        "USERS_PAGE",
        "USERS_ID_POLICY",
        "USERS_NOTIFY_LOAD_ERRORS",
        "USERS_TIMEOUT",
        "TOAST_DURATION_MS",
        "WEB_MAX_SESSIONS",
        "WEB_SESSION_TTL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = WebConfig.from_env()

    assert len(config.secret_key) == 64
    assert config.api_base_url == "https://reqres.in/api"
    assert config.api_key is None
    assert config.users_page == 2
    assert config.id_policy == IdPolicy.MAX
    assert config.notify_load_errors is True
    assert config.toast_duration_ms == 3000
    assert (config.max_sessions, config.session_ttl) == (1000, 3600.0)
    assert (config.host, config.port) == ("0.0.0.0", 8000)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEB_SECRET_KEY", "secret")
    monkeypatch.setenv("USERS_API_URL", "http://localhost:9000/api")
    monkeypatch.setenv("USERS_API_KEY", "reqres-free-v1")
    monkeypatch.setenv("USERS_ID_POLICY", "SERVER")
    monkeypatch.setenv("USERS_NOTIFY_LOAD_ERRORS", "no")
    monkeypatch.setenv("USERS_TIMEOUT", "2.5")
    monkeypatch.setenv("WEB_PORT", "5001")

    config = WebConfig.from_env()

    assert config.secret_key == "secret"
    assert config.api_base_url == "http://localhost:9000/api"
    assert config.api_key == "reqres-free-v1"
    assert config.id_policy == IdPolicy.SERVER
    assert config.notify_load_errors is False
    assert config.request_timeout == 2.5
    assert config.port == 5001


@pytest.mark.parametrize(
    "name,value",
    [
        ("USERS_ID_POLICY", "random"),
        ("USERS_PAGE", "0"),
        ("USERS_PAGE", "two"),
        ("USERS_NOTIFY_LOAD_ERRORS", "maybe"),
        ("WEB_PORT", "http"),
        ("WEB_MAX_SESSIONS", "0"),
    ],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        WebConfig.from_env()


def test_with_compat() -> None:
    config = WebConfig(secret_key="secret").with_compat()
    assert config.id_policy == IdPolicy.COUNT
    assert config.notify_load_errors is False
