"""Общие фикстуры тестов"""

from collections.abc import Iterator

import pytest
import respx
from starlette.testclient import TestClient

from users.client import UsersClient
from users.commands import UserCommands
from users.session import UserSession
from users.state import IdPolicy
from web.app import create_app
from web.config import WebConfig

from .support.data import TEST_BASE_URL


@pytest.fixture
def mock_api() -> Iterator[respx.MockRouter]:
    """Мок API пользователей; любой незамоканный запрос - ошибка теста"""
    with respx.mock(assert_all_called=False) as router:
        yield router


def make_commands(
    id_policy: IdPolicy = IdPolicy.MAX, notify_load_errors: bool = True
) -> UserCommands:
    return UserCommands(
        client_factory=lambda: UsersClient(base_url=TEST_BASE_URL),
        page=2,
        id_policy=id_policy,
        notify_load_errors=notify_load_errors,
    )


@pytest.fixture
def commands() -> UserCommands:
    return make_commands()


@pytest.fixture
def compat_commands() -> UserCommands:
    return make_commands(IdPolicy.COUNT, notify_load_errors=False)


@pytest.fixture
def server_commands() -> UserCommands:
    return make_commands(IdPolicy.SERVER)


@pytest.fixture
def session() -> UserSession:
    return UserSession()


@pytest.fixture
def config() -> WebConfig:
    return WebConfig(secret_key="test-secret", api_base_url=TEST_BASE_URL)


@pytest.fixture
def client(config: WebConfig, mock_api: respx.MockRouter) -> Iterator[TestClient]:
    app = create_app(config)
    with TestClient(app) as test_client:
        yield test_client
