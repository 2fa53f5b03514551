"""Тесты маршрутов веб-приложения"""

import httpx
import respx
from starlette.testclient import TestClient

from users import notifications as messages
from web.app import create_app
from web.config import WebConfig

from .support.data import SCENARIO_USERS, TEST_BASE_URL, created_body


def mock_list(mock_api: respx.MockRouter, users: list = SCENARIO_USERS) -> respx.Route:
    return mock_api.get(f"{TEST_BASE_URL}/users", params={"page": "2"}).respond(200, json={"data": users})


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "User Manager Web"}


def test_page_loads_users_once(client: TestClient, mock_api: respx.MockRouter) -> None:
    route = mock_list(mock_api)

    r = client.get("/")
    assert r.status_code == 200
    assert "George Bluth - ID: 1" in r.text
    assert "Janet Weaver - ID: 2" in r.text

    client.get("/")
    assert route.call_count == 1


def test_load_failure_shows_toast(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_api.get(f"{TEST_BASE_URL}/users").mock(side_effect=httpx.ConnectError)

    r = client.get("/")
    assert r.status_code == 200
    assert messages.LOAD_FAILED in r.text
    assert "No users yet" in r.text

    # Уведомление показывается один раз
    r = client.get("/")
    assert messages.LOAD_FAILED not in r.text


def test_sessions_are_separate(config: WebConfig, mock_api: respx.MockRouter) -> None:
    route = mock_list(mock_api)
    app = create_app(config)
    with TestClient(app) as first, TestClient(app) as second:
        first.get("/")
        second.get("/")

    assert route.call_count == 2
    assert len(app.state.registry) == 2


def test_create_user(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    mock_api.post(f"{TEST_BASE_URL}/users").respond(201, json=created_body("Bob", "Jones"))
    client.get("/")

    r = client.post("/users/create", data={"first_name": "Bob", "last_name": "Jones"})

    assert r.status_code == 200
    assert r.history[0].status_code == 303
    assert "Bob Jones - ID: 3" in r.text
    assert messages.CREATE_SUCCESS in r.text


def test_create_user_validation(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    create = mock_api.post(f"{TEST_BASE_URL}/users")
    client.get("/")

    r = client.post("/users/create", data={"first_name": "Bob", "last_name": ""})

    assert messages.CREATE_INVALID in r.text
    assert not create.called
    # Введенное имя остается в форме
    assert 'value="Bob"' in r.text


def test_edit_flow(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    update = mock_api.put(f"{TEST_BASE_URL}/users/2").respond(200, json={})
    client.get("/")

    r = client.post("/users/2/edit/open")
    assert "modal-open" in r.text
    assert 'value="Janet"' in r.text

    r = client.post("/users/edit", data={"first_name": "Jane", "last_name": "Weaver"})
    assert update.call_count == 1
    assert "Jane Weaver - ID: 2" in r.text
    assert messages.UPDATE_SUCCESS in r.text
    assert "modal-open" not in r.text


def test_edit_rejected_keeps_dialog(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    mock_api.put(f"{TEST_BASE_URL}/users/1").respond(500)
    client.get("/")
    client.post("/users/1/edit/open")

    r = client.post("/users/edit", data={"first_name": "G", "last_name": "B"})

    assert messages.UPDATE_REJECTED in r.text
    assert "modal-open" in r.text
    assert "George Bluth - ID: 1" in r.text

    r = client.post("/users/edit/cancel")
    assert "modal-open" not in r.text


def test_delete_user(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    mock_api.delete(f"{TEST_BASE_URL}/users/1").respond(204)
    client.get("/")

    r = client.post("/users/1/delete")

    assert "George Bluth" not in r.text
    assert "Janet Weaver - ID: 2" in r.text
    assert messages.DELETE_SUCCESS in r.text


def test_menu(client: TestClient, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    client.get("/")

    r = client.post("/menu/toggle")
    assert "Employee" in r.text
    assert "Customer" in r.text

    r = client.post("/menu/close")
    assert "Employee" not in r.text


def test_session_registry_is_bounded(config: WebConfig, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    config.max_sessions = 3
    app = create_app(config)

    for _ in range(10):
        with TestClient(app) as visitor:
            visitor.get("/")

    assert len(app.state.registry) == 3


def test_toast_auto_dismiss_duration(config: WebConfig, mock_api: respx.MockRouter) -> None:
    mock_list(mock_api)
    mock_api.delete(f"{TEST_BASE_URL}/users/1").respond(204)

    with TestClient(create_app(config)) as default_client:
        default_client.get("/")
        r = default_client.post("/users/1/delete")
    assert messages.DELETE_SUCCESS in r.text
    assert "}, 3000);" in r.text

    config.toast_duration_ms = 1500
    with TestClient(create_app(config)) as custom_client:
        custom_client.get("/")
        r = custom_client.post("/users/1/delete")
    assert "}, 1500);" in r.text
