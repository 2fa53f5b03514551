"""Тесты хранилища сессий"""

from web.sessions import SESSION_KEY, SessionRegistry


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_same_cookie_same_session() -> None:
    registry = SessionRegistry()
    sess: dict = {}

    first = registry.get(sess)
    assert SESSION_KEY in sess
    assert registry.get(sess) is first
    assert len(registry) == 1


def test_unknown_cookie_gets_new_session() -> None:
    registry = SessionRegistry()
    sess = {SESSION_KEY: "forged"}

    registry.get(sess)

    assert sess[SESSION_KEY] != "forged"
    assert len(registry) == 1


def test_cap_evicts_least_recently_used() -> None:
    registry = SessionRegistry(max_sessions=3)
    cookies = [{} for _ in range(3)]
    sessions = [registry.get(sess) for sess in cookies]

    # Первая сессия становится самой свежей
    registry.get(cookies[0])
    registry.get({})

    assert len(registry) == 3
    assert registry.get(cookies[0]) is sessions[0]
    assert registry.get(cookies[2]) is sessions[2]
    assert registry.get(cookies[1]) is not sessions[1]

    for _ in range(50):
        registry.get({})
    assert len(registry) == 3


def test_idle_sessions_expire() -> None:
    clock = FakeClock()
    registry = SessionRegistry(ttl=60, clock=clock)
    idle: dict = {}
    active: dict = {}
    idle_session = registry.get(idle)
    active_session = registry.get(active)

    clock.now = 40
    registry.get(active)
    clock.now = 70

    assert registry.get(active) is active_session
    assert len(registry) == 1
    assert registry.get(idle) is not idle_session
