"""Конфигурация веб-приложения"""

import logging
import os
import secrets
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from users.client import DEFAULT_BASE_URL
from users.state import IdPolicy

load_dotenv()

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes")
FALSE_VALUES = ("false", "0", "no")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    if value.lower() in TRUE_VALUES:
        return True
    if value.lower() in FALSE_VALUES:
        return False
    raise ValueError(f"{name} должен быть true/false, получено: {value}")


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return cast(value)
    except ValueError:
        raise ValueError(f"{name} должен быть числом, получено: {value}") from None


@dataclass
class WebConfig:
    """Конфигурация веб-приложения"""

    # Секретный ключ для сессий
    secret_key: str

    # Базовый адрес API пользователей
    api_base_url: str = DEFAULT_BASE_URL

    # Ключ API (заголовок x-api-key), если нужен
    api_key: Optional[str] = None

    # Таймаут запросов к API (секунды)
    request_timeout: float = 10.0

    # Страница списка, загружаемая при открытии
    users_page: int = 2

    # Правило назначения id новым пользователям
    id_policy: IdPolicy = IdPolicy.MAX

    # Показывать ли ошибку загрузки списка пользователю
    notify_load_errors: bool = True

    # Время показа уведомления (мс)
    toast_duration_ms: int = 3000

    # Лимит сессий страницы в памяти
    max_sessions: int = 1000

    # Время жизни неактивной сессии (секунды)
    session_ttl: float = 3600.0

    # Порт для веб-приложения
    port: int = 8000

    # Host для веб-приложения
    host: str = "0.0.0.0"

    def with_compat(self) -> "WebConfig":
        """Режим совместимости со старым UI: id по длине списка, ошибки загрузки молча"""
        self.id_policy = IdPolicy.COUNT
        self.notify_load_errors = False
        return self

    @classmethod
    def from_env(cls) -> "WebConfig":
        """Загрузить конфигурацию из переменных окружения

        Returns:
            WebConfig с загруженными данными

        Raises:
            ValueError: Если значения переменных некорректны
        """
        # Генерируем secret_key или берем из .env
        secret_key = os.getenv("WEB_SECRET_KEY")
        if not secret_key:
            # Если не указан - генерируем случайный (для dev)
            secret_key = secrets.token_hex(32)
            logger.warning(f"⚠️  WEB_SECRET_KEY не установлен в .env, используется случайный: {secret_key[:16]}...")

        id_policy_value = os.getenv("USERS_ID_POLICY", IdPolicy.MAX.value).lower()
        try:
            id_policy = IdPolicy(id_policy_value)
        except ValueError:
            allowed = ", ".join(policy.value for policy in IdPolicy)
            raise ValueError(f"USERS_ID_POLICY должен быть одним из: {allowed}, получено: {id_policy_value}") from None

        users_page = _env_number("USERS_PAGE", 2, int)
        if users_page < 1:
            raise ValueError(f"USERS_PAGE должен быть >= 1, получено: {users_page}")

        max_sessions = _env_number("WEB_MAX_SESSIONS", 1000, int)
        if max_sessions < 1:
            raise ValueError(f"WEB_MAX_SESSIONS должен быть >= 1, получено: {max_sessions}")

        return cls(
            secret_key=secret_key,
            api_base_url=os.getenv("USERS_API_URL", DEFAULT_BASE_URL),
            api_key=os.getenv("USERS_API_KEY") or None,
            request_timeout=_env_number("USERS_TIMEOUT", 10.0, float),
            users_page=users_page,
            id_policy=id_policy,
            notify_load_errors=_env_bool("USERS_NOTIFY_LOAD_ERRORS", True),
            toast_duration_ms=_env_number("TOAST_DURATION_MS", 3000, int),
            max_sessions=max_sessions,
            session_ttl=_env_number("WEB_SESSION_TTL", 3600.0, float),
            port=_env_number("WEB_PORT", 8000, int),
            host=os.getenv("WEB_HOST", "0.0.0.0"),
        )
