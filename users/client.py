"""Клиент для работы с REST API коллекции пользователей."""

import logging
from typing import Any, List, Optional

import httpx

from .errors import NetworkError, RemoteRejection
from .models import UserRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://reqres.in/api"


class UsersClient:
    """Обертка над httpx.AsyncClient для ресурса /users."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
    ):
        """
        Инициализация клиента.

        Args:
            base_url: Базовый адрес API (без завершающего /)
            api_key: Значение заголовка x-api-key (если API его требует)
            timeout: Таймаут запроса в секундах
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Асинхронный вход в контекстный менеджер."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Асинхронный выход из контекстного менеджера."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Получение экземпляра httpx.AsyncClient."""
        if not self._client:
            raise RuntimeError("Клиент не инициализирован. Используйте 'async with'")
        return self._client

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Отправляет запрос, превращая ошибки транспорта в NetworkError"""
        try:
            return await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {path}: {e}") from e

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Не удалось разобрать ответ {response.request.url}: {e}") from e

    async def list_users(self, page: int = 2) -> List[UserRecord]:
        """Получает страницу пользователей

        Args:
            page: Номер страницы

        Returns:
            Пользователи в порядке ответа API

        Raises:
            NetworkError: Ошибка сети или ответ без массива data
        """
        response = await self._send("GET", "/users", params={"page": page})
        body = self._decode(response)

        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise NetworkError("В ответе нет массива data")

        users = [
            UserRecord.from_api(item, fallback_id=position + 1)
            for position, item in enumerate(body["data"])
        ]
        logger.debug(f"Загружено {len(users)} пользователей (page={page})")
        return users

    async def create_user(self, first_name: str, last_name: str) -> dict:
        """Создает пользователя

        Статус ответа не проверяется: успехом считается любое JSON-тело.

        Args:
            first_name: Имя
            last_name: Фамилия

        Returns:
            Декодированный JSON-объект ответа

        Raises:
            NetworkError: Ошибка сети или тело ответа не является JSON-объектом
        """
        response = await self._send(
            "POST",
            "/users",
            json={"first_name": first_name, "last_name": last_name},
        )
        body = self._decode(response)

        if not isinstance(body, dict):
            raise NetworkError("Ответ на создание пользователя не является объектом")

        if response.is_error:
            logger.warning(f"Создание пользователя вернуло HTTP {response.status_code}, тело принято как есть")
        return body

    async def update_user(self, user_id: int, first_name: str, last_name: str) -> None:
        """Обновляет имя и фамилию пользователя

        Raises:
            NetworkError: Ошибка сети
            RemoteRejection: Статус ответа не 2xx
        """
        response = await self._send(
            "PUT",
            f"/users/{user_id}",
            json={"first_name": first_name, "last_name": last_name},
        )
        if not response.is_success:
            raise RemoteRejection(response.status_code)

    async def delete_user(self, user_id: int) -> None:
        """Удаляет пользователя

        Raises:
            NetworkError: Ошибка сети
            RemoteRejection: Статус ответа не 2xx
        """
        response = await self._send("DELETE", f"/users/{user_id}")
        if not response.is_success:
            raise RemoteRejection(response.status_code)
