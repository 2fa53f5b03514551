"""Модели данных пользователей"""

from dataclasses import dataclass
from typing import Any, Optional

from .errors import NetworkError


def parse_user_id(value: Any) -> Optional[int]:
    """Приводит id из ответа API к int

    Мок-API на создание возвращает id строкой ("542"), в списке - числом.

    Args:
        value: Значение поля id из ответа

    Returns:
        Целый id или None, если значение отсутствует или не является числом
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class UserRecord:
    """Запись пользователя в локальном списке

    Attributes:
        id: ID пользователя (из API или назначенный локально)
        first_name: Имя
        last_name: Фамилия
        email: Email (приходит только из списка API)
        avatar: URL аватара (приходит только из списка API)
    """

    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    avatar: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_api(cls, payload: Any, fallback_id: Optional[int] = None) -> "UserRecord":
        """Собирает запись из объекта ответа API

        Args:
            payload: Декодированный JSON-объект пользователя
            fallback_id: ID на случай, если в ответе его нет

        Returns:
            UserRecord

        Raises:
            NetworkError: Если объект не похож на пользователя
        """
        if not isinstance(payload, dict):
            raise NetworkError(f"Ожидался объект пользователя, получено: {type(payload).__name__}")

        first_name = payload.get("first_name")
        last_name = payload.get("last_name")
        if not isinstance(first_name, str) or not isinstance(last_name, str):
            raise NetworkError("В объекте пользователя нет first_name/last_name")

        user_id = parse_user_id(payload.get("id"))
        if user_id is None:
            user_id = fallback_id
        if user_id is None:
            raise NetworkError("В объекте пользователя нет id")

        email = payload.get("email")
        avatar = payload.get("avatar")

        return cls(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email if isinstance(email, str) else None,
            avatar=avatar if isinstance(avatar, str) else None,
        )
