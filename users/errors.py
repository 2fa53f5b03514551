"""Исключения для работы с пользователями"""

from typing import Optional


class UsersError(Exception):
    """Базовое исключение модуля users"""


class ValidationError(UsersError):
    """Не заполнены обязательные поля формы (до сетевого запроса не доходит)"""


class NetworkError(UsersError):
    """Ошибка транспорта или не удалось разобрать ответ API"""


class RemoteRejection(UsersError):
    """API ответил статусом, отличным от 2xx"""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")
