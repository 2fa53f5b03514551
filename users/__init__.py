"""User Manager - синхронизация локального списка пользователей с удаленным API."""

from .client import UsersClient
from .commands import UserCommands
from .models import UserRecord
from .state import AppState, IdPolicy, LoadStatus, Visibility

__all__ = [
    "UsersClient",
    "UserCommands",
    "UserRecord",
    "AppState",
    "IdPolicy",
    "LoadStatus",
    "Visibility",
]
