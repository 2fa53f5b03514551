"""Всплывающие уведомления для пользователя"""

from dataclasses import dataclass
from enum import Enum


class NotificationLevel(str, Enum):
    """Тип уведомления"""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Уведомление, которое показывается тостом

    Attributes:
        level: Тип (success/error)
        text: Текст для пользователя
    """

    level: NotificationLevel
    text: str

    @classmethod
    def success(cls, text: str) -> "Notification":
        return cls(NotificationLevel.SUCCESS, text)

    @classmethod
    def error(cls, text: str) -> "Notification":
        return cls(NotificationLevel.ERROR, text)


# Тексты уведомлений
LOAD_FAILED = "Error fetching users!"
CREATE_INVALID = "Enter both First and Last Name!"
CREATE_SUCCESS = "User added successfully!"
CREATE_FAILED = "Failed to add user!"
UPDATE_INVALID = "Both fields are required!"
UPDATE_SUCCESS = "User updated successfully!"
UPDATE_REJECTED = "Failed to update user!"
UPDATE_FAILED = "Error updating user!"
DELETE_SUCCESS = "User deleted successfully!"
DELETE_REJECTED = "Failed to delete user!"
DELETE_FAILED = "Error deleting user!"
