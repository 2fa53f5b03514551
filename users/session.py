"""Сессия пользователя браузера: текущее состояние и очередь уведомлений"""

from typing import Callable, List

from .notifications import Notification
from .state import AppState


class UserSession:
    """Держит единственное изменяемое значение - текущий AppState"""

    def __init__(self, state: AppState = None):
        self.state = state or AppState()
        self._notifications: List[Notification] = []

    def apply(self, transition: Callable[..., AppState], *args) -> AppState:
        """Применяет переход к текущему состоянию и сохраняет результат"""
        self.state = transition(self.state, *args)
        return self.state

    def notify(self, notification: Notification) -> None:
        self._notifications.append(notification)

    def pop_notifications(self) -> List[Notification]:
        """Забирает накопленные уведомления (показываются один раз)"""
        notifications, self._notifications = self._notifications, []
        return notifications
