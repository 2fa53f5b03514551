"""Всплывающие уведомления (тосты)"""

from typing import List
from fasthtml.common import *
from users.notifications import Notification, NotificationLevel

ALERT_CLASSES = {
    NotificationLevel.SUCCESS: "alert-success",
    NotificationLevel.ERROR: "alert-error",
}


def toast(notification: Notification) -> Div:
    """Один тост"""
    return Div(
        Span(notification.text),
        cls=f"alert {ALERT_CLASSES.get(notification.level, 'alert-info')} shadow-lg"
    )


def toast_container(notifications: List[Notification], duration_ms: int = 3000) -> Div:
    """Контейнер тостов в правом верхнем углу, скрывается через duration_ms"""
    if not notifications:
        return Div(id="toast-container")

    return Div(
        *[toast(notification) for notification in notifications],
        # Автоскрытие
        Script(f"""
            setTimeout(function() {{
                var container = document.getElementById('toast-container');
                if (container) {{ container.remove(); }}
            }}, {int(duration_ms)});
        """),
        cls="toast toast-top toast-end z-50",
        id="toast-container"
    )
