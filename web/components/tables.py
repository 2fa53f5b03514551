"""Список пользователей"""

from typing import Sequence
from urllib.parse import quote
from fasthtml.common import *
from users.models import UserRecord


def get_fallback_avatar_url(display_name: str) -> str:
    """Получает fallback URL аватара через ui-avatars.com

    Args:
        display_name: Имя пользователя

    Returns:
        URL аватара
    """
    return f"https://ui-avatars.com/api/?name={quote(display_name)}&background=random"


def user_row(user: UserRecord) -> Div:
    """Строка списка: аватар, имя и кнопки редактирования/удаления"""
    avatar_url = user.avatar or get_fallback_avatar_url(user.full_name)

    return Div(
        Div(
            Div(
                Div(Img(src=avatar_url, alt=user.full_name), cls="w-8 rounded-full"),
                cls="avatar"
            ),
            Span(f"{user.first_name} {user.last_name} - ID: {user.id}"),
            cls="flex items-center gap-3"
        ),
        Div(
            Form(
                Button("✏️", type_="submit", title="Edit User", cls="btn btn-ghost btn-sm text-primary"),
                method="POST",
                action=f"/users/{user.id}/edit/open"
            ),
            Form(
                Button("🗑️", type_="submit", title="Delete User", cls="btn btn-ghost btn-sm text-error"),
                method="POST",
                action=f"/users/{user.id}/delete"
            ),
            cls="flex gap-1"
        ),
        cls="flex justify-between items-center mb-2",
        id=f"user-{user.id}"
    )


def user_list(users: Sequence[UserRecord]) -> Div:
    """Прокручиваемый список пользователей"""
    if not users:
        return Div(
            P("No users yet", cls="text-center py-8 text-gray-500"),
            id="user-list"
        )

    return Div(
        *[user_row(user) for user in users],
        cls="max-h-60 overflow-y-auto p-2",
        id="user-list"
    )
