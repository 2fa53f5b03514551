"""Состояние страницы и чистые функции переходов

Все функции принимают текущее AppState и возвращают новое, ничего не изменяя.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from .models import UserRecord


class Visibility(str, Enum):
    """Видимость диалога или меню"""
    CLOSED = "closed"
    OPEN = "open"


class LoadStatus(str, Enum):
    """Статус первичной загрузки списка"""
    NOT_STARTED = "not_started"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class IdPolicy(str, Enum):
    """Правило назначения id новым пользователям"""
    COUNT = "count"    # длина списка + 1, как в старом UI (дает дубли после удаления)
    MAX = "max"        # максимальный id + 1
    SERVER = "server"  # id из ответа API, иначе как MAX


@dataclass(frozen=True)
class AppState:
    """Состояние страницы одного пользователя браузера

    Attributes:
        users: Локальная копия списка пользователей (порядок отображения)
        load_status: Статус первичной загрузки
        first_name: Поле "Имя" формы создания
        last_name: Поле "Фамилия" формы создания
        edit_dialog: Видимость диалога редактирования
        edit_user_id: ID редактируемого пользователя
        edited_first_name: Буфер редактирования - имя
        edited_last_name: Буфер редактирования - фамилия
        menu: Видимость меню в навбаре
    """

    users: Tuple[UserRecord, ...] = ()
    load_status: LoadStatus = LoadStatus.NOT_STARTED
    first_name: str = ""
    last_name: str = ""
    edit_dialog: Visibility = Visibility.CLOSED
    edit_user_id: Optional[int] = None
    edited_first_name: str = ""
    edited_last_name: str = ""
    menu: Visibility = Visibility.CLOSED

    def find_user(self, user_id: int) -> Optional[UserRecord]:
        for user in self.users:
            if user.id == user_id:
                return user
        return None


def next_user_id(users: Tuple[UserRecord, ...], policy: IdPolicy, server_id: Optional[int] = None) -> int:
    """Вычисляет id для нового пользователя

    Args:
        users: Текущий список
        policy: Правило назначения
        server_id: ID из ответа API (учитывается только для SERVER)

    Returns:
        Новый id
    """
    if policy == IdPolicy.COUNT:
        return len(users) + 1
    if policy == IdPolicy.SERVER and server_id is not None:
        return server_id
    return max((user.id for user in users), default=0) + 1


# Загрузка списка

def load_started(state: AppState) -> AppState:
    return replace(state, load_status=LoadStatus.LOADING)


def users_loaded(state: AppState, users: Iterable[UserRecord]) -> AppState:
    """Полностью заменяет локальный список ответом API"""
    return replace(state, users=tuple(users), load_status=LoadStatus.LOADED)


def load_failed(state: AppState) -> AppState:
    return replace(state, load_status=LoadStatus.FAILED)


# Форма создания

def form_changed(state: AppState, first_name: str, last_name: str) -> AppState:
    return replace(state, first_name=first_name, last_name=last_name)


def user_created(state: AppState, user: UserRecord) -> AppState:
    """Добавляет пользователя в конец списка и очищает форму"""
    return replace(state, users=state.users + (user,), first_name="", last_name="")


# Редактирование

def edit_opened(state: AppState, user: UserRecord) -> AppState:
    """Заполняет буфер редактирования и открывает диалог"""
    return replace(
        state,
        edit_dialog=Visibility.OPEN,
        edit_user_id=user.id,
        edited_first_name=user.first_name,
        edited_last_name=user.last_name,
    )


def edit_buffer_changed(state: AppState, first_name: str, last_name: str) -> AppState:
    return replace(state, edited_first_name=first_name, edited_last_name=last_name)


def edit_closed(state: AppState) -> AppState:
    return replace(state, edit_dialog=Visibility.CLOSED)


def user_updated(state: AppState, user_id: int, first_name: str, last_name: str) -> AppState:
    """Меняет имя и фамилию пользователя на месте

    Диалог закрывается, только если он все еще открыт для этого же пользователя.
    """
    users = tuple(
        replace(user, first_name=first_name, last_name=last_name) if user.id == user_id else user
        for user in state.users
    )
    if state.edit_user_id != user_id:
        return replace(state, users=users)
    return replace(state, users=users, edit_dialog=Visibility.CLOSED)


# Удаление

def user_deleted(state: AppState, user_id: int) -> AppState:
    return replace(state, users=tuple(user for user in state.users if user.id != user_id))


# Меню

def menu_toggled(state: AppState) -> AppState:
    menu = Visibility.CLOSED if state.menu == Visibility.OPEN else Visibility.OPEN
    return replace(state, menu=menu)


def menu_closed(state: AppState) -> AppState:
    return replace(state, menu=Visibility.CLOSED)
