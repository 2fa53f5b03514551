"""Обработчики команд: загрузка, создание, редактирование и удаление пользователей

Каждая команда делает не более одного запроса к API, а результат применяет к
состоянию сессии, которое актуально на момент получения ответа.
"""

import logging
from typing import Callable, Optional

from . import notifications as messages
from . import state as transitions
from .client import UsersClient
from .errors import NetworkError, RemoteRejection, ValidationError
from .models import UserRecord, parse_user_id
from .notifications import Notification
from .session import UserSession
from .state import IdPolicy, LoadStatus, Visibility, next_user_id

logger = logging.getLogger(__name__)


def require_names(first_name: str, last_name: str, message: str) -> None:
    """Проверяет, что оба поля заполнены

    Raises:
        ValidationError: Если хотя бы одно поле пустое
    """
    if not first_name or not last_name:
        raise ValidationError(message)


class UserCommands:
    """Команды страницы управления пользователями"""

    def __init__(
        self,
        client_factory: Callable[[], UsersClient],
        page: int = 2,
        id_policy: IdPolicy = IdPolicy.MAX,
        notify_load_errors: bool = True,
    ):
        """
        Args:
            client_factory: Создает новый UsersClient (используется как async with)
            page: Номер загружаемой страницы списка
            id_policy: Правило назначения id созданным пользователям
            notify_load_errors: Показывать ли уведомление при ошибке загрузки списка
        """
        self.client_factory = client_factory
        self.page = page
        self.id_policy = id_policy
        self.notify_load_errors = notify_load_errors

    def _notify(self, session: UserSession, notification: Notification) -> Notification:
        session.notify(notification)
        return notification

    async def load(self, session: UserSession) -> Optional[Notification]:
        """Первичная загрузка списка (выполняется не больше одного раза за сессию)"""
        if session.state.load_status != LoadStatus.NOT_STARTED:
            return None

        session.apply(transitions.load_started)
        try:
            async with self.client_factory() as client:
                users = await client.list_users(page=self.page)
        except NetworkError as e:
            logger.error(f"Ошибка загрузки пользователей: {e}")
            session.apply(transitions.load_failed)
            if self.notify_load_errors:
                return self._notify(session, Notification.error(messages.LOAD_FAILED))
            return None

        session.apply(transitions.users_loaded, users)
        logger.info(f"Загружено пользователей: {len(users)}")
        return None

    async def create(self, session: UserSession, first_name: str, last_name: str) -> Notification:
        """Создает пользователя в API и добавляет его в конец списка"""
        session.apply(transitions.form_changed, first_name, last_name)

        try:
            require_names(first_name, last_name, messages.CREATE_INVALID)
            async with self.client_factory() as client:
                body = await client.create_user(first_name, last_name)
        except ValidationError as e:
            logger.warning(f"Создание пользователя отклонено: {e}")
            return self._notify(session, Notification.error(messages.CREATE_INVALID))
        except NetworkError as e:
            logger.error(f"Ошибка создания пользователя: {e}")
            return self._notify(session, Notification.error(messages.CREATE_FAILED))

        created_first = body.get("first_name")
        created_last = body.get("last_name")
        user = UserRecord(
            id=next_user_id(session.state.users, self.id_policy, parse_user_id(body.get("id"))),
            first_name=created_first if isinstance(created_first, str) else first_name,
            last_name=created_last if isinstance(created_last, str) else last_name,
        )
        session.apply(transitions.user_created, user)

        logger.info(f"Создан пользователь #{user.id}: {user.full_name}")
        return self._notify(session, Notification.success(messages.CREATE_SUCCESS))

    def open_edit(self, session: UserSession, user_id: int) -> bool:
        """Открывает диалог редактирования для пользователя из списка

        Returns:
            True, если пользователь найден и диалог открыт
        """
        user = session.state.find_user(user_id)
        if not user:
            logger.warning(f"Пользователь #{user_id} не найден в списке, диалог не открыт")
            return False

        session.apply(transitions.edit_opened, user)
        return True

    def cancel_edit(self, session: UserSession) -> None:
        session.apply(transitions.edit_closed)

    async def commit_edit(self, session: UserSession, first_name: str, last_name: str) -> Optional[Notification]:
        """Сохраняет изменения из диалога редактирования

        При любой ошибке диалог остается открытым, а буфер сохраняется.
        """
        if session.state.edit_dialog != Visibility.OPEN or session.state.edit_user_id is None:
            logger.warning("Сохранение без открытого диалога редактирования проигнорировано")
            return None

        user_id = session.state.edit_user_id
        session.apply(transitions.edit_buffer_changed, first_name, last_name)

        try:
            require_names(first_name, last_name, messages.UPDATE_INVALID)
            async with self.client_factory() as client:
                await client.update_user(user_id, first_name, last_name)
        except ValidationError as e:
            logger.warning(f"Редактирование пользователя #{user_id} отклонено: {e}")
            return self._notify(session, Notification.error(messages.UPDATE_INVALID))
        except RemoteRejection as e:
            logger.warning(f"API отклонил обновление пользователя #{user_id}: {e}")
            return self._notify(session, Notification.error(messages.UPDATE_REJECTED))
        except NetworkError as e:
            logger.error(f"Ошибка обновления пользователя #{user_id}: {e}")
            return self._notify(session, Notification.error(messages.UPDATE_FAILED))

        session.apply(transitions.user_updated, user_id, first_name, last_name)
        logger.info(f"Обновлен пользователь #{user_id}")
        return self._notify(session, Notification.success(messages.UPDATE_SUCCESS))

    async def delete(self, session: UserSession, user_id: int) -> Notification:
        """Удаляет пользователя в API и из списка (без подтверждения)"""
        try:
            async with self.client_factory() as client:
                await client.delete_user(user_id)
        except RemoteRejection as e:
            logger.warning(f"API отклонил удаление пользователя #{user_id}: {e}")
            return self._notify(session, Notification.error(messages.DELETE_REJECTED))
        except NetworkError as e:
            logger.error(f"Ошибка удаления пользователя #{user_id}: {e}")
            return self._notify(session, Notification.error(messages.DELETE_FAILED))

        session.apply(transitions.user_deleted, user_id)
        logger.info(f"Удален пользователь #{user_id}")
        return self._notify(session, Notification.success(messages.DELETE_SUCCESS))

    def toggle_menu(self, session: UserSession) -> None:
        session.apply(transitions.menu_toggled)

    def close_menu(self, session: UserSession) -> None:
        session.apply(transitions.menu_closed)
