"""Маршруты страницы управления пользователями"""

import logging
from fasthtml.common import *
from users.commands import UserCommands
from web.config import WebConfig
from web.components import page_layout, users_card, edit_user_modal
from web.sessions import SessionRegistry

logger = logging.getLogger(__name__)


def setup_user_routes(app, config: WebConfig, registry: SessionRegistry, commands: UserCommands):
    """Настраивает маршруты управления пользователями

    Args:
        app: FastHTML приложение
        config: Конфигурация веб-приложения
        registry: Хранилище сессий страницы
        commands: Обработчики команд
    """

    @app.get("/")
    async def users_page(sess):
        """Главная страница: форма, список и диалог редактирования"""
        session = registry.get(sess)

        # Первичная загрузка списка (один раз за сессию)
        await commands.load(session)

        state = session.state
        content = Div(
            users_card(state),
            edit_user_modal(state),
            cls="w-full flex flex-col items-center"
        )

        return page_layout(
            "User Manager",
            content,
            state.menu,
            session.pop_notifications(),
            config.toast_duration_ms
        )

    @app.post("/users/create")
    async def user_create_submit(sess, first_name: str = "", last_name: str = ""):
        """Создание нового пользователя"""
        session = registry.get(sess)
        await commands.create(session, first_name or "", last_name or "")
        return RedirectResponse('/', status_code=303)

    @app.post("/users/{user_id}/edit/open")
    async def user_edit_open(sess, user_id: int):
        """Открытие диалога редактирования"""
        session = registry.get(sess)
        commands.open_edit(session, user_id)
        return RedirectResponse('/', status_code=303)

    @app.post("/users/edit/cancel")
    async def user_edit_cancel(sess):
        """Закрытие диалога без сохранения"""
        session = registry.get(sess)
        commands.cancel_edit(session)
        return RedirectResponse('/', status_code=303)

    @app.post("/users/edit")
    async def user_edit_submit(sess, first_name: str = "", last_name: str = ""):
        """Сохранение изменений пользователя"""
        session = registry.get(sess)
        await commands.commit_edit(session, first_name or "", last_name or "")
        return RedirectResponse('/', status_code=303)

    @app.post("/users/{user_id}/delete")
    async def user_delete(sess, user_id: int):
        """Удаление пользователя (без подтверждения)"""
        session = registry.get(sess)
        await commands.delete(session, user_id)
        return RedirectResponse('/', status_code=303)

    @app.post("/menu/toggle")
    async def menu_toggle(sess):
        """Открытие/закрытие меню в навбаре"""
        commands.toggle_menu(registry.get(sess))
        return RedirectResponse('/', status_code=303)

    @app.post("/menu/close")
    async def menu_close(sess):
        """Выбор пункта меню закрывает его"""
        commands.close_menu(registry.get(sess))
        return RedirectResponse('/', status_code=303)
