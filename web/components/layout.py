"""Layout компоненты - navbar, page_layout"""

from typing import Any, List
from fasthtml.common import *
from users.state import Visibility
from users.notifications import Notification
from .notifications import toast_container

MENU_ITEMS = ("Employee", "Customer")


def navbar(menu: Visibility) -> Div:
    """Навигационная панель с выпадающим меню"""
    # Меню раскрывается по состоянию, а не по фокусу
    menu_list = Ul(
        *[
            Li(
                Form(
                    Button(item, type_="submit", cls="w-full text-left"),
                    method="POST",
                    action="/menu/close"
                )
            )
            for item in MENU_ITEMS
        ],
        cls="menu menu-sm dropdown-content mt-3 z-[1] p-2 shadow bg-base-100 rounded-box w-52 text-base-content",
        id="main-menu"
    ) if menu == Visibility.OPEN else None

    return Div(
        Div(
            # Кнопка меню
            Div(
                Form(
                    Button("☰", type_="submit", cls="btn btn-ghost btn-square", aria_label="menu"),
                    method="POST",
                    action="/menu/toggle"
                ),
                menu_list,
                cls="dropdown dropdown-open" if menu == Visibility.OPEN else "dropdown"
            ),
            Div(
                Span("Hey", cls="text-xl font-semibold ml-2"),
                cls="flex-1"
            ),
            Div(
                Button("Login", type_="button", cls="btn btn-ghost"),
                cls="flex-none"
            ),
            cls="navbar bg-primary text-primary-content shadow-lg"
        ),
        cls="mb-0"
    )


def page_layout(
    title: str,
    content: Any,
    menu: Visibility,
    notifications: List[Notification],
    toast_duration_ms: int = 3000
) -> Html:
    """Общий layout страницы"""
    return Html(
        Head(
            Meta(charset="utf-8"),
            Meta(name="viewport", content="width=device-width, initial-scale=1"),
            Title(title),
            Script(src="https://cdn.tailwindcss.com"),
            Link(href="https://cdn.jsdelivr.net/npm/daisyui@4/dist/full.min.css", rel="stylesheet", type_="text/css"),
        ),
        Body(
            navbar(menu),
            Main(
                content,
                cls="container mx-auto px-4 py-4 min-h-screen bg-base-200 flex flex-col items-center justify-center"
            ),
            toast_container(notifications, toast_duration_ms),
            data_theme="light"
        )
    )
