"""Card компоненты"""

from fasthtml.common import *
from users.state import AppState
from .forms import user_create_form
from .tables import user_list


def card(title: str, *content) -> Div:
    """Card компонент"""
    return Div(
        Div(
            H2(title, cls="card-title justify-center"),
            *content,
            cls="card-body"
        ),
        cls="card bg-base-100 shadow-xl"
    )


def users_card(state: AppState) -> Div:
    """Основная карточка: форма создания и история"""
    return Div(
        card(
            "Login",
            user_create_form(state),
            H2("Login History", cls="card-title justify-center mt-6"),
            user_list(state.users),
        ),
        cls="w-full md:w-1/2 min-h-[400px]"
    )
