"""Form компоненты"""

from fasthtml.common import *
from users.state import AppState


def user_create_form(state: AppState) -> Form:
    """Форма создания пользователя

    Значения берутся из состояния: после ошибки введенное остается в полях,
    после успешного создания поля пустые.
    """
    return Form(
        # Имя
        Div(
            Label("First Name", cls="label"),
            Input(
                type_="text",
                name="first_name",
                value=state.first_name,
                placeholder="George",
                cls="input input-bordered w-full"
            ),
            cls="form-control mb-2"
        ),

        # Фамилия
        Div(
            Label("Last Name", cls="label"),
            Input(
                type_="text",
                name="last_name",
                value=state.last_name,
                placeholder="Bluth",
                cls="input input-bordered w-full"
            ),
            cls="form-control mb-2"
        ),

        # Кнопка отправки
        Button(
            "Login",
            type_="submit",
            cls="btn btn-primary w-full mt-4"
        ),

        method="POST",
        action="/users/create",
        id="create-user-form"
    )
