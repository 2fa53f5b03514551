"""Модальные окна"""

from fasthtml.common import *
from users.state import AppState, Visibility


def edit_user_modal(state: AppState) -> Div:
    """Диалог редактирования пользователя

    Открыт, пока state.edit_dialog == OPEN. Поля заполняются из буфера
    редактирования, поэтому после неудачного сохранения введенное не теряется.
    """
    is_open = state.edit_dialog == Visibility.OPEN

    return Div(
        Dialog(
            Div(
                # Заголовок
                Div(
                    H3("Edit User", cls="font-bold text-lg"),
                    cls="relative mb-4"
                ),

                # Форма
                Form(
                    Div(
                        Label("First Name", cls="label"),
                        Input(
                            type_="text",
                            name="first_name",
                            value=state.edited_first_name,
                            cls="input input-bordered w-full"
                        ),
                        cls="form-control mb-3"
                    ),
                    Div(
                        Label("Last Name", cls="label"),
                        Input(
                            type_="text",
                            name="last_name",
                            value=state.edited_last_name,
                            cls="input input-bordered w-full"
                        ),
                        cls="form-control mb-3"
                    ),

                    # Кнопки действий
                    Div(
                        Button(
                            "Cancel",
                            type_="submit",
                            formaction="/users/edit/cancel",
                            cls="btn btn-ghost btn-sm"
                        ),
                        Button("Save", type_="submit", cls="btn btn-primary btn-sm"),
                        cls="flex justify-end gap-2"
                    ),

                    method="POST",
                    action="/users/edit",
                    id="edit-user-form"
                ),

                cls="modal-box"
            ),
            # Backdrop - клик вне окна закрывает диалог
            Form(
                Button(type_="submit", cls="cursor-default"),
                method="POST",
                action="/users/edit/cancel",
                cls="modal-backdrop"
            ),
            open=is_open,
            id="edit-user-modal",
            cls="modal modal-open" if is_open else "modal"
        ),
        id="edit-modal-container"
    )
