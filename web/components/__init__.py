"""UI компоненты для FastHTML приложения"""

from .layout import page_layout, navbar
from .tables import user_list, user_row, get_fallback_avatar_url
from .forms import user_create_form
from .cards import card, users_card
from .modals import edit_user_modal
from .notifications import toast, toast_container

__all__ = [
    # Layout
    "page_layout",
    "navbar",
    # Tables
    "user_list",
    "user_row",
    "get_fallback_avatar_url",
    # Forms
    "user_create_form",
    # Cards
    "card",
    "users_card",
    # Modals
    "edit_user_modal",
    # Notifications
    "toast",
    "toast_container",
]
