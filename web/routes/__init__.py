"""Web routes for User Manager"""

from .users import setup_user_routes

__all__ = [
    "setup_user_routes",
]
