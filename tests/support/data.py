"""Тестовые ответы API пользователей"""

TEST_BASE_URL = "https://reqres.test/api"

SCENARIO_USERS = [
    {"id": 1, "first_name": "George", "last_name": "Bluth"},
    {"id": 2, "first_name": "Janet", "last_name": "Weaver"},
]

PAGE_TWO = {
    "page": 2,
    "per_page": 6,
    "total": 12,
    "total_pages": 2,
    "data": [
        {
            "id": 7,
            "email": "michael.lawson@reqres.in",
            "first_name": "Michael",
            "last_name": "Lawson",
            "avatar": "https://reqres.in/img/faces/7-image.jpg",
        },
        {
            "id": 8,
            "email": "lindsay.ferguson@reqres.in",
            "first_name": "Lindsay",
            "last_name": "Ferguson",
            "avatar": "https://reqres.in/img/faces/8-image.jpg",
        },
        {
            "id": 9,
            "email": "tobias.funke@reqres.in",
            "first_name": "Tobias",
            "last_name": "Funke",
            "avatar": "https://reqres.in/img/faces/9-image.jpg",
        },
    ],
}


def created_body(first_name: str, last_name: str, user_id: str = "542") -> dict:
    """Ответ мок-API на POST /users"""
    return {
        "first_name": first_name,
        "last_name": last_name,
        "id": user_id,
        "createdAt": "2026-10-19T10:00:00.000Z",
    }
