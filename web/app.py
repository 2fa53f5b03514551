"""Основное веб-приложение FastHTML для User Manager"""

import logging
from typing import Optional
from fasthtml.common import *
from users.client import UsersClient
from users.commands import UserCommands
from web.config import WebConfig
from web.sessions import SessionRegistry

logger = logging.getLogger(__name__)


def create_app(config: WebConfig) -> FastHTML:
    """Создает FastHTML приложение и регистрирует маршруты

    Args:
        config: Конфигурация веб-приложения

    Returns:
        FastHTML приложение
    """
    app = FastHTML(secret_key=config.secret_key)

    registry = SessionRegistry(max_sessions=config.max_sessions, ttl=config.session_ttl)
    commands = UserCommands(
        client_factory=lambda: UsersClient(
            base_url=config.api_base_url,
            api_key=config.api_key,
            timeout=config.request_timeout,
        ),
        page=config.users_page,
        id_policy=config.id_policy,
        notify_load_errors=config.notify_load_errors,
    )

    # Импортируем маршруты
    from web.routes import setup_user_routes

    # Регистрируем маршруты
    setup_user_routes(app, config, registry, commands)

    @app.get("/health")
    def health():
        """Health check endpoint"""
        return {"status": "ok", "service": "User Manager Web"}

    app.state.registry = registry
    return app


def serve(config: Optional[WebConfig] = None):
    """Запуск веб-сервера"""
    config = config or WebConfig.from_env()
    app = create_app(config)

    logger.info(f"🚀 Запуск веб-приложения на http://{config.host}:{config.port}")
    logger.info(f"🔗 API пользователей: {config.api_base_url} (id policy: {config.id_policy.value})")

    import uvicorn
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="info",
        timeout_keep_alive=5,
    )


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    serve()
