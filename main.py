"""Основной файл запуска веб-приложения User Manager."""

import logging
import argparse

from web.app import serve
from web.config import WebConfig

# Настройка логирования
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# httpx логирует каждый запрос на INFO
logging.getLogger("httpx").setLevel(logging.WARNING)


def main(host: str = None, port: int = None, compat: bool = False):
    """Основная функция запуска.

    Args:
        host: Host веб-сервера (перекрывает WEB_HOST)
        port: Порт веб-сервера (перекрывает WEB_PORT)
        compat: Режим совместимости со старым UI
    """
    logger.info("Запуск User Manager...")

    # Загрузка конфигурации
    try:
        config = WebConfig.from_env()
        logger.info("✅ Конфигурация загружена")
    except ValueError as e:
        logger.error(f"❌ Ошибка конфигурации: {e}")
        return

    if host:
        config.host = host
    if port:
        config.port = port
    if compat:
        config.with_compat()
        logger.warning("⚠️  Режим совместимости: id новых пользователей = длина списка + 1")

    serve(config)


if __name__ == "__main__":
    # Парсинг аргументов командной строки
    parser = argparse.ArgumentParser(
        description="User Manager Web",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python main.py                      # Запуск на WEB_HOST:WEB_PORT из .env
  python main.py --port 5001          # Запуск на другом порту
  python main.py --compat             # Поведение старого UI (id по длине списка)
        """,
    )
    parser.add_argument("--host", help="Host веб-сервера")
    parser.add_argument("--port", type=int, help="Порт веб-сервера")
    parser.add_argument(
        "--compat",
        action="store_true",
        help="Назначать id по длине списка и не показывать ошибку загрузки списка",
    )

    args = parser.parse_args()

    try:
        main(host=args.host, port=args.port, compat=args.compat)
    except KeyboardInterrupt:
        logger.info("⚠️ Остановлено пользователем")
