"""Хранилище сессий страницы в памяти процесса

Cookie-сессия FastHTML хранит только случайный ключ, само состояние живет здесь
и пропадает при перезапуске. Число сессий ограничено: неактивные дольше ttl
удаляются, при переполнении вытесняется самая давно использованная.
"""

import logging
import secrets
import time
from collections import OrderedDict
from typing import Callable, Tuple

from users.session import UserSession

logger = logging.getLogger(__name__)

SESSION_KEY = "session_id"


class SessionRegistry:
    """Сопоставляет ключ из cookie-сессии с UserSession"""

    def __init__(
        self,
        max_sessions: int = 1000,
        ttl: float = 3600.0,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Args:
            max_sessions: Максимум одновременно хранимых сессий
            ttl: Время жизни неактивной сессии (секунды)
            clock: Источник времени
        """
        self.max_sessions = max_sessions
        self.ttl = ttl
        self._clock = clock
        # Порядок - от давно использованных к недавним
        self._sessions: "OrderedDict[str, Tuple[UserSession, float]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def _expire(self, now: float) -> None:
        while self._sessions:
            session_id, (_, last_seen) = next(iter(self._sessions.items()))
            if now - last_seen < self.ttl:
                break
            del self._sessions[session_id]
            logger.debug(f"Сессия {session_id[:8]}... удалена по таймауту")

    def get(self, sess) -> UserSession:
        """Возвращает сессию для cookie-сессии, создавая новую при необходимости

        Args:
            sess: Сессия запроса FastHTML (dict-like)

        Returns:
            UserSession
        """
        now = self._clock()
        self._expire(now)

        session_id = sess.get(SESSION_KEY)
        if session_id and session_id in self._sessions:
            session, _ = self._sessions[session_id]
            self._sessions[session_id] = (session, now)
            self._sessions.move_to_end(session_id)
            return session

        while len(self._sessions) >= self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info(f"Сессия {evicted_id[:8]}... вытеснена (лимит {self.max_sessions})")

        session_id = secrets.token_urlsafe(16)
        sess[SESSION_KEY] = session_id
        session = UserSession()
        self._sessions[session_id] = (session, now)
        logger.debug(f"Создана новая сессия {session_id[:8]}...")
        return session
