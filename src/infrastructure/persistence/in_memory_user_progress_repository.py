"""
Progresso de usuários mantido em memória, indexado por user_id.
"""
import threading
from typing import Dict, Optional

from src.domain.entities import UserProgress
from src.domain.interfaces import IUserProgressRepository


class InMemoryUserProgressRepository(IUserProgressRepository):

    def __init__(self):
        self._items: Dict[str, UserProgress] = {}
        self._lock = threading.RLock()

    def get(self, user_id: str) -> Optional[UserProgress]:
        with self._lock:
            return self._items.get(user_id)

    def save(self, progress: UserProgress) -> UserProgress:
        with self._lock:
            self._items[progress.user_id] = progress
        return progress

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
