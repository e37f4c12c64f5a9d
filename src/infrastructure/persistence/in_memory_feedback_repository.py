"""
Repositório de feedbacks em memória.
Thread-safe; a ordem de inserção define "mais recente".
"""
import threading
from collections import OrderedDict
from typing import List, Optional
from loguru import logger

from src.domain.entities import Feedback, FeedbackStatus, FeedbackType
from src.domain.interfaces import IFeedbackRepository


class InMemoryFeedbackRepository(IFeedbackRepository):
    """Feedbacks mantidos em um OrderedDict protegido por RLock."""

    def __init__(self):
        self._items: "OrderedDict[str, Feedback]" = OrderedDict()
        self._lock = threading.RLock()

    def add(self, feedback: Feedback) -> Feedback:
        with self._lock:
            self._items[feedback.id] = feedback
        logger.debug(f"Feedback stored: {feedback.id}")
        return feedback

    def get(self, feedback_id: str) -> Optional[Feedback]:
        with self._lock:
            return self._items.get(feedback_id)

    def update_status(self, feedback_id: str, status: FeedbackStatus) -> Optional[Feedback]:
        with self._lock:
            feedback = self._items.get(feedback_id)
            if feedback is None:
                return None
            feedback.change_status(status)
            return feedback

    def find(
        self,
        status: Optional[FeedbackStatus] = None,
        feedback_type: Optional[FeedbackType] = None
    ) -> List[Feedback]:
        with self._lock:
            items = list(reversed(self._items.values()))
        if status is not None:
            items = [f for f in items if f.status == status]
        if feedback_type is not None:
            items = [f for f in items if f.type == feedback_type]
        return items

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
