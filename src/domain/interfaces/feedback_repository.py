"""
Interface: IFeedbackRepository
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Feedback, FeedbackStatus, FeedbackType


class IFeedbackRepository(ABC):
    """Armazenamento de feedbacks."""

    @abstractmethod
    def add(self, feedback: Feedback) -> Feedback:
        """Persiste um novo feedback."""

    @abstractmethod
    def get(self, feedback_id: str) -> Optional[Feedback]:
        """Retorna o feedback ou None."""

    @abstractmethod
    def update_status(self, feedback_id: str, status: FeedbackStatus) -> Optional[Feedback]:
        """Atualiza o status; None se o feedback não existir."""

    @abstractmethod
    def find(
        self,
        status: Optional[FeedbackStatus] = None,
        feedback_type: Optional[FeedbackType] = None
    ) -> List[Feedback]:
        """Feedbacks que casam com os filtros, mais recentes primeiro."""

    @abstractmethod
    def count(self) -> int:
        """Total de feedbacks armazenados."""
