"""
Interface: IUserProgressRepository
"""
from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import UserProgress


class IUserProgressRepository(ABC):
    """Progresso de onboarding/tutoriais, um registro por usuário."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[UserProgress]:
        pass

    @abstractmethod
    def save(self, progress: UserProgress) -> UserProgress:
        pass
