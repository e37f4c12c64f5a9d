"""
Interface: IVideoRegistry
Registro dos vídeos enviados durante a execução do servidor.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Video


class IVideoRegistry(ABC):

    @abstractmethod
    def add(self, video: Video) -> Video:
        """Registra um vídeo enviado."""

    @abstractmethod
    def get(self, video_id: str) -> Optional[Video]:
        """Retorna o vídeo ou None."""

    @abstractmethod
    def list(self) -> List[Video]:
        """Vídeos enviados, mais recentes primeiro."""
