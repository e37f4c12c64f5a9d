"""
Interface: IEventPublisher
Canal de publicação de eventos em tempo real (publish/subscribe).
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class IEventPublisher(ABC):

    @abstractmethod
    async def publish(self, event: str, data: Dict[str, Any]) -> int:
        """
        Envia o evento para todos os inscritos.

        Returns:
            int: Número de clientes que receberam o evento
        """
