"""
Connection Manager - canal de eventos em tempo real via WebSocket.

Mantém os clientes conectados ao dashboard de feedback e faz broadcast
de eventos ('new-feedback', 'feedback-updated') para todos eles.
Protocolo: servidor -> cliente. Clientes podem enviar 'ping' para keepalive.
"""
import asyncio
from dataclasses import asdict, dataclass
from typing import Any, Dict, List
from loguru import logger

from src.domain.interfaces import IEventPublisher


@dataclass
class ConnectionStats:
    """Estatísticas do canal."""

    events_published: int = 0
    deliveries_failed: int = 0
    clients_connected: int = 0
    clients_disconnected: int = 0


class ConnectionManager(IEventPublisher):
    """Registro de WebSockets conectados + broadcast de eventos."""

    def __init__(self):
        self._connections: List[Any] = []
        self._lock = asyncio.Lock()
        self._stats = ConnectionStats()

    @property
    def client_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket) -> None:
        """Aceita e registra um cliente."""
        await websocket.accept()
        async with self._lock:
            self._connections.append(websocket)
        self._stats.clients_connected += 1
        logger.info(f"Client connected to feedback channel (total: {self.client_count})")

    async def disconnect(self, websocket) -> None:
        async with self._lock:
            if websocket in self._connections:
                self._connections.remove(websocket)
                self._stats.clients_disconnected += 1
        logger.info(f"Client disconnected from feedback channel (total: {self.client_count})")

    async def publish(self, event: str, data: Dict[str, Any]) -> int:
        """
        Envia {"event": ..., "data": ...} para todos os clientes.

        Clientes cujo envio falha são removidos do registro.

        Returns:
            int: Número de clientes que receberam o evento
        """
        async with self._lock:
            targets = list(self._connections)

        self._stats.events_published += 1
        if not targets:
            logger.debug(f"No clients connected, event '{event}' not delivered")
            return 0

        message = {"event": event, "data": data}
        delivered = 0
        dead = []
        for websocket in targets:
            try:
                await websocket.send_json(message)
                delivered += 1
            except Exception as e:
                logger.warning(f"Failed to deliver '{event}' to client: {e}")
                self._stats.deliveries_failed += 1
                dead.append(websocket)

        for websocket in dead:
            await self.disconnect(websocket)

        logger.debug(f"Event '{event}' delivered to {delivered} client(s)")
        return delivered

    def get_stats(self) -> Dict[str, Any]:
        stats = asdict(self._stats)
        stats["active_connections"] = self.client_count
        return stats
