"""Realtime (WebSocket) package."""
from src.infrastructure.realtime.connection_manager import ConnectionManager

__all__ = ["ConnectionManager"]
