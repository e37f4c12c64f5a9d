"""Security package."""
from src.infrastructure.security.token_service import InMemoryTokenService

__all__ = ["InMemoryTokenService"]
