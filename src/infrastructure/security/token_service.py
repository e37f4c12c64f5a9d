"""
Token Service - tokens opacos de acesso/refresh mantidos em memória.

Não há JWT nem banco: cada token é um valor aleatório registrado junto com
o usuário e a data de expiração. O refresh rotaciona o par inteiro.
"""
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple
from loguru import logger

from src.domain.entities import User
from src.domain.exceptions import AuthenticationError
from src.domain.interfaces import ITokenService, TokenPair


@dataclass
class _Grant:
    user: User
    access_token: str
    refresh_token: str
    access_expires_at: float
    refresh_expires_at: float


class InMemoryTokenService(ITokenService):
    """Emissão, validação, refresh e revogação de tokens."""

    def __init__(
        self,
        access_ttl_seconds: int = 15 * 60,
        refresh_ttl_seconds: int = 7 * 24 * 3600,
        clock: Callable[[], float] = time.time
    ):
        self.access_ttl_seconds = access_ttl_seconds
        self.refresh_ttl_seconds = refresh_ttl_seconds
        self._clock = clock
        self._by_access: Dict[str, _Grant] = {}
        self._by_refresh: Dict[str, _Grant] = {}
        self._lock = threading.RLock()

    def issue(self, user: User) -> TokenPair:
        now = self._clock()
        grant = _Grant(
            user=user,
            access_token=f"mock-access-{secrets.token_urlsafe(24)}",
            refresh_token=f"mock-refresh-{secrets.token_urlsafe(24)}",
            access_expires_at=now + self.access_ttl_seconds,
            refresh_expires_at=now + self.refresh_ttl_seconds
        )
        with self._lock:
            self._purge_expired(now)
            self._by_access[grant.access_token] = grant
            self._by_refresh[grant.refresh_token] = grant
        logger.debug(f"Tokens issued for user {user.id}")
        return TokenPair(grant.access_token, grant.refresh_token, self.access_ttl_seconds)

    def authenticate(self, access_token: str) -> User:
        with self._lock:
            grant = self._by_access.get(access_token)
        if grant is None:
            raise AuthenticationError("Invalid token")
        if self._clock() >= grant.access_expires_at:
            raise AuthenticationError("Token expired")
        return grant.user

    def refresh(self, refresh_token: str) -> Tuple[User, TokenPair]:
        with self._lock:
            grant = self._by_refresh.get(refresh_token)
            if grant is None:
                raise AuthenticationError("Invalid refresh token")
            self._drop(grant)
        if self._clock() >= grant.refresh_expires_at:
            raise AuthenticationError("Refresh token expired")
        logger.info(f"Tokens refreshed for user {grant.user.id}")
        return grant.user, self.issue(grant.user)

    def revoke(self, access_token: str) -> bool:
        with self._lock:
            grant = self._by_access.get(access_token)
            if grant is None:
                return False
            self._drop(grant)
        return True

    @property
    def active_grants(self) -> int:
        with self._lock:
            return len(self._by_refresh)

    def _purge_expired(self, now: float) -> None:
        """Remove grants em que os dois tokens já expiraram."""
        expired = [
            g for g in self._by_refresh.values()
            if now >= max(g.access_expires_at, g.refresh_expires_at)
        ]
        for grant in expired:
            self._drop(grant)
        if expired:
            logger.debug(f"Purged {len(expired)} expired token grants")

    def _drop(self, grant: _Grant) -> None:
        self._by_access.pop(grant.access_token, None)
        self._by_refresh.pop(grant.refresh_token, None)
