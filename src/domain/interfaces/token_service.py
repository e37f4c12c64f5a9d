"""
Interface: ITokenService
Emissão e validação de tokens de acesso/refresh.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from src.domain.entities import User


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    expires_in: int

    def to_dict(self) -> dict:
        return {
            "accessToken": self.access_token,
            "refreshToken": self.refresh_token,
            "expiresIn": self.expires_in
        }


class ITokenService(ABC):

    @abstractmethod
    def issue(self, user: User) -> TokenPair:
        """Emite um novo par de tokens para o usuário."""

    @abstractmethod
    def authenticate(self, access_token: str) -> User:
        """Retorna o usuário dono do token. Raises AuthenticationError."""

    @abstractmethod
    def refresh(self, refresh_token: str) -> Tuple[User, TokenPair]:
        """Troca o refresh token por um novo par. Raises AuthenticationError."""

    @abstractmethod
    def revoke(self, access_token: str) -> bool:
        """Revoga o par ao qual o access token pertence."""
