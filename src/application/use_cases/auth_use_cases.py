"""
Use Case: Autenticação
Login, registro, refresh e logout do usuário demo.
"""
from typing import Optional, Tuple
from loguru import logger

from src.domain.entities import User
from src.domain.exceptions import AuthenticationError, ValidationError
from src.domain.interfaces import ITokenService, TokenPair
from src.infrastructure.demo import DemoCatalog


class AuthUseCase:
    """
    Fluxos de autenticação.

    Qualquer e-mail/senha é aceito: o usuário retornado é sempre o usuário
    demo, com o e-mail (e nomes, no registro) informados pelo cliente.
    """

    def __init__(self, token_service: ITokenService, catalog: DemoCatalog):
        self.token_service = token_service
        self.catalog = catalog

    def login(self, email: Optional[str], password: Optional[str]) -> Tuple[User, TokenPair]:
        if not email or not password:
            raise ValidationError("Email and password required")

        user = self.catalog.demo_user(email)
        tokens = self.token_service.issue(user)
        logger.info(f"🔑 Login: {email}")
        return user, tokens

    def register(
        self,
        email: Optional[str],
        password: Optional[str],
        first_name: Optional[str],
        last_name: Optional[str]
    ) -> Tuple[User, TokenPair]:
        if not all([email, password, first_name, last_name]):
            raise ValidationError("All fields are required")

        user = self.catalog.demo_user(email, first_name, last_name)
        tokens = self.token_service.issue(user)
        logger.info(f"User registered: {email}")
        return user, tokens

    def refresh(self, refresh_token: Optional[str]) -> Tuple[User, TokenPair]:
        if not refresh_token:
            raise AuthenticationError("Refresh token required")
        return self.token_service.refresh(refresh_token)

    def logout(self, access_token: str) -> bool:
        revoked = self.token_service.revoke(access_token)
        logger.info(f"Logout (revoked={revoked})")
        return revoked

    @staticmethod
    def session_payload(user: User, tokens: TokenPair) -> dict:
        """Payload de login/registro/refresh: {user, tokens}."""
        return {"user": user.to_dict(), "tokens": tokens.to_dict()}
