"""
Entity: User
Usuário autenticado (sempre o usuário demo no servidor mock).
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone

VALID_ROLES = ("owner", "admin", "editor", "viewer")


@dataclass
class User:
    """Entidade que representa um usuário."""

    id: str
    email: str
    first_name: str
    last_name: str
    role: str = "owner"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.role not in VALID_ROLES:
            raise ValueError(f"Role must be one of {VALID_ROLES}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        """Converte para o formato de resposta da API."""
        return {
            "_id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role
        }
