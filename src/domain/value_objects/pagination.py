"""
Value Object: Pagination
Metadados de paginação usados nas listagens da API.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """Página solicitada + total de itens disponíveis."""

    page: int = 1
    limit: int = 10
    total: int = 0

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.total < 0:
            raise ValueError("Total cannot be negative")

    @property
    def pages(self) -> int:
        """Número total de páginas (0 quando não há itens)."""
        return math.ceil(self.total / self.limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def slice(self, items: Sequence[T]) -> List[T]:
        """Retorna apenas os itens da página atual."""
        return list(items[self.offset:self.offset + self.limit])

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "pages": self.pages
        }
