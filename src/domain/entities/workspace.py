"""
Entity: Workspace
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


@dataclass
class Workspace:
    """Espaço de trabalho que agrupa projetos e membros."""

    id: str
    name: str
    description: Optional[str] = None
    owner: str = "1"
    members: List[dict] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def matches(self, search: str) -> bool:
        """Busca case-insensitive em nome e descrição."""
        needle = search.lower()
        return needle in self.name.lower() or needle in (self.description or "").lower()

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "owner": self.owner,
            "members": list(self.members),
            "projects": list(self.projects),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat()
        }
