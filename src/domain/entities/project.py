"""
Entity: Project
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Union


@dataclass
class Project:
    """Projeto: conjunto de vídeos e documentos de um workspace."""

    id: str
    name: str
    description: Optional[str] = None
    workspace: Union[str, dict, None] = None
    owner: str = "1"
    videos: List[str] = field(default_factory=list)
    documents: List[str] = field(default_factory=list)
    collaborators: List[dict] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def workspace_name(self) -> Optional[str]:
        if isinstance(self.workspace, dict):
            return self.workspace.get("name")
        return None

    def matches(self, search: str) -> bool:
        """Busca case-insensitive em nome e descrição."""
        needle = search.lower()
        return needle in self.name.lower() or needle in (self.description or "").lower()

    def to_dict(self, include_documents: bool = False) -> dict:
        data = {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "workspace": self.workspace,
            "owner": self.owner,
            "videos": list(self.videos),
            "collaborators": list(self.collaborators),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat()
        }
        if include_documents:
            data["documents"] = list(self.documents)
        return data
