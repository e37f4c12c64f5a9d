"""
Entity: Template
"""
from dataclasses import dataclass, field
from typing import List

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Template:
    """Template de edição de vídeo."""

    id: str
    name: str
    description: str
    category: str
    thumbnail: str
    features: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    rating: float = 0.0
    views: int = 0
    downloads: int = 0
    template_data: dict = field(default_factory=dict)

    @property
    def is_featured(self) -> bool:
        return self.rating >= 4.5

    def matches(self, search: str) -> bool:
        """Busca case-insensitive em nome, descrição, features e tags."""
        needle = search.lower()
        haystack = [self.name, self.description, *self.features, *self.tags]
        return any(needle in value.lower() for value in haystack)

    def to_dict(self, include_data: bool = False) -> dict:
        data = {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "thumbnail": self.thumbnail,
            "features": list(self.features),
            "tags": list(self.tags),
            "rating": self.rating,
            "views": self.views,
            "downloads": self.downloads
        }
        if include_data:
            data["templateData"] = self.template_data
        return data
