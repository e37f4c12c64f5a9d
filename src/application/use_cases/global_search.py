"""
Use Case: Global Search
Busca case-insensitive em projetos, workspaces e vídeos.
"""
from typing import Dict, List, Optional

from src.domain.interfaces import IVideoRegistry
from src.infrastructure.demo import DemoCatalog

SEARCH_TYPES = ("projects", "workspaces", "videos")
MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 15
MAX_LIMIT = 50


def parse_types(types: Optional[str]) -> List[str]:
    """'projects,videos' -> ['projects', 'videos']; tipos desconhecidos são ignorados."""
    if not types:
        return list(SEARCH_TYPES)
    requested = [t.strip().lower() for t in types.split(",")]
    return [t for t in SEARCH_TYPES if t in requested]


class GlobalSearchUseCase:

    def __init__(self, catalog: DemoCatalog, registry: IVideoRegistry):
        self.catalog = catalog
        self.registry = registry

    def execute(
        self,
        query: Optional[str],
        limit: Optional[int] = None,
        types: Optional[str] = None
    ) -> Dict:
        results = {"projects": [], "workspaces": [], "videos": [], "total": 0}

        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return results

        limit = min(limit or DEFAULT_LIMIT, MAX_LIMIT)
        wanted = parse_types(types)

        if "projects" in wanted:
            results["projects"] = [
                p.to_dict() for p in self.catalog.projects() if p.matches(query)
            ][:limit]
        if "workspaces" in wanted:
            results["workspaces"] = [
                w.to_dict() for w in self.catalog.workspaces() if w.matches(query)
            ][:limit]
        if "videos" in wanted:
            videos = self.registry.list() + self.catalog.videos()
            results["videos"] = [
                v.to_summary_dict() for v in videos if v.matches(query)
            ][:limit]

        results["total"] = sum(len(results[key]) for key in SEARCH_TYPES)
        return results
