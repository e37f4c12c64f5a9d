"""
Use Cases: Video Catalog
Listagem, detalhe e exportação de vídeos (demo + gravações enviadas).
"""
from typing import Dict, List, Optional
import uuid
from loguru import logger

from src.domain.entities import Video
from src.domain.exceptions import ValidationError
from src.domain.interfaces import IVideoRegistry
from src.domain.value_objects import Pagination, VideoStatus
from src.infrastructure.demo import DemoCatalog

EXPORT_ESTIMATED_TIME = "2-3 minutes"


class VideoCatalogUseCase:

    def __init__(self, catalog: DemoCatalog, registry: IVideoRegistry):
        self.catalog = catalog
        self.registry = registry

    def all_videos(self) -> List[Video]:
        """Gravações enviadas (mais recentes primeiro) seguidas dos vídeos demo."""
        return self.registry.list() + self.catalog.videos()

    def list_videos(
        self,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        project_id: Optional[str] = None
    ) -> Dict:
        videos = self.all_videos()

        if status and status.lower() != "all":
            try:
                wanted = VideoStatus(status.lower())
            except ValueError:
                allowed = ", ".join(s.value for s in VideoStatus)
                raise ValidationError(f"Invalid status '{status}'. Allowed: {allowed}")
            videos = [v for v in videos if v.status == wanted]

        if project_id:
            videos = [v for v in videos if v.project == project_id]

        pagination = Pagination(page=page, limit=limit, total=len(videos))
        return {
            "data": [v.to_summary_dict() for v in pagination.slice(videos)],
            "pagination": pagination.to_dict()
        }

    def get_video(self, video_id: str) -> Video:
        uploaded = self.registry.get(video_id)
        if uploaded is not None:
            return uploaded
        return self.catalog.video_detail(video_id)

    def get_progress(self, video_id: str) -> Dict:
        """Estágio e progresso de processamento (placeholder, sem pipeline real)."""
        video = self.registry.get(video_id) or next(
            (v for v in self.catalog.videos() if v.id == video_id),
            None
        ) or self.catalog.video_detail(video_id)
        return {"processing": video.processing.to_dict(), "status": video.status.value}

    def request_export(self, video_id: str, export_format: str, quality: str) -> Dict:
        """Simula o enfileiramento de uma exportação."""
        export_id = f"export_{uuid.uuid4().hex[:12]}"
        logger.info(f"Export requested: video={video_id} format={export_format} quality={quality}")
        return {
            "exportId": export_id,
            "videoId": video_id,
            "status": "processing",
            "format": export_format,
            "quality": quality,
            "estimatedTime": EXPORT_ESTIMATED_TIME
        }
