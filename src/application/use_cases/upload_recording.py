"""
Use Case: Upload Recording
Recebe uma gravação de tela, salva em disco e registra como vídeo pronto.
"""
from typing import Optional
import uuid
from fastapi import UploadFile
from loguru import logger

from src.domain.entities import OriginalFile, User, Video
from src.domain.interfaces import IVideoRegistry
from src.domain.value_objects import VideoStatus
from src.infrastructure.storage import VideoUploadService

DEFAULT_TITLE = "Untitled Recording"


class UploadRecordingUseCase:
    """Use Case para upload de gravações."""

    def __init__(
        self,
        upload_service: VideoUploadService,
        registry: IVideoRegistry,
        public_prefix: str = "/uploads"
    ):
        """
        Args:
            upload_service: Serviço que valida e grava o arquivo
            registry: Registro dos vídeos enviados
            public_prefix: Prefixo da URL pública dos arquivos
        """
        self.upload_service = upload_service
        self.registry = registry
        self.public_prefix = public_prefix.rstrip("/")

    async def execute(
        self,
        upload_file: UploadFile,
        owner: User,
        title: Optional[str] = None,
        project_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> Video:
        """
        Salva o arquivo e registra o vídeo.

        Raises:
            UploadError: formato não suportado ou arquivo grande demais
            ValidationError: arquivo ausente ou vazio
            StorageError: falha de escrita
        """
        video_id = uuid.uuid4().hex
        logger.info(f"📤 Receiving recording upload: {upload_file.filename} (video_id={video_id})")

        saved = await self.upload_service.save_upload(upload_file, video_id)

        video = Video(
            id=video_id,
            title=(title or "").strip() or DEFAULT_TITLE,
            description=description,
            project=project_id or None,
            owner=owner.id,
            status=VideoStatus.READY,
            original_file=OriginalFile(
                url=f"{self.public_prefix}/{video_id}/{saved.file_path.name}",
                format=saved.get_format(),
                size=saved.size_bytes
            )
        )
        self.registry.add(video)

        logger.info(f"✅ Recording registered: {video.id} ({saved.get_size_mb():.2f} MB)")
        return video
