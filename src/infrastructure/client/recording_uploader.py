"""
Upload de gravações de tela para a API.
"""
from datetime import datetime
from typing import Any, Dict, Optional
from loguru import logger

from src.domain.entities import RecordingSession, RecordingState
from src.domain.exceptions import ApiError, AuthenticationError, NetworkError, UploadError
from src.infrastructure.client.api_client import CluesoApiClient, ProgressCallback


def upload_filename(now: datetime) -> str:
    """screen-recording-<epoch-ms>.webm"""
    return f"screen-recording-{int(now.timestamp() * 1000)}.webm"


def upload_title(now: datetime) -> str:
    return f"Screen Recording {now.strftime('%Y-%m-%d %H:%M:%S')}"


class RecordingUploader:
    """
    Envia o resultado de uma RecordingSession finalizada.

    Em caso de falha a sessão não é alterada (o blob continua disponível
    para nova tentativa ou download). Em caso de sucesso a sessão é descartada.
    """

    def __init__(self, api_client: CluesoApiClient):
        self.api_client = api_client

    def upload(
        self,
        session: RecordingSession,
        project_id: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
        now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Returns:
            dict: vídeo criado pela API

        Raises:
            UploadError: sessão sem gravação ou falha no envio
        """
        blob = session.result
        if session.state != RecordingState.STOPPED or blob is None:
            raise UploadError("No finished recording to upload")

        now = now or datetime.now()
        filename = upload_filename(now)
        try:
            video = self.api_client.upload_video(
                blob.data,
                filename,
                upload_title(now),
                project_id=project_id,
                mime_type=blob.mime_type,
                on_progress=on_progress
            )
        except (ApiError, AuthenticationError, NetworkError) as e:
            logger.error(f"❌ Recording upload failed: {e.message}")
            raise UploadError(f"Upload failed: {e.message}") from e

        session.discard()
        logger.info(f"✅ Recording uploaded: {filename}")
        return video
