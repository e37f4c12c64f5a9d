"""
Serviço de upload de vídeos.
Valida formato/tamanho e salva gravações enviadas em streaming.
"""
from typing import List
from fastapi import UploadFile
from loguru import logger

from src.domain.interfaces import IStorageService
from src.domain.value_objects import UploadedVideoFile
from src.domain.exceptions import (
    FileTooLargeError,
    StorageError,
    UnsupportedFormatError,
    ValidationError
)


class VideoUploadService:
    """Serviço para gerenciar uploads de vídeo."""

    def __init__(
        self,
        storage_service: IStorageService,
        allowed_formats: List[str],
        max_size_bytes: int,
        chunk_size: int = 1024 * 1024
    ):
        self.storage = storage_service
        self.allowed_formats = [fmt.lower() for fmt in allowed_formats]
        self.max_size_bytes = max_size_bytes
        self.chunk_size = chunk_size

    def validate_filename(self, filename: str) -> str:
        """
        Valida a extensão e retorna o nome sanitizado.

        Raises:
            ValidationError: nome vazio
            UnsupportedFormatError: extensão fora da lista permitida
        """
        if not filename:
            raise ValidationError("Video file is required")

        safe_name = self._sanitize_filename(filename)
        extension = "." + safe_name.rsplit(".", 1)[-1].lower() if "." in safe_name else ""
        if extension not in self.allowed_formats:
            raise UnsupportedFormatError(extension or "(none)", self.allowed_formats)
        return safe_name

    async def save_upload(self, upload_file: UploadFile, video_id: str) -> UploadedVideoFile:
        """
        Salva o arquivo enviado no diretório do vídeo.

        Raises:
            FileTooLargeError: arquivo passa de max_size_bytes (o arquivo parcial é removido)
            StorageError: falha de escrita
        """
        safe_filename = self.validate_filename(upload_file.filename or "")
        target_dir = await self.storage.create_upload_directory(video_id)
        file_path = target_dir / safe_filename

        logger.info(f"Saving upload: {safe_filename}")

        total_bytes = 0
        try:
            with open(file_path, 'wb') as f:
                while chunk := await upload_file.read(self.chunk_size):
                    total_bytes += len(chunk)
                    if total_bytes > self.max_size_bytes:
                        raise FileTooLargeError(total_bytes, self.max_size_bytes)
                    f.write(chunk)
        except FileTooLargeError:
            await self.storage.cleanup_directory(target_dir)
            logger.warning(f"Upload rejected (too large): {safe_filename}")
            raise
        except OSError as e:
            await self.storage.cleanup_directory(target_dir)
            logger.error(f"Failed to save upload: {str(e)}")
            raise StorageError(f"Failed to save uploaded file: {str(e)}") from e

        if total_bytes == 0:
            await self.storage.cleanup_directory(target_dir)
            raise ValidationError("Uploaded file is empty")

        logger.info(f"✅ Upload saved: {safe_filename} ({total_bytes} bytes)")

        return UploadedVideoFile(
            file_path=file_path,
            original_filename=upload_file.filename,
            mime_type=upload_file.content_type or 'application/octet-stream',
            size_bytes=total_bytes
        )

    def _sanitize_filename(self, filename: str) -> str:
        """Sanitiza nome do arquivo para prevenir path traversal."""
        safe_name = filename.replace('/', '_').replace('\\', '_')
        dangerous_chars = ['..', '<', '>', ':', '"', '|', '?', '*']
        for char in dangerous_chars:
            safe_name = safe_name.replace(char, '_')
        return safe_name
