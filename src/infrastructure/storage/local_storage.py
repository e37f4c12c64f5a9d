"""
Storage Service Implementation.
Gerencia o diretório de uploads de gravações com limpeza de itens antigos.
"""
import asyncio
import shutil
import time
from pathlib import Path
from typing import List
from loguru import logger

from src.domain.interfaces import IStorageService
from src.domain.exceptions import StorageError


class LocalStorageService(IStorageService):
    """
    Serviço de armazenamento local para gravações enviadas.
    Cada vídeo ganha um subdiretório próprio: <upload_dir>/<video_id>/<arquivo>.
    """

    def __init__(self, upload_dir: str = "./uploads"):
        """
        Inicializa o serviço de storage.

        Args:
            upload_dir: Diretório base dos uploads
        """
        self._base_dir = Path(upload_dir)
        self._base_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Storage service initialized: {self._base_dir}")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    async def create_upload_directory(self, video_id: str) -> Path:
        """
        Cria o diretório de um vídeo.

        Raises:
            StorageError: Se não conseguir criar o diretório
        """
        target = self._base_dir / video_id
        try:
            await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
            logger.debug(f"Created upload directory: {target}")
            return target
        except OSError as e:
            logger.error(f"Failed to create upload directory: {str(e)}")
            raise StorageError(f"Failed to create upload directory: {str(e)}") from e

    async def cleanup_old_files(self, max_age_hours: int = 24) -> int:
        """
        Remove arquivos/diretórios modificados há mais de max_age_hours.

        Returns:
            int: Número de itens removidos
        """
        logger.info(f"Starting upload cleanup: max_age={max_age_hours}h")

        if not self._base_dir.exists():
            return 0

        cutoff = time.time() - max_age_hours * 3600
        removed_count = 0

        try:
            items = list(self._base_dir.iterdir())
        except OSError as e:
            raise StorageError(f"Failed to cleanup old files: {str(e)}") from e

        for item in items:
            try:
                if item.stat().st_mtime >= cutoff:
                    continue
                if item.is_dir():
                    await asyncio.to_thread(shutil.rmtree, item)
                else:
                    item.unlink()
                removed_count += 1
                logger.debug(f"Removed old upload: {item.name}")
            except OSError as e:
                logger.warning(f"Failed to remove {item}: {str(e)}")

        logger.info(f"Cleanup completed: {removed_count} items removed")
        return removed_count

    async def cleanup_directory(self, directory: Path) -> bool:
        """Remove um diretório específico e todo seu conteúdo."""
        if not directory.exists():
            return True
        if not directory.is_dir():
            logger.warning(f"Path is not a directory: {directory}")
            return False
        try:
            await asyncio.to_thread(shutil.rmtree, directory)
            logger.debug(f"Removed directory: {directory}")
            return True
        except OSError as e:
            logger.error(f"Failed to remove directory {directory}: {str(e)}")
            return False

    async def get_upload_files(self) -> List[Path]:
        if not self._base_dir.exists():
            return []
        items = await asyncio.to_thread(lambda: list(self._base_dir.rglob("*")))
        return [item for item in items if item.is_file()]

    async def get_storage_usage(self) -> dict:
        """
        Obtém informações sobre uso de armazenamento.

        Returns:
            dict: total de arquivos e tamanho
        """
        files = await self.get_upload_files()
        total_size = sum(f.stat().st_size for f in files if f.exists())
        return {
            "total_files": len(files),
            "total_size_bytes": total_size,
            "total_size_mb": round(total_size / (1024 * 1024), 2)
        }
