"""
Use Case: Cleanup Old Uploads
Remove gravações antigas do diretório de uploads.
"""
from loguru import logger

from src.domain.exceptions import StorageError
from src.domain.interfaces import IStorageService


class CleanupOldUploadsUseCase:
    """Use Case para limpeza de uploads antigos."""

    def __init__(
        self,
        storage_service: IStorageService,
        max_age_hours: int = 24
    ):
        """
        Args:
            storage_service: Serviço de armazenamento
            max_age_hours: Idade máxima das gravações em horas
        """
        self.storage_service = storage_service
        self.max_age_hours = max_age_hours

    async def execute(self) -> dict:
        """
        Executa a limpeza.

        Returns:
            dict: removed_count e espaço liberado. Falhas são registradas
            e reportadas com success=False, sem interromper o startup.
        """
        logger.info(f"Starting uploads cleanup: max_age={self.max_age_hours}h")

        try:
            usage_before = await self.storage_service.get_storage_usage()
            removed_count = await self.storage_service.cleanup_old_files(self.max_age_hours)
            usage_after = await self.storage_service.get_storage_usage()
        except (StorageError, OSError) as e:
            logger.error(f"Uploads cleanup failed: {str(e)}")
            return {"success": False, "error": str(e), "removed_count": 0}

        freed = round(usage_before["total_size_mb"] - usage_after["total_size_mb"], 2)
        logger.info(f"🧹 Cleanup completed: {removed_count} items removed, {freed} MB freed")

        return {
            "success": True,
            "removed_count": removed_count,
            "freed_space_mb": freed
        }
