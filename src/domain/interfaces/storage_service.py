"""
Interface: IStorageService
Define o contrato para o armazenamento local de gravações enviadas.
Segue o princípio de Dependency Inversion (SOLID).
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class IStorageService(ABC):
    """Interface para gerenciamento do diretório de uploads."""

    @property
    @abstractmethod
    def base_dir(self) -> Path:
        """Diretório raiz dos uploads."""

    @abstractmethod
    async def create_upload_directory(self, video_id: str) -> Path:
        """
        Cria o diretório de um vídeo enviado.

        Args:
            video_id: ID do vídeo

        Returns:
            Path: Caminho do diretório criado
        """

    @abstractmethod
    async def cleanup_directory(self, directory: Path) -> bool:
        """
        Remove um diretório e todo seu conteúdo.

        Returns:
            bool: True se removido com sucesso
        """

    @abstractmethod
    async def cleanup_old_files(self, max_age_hours: int = 24) -> int:
        """
        Remove uploads antigos.

        Returns:
            int: Número de itens removidos
        """

    @abstractmethod
    async def get_upload_files(self) -> List[Path]:
        """Lista todos os arquivos enviados."""

    @abstractmethod
    async def get_storage_usage(self) -> dict:
        """Informações de uso (arquivos, tamanho total)."""
