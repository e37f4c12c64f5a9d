"""
Value Object para vídeo enviado via upload.
Imutável e com validações.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedVideoFile:
    """
    Representa uma gravação salva no diretório de uploads.

    Attributes:
        file_path: Caminho do arquivo salvo
        original_filename: Nome original enviado pelo cliente
        mime_type: MIME type declarado no upload
        size_bytes: Tamanho em bytes
    """

    file_path: Path
    original_filename: str
    mime_type: str
    size_bytes: int

    def __post_init__(self):
        """Validações após inicialização."""
        if not self.file_path.exists():
            raise ValueError(f"File not found: {self.file_path}")

        if self.size_bytes <= 0:
            raise ValueError("File size must be positive")

        if not self.original_filename:
            raise ValueError("Original filename is required")

    def get_extension(self) -> str:
        """Retorna extensão do arquivo."""
        return self.file_path.suffix.lower()

    def get_format(self) -> str:
        """Extensão sem o ponto (ex: 'webm')."""
        return self.get_extension().lstrip(".")

    def is_video(self) -> bool:
        return self.mime_type.startswith('video/')

    def get_size_mb(self) -> float:
        """Retorna tamanho em MB."""
        return self.size_bytes / (1024 * 1024)
