"""Storage package."""
from src.infrastructure.storage.local_storage import LocalStorageService
from src.infrastructure.storage.video_upload_service import VideoUploadService

__all__ = ["LocalStorageService", "VideoUploadService"]
