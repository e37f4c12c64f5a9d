"""Value objects package."""
from src.domain.value_objects.pagination import Pagination
from src.domain.value_objects.processing_stage import ProcessingStage, VideoStatus
from src.domain.value_objects.uploaded_video_file import UploadedVideoFile

__all__ = ["Pagination", "ProcessingStage", "VideoStatus", "UploadedVideoFile"]
