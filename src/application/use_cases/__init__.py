"""Use cases package."""
from src.application.use_cases.auth_use_cases import AuthUseCase
from src.application.use_cases.cleanup_files import CleanupOldUploadsUseCase
from src.application.use_cases.content_enhancement import ContentEnhancementUseCase
from src.application.use_cases.feedback_use_cases import (
    FeedbackStatsUseCase,
    ListFeedbackUseCase,
    SubmitFeedbackUseCase,
    UpdateFeedbackStatusUseCase
)
from src.application.use_cases.global_search import GlobalSearchUseCase
from src.application.use_cases.template_library import TemplateLibraryUseCase
from src.application.use_cases.upload_recording import UploadRecordingUseCase
from src.application.use_cases.user_progress import UserProgressUseCase
from src.application.use_cases.video_catalog import VideoCatalogUseCase

__all__ = [
    "AuthUseCase",
    "CleanupOldUploadsUseCase",
    "ContentEnhancementUseCase",
    "FeedbackStatsUseCase",
    "ListFeedbackUseCase",
    "SubmitFeedbackUseCase",
    "UpdateFeedbackStatusUseCase",
    "GlobalSearchUseCase",
    "TemplateLibraryUseCase",
    "UploadRecordingUseCase",
    "UserProgressUseCase",
    "VideoCatalogUseCase"
]
