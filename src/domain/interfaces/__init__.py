"""Domain interfaces package."""
from src.domain.interfaces.storage_service import IStorageService
from src.domain.interfaces.feedback_repository import IFeedbackRepository
from src.domain.interfaces.video_registry import IVideoRegistry
from src.domain.interfaces.event_publisher import IEventPublisher
from src.domain.interfaces.token_service import ITokenService, TokenPair
from src.domain.interfaces.user_progress_repository import IUserProgressRepository

__all__ = [
    "IStorageService",
    "IFeedbackRepository",
    "IVideoRegistry",
    "IEventPublisher",
    "ITokenService",
    "TokenPair",
    "IUserProgressRepository"
]
