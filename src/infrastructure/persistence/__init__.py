"""In-memory persistence package."""
from src.infrastructure.persistence.in_memory_feedback_repository import InMemoryFeedbackRepository
from src.infrastructure.persistence.in_memory_user_progress_repository import InMemoryUserProgressRepository
from src.infrastructure.persistence.in_memory_video_registry import InMemoryVideoRegistry

__all__ = ["InMemoryFeedbackRepository", "InMemoryUserProgressRepository", "InMemoryVideoRegistry"]
