"""Domain entities package."""
from src.domain.entities.user import User
from src.domain.entities.workspace import Workspace
from src.domain.entities.project import Project
from src.domain.entities.template import Template
from src.domain.entities.video import Caption, OriginalFile, ProcessingStatus, Transcript, Video
from src.domain.entities.feedback import (
    Feedback,
    FeedbackPriority,
    FeedbackStatus,
    FeedbackType
)
from src.domain.entities.user_progress import ProgressPreferences, UserProgress
from src.domain.entities.recording_session import (
    RecordedBlob,
    RecordingSession,
    RecordingSettings,
    RecordingState,
    format_duration
)

__all__ = [
    "User",
    "Workspace",
    "Project",
    "Template",
    "Caption",
    "OriginalFile",
    "ProcessingStatus",
    "Transcript",
    "Video",
    "Feedback",
    "FeedbackPriority",
    "FeedbackStatus",
    "FeedbackType",
    "ProgressPreferences",
    "UserProgress",
    "RecordedBlob",
    "RecordingSession",
    "RecordingSettings",
    "RecordingState",
    "format_duration"
]
