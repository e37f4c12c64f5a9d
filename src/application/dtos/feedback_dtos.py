"""
DTOs de feedback.
"""
from pydantic import BaseModel, Field, field_validator

from src.domain.entities import FeedbackPriority, FeedbackStatus, FeedbackType
from src.domain.entities.feedback import MAX_MESSAGE_LENGTH, MIN_MESSAGE_LENGTH


class SubmitFeedbackRequestDTO(BaseModel):
    """DTO para envio de feedback."""

    message: str = Field(
        ...,
        description="Mensagem do feedback",
        examples=["The caption editor loses focus after saving."]
    )
    type: FeedbackType = Field(default=FeedbackType.GENERAL)
    priority: FeedbackPriority = Field(default=FeedbackPriority.MEDIUM)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Remove espaços e valida o tamanho."""
        v = v.strip()
        if len(v) < MIN_MESSAGE_LENGTH:
            raise ValueError(f"Message must be at least {MIN_MESSAGE_LENGTH} characters")
        if len(v) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")
        return v


class UpdateFeedbackStatusRequestDTO(BaseModel):
    status: FeedbackStatus
