"""
Entity: Feedback
Feedback enviado por usuários e exibido no dashboard de administração.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
import uuid

MIN_MESSAGE_LENGTH = 10
MAX_MESSAGE_LENGTH = 1000


class FeedbackType(str, Enum):
    BUG = "bug"
    FEATURE = "feature"
    GENERAL = "general"
    COMPLIMENT = "compliment"


class FeedbackPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FeedbackStatus(str, Enum):
    NEW = "new"
    REVIEWING = "reviewing"
    RESOLVED = "resolved"


@dataclass
class Feedback:
    """Entidade que representa um feedback."""

    user_id: str
    user_name: str
    message: str
    type: FeedbackType = FeedbackType.GENERAL
    priority: FeedbackPriority = FeedbackPriority.MEDIUM
    status: FeedbackStatus = FeedbackStatus.NEW
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Normaliza a mensagem e valida os limites de tamanho."""
        self.message = self.message.strip()
        if not MIN_MESSAGE_LENGTH <= len(self.message) <= MAX_MESSAGE_LENGTH:
            raise ValueError(
                f"Message must be between {MIN_MESSAGE_LENGTH} and "
                f"{MAX_MESSAGE_LENGTH} characters"
            )
        self.type = FeedbackType(self.type)
        self.priority = FeedbackPriority(self.priority)
        self.status = FeedbackStatus(self.status)

    def change_status(self, status: FeedbackStatus) -> None:
        self.status = FeedbackStatus(status)
        self.updated_at = datetime.now(timezone.utc)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "userName": self.user_name,
            "message": self.message,
            "type": self.type.value,
            "priority": self.priority.value,
            "timestamp": self.created_at.isoformat(),
            "status": self.status.value
        }
