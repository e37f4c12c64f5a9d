"""
Use Cases: Feedback
Envio, listagem, estatísticas e mudança de status, com broadcast em tempo real.
"""
from typing import Dict, Optional
from loguru import logger

from src.domain.entities import (
    Feedback,
    FeedbackPriority,
    FeedbackStatus,
    FeedbackType,
    User
)
from src.domain.exceptions import ResourceNotFoundError, ValidationError
from src.domain.interfaces import IEventPublisher, IFeedbackRepository
from src.domain.value_objects import Pagination

NEW_FEEDBACK_EVENT = "new-feedback"
FEEDBACK_UPDATED_EVENT = "feedback-updated"


def parse_filter(value: Optional[str], enum_cls, field_name: str):
    """Converte um filtro de query string; 'all' (ou vazio) significa sem filtro."""
    if value is None or value == "" or value.lower() == "all":
        return None
    try:
        return enum_cls(value.lower())
    except ValueError:
        allowed = ", ".join(item.value for item in enum_cls)
        raise ValidationError(f"Invalid {field_name} '{value}'. Allowed: all, {allowed}")


class SubmitFeedbackUseCase:

    def __init__(self, repository: IFeedbackRepository, publisher: IEventPublisher):
        self.repository = repository
        self.publisher = publisher

    async def execute(
        self,
        user: User,
        message: str,
        feedback_type: FeedbackType = FeedbackType.GENERAL,
        priority: FeedbackPriority = FeedbackPriority.MEDIUM
    ) -> Feedback:
        try:
            feedback = Feedback(
                user_id=user.id,
                user_name=user.full_name or user.email,
                message=message,
                type=feedback_type,
                priority=priority
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        self.repository.add(feedback)
        logger.info(f"📝 Feedback received: {feedback.id} ({feedback.type.value}/{feedback.priority.value})")

        await self.publisher.publish(NEW_FEEDBACK_EVENT, feedback.to_dict())
        return feedback


class ListFeedbackUseCase:
    """Listagem paginada, mais recentes primeiro."""

    def __init__(self, repository: IFeedbackRepository):
        self.repository = repository

    def execute(
        self,
        status: Optional[str] = None,
        feedback_type: Optional[str] = None,
        page: int = 1,
        limit: int = 50
    ) -> Dict:
        status_filter = parse_filter(status, FeedbackStatus, "status")
        type_filter = parse_filter(feedback_type, FeedbackType, "type")

        matching = self.repository.find(status=status_filter, feedback_type=type_filter)
        pagination = Pagination(page=page, limit=limit, total=len(matching))

        page_items = pagination.slice(matching)

        # total = itens que casam com o filtro; filtered = itens desta página
        return {
            "feedback": [item.to_dict() for item in page_items],
            "total": len(matching),
            "filtered": len(page_items),
            "page": pagination.page,
            "limit": pagination.limit,
            "pages": pagination.pages
        }


class FeedbackStatsUseCase:

    def __init__(self, repository: IFeedbackRepository):
        self.repository = repository

    def execute(self) -> Dict:
        """Totais por tipo, com contagem por status."""
        by_type = {
            feedback_type.value: {"total": 0, **{s.value: 0 for s in FeedbackStatus}}
            for feedback_type in FeedbackType
        }
        items = self.repository.find()
        for item in items:
            bucket = by_type[item.type.value]
            bucket["total"] += 1
            bucket[item.status.value] += 1

        return {"total": len(items), "byType": by_type}


class UpdateFeedbackStatusUseCase:

    def __init__(self, repository: IFeedbackRepository, publisher: IEventPublisher):
        self.repository = repository
        self.publisher = publisher

    async def execute(self, feedback_id: str, status: FeedbackStatus) -> Feedback:
        feedback = self.repository.update_status(feedback_id, status)
        if feedback is None:
            raise ResourceNotFoundError("Feedback", feedback_id)

        logger.info(f"Feedback {feedback_id} -> {feedback.status.value}")
        await self.publisher.publish(FEEDBACK_UPDATED_EVENT, feedback.to_dict())
        return feedback
