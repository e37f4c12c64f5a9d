"""
Rotas de feedback.
REST para envio/gestão e WebSocket para o dashboard em tempo real.
"""
from fastapi import APIRouter, Depends, Query, Request, WebSocket, WebSocketDisconnect, status
from loguru import logger

from src.config import settings
from src.application.dtos import (
    ApiResponse,
    SubmitFeedbackRequestDTO,
    UpdateFeedbackStatusRequestDTO
)
from src.application.use_cases import (
    FeedbackStatsUseCase,
    ListFeedbackUseCase,
    SubmitFeedbackUseCase,
    UpdateFeedbackStatusUseCase
)
from src.domain.entities import User
from src.infrastructure.realtime import ConnectionManager
from src.presentation.api.dependencies import (
    get_connection_manager,
    get_current_user,
    get_feedback_stats_use_case,
    get_list_feedback_use_case,
    get_submit_feedback_use_case,
    get_update_feedback_status_use_case
)
from src.presentation.api.rate_limit import limiter

router = APIRouter(prefix=f"{settings.api_prefix}/feedback", tags=["Feedback"])
ws_router = APIRouter(tags=["Feedback"])


@router.post("", status_code=status.HTTP_201_CREATED, summary="Submit feedback")
@limiter.limit(settings.feedback_rate_limit)
async def submit_feedback(
    request: Request,
    body: SubmitFeedbackRequestDTO,
    user: User = Depends(get_current_user),
    use_case: SubmitFeedbackUseCase = Depends(get_submit_feedback_use_case)
) -> dict:
    feedback = await use_case.execute(user, body.message, body.type, body.priority)
    return ApiResponse.ok(
        data=feedback.to_dict(),
        message="Feedback submitted successfully"
    ).to_content()


@router.get("", summary="List feedback")
async def list_feedback(
    status_filter: str = Query("all", alias="status"),
    type_filter: str = Query("all", alias="type"),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    user: User = Depends(get_current_user),
    use_case: ListFeedbackUseCase = Depends(get_list_feedback_use_case)
) -> dict:
    data = use_case.execute(status=status_filter, feedback_type=type_filter, page=page, limit=limit)
    return ApiResponse.ok(data=data).to_content()


@router.get("/stats", summary="Feedback statistics")
async def feedback_stats(
    user: User = Depends(get_current_user),
    use_case: FeedbackStatsUseCase = Depends(get_feedback_stats_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.execute()).to_content()


@router.put("/{feedback_id}/status", summary="Update feedback status")
async def update_feedback_status(
    feedback_id: str,
    body: UpdateFeedbackStatusRequestDTO,
    user: User = Depends(get_current_user),
    use_case: UpdateFeedbackStatusUseCase = Depends(get_update_feedback_status_use_case)
) -> dict:
    feedback = await use_case.execute(feedback_id, body.status)
    return ApiResponse.ok(
        data=feedback.to_dict(),
        message="Feedback status updated"
    ).to_content()


@ws_router.websocket("/ws/feedback")
async def feedback_channel(
    websocket: WebSocket,
    manager: ConnectionManager = Depends(get_connection_manager)
):
    """
    Canal push do dashboard de feedback.
    Eventos: {"event": "new-feedback" | "feedback-updated", "data": {...}}.
    """
    await manager.connect(websocket)
    try:
        while True:
            message = await websocket.receive_text()
            if message.strip().lower() == "ping":
                await websocket.send_text("pong")
    except WebSocketDisconnect:
        logger.debug("Feedback channel client closed the connection")
    finally:
        await manager.disconnect(websocket)
