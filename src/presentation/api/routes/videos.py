"""
Rotas de vídeos.
Listagem, detalhe, upload de gravações e exportação.
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status

from src.config import settings
from src.application.dtos import ApiResponse, ExportRequestDTO
from src.application.use_cases import UploadRecordingUseCase, VideoCatalogUseCase
from src.domain.entities import User
from src.domain.exceptions import ValidationError
from src.presentation.api.dependencies import (
    get_current_user,
    get_upload_recording_use_case,
    get_video_catalog_use_case
)
from src.presentation.api.rate_limit import limiter

router = APIRouter(prefix=f"{settings.api_prefix}/videos", tags=["Videos"])


@router.get("", summary="List videos")
async def list_videos(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: Optional[str] = Query(None, alias="status"),
    project_id: Optional[str] = Query(None, alias="projectId"),
    use_case: VideoCatalogUseCase = Depends(get_video_catalog_use_case)
) -> dict:
    data = use_case.list_videos(page=page, limit=limit, status=status_filter, project_id=project_id)
    return ApiResponse.ok(data=data).to_content()


@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    summary="Upload recording",
    description=(
        "Multipart upload of a screen recording. "
        f"Allowed formats: {settings.allowed_video_formats}. "
        f"Max size: {settings.max_upload_size_mb}MB."
    )
)
@limiter.limit(settings.upload_rate_limit)
async def upload_video(
    request: Request,
    video: Optional[UploadFile] = File(None, description="Video file"),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    project_id: Optional[str] = Form(None, alias="projectId"),
    user: User = Depends(get_current_user),
    use_case: UploadRecordingUseCase = Depends(get_upload_recording_use_case)
) -> dict:
    if video is None:
        raise ValidationError("Video file is required")

    try:
        created = await use_case.execute(
            video,
            owner=user,
            title=title,
            project_id=project_id,
            description=description
        )
    finally:
        await video.close()

    return ApiResponse.ok(
        data=created.to_dict(),
        message="Video uploaded successfully"
    ).to_content()


@router.get("/{video_id}", summary="Get video")
async def get_video(
    video_id: str,
    use_case: VideoCatalogUseCase = Depends(get_video_catalog_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.get_video(video_id).to_dict()).to_content()


@router.get("/{video_id}/progress", summary="Processing progress")
async def get_video_progress(
    video_id: str,
    use_case: VideoCatalogUseCase = Depends(get_video_catalog_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.get_progress(video_id)).to_content()


@router.post("/{video_id}/export", summary="Export video")
async def export_video(
    video_id: str,
    body: Optional[ExportRequestDTO] = None,
    use_case: VideoCatalogUseCase = Depends(get_video_catalog_use_case)
) -> dict:
    body = body or ExportRequestDTO()
    data = use_case.request_export(video_id, body.format, body.quality)
    return ApiResponse.ok(data=data, message="Export started").to_content()
