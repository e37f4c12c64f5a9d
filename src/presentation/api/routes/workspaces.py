"""
Rotas de workspaces.
"""
import uuid
from fastapi import APIRouter, Depends, Query, status

from src.config import settings
from src.application.dtos import ApiResponse, CreateWorkspaceRequestDTO
from src.domain.entities import Workspace
from src.domain.value_objects import Pagination
from src.infrastructure.demo import DEMO_USER_ID, DemoCatalog
from src.presentation.api.dependencies import get_catalog

router = APIRouter(prefix=f"{settings.api_prefix}/workspaces", tags=["Workspaces"])


@router.get("", summary="List workspaces")
async def list_workspaces(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    catalog: DemoCatalog = Depends(get_catalog)
) -> dict:
    workspaces = catalog.workspaces()
    pagination = Pagination(page=page, limit=limit, total=len(workspaces))
    return ApiResponse.ok(data={
        "data": [w.to_dict() for w in pagination.slice(workspaces)],
        "pagination": pagination.to_dict()
    }).to_content()


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create workspace")
async def create_workspace(body: CreateWorkspaceRequestDTO) -> dict:
    workspace = Workspace(
        id=uuid.uuid4().hex,
        name=body.name,
        description=body.description,
        owner=DEMO_USER_ID
    )
    return ApiResponse.ok(
        data=workspace.to_dict(),
        message="Workspace created successfully"
    ).to_content()


@router.get("/{workspace_id}", summary="Get workspace")
async def get_workspace(workspace_id: str, catalog: DemoCatalog = Depends(get_catalog)) -> dict:
    return ApiResponse.ok(data=catalog.workspace(workspace_id).to_dict()).to_content()
