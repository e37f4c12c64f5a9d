"""
Rotas de projetos.
"""
import uuid
from fastapi import APIRouter, Depends, Query, status

from src.config import settings
from src.application.dtos import ApiResponse, CreateProjectRequestDTO
from src.domain.entities import Project
from src.domain.value_objects import Pagination
from src.infrastructure.demo import DEMO_USER_ID, DemoCatalog
from src.presentation.api.dependencies import get_catalog

router = APIRouter(prefix=f"{settings.api_prefix}/projects", tags=["Projects"])


@router.get("", summary="List projects")
async def list_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    catalog: DemoCatalog = Depends(get_catalog)
) -> dict:
    projects = catalog.projects()
    pagination = Pagination(page=page, limit=limit, total=len(projects))
    return ApiResponse.ok(data={
        "data": [p.to_dict() for p in pagination.slice(projects)],
        "pagination": pagination.to_dict()
    }).to_content()


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create project")
async def create_project(body: CreateProjectRequestDTO) -> dict:
    """Cria o projeto apenas na resposta (nada é persistido)."""
    project = Project(
        id=uuid.uuid4().hex,
        name=body.name,
        description=body.description,
        workspace=body.workspace_id,
        owner=DEMO_USER_ID
    )
    return ApiResponse.ok(
        data=project.to_dict(),
        message="Project created successfully"
    ).to_content()


@router.get("/{project_id}", summary="Get project")
async def get_project(project_id: str, catalog: DemoCatalog = Depends(get_catalog)) -> dict:
    return ApiResponse.ok(
        data=catalog.project(project_id).to_dict(include_documents=True)
    ).to_content()


@router.get("/{project_id}/activity", summary="Project activity feed")
async def get_project_activity(project_id: str, catalog: DemoCatalog = Depends(get_catalog)) -> dict:
    return ApiResponse.ok(data=catalog.project_activity(project_id)).to_content()
