"""
Rotas de analytics e busca global.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from src.config import settings
from src.application.dtos import ApiResponse
from src.application.use_cases import GlobalSearchUseCase
from src.infrastructure.demo import DemoCatalog
from src.presentation.api.dependencies import get_catalog, get_global_search_use_case

router = APIRouter(prefix=settings.api_prefix)


@router.get("/analytics/overview", tags=["Analytics"], summary="Analytics overview")
async def analytics_overview(catalog: DemoCatalog = Depends(get_catalog)) -> dict:
    return ApiResponse.ok(data=catalog.analytics_overview()).to_content()


@router.get("/search", tags=["Search"], summary="Global search")
async def global_search(
    q: Optional[str] = Query(None, description="Texto a buscar (mínimo 2 caracteres)"),
    limit: Optional[int] = Query(None, ge=1),
    types: Optional[str] = Query(None, description="Lista separada por vírgula: projects,workspaces,videos"),
    use_case: GlobalSearchUseCase = Depends(get_global_search_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.execute(q, limit=limit, types=types)).to_content()
