"""
Rotas de templates.
Leitura pública; usar e avaliar exigem usuário autenticado.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from src.config import settings
from src.application.dtos import ApiResponse, RateTemplateRequestDTO, UseTemplateRequestDTO
from src.application.use_cases import TemplateLibraryUseCase
from src.domain.entities import User
from src.presentation.api.dependencies import get_current_user, get_template_library_use_case

router = APIRouter(prefix=f"{settings.api_prefix}/templates", tags=["Templates"])


@router.get("", summary="List templates")
async def list_templates(
    category: Optional[str] = Query(None, description="Categoria ('all' = todas)"),
    search: Optional[str] = Query(None, description="Texto a buscar"),
    use_case: TemplateLibraryUseCase = Depends(get_template_library_use_case)
) -> dict:
    templates = use_case.list_templates(category=category, search=search)
    return ApiResponse.ok(data={"templates": [t.to_dict() for t in templates]}).to_content()


@router.get("/featured", summary="Featured templates")
async def featured_templates(
    use_case: TemplateLibraryUseCase = Depends(get_template_library_use_case)
) -> dict:
    return ApiResponse.ok(data={"templates": [t.to_dict() for t in use_case.featured()]}).to_content()


@router.get("/popular", summary="Popular templates")
async def popular_templates(
    use_case: TemplateLibraryUseCase = Depends(get_template_library_use_case)
) -> dict:
    return ApiResponse.ok(data={"templates": [t.to_dict() for t in use_case.popular()]}).to_content()


@router.get("/{template_id}", summary="Get template")
async def get_template(
    template_id: str,
    use_case: TemplateLibraryUseCase = Depends(get_template_library_use_case)
) -> dict:
    template = use_case.get_template(template_id)
    return ApiResponse.ok(data={"template": template.to_dict(include_data=True)}).to_content()


@router.post("/{template_id}/use", summary="Use template")
async def use_template(
    template_id: str,
    body: Optional[UseTemplateRequestDTO] = None,
    user: User = Depends(get_current_user),
    use_case: TemplateLibraryUseCase = Depends(get_template_library_use_case)
) -> dict:
    body = body or UseTemplateRequestDTO()
    data = use_case.use_template(template_id, body.project_name, body.project_description)
    return ApiResponse.ok(data=data).to_content()


@router.post("/{template_id}/rate", summary="Rate template")
async def rate_template(
    template_id: str,
    body: Optional[RateTemplateRequestDTO] = None,
    user: User = Depends(get_current_user),
    use_case: TemplateLibraryUseCase = Depends(get_template_library_use_case)
) -> dict:
    rating = body.rating if body else None
    return ApiResponse.ok(data=use_case.rate_template(template_id, rating)).to_content()
