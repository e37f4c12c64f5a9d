"""
Rotas de IA (respostas simuladas).
"""
from fastapi import APIRouter, Depends

from src.config import settings
from src.application.dtos import ApiResponse, TagsRequestDTO, TextRequestDTO
from src.application.use_cases import ContentEnhancementUseCase
from src.presentation.api.dependencies import get_content_enhancement_use_case

router = APIRouter(prefix=f"{settings.api_prefix}/ai", tags=["AI"])


@router.post("/enhance-script", summary="Enhance script")
async def enhance_script(
    body: TextRequestDTO,
    use_case: ContentEnhancementUseCase = Depends(get_content_enhancement_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.enhance_script(body.text)).to_content()


@router.post("/generate-summary", summary="Generate summary")
async def generate_summary(
    body: TextRequestDTO,
    use_case: ContentEnhancementUseCase = Depends(get_content_enhancement_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.generate_summary(body.text)).to_content()


@router.post("/generate-tags", summary="Generate tags")
async def generate_tags(
    body: TagsRequestDTO,
    use_case: ContentEnhancementUseCase = Depends(get_content_enhancement_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.generate_tags(body.text, body.title)).to_content()


@router.post("/generate-captions", summary="Generate captions")
async def generate_captions(
    body: TextRequestDTO,
    use_case: ContentEnhancementUseCase = Depends(get_content_enhancement_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.generate_captions(body.text)).to_content()
