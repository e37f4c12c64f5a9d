"""
Rotas de progresso do usuário: onboarding, tutoriais, preferências e ajuda.
Todas exigem usuário autenticado.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from src.config import settings
from src.application.dtos import (
    ApiResponse,
    CompleteTutorialRequestDTO,
    OnboardingStepRequestDTO,
    UpdatePreferencesRequestDTO
)
from src.application.use_cases import UserProgressUseCase
from src.domain.entities import User
from src.presentation.api.dependencies import get_current_user, get_user_progress_use_case

router = APIRouter(prefix=f"{settings.api_prefix}/user-progress", tags=["User Progress"])


@router.get("", summary="Get user progress")
async def get_progress(
    user: User = Depends(get_current_user),
    use_case: UserProgressUseCase = Depends(get_user_progress_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.get_progress(user).to_dict()).to_content()


@router.put("/onboarding", summary="Update onboarding step")
async def update_onboarding(
    body: Optional[OnboardingStepRequestDTO] = None,
    user: User = Depends(get_current_user),
    use_case: UserProgressUseCase = Depends(get_user_progress_use_case)
) -> dict:
    step = body.step if body else None
    return ApiResponse.ok(data=use_case.update_onboarding_step(user, step).to_dict()).to_content()


@router.post("/tutorial/complete", summary="Complete tutorial")
async def complete_tutorial(
    body: Optional[CompleteTutorialRequestDTO] = None,
    user: User = Depends(get_current_user),
    use_case: UserProgressUseCase = Depends(get_user_progress_use_case)
) -> dict:
    tutorial_id = body.tutorial_id if body else None
    progress, new_achievements = use_case.complete_tutorial(user, tutorial_id)

    content = ApiResponse.ok(data=progress.to_dict()).to_content()
    content["newAchievements"] = new_achievements
    return content


@router.put("/preferences", summary="Update preferences")
async def update_preferences(
    body: Optional[UpdatePreferencesRequestDTO] = None,
    user: User = Depends(get_current_user),
    use_case: UserProgressUseCase = Depends(get_user_progress_use_case)
) -> dict:
    preferences = body.preferences if body else None
    return ApiResponse.ok(data=use_case.update_preferences(user, preferences).to_dict()).to_content()


@router.get("/tutorials", summary="List tutorials")
async def list_tutorials(
    user: User = Depends(get_current_user),
    use_case: UserProgressUseCase = Depends(get_user_progress_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.tutorials()).to_content()


@router.get("/help", summary="Help articles")
async def help_articles(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    user: User = Depends(get_current_user),
    use_case: UserProgressUseCase = Depends(get_user_progress_use_case)
) -> dict:
    return ApiResponse.ok(data=use_case.help_articles(category=category, search=search)).to_content()
