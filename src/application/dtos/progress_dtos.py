"""
DTOs de progresso do usuário.
Os valores chegam sem tipo fixo: o use case valida e devolve as mensagens
esperadas pelo frontend ("Invalid onboarding step", ...).
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class OnboardingStepRequestDTO(BaseModel):
    step: Optional[Any] = Field(None, examples=[3])


class CompleteTutorialRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tutorial_id: Optional[Any] = Field(None, alias="tutorialId", examples=["getting_started"])


class UpdatePreferencesRequestDTO(BaseModel):
    preferences: Optional[Any] = Field(
        None,
        examples=[{"showTutorialHints": False, "skipIntroVideos": True}]
    )
