"""DTOs package."""
from src.application.dtos.common_dtos import ApiResponse, ErrorDetailDTO, HealthDataDTO
from src.application.dtos.auth_dtos import LoginRequestDTO, RefreshRequestDTO, RegisterRequestDTO
from src.application.dtos.catalog_dtos import (
    CreateProjectRequestDTO,
    CreateWorkspaceRequestDTO,
    ExportRequestDTO,
    RateTemplateRequestDTO,
    UseTemplateRequestDTO
)
from src.application.dtos.ai_dtos import TagsRequestDTO, TextRequestDTO
from src.application.dtos.feedback_dtos import (
    SubmitFeedbackRequestDTO,
    UpdateFeedbackStatusRequestDTO
)
from src.application.dtos.progress_dtos import (
    CompleteTutorialRequestDTO,
    OnboardingStepRequestDTO,
    UpdatePreferencesRequestDTO
)

__all__ = [
    "ApiResponse",
    "ErrorDetailDTO",
    "HealthDataDTO",
    "LoginRequestDTO",
    "RefreshRequestDTO",
    "RegisterRequestDTO",
    "CreateProjectRequestDTO",
    "CreateWorkspaceRequestDTO",
    "ExportRequestDTO",
    "RateTemplateRequestDTO",
    "UseTemplateRequestDTO",
    "TagsRequestDTO",
    "TextRequestDTO",
    "SubmitFeedbackRequestDTO",
    "UpdateFeedbackStatusRequestDTO",
    "CompleteTutorialRequestDTO",
    "OnboardingStepRequestDTO",
    "UpdatePreferencesRequestDTO"
]
