"""
DTOs de projetos, workspaces, templates e exportação.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateProjectRequestDTO(BaseModel):
    """DTO para criação de projeto."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100, description="Nome do projeto")
    description: Optional[str] = Field(None, max_length=500)
    workspace_id: Optional[str] = Field(None, alias="workspaceId")


class CreateWorkspaceRequestDTO(BaseModel):
    """DTO para criação de workspace."""

    name: str = Field(..., min_length=1, max_length=100, description="Nome do workspace")
    description: Optional[str] = Field(None, max_length=500)


class ExportRequestDTO(BaseModel):
    """DTO para exportação de vídeo."""

    format: str = Field(
        default="mp4",
        description="Formato de saída",
        pattern="^(mp4|webm|gif|mov)$"
    )
    quality: str = Field(
        default="high",
        description="Qualidade de saída",
        pattern="^(low|medium|high|4k)$"
    )


class UseTemplateRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_name: Optional[str] = Field(None, alias="projectName", max_length=100)
    project_description: Optional[str] = Field(None, alias="projectDescription", max_length=500)


class RateTemplateRequestDTO(BaseModel):
    """Nota de 1 a 5 (faixa validada no use case)."""

    rating: Optional[float] = None
