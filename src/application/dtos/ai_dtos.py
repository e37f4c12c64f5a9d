"""
DTOs dos endpoints de IA (stubs).
"""
from typing import Optional
from pydantic import BaseModel, Field


class TextRequestDTO(BaseModel):
    text: Optional[str] = Field(None, description="Texto de entrada")
    context: Optional[str] = Field(None, description="Contexto adicional (opcional)")


class TagsRequestDTO(BaseModel):
    text: Optional[str] = Field(None, description="Texto de entrada")
    title: Optional[str] = Field(None, description="Título do vídeo")
