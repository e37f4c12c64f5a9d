"""
DTOs de autenticação.
Os campos são opcionais no schema: a checagem de obrigatoriedade é feita no
use case para devolver as mensagens esperadas pelo frontend.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LoginRequestDTO(BaseModel):
    email: Optional[str] = Field(None, examples=["demo@clueso.io"])
    password: Optional[str] = Field(None, examples=["secret"])


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")


class RefreshRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    refresh_token: Optional[str] = Field(None, alias="refreshToken")
