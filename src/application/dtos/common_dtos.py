"""
DTOs comuns: envelope padrão das respostas da API.
Toda resposta segue {success, data?, message?, error?}.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ErrorDetailDTO(BaseModel):
    """Detalhe de erro de validação por campo."""

    field: str = Field(..., description="Caminho do campo inválido")
    message: str = Field(..., description="Mensagem de erro")


class ApiResponse(BaseModel):
    """Envelope padrão de resposta."""

    success: bool = Field(..., description="Indica se a operação teve sucesso")
    data: Optional[Any] = Field(None, description="Payload da resposta")
    message: Optional[str] = Field(None, description="Mensagem legível")
    error: Optional[str] = Field(None, description="Descrição do erro")
    code: Optional[str] = Field(None, description="Código do erro (ex: VALIDATION_ERROR)")
    details: Optional[List[ErrorDetailDTO]] = Field(None, description="Detalhes de validação")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "data": {"timestamp": "2024-01-01T00:00:00+00:00", "version": "1.0.0"},
                "message": "API is healthy"
            }
        }
    }

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        error: str,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[List[Dict[str, str]]] = None
    ) -> "ApiResponse":
        return cls(
            success=False,
            error=error,
            message=message,
            code=code,
            details=[ErrorDetailDTO(**d) for d in details] if details else None
        )

    def to_content(self) -> Dict[str, Any]:
        """
        Corpo da resposta. Apenas campos do envelope com valor são incluídos;
        o conteúdo de `data` é mantido como está (inclusive valores nulos).
        """
        content: Dict[str, Any] = {"success": self.success}
        for key in ("data", "message", "error", "code"):
            value = getattr(self, key)
            if value is not None:
                content[key] = value
        if self.details:
            content["details"] = [detail.model_dump() for detail in self.details]
        return content


class HealthDataDTO(BaseModel):
    """Dados do health check."""

    timestamp: str
    version: str
    environment: str
    uptime_seconds: float
    storage_usage: Dict[str, Any]
    realtime: Dict[str, Any]
